"""Pytest configuration and shared fixtures for the diffassert test suite."""

import pytest
from utils import Empty, Inner, Leaf, Web

from diffassert.options import CompareOptions, RenderOptions


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def plain_options() -> CompareOptions:
    """Comparison options that render wdiff-style markers instead of ANSI colors."""
    return CompareOptions(render=RenderOptions(use_color=False))


@pytest.fixture
def make_web():
    """Build the nested Web structure with the given leaf value.

    Returns
    -------
    callable
        Factory taking the leaf string and returning a fresh ``Web`` instance

    """

    def _make(leaf: str) -> Web:
        return Web(a=Inner(c=Leaf(d=leaf)), b=Empty())

    return _make

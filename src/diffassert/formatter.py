#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/diffassert/formatter.py
"""Deterministic text rendering of arbitrary values.

Strings pass through untouched. Every other value is pretty-printed with
:func:`rich.pretty.pretty_repr`, after a preparation pass that makes the
output stable for equal values:

- mapping keys are sorted (when orderable), except for ``OrderedDict`` whose
  order is part of its value
- keys and values of mappings are prepared alike, and namedtuples are
  rebuilt from their prepared fields
- ``set``/``frozenset`` members are ordered by their rendered text
- objects that keep ``object.__repr__`` (and would otherwise print a memory
  address) are rendered from their attributes as ``ClassName(attr=value)``
- dataclasses using the generated repr get the same treatment, so their
  children are prepared too

Types can take full control of their rendering by implementing the rich repr
protocol (see :class:`Formattable`), for instance with ``@rich.repr.auto``.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import reprlib
import sys
from collections import Counter, OrderedDict, defaultdict
from collections.abc import Mapping
from inspect import isclass
from typing import Any, Iterator, Protocol, runtime_checkable

from rich.pretty import pretty_repr
from rich.repr import Result

from diffassert.options import FormatOptions

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


@runtime_checkable
class Formattable(Protocol):
    """Capability for values that describe their own comparable form.

    Any object with a ``__rich_repr__`` method satisfies this protocol. The
    method yields positional values, ``(name, value)`` pairs or
    ``(name, value, default)`` triples, exactly as rich expects.
    """

    def __rich_repr__(self) -> Result:
        """Yield the arguments that describe this value."""
        ...


class _Verbatim:
    """Leaf whose repr is a fixed piece of text."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return self.text


class _Reflected:
    """Proxy presenting reflected attributes through the rich repr protocol."""

    __slots__ = ("_fields",)

    def __init__(self, fields: tuple[tuple[str, Any], ...]) -> None:
        self._fields = fields

    def __rich_repr__(self) -> Result:
        yield from self._fields


@functools.lru_cache(maxsize=None)
def _proxy_class(name: str) -> type[_Reflected]:
    # rich prints the proxy's own class name, so mint one per reflected type name
    return type(name, (_Reflected,), {"__slots__": ()})


class _OrderedSet(set):
    """A set that iterates in a fixed order."""

    def __init__(self, items: list[Any]) -> None:
        super().__init__(items)
        self._order = items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)


class _OrderedFrozenset(frozenset):
    """A frozenset that iterates in a fixed order."""

    def __new__(cls, items: list[Any]) -> _OrderedFrozenset:
        instance = super().__new__(cls, items)
        instance._order = items
        return instance

    def __iter__(self) -> Iterator[Any]:
        return iter(self._order)


def _has_default_repr(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields") and hasattr(value, "_asdict")


def _has_dataclass_repr(value: Any) -> bool:
    if not dataclasses.is_dataclass(value) or isclass(value):
        return False
    code = getattr(type(value).__repr__, "__code__", None)
    return code is not None and code.co_filename in (dataclasses.__file__, reprlib.__file__)


def _instance_attributes(value: Any) -> list[tuple[str, Any]]:
    """Collect instance attributes from ``__dict__`` and ``__slots__``."""
    attributes: list[tuple[str, Any]] = []
    seen: set[str] = set()
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in seen:
                continue
            seen.add(name)
            if hasattr(value, name):
                attributes.append((name, getattr(value, name)))
    if hasattr(value, "__dict__"):
        attributes.extend((name, child) for name, child in vars(value).items() if name not in seen)
    return attributes


class _ValuePreparer:
    """Rewrite a value graph into one that pretty-prints deterministically."""

    def __init__(self, options: FormatOptions) -> None:
        self.options = options
        self._active: set[int] = set()

    def prepare(self, value: Any) -> Any:
        if isinstance(value, _SCALARS) or isclass(value):
            return value
        if isinstance(value, Formattable):
            return value

        value_id = id(value)
        if value_id in self._active:
            return _Verbatim("...")
        self._active.add(value_id)
        try:
            return self._prepare_compound(value)
        finally:
            self._active.discard(value_id)

    def _prepare_compound(self, value: Any) -> Any:
        value_type = type(value)
        if value_type is dict:
            return self._prepare_items(value)
        if value_type is defaultdict:
            return defaultdict(value.default_factory, self._prepare_items(value))
        if value_type is Counter:
            return Counter(self._prepare_items(value))
        if isinstance(value, Mapping):
            # OrderedDict, UserDict, mappingproxy and custom mappings render as Name({...})
            items = self._prepare_items(value, sort=not isinstance(value, OrderedDict))
            return _proxy_class(value_type.__name__)((items,))
        if value_type is list:
            return [self.prepare(child) for child in value]
        if value_type is tuple:
            return tuple(self.prepare(child) for child in value)
        if _is_namedtuple(value):
            fields = tuple((name, self.prepare(child)) for name, child in value._asdict().items())
            return _proxy_class(value_type.__name__)(fields)
        if value_type is set or value_type is frozenset:
            members = sorted((self.prepare(child) for child in value), key=self._sort_key)
            return _OrderedSet(members) if value_type is set else _OrderedFrozenset(members)
        if _has_dataclass_repr(value):
            fields = tuple(
                (f.name, self.prepare(getattr(value, f.name)))
                for f in dataclasses.fields(value)
                if f.repr and hasattr(value, f.name)
            )
            return _proxy_class(value_type.__name__)(fields)
        if _has_default_repr(value):
            return self._reflect(value)
        return value

    def _prepare_items(self, mapping: Mapping[Any, Any], sort: bool = True) -> dict[Any, Any]:
        items = list(mapping.items())
        if sort and self.options.sort_keys:
            try:
                items.sort(key=lambda item: item[0])
            except TypeError:
                logger.debug("Keeping insertion order for mapping with unorderable keys")
        return {self._prepare_key(key): self.prepare(child) for key, child in items}

    def _prepare_key(self, key: Any) -> Any:
        if isinstance(key, _SCALARS) or isclass(key):
            return key
        # rich prints keys with plain repr(), so freeze the prepared text
        return _Verbatim(pretty_repr(self.prepare(key), max_width=sys.maxsize))

    def _reflect(self, value: Any) -> Any:
        name = type(value).__name__
        try:
            attributes = _instance_attributes(value)
        except Exception as exc:
            logger.warning("Could not reflect attributes of %s: %s", name, exc)
            return _Verbatim(f"{name}(...)")
        return _proxy_class(name)(tuple((key, self.prepare(child)) for key, child in attributes))

    @staticmethod
    def _sort_key(member: Any) -> str:
        return pretty_repr(member)


def _fallback_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception as exc:
        logger.warning("repr() failed for %s: %s", type(value).__name__, exc)
        return f"<{type(value).__name__} object>"


def format_value(value: Any, options: FormatOptions | None = None) -> str:
    """Render a value as deterministic, human-readable text.

    Parameters
    ----------
    value : Any
        Value to render. ``str`` values are returned unchanged.
    options : FormatOptions, optional
        Formatting options. Defaults to :class:`FormatOptions()`.

    Returns
    -------
    str
        Text form of ``value``. Never raises: values that cannot be
        pretty-printed degrade to ``repr()`` and finally to a generic
        ``<TypeName object>`` placeholder.

    Examples
    --------
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Point:
        ...     x: int
        ...     y: int
        >>> format_value(Point(1, 2))
        'Point(x=1, y=2)'
        >>> format_value("already text")
        'already text'

    """
    if isinstance(value, str):
        return value

    options = options or FormatOptions()
    try:
        prepared = _ValuePreparer(options).prepare(value)
        return pretty_repr(
            prepared,
            max_width=options.max_width,
            indent_size=options.indent_size,
            expand_all=options.expand_all,
        )
    except Exception as exc:
        logger.warning("Pretty printing failed for %s, falling back to repr(): %s", type(value).__name__, exc)
        return _fallback_repr(value)

"""Unit tests for diffassert/formatter.py."""

import logging
from collections import Counter, OrderedDict, UserDict, defaultdict, namedtuple
from dataclasses import dataclass, field

import pytest

from diffassert import formatter
from diffassert.formatter import Formattable, format_value
from diffassert.options import FormatOptions


class Point:
    """Plain class relying on object.__repr__."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


class Slotted:
    """Class storing its state in __slots__."""

    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x = x
        self.y = y


class Money:
    """Class with its own repr."""

    def __init__(self, amount):
        self.amount = amount

    def __repr__(self):
        return f"Money({self.amount})"


class Version:
    """Class implementing the rich repr protocol."""

    def __init__(self, major, minor):
        self.major = major
        self.minor = minor

    def __rich_repr__(self):
        yield self.major
        yield "minor", self.minor


class Broken:
    """Class whose repr always fails."""

    def __repr__(self):
        raise ValueError("boom")


@dataclass
class Box:
    item: object
    hidden: int = field(default=0, repr=False)


Coord = namedtuple("Coord", ["x", "y"])


class TestStrings:
    """Strings are never quoted or escaped."""

    def test_string_passes_through(self):
        """Test that a string is returned unchanged."""
        assert format_value("hi") == "hi"

    def test_string_with_newline_passes_through(self):
        """Test that newlines in strings are not escaped."""
        assert format_value("a\nb") == "a\nb"


class TestStructures:
    """Tests for structured values."""

    def test_scalar(self):
        """Test formatting an integer."""
        assert format_value(3) == "3"

    def test_bytes(self):
        """Test formatting bytes uses their repr."""
        assert format_value(b"ab") == "b'ab'"

    def test_nested_dataclasses(self, make_web):
        """Test nested dataclasses show field names and unqualified type names."""
        assert format_value(make_web("D")) == "Web(a=Inner(c=Leaf(d='D')), b=Empty())"

    def test_dataclass_hidden_field_omitted(self):
        """Test that fields declared with repr=False are not rendered."""
        assert format_value(Box(item=1, hidden=5)) == "Box(item=1)"

    def test_dataclass_child_without_repr_is_reflected(self):
        """Test that dataclass children with a default repr are reflected."""
        assert format_value(Box(item=Point(1, 2))) == "Box(item=Point(x=1, y=2))"

    def test_dict_keys_sorted(self):
        """Test that dict keys are sorted for deterministic output."""
        assert format_value({"b": 1, "a": 2}) == "{'a': 2, 'b': 1}"

    def test_dict_insertion_order_kept_when_unsorted(self):
        """Test that sort_keys=False keeps insertion order."""
        result = format_value({"b": 1, "a": 2}, FormatOptions(sort_keys=False))
        assert result == "{'b': 1, 'a': 2}"

    def test_dict_with_unorderable_keys(self):
        """Test that mixed key types fall back to insertion order."""
        assert format_value({1: "x", "a": "y"}) == "{1: 'x', 'a': 'y'}"

    def test_set_members_ordered(self):
        """Test that set members are emitted in a stable order."""
        assert format_value({"z", "x", "y"}) == "{'x', 'y', 'z'}"

    def test_frozenset_members_ordered(self):
        """Test that frozenset members are emitted in a stable order."""
        assert format_value(frozenset({3, 1, 2})) == "frozenset({1, 2, 3})"

    def test_list_and_tuple(self):
        """Test formatting of lists and tuples."""
        assert format_value([1, (2, 3)]) == "[1, (2, 3)]"

    def test_namedtuple_fields_prepared(self):
        """Test that namedtuple fields are rendered by name and prepared."""
        assert format_value(Coord(Point(1, 2), 3)) == "Coord(x=Point(x=1, y=2), y=3)"

    def test_ordered_dict_keeps_order_and_name(self):
        """Test that an OrderedDict keeps its order and its type name."""
        value = OrderedDict([("b", Point(1, 2)), ("a", 1)])
        assert format_value(value) == "OrderedDict({'b': Point(x=1, y=2), 'a': 1})"

    def test_defaultdict_children_prepared(self):
        """Test that defaultdict values are prepared and keys sorted."""
        value = defaultdict(list, {"b": [Point(1, 2)], "a": []})
        assert format_value(value) == "defaultdict(<class 'list'>, {'a': [], 'b': [Point(x=1, y=2)]})"

    def test_counter_keys_sorted(self):
        """Test that Counter entries are ordered by key."""
        assert format_value(Counter({"b": 1, "a": 2})) == "Counter({'a': 2, 'b': 1})"

    def test_user_dict_rendered_by_name(self):
        """Test that other mappings render as their type name around a dict."""
        assert format_value(UserDict({"k": Point(0, 0)})) == "UserDict({'k': Point(x=0, y=0)})"

    def test_object_keys_prepared(self):
        """Test that dict keys with a default repr are reflected like values."""
        assert format_value({Point(1, 2): "p"}) == "{Point(x=1, y=2): 'p'}"

    def test_tuple_key_with_object_prepared(self):
        """Test that objects nested in tuple keys are reflected."""
        assert format_value({(1, Point(0, 1)): 2}) == "{(1, Point(x=0, y=1)): 2}"

    def test_long_value_wraps(self):
        """Test that values wider than max_width are wrapped."""
        result = format_value(list(range(30)), FormatOptions(max_width=20))
        assert "\n" in result
        assert result.startswith("[")

    def test_expand_all(self):
        """Test that expand_all puts nested items on their own lines."""
        result = format_value({"a": 1}, FormatOptions(expand_all=True))
        assert "\n" in result
        assert "'a': 1" in result

    def test_deterministic(self, make_web):
        """Test that formatting the same value twice yields the same text."""
        value = {"web": make_web("D"), "tags": {"b", "a"}}
        assert format_value(value) == format_value(value)


class TestReflectionFallback:
    """Objects without a useful repr are rendered from their attributes."""

    def test_plain_object(self):
        """Test that default-repr objects show their attributes, not an address."""
        result = format_value(Point(1, 2))
        assert result == "Point(x=1, y=2)"
        assert "0x" not in result

    def test_slotted_object(self):
        """Test that __slots__ attributes are reflected."""
        assert format_value(Slotted(1, "a")) == "Slotted(x=1, y='a')"

    def test_nested_in_containers(self):
        """Test that reflected objects inside containers are reflected too."""
        assert format_value([Point(0, 0)]) == "[Point(x=0, y=0)]"

    def test_custom_repr_respected(self):
        """Test that a class with its own repr keeps it."""
        assert format_value(Money(5)) == "Money(5)"

    def test_cycle_is_elided(self):
        """Test that a reference cycle renders as an ellipsis."""
        node = Point(1, None)
        node.y = node
        assert format_value(node) == "Point(x=1, y=...)"

    def test_shared_value_rendered_each_time(self):
        """Test that a value embedded twice is not mistaken for a cycle."""
        shared = Point(1, 2)
        assert format_value([shared, shared]) == "[Point(x=1, y=2), Point(x=1, y=2)]"


class TestFormattable:
    """Tests for the rich repr capability."""

    def test_protocol_detection(self):
        """Test that objects with __rich_repr__ satisfy Formattable."""
        assert isinstance(Version(1, 2), Formattable)
        assert not isinstance(Point(1, 2), Formattable)

    def test_rich_repr_used(self):
        """Test that __rich_repr__ controls the rendering."""
        assert format_value(Version(1, 2)) == "Version(1, minor=2)"


class TestDegradation:
    """Formatting never raises."""

    def test_failing_repr(self):
        """Test that a raising __repr__ degrades to a placeholder."""
        assert format_value(Broken()) == "<repr-error 'boom'>"

    def test_pretty_printer_failure_falls_back_to_repr(self, monkeypatch, caplog):
        """Test the fallback to repr() when the pretty printer fails."""

        def explode(*args, **kwargs):
            raise RuntimeError("printer down")

        monkeypatch.setattr(formatter, "pretty_repr", explode)
        with caplog.at_level(logging.WARNING, logger="diffassert.formatter"):
            assert format_value([1, 2]) == "[1, 2]"
        assert "falling back to repr()" in caplog.text

    def test_total_failure_falls_back_to_type_name(self, monkeypatch):
        """Test the last-resort placeholder when repr() fails as well."""

        def explode(*args, **kwargs):
            raise RuntimeError("printer down")

        monkeypatch.setattr(formatter, "pretty_repr", explode)
        assert format_value(Broken()) == "<Broken object>"


@pytest.mark.parametrize(
    "value",
    [
        0,
        None,
        [1, [2, [3]]],
        {"k": {"nested": (1, 2)}},
        {1.5, 2.5},
    ],
)
def test_format_is_stable(value):
    """Test that equal values always format identically."""
    assert format_value(value) == format_value(value)

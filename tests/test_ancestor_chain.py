"""Tests for walking parent chains."""

import pytest

from apisite.ancestor_chain import ancestor_chain
from apisite.errors import CyclicHierarchyError


def test_chain_is_root_first(make_type) -> None:
    """Verify that ancestors precede the type, root first."""
    foo = make_type("A\\Foo")
    bar = make_type("A\\Bar", parent="A\\Foo")
    baz = make_type("A\\Baz", parent="A\\Bar")
    lookup = {t.name: t for t in (foo, bar, baz)}.get
    assert ancestor_chain(bar, lookup) == [foo, bar]
    assert ancestor_chain(baz, lookup) == [foo, bar, baz]
    assert ancestor_chain(foo, lookup) == [foo]


def test_chain_stops_at_unknown_parent(make_type) -> None:
    """Verify that an unresolvable parent ends the chain."""
    bar = make_type("A\\Bar", parent="Vendor\\Base")
    assert ancestor_chain(bar, {bar.name: bar}.get) == [bar]


def test_cycle_is_reported(make_type) -> None:
    """Verify that a parent cycle raises instead of looping."""
    a = make_type("A", parent="B")
    b = make_type("B", parent="C")
    c = make_type("C", parent="A")
    lookup = {t.name: t for t in (a, b, c)}.get
    with pytest.raises(CyclicHierarchyError) as exc_info:
        ancestor_chain(a, lookup)
    assert exc_info.value.name == "A"
    assert "A -> B -> C -> A" in str(exc_info.value)


def test_self_parent_is_a_cycle(make_type) -> None:
    """Verify that a type naming itself as parent is rejected."""
    a = make_type("A", parent="A")
    with pytest.raises(CyclicHierarchyError):
        ancestor_chain(a, {"A": a}.get)

"""Tests for the Rewrite base class."""

import pytest

from extidy.rewrites.base import Rewrite
from extidy.rewrites.redundant_block import RemoveRedundantBlock
from extidy.type_resolver import TypeTable


def test_name_returns_class_name():
    assert Rewrite.name() == "Rewrite"
    assert RemoveRedundantBlock.name() == "RemoveRedundantBlock"


def test_get_changes_empty():
    assert list(Rewrite().get_changes()) == []


def test_get_changes_after_append():
    r = Rewrite()
    r.changes_made.append("something happened")
    assert list(r.get_changes()) == ["something happened"]


def test_resolver_and_position_stored():
    table = TypeTable()
    r = Rewrite(table, context_position=12)
    assert r.resolver is table
    assert r.context_position == 12


def test_fresh_stats_per_instance():
    a, b = Rewrite(), Rewrite()
    a.stats.blocks_unwrapped += 1
    assert b.stats.blocks_unwrapped == 0


def test_apply_not_implemented():
    with pytest.raises(NotImplementedError):
        Rewrite().apply([])

"""Full-stack example tests.

Each test loads a realistic statement list from the examples/ directory,
runs the whole pipeline over it and compares against the expected output
byte for byte.
"""

from __future__ import annotations

from pathlib import Path

from extidy.config import ExtidyConfig
from extidy.engine import tidy_source
from extidy.stats import RunStats

EXAMPLES = Path(__file__).parent.parent / "examples"


def _load(category: str, name: str) -> tuple[str, str]:
    """Return (input_src, expected_src) for an example."""
    base = EXAMPLES / category / name
    return (base / "input.cs").read_text(), (base / "expected.cs").read_text()


def _tidy(source: str) -> tuple[str, RunStats]:
    stats = RunStats()
    return tidy_source(source, config=ExtidyConfig(), stats=stats), stats


# ---------------------------------------------------------------------------
# RemoveRedundantBlock
# ---------------------------------------------------------------------------


def test_redundant_block_unwrap_body():
    source, expected = _load("redundant_block", "01_unwrap_body")
    result, stats = _tidy(source)
    assert result == expected
    assert stats.blocks_unwrapped == 1


# ---------------------------------------------------------------------------
# MergeDeclarationStatements
# ---------------------------------------------------------------------------


def test_merge_declarations_interleaved_types():
    source, expected = _load("merge_declarations", "01_interleaved_types")
    result, stats = _tidy(source)
    assert result == expected
    assert stats.declarations_merged == 2


def test_merge_declarations_comment_blocks_merge():
    source, expected = _load("merge_declarations", "02_comment_blocks_merge")
    result, stats = _tidy(source)
    assert result == expected == source
    assert stats.total_edits == 0


# ---------------------------------------------------------------------------
# RemoveDeclarationAssignmentPattern
# ---------------------------------------------------------------------------


def test_declaration_assignment_fold():
    source, expected = _load("declaration_assignment", "01_fold")
    result, stats = _tidy(source)
    assert result == expected
    assert stats.assignments_folded == 1


# ---------------------------------------------------------------------------
# RemoveInitializedDeclarationAndReturnPattern
# ---------------------------------------------------------------------------


def test_declaration_return_extracted_body():
    source, expected = _load("declaration_return", "01_extracted_body")
    result, stats = _tidy(source)
    assert result == expected
    assert stats.blocks_unwrapped == 1
    assert stats.returns_folded == 1


def test_declaration_return_stackalloc_kept():
    source, expected = _load("declaration_return", "02_stackalloc_kept")
    result, stats = _tidy(source)
    assert result == expected == source
    assert stats.returns_folded == 0

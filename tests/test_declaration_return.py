"""Tests for the RemoveInitializedDeclarationAndReturnPattern rewrite."""

from extidy.rewrites.declaration_return import (
    RemoveInitializedDeclarationAndReturnPattern,
)
from extidy.syntax.nodes import Annotation, ReturnStatement, to_source
from extidy.syntax.parser import parse_statements


def _rewrite():
    return RemoveInitializedDeclarationAndReturnPattern()


def _apply(source: str) -> str:
    return to_source(_rewrite().apply(parse_statements(source)))


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


def test_returns_initializer():
    assert _apply("int x = 1;\nreturn x;\n") == "return 1;\n"


def test_keeps_outer_trivia():
    source = "    var total = Sum(a, b);\n    return total;\n"
    assert _apply(source) == "    return Sum(a, b);\n"


def test_initializer_expression_is_reused():
    statements = parse_statements("var o = new Order(id);\nreturn o;\n")
    initializer = statements[0].variables[0].initializer.value
    (result,) = _rewrite().apply(statements)
    assert isinstance(result, ReturnStatement)
    assert result.expression is initializer


def test_reports_change():
    rewrite = _rewrite()
    rewrite.apply(parse_statements("int x = 1;\nreturn x;\n"))
    assert rewrite.get_changes() == [
        "RemoveInitializedDeclarationAndReturnPattern: returned initializer of x directly"
    ]
    assert rewrite.stats.returns_folded == 1


# ---------------------------------------------------------------------------
# Skip cases
# ---------------------------------------------------------------------------


def _assert_unchanged(source: str):
    statements = parse_statements(source)
    rewrite = _rewrite()
    result = rewrite.apply(statements)
    assert len(result) == len(statements)
    assert all(new is old for new, old in zip(result, statements))
    assert rewrite.get_changes() == []


def test_three_statements():
    _assert_unchanged("string s;\nreturn 1;\nint z;\n")


def test_statement_after_return():
    _assert_unchanged("int x = 1;\nreturn x;\nLog();\n")


def test_stackalloc_initializer():
    _assert_unchanged("Span<byte> buffer = stackalloc byte[16];\nreturn buffer;\n")


def test_no_initializer():
    _assert_unchanged("int x;\nreturn x;\n")


def test_multiple_variables():
    _assert_unchanged("int x = 1, y = 2;\nreturn x;\n")


def test_bare_return():
    _assert_unchanged("int x = 1;\nreturn;\n")


def test_returns_other_name():
    _assert_unchanged("int x = 1;\nreturn y;\n")


def test_returns_expression_of_name():
    _assert_unchanged("int x = 1;\nreturn x + 1;\n")


def test_comment_on_declaration():
    _assert_unchanged("int x = 1; // seed\nreturn x;\n")


def test_comment_on_return():
    _assert_unchanged("int x = 1;\nreturn /* it */ x;\n")


def test_second_statement_not_return():
    _assert_unchanged("int x = 1;\nUse(x);\n")


def test_single_statement():
    _assert_unchanged("return 1;")


def test_empty_input():
    assert _rewrite().apply([]) == []


# ---------------------------------------------------------------------------
# Annotations of the dropped tokens
# ---------------------------------------------------------------------------


def test_boundary_annotations_move_to_new_return():
    start, end = Annotation("region_start"), Annotation("region_end")
    declaration, return_statement = parse_statements("int x = 1;\nreturn x;\n")
    head = declaration.first_token()
    declaration = declaration.replace_tokens(
        {head: head.with_additional_annotations(start)}
    )
    return_statement = return_statement.with_changes(
        semicolon=return_statement.semicolon.with_additional_annotations(end)
    )
    (result,) = _rewrite().apply([declaration, return_statement])
    assert result.return_keyword.has_annotation(start)
    assert result.semicolon.has_annotation(end)
    assert not result.return_keyword.has_annotation(end)
    assert result.full_text == "return 1;\n"


def test_return_keyword_annotations_kept():
    own = Annotation("own")
    declaration, return_statement = parse_statements("int x = 1;\nreturn x;\n")
    return_statement = return_statement.with_changes(
        return_keyword=return_statement.return_keyword.with_additional_annotations(own)
    )
    (result,) = _rewrite().apply([declaration, return_statement])
    assert result.return_keyword.has_annotation(own)

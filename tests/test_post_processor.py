"""End-to-end scenarios for the PostProcessor operations."""

from extidy.post_processor import PostProcessor
from extidy.syntax.nodes import to_source
from extidy.syntax.parser import parse_statements
from extidy.type_resolver import TypeTable


def _processor():
    return PostProcessor(TypeTable(), context_position=0)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_merge_adjacent_int_declarations():
    statements = parse_statements("int a;\nint b;\nConsole.Write();\n")
    result = list(_processor().merge_declaration_statements(statements))
    assert [s.text for s in result] == ["int a, b;", "Console.Write();"]


def test_unwrap_then_return_initializer():
    processor = _processor()
    statements = parse_statements("{ int x = 1; return x; }")

    unwrapped = processor.remove_redundant_block(statements)
    assert [s.text for s in unwrapped] == ["int x = 1;", "return x;"]

    result = processor.remove_initialized_declaration_and_return_pattern(unwrapped)
    assert [s.text for s in result] == ["return 1;"]
    assert to_source(result) == " return 1; "


def test_fold_assignment_into_declaration():
    statements = parse_statements("int x;\nx = Compute();")
    result = _processor().remove_declaration_assignment_pattern(statements)
    assert [s.text for s in result] == ["int x = Compute();"]


def test_comment_prevents_assignment_fold():
    statements = parse_statements("int x;\n/* comment */ x = 5;")
    result = _processor().remove_declaration_assignment_pattern(statements)
    assert result == statements


def test_return_pattern_needs_exactly_two_statements():
    statements = parse_statements("string s;\nreturn 1;\nint z;")
    result = _processor().remove_initialized_declaration_and_return_pattern(
        statements
    )
    assert result == statements


def test_empty_input_for_every_operation():
    processor = _processor()
    assert list(processor.merge_declaration_statements([])) == []
    assert processor.remove_redundant_block([]) == []
    assert processor.remove_declaration_assignment_pattern([]) == []
    assert processor.remove_initialized_declaration_and_return_pattern([]) == []


# ---------------------------------------------------------------------------
# Statelessness
# ---------------------------------------------------------------------------


def test_calls_are_independent():
    processor = _processor()
    first = parse_statements("int a;\nint b;\n")
    second = parse_statements("string s;\nstring t;\n")
    assert to_source(processor.merge_declaration_statements(first)) == "int a, b;\n"
    assert to_source(processor.merge_declaration_statements(second)) == (
        "string s, t;\n"
    )
    assert to_source(first) == "int a;\nint b;\n"


def test_without_resolver_merge_is_a_no_op():
    statements = parse_statements("int a;\nint b;\n")
    assert list(PostProcessor().merge_declaration_statements(statements)) == statements

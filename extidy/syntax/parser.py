"""Text front end: statement source to syntax nodes, trivia included.

The lark grammar ignores whitespace, comments and directives, so the parse
tree alone would lose them. A second lex pass with ``dont_ignore=True`` sees
every character, and each significant token is rebuilt with the trivia
around it before the tree is transformed into nodes:

- trailing trivia runs to the end of the line, line break included, and
  never takes a directive;
- everything else before a token is its leading trivia;
- trivia after the last token is trailing trivia of that token.

Rendering the resulting statements therefore reproduces the input exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from lark import Lark, Token as LarkToken, Transformer
from lark.exceptions import UnexpectedInput

from ..errors import ExtidyParseError
from .nodes import (
    ArgumentList,
    ArrayType,
    Assignment,
    Binary,
    Block,
    EmptyStatement,
    EqualsValue,
    ExpressionStatement,
    IfStatement,
    Invocation,
    Literal,
    LocalDeclaration,
    MemberAccess,
    Name,
    NamedType,
    NullableType,
    ObjectCreation,
    Parenthesized,
    PrefixUnary,
    ReturnStatement,
    SeparatedList,
    StackAlloc,
    Statement,
    Token,
    TypeArguments,
    VariableDeclaration,
    VariableDeclarator,
)
from .trivia import Trivia, TriviaKind

_GRAMMAR_PATH = Path(__file__).with_name("statements.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
    _GRAMMAR_SRC,
    parser="earley",
    lexer="basic",
    keep_all_tokens=True,
    maybe_placeholders=False,
)

_TRIVIA_KINDS: Dict[str, TriviaKind] = {
    "WHITESPACE": TriviaKind.WHITESPACE,
    "END_OF_LINE": TriviaKind.END_OF_LINE,
    "SINGLE_LINE_COMMENT": TriviaKind.SINGLE_LINE_COMMENT,
    "MULTI_LINE_COMMENT": TriviaKind.MULTI_LINE_COMMENT,
    "DIRECTIVE": TriviaKind.DIRECTIVE,
}

# Keywords and punctuation use their own text as the kind.
_NAMED_KINDS: Dict[str, str] = {
    "IDENTIFIER": "identifier",
    "NUMBER": "numeric_literal",
    "STRING": "string_literal",
    "CHAR": "character_literal",
}


def _token_kind(tok: LarkToken) -> str:
    return _NAMED_KINDS.get(tok.type, tok.value)


def _lex_with_trivia(source: str) -> Dict[int, Token]:
    """Return every significant token, keyed by its offset in *source*."""
    entries = []  # (lark token, leading trivia, trailing trivia)
    pending: List[Trivia] = []
    in_trailing = False
    for tok in _PARSER.lex(source, dont_ignore=True):
        kind = _TRIVIA_KINDS.get(tok.type)
        if kind is None:
            entries.append((tok, pending, []))
            pending = []
            in_trailing = True
            continue
        trivia = Trivia(kind, tok.value)
        if in_trailing and kind is not TriviaKind.DIRECTIVE:
            entries[-1][2].append(trivia)
            if kind is TriviaKind.END_OF_LINE:
                in_trailing = False
        else:
            in_trailing = False
            pending.append(trivia)
    if pending and entries:
        entries[-1][2].extend(pending)

    return {
        tok.start_pos: Token(
            kind=_token_kind(tok),
            text=tok.value,
            leading=tuple(leading),
            trailing=tuple(trailing),
        )
        for tok, leading, trailing in entries
    }


class _NodeBuilder(Transformer):
    """Turn the lark tree into nodes, swapping in the trivia-bearing tokens."""

    def __init__(self, tokens: Dict[int, Token]) -> None:
        super().__init__()
        self._tokens = tokens

    def _convert(self, children):
        return [
            self._tokens[c.start_pos] if isinstance(c, LarkToken) else c
            for c in children
        ]

    def start(self, children):
        return self._convert(children)

    # Statements

    def block(self, children):
        c = self._convert(children)
        return Block(c[0], tuple(c[1:-1]), c[-1])

    def local_declaration(self, children):
        c = self._convert(children)
        return LocalDeclaration(tuple(c[:-2]), c[-2], c[-1])

    def variable_declaration(self, children):
        c = self._convert(children)
        return VariableDeclaration(c[0], SeparatedList(tuple(c[1:])))

    def declarator(self, children):
        c = self._convert(children)
        return VariableDeclarator(c[0], c[1] if len(c) > 1 else None)

    def equals_value(self, children):
        return EqualsValue(*self._convert(children))

    def return_statement(self, children):
        c = self._convert(children)
        expression = c[1] if len(c) == 3 else None
        return ReturnStatement(c[0], expression, c[-1])

    def if_statement(self, children):
        return IfStatement(*self._convert(children))

    def empty_statement(self, children):
        return EmptyStatement(*self._convert(children))

    def expression_statement(self, children):
        return ExpressionStatement(*self._convert(children))

    # Types

    def predefined_type(self, children):
        return NamedType(tuple(self._convert(children)))

    def named_type(self, children):
        c = self._convert(children)
        if isinstance(c[-1], TypeArguments):
            return NamedType(tuple(c[:-1]), c[-1])
        return NamedType(tuple(c))

    def type_arguments(self, children):
        c = self._convert(children)
        return TypeArguments(c[0], SeparatedList(tuple(c[1:-1])), c[-1])

    def array_type(self, children):
        return ArrayType(*self._convert(children))

    def nullable_type(self, children):
        return NullableType(*self._convert(children))

    # Expressions

    def assignment(self, children):
        return Assignment(*self._convert(children))

    def _fold_binary(self, children):
        c = self._convert(children)
        result = c[0]
        for i in range(1, len(c), 2):
            result = Binary(result, c[i], c[i + 1])
        return result

    logical = equality = relational = additive = multiplicative = _fold_binary

    def prefix_unary(self, children):
        return PrefixUnary(*self._convert(children))

    def name(self, children):
        return Name(*self._convert(children))

    def literal(self, children):
        return Literal(*self._convert(children))

    def parenthesized(self, children):
        return Parenthesized(*self._convert(children))

    def member_access(self, children):
        c = self._convert(children)
        return MemberAccess(c[0], c[1], Name(c[2]))

    def invocation(self, children):
        return Invocation(*self._convert(children))

    def object_creation(self, children):
        return ObjectCreation(*self._convert(children))

    def stackalloc(self, children):
        return StackAlloc(*self._convert(children))

    def argument_list(self, children):
        c = self._convert(children)
        return ArgumentList(c[0], SeparatedList(tuple(c[1:-1])), c[-1])


def parse_statements(source: str) -> List[Statement]:
    """Parse *source* into a list of statements.

    Raises ExtidyParseError if the text is not a sequence of supported
    statements.
    """
    try:
        tokens = _lex_with_trivia(source)
        tree = _PARSER.parse(source)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", 0)
        column = getattr(exc, "column", 0)
        raise ExtidyParseError(
            f"cannot parse statements at line {line}, column {column}",
            line=line,
            column=column,
        ) from exc
    return _NodeBuilder(tokens).transform(tree)


def parse_statement(source: str) -> Statement:
    """Parse *source* holding exactly one statement."""
    statements = parse_statements(source)
    if len(statements) != 1:
        raise ExtidyParseError(f"expected one statement, found {len(statements)}")
    return statements[0]

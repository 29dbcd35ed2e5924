"""Construction helpers for synthesized nodes."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .nodes import (
    EqualsValue,
    Expression,
    LocalDeclaration,
    Node,
    ReturnStatement,
    SeparatedList,
    Token,
    TypeNode,
    VariableDeclaration,
    VariableDeclarator,
)
from .trivia import Trivia, space


def token(
    kind: str,
    text: Optional[str] = None,
    leading: Iterable[Trivia] = (),
    trailing: Iterable[Trivia] = (),
) -> Token:
    """Build a token; *text* defaults to *kind* for keywords and punctuation."""
    return Token(
        kind=kind,
        text=kind if text is None else text,
        leading=tuple(leading),
        trailing=tuple(trailing),
    )


def separated_list(items: Sequence[Node]) -> SeparatedList:
    """Join *items* with fresh ``, `` separators."""
    elements = []
    for i, item in enumerate(items):
        if i > 0:
            elements.append(token(",", trailing=(space(),)))
        elements.append(item)
    return SeparatedList(tuple(elements))


def equals_value(value: Expression) -> EqualsValue:
    return EqualsValue(token("=", leading=(space(),), trailing=(space(),)), value)


def local_declaration(
    type_node: TypeNode,
    variables: Sequence[VariableDeclarator],
    semicolon: Optional[Token] = None,
) -> LocalDeclaration:
    return LocalDeclaration(
        modifiers=(),
        declaration=VariableDeclaration(type_node, separated_list(variables)),
        semicolon=semicolon if semicolon is not None else token(";"),
    )


def return_statement(
    expression: Optional[Expression],
    leading: Iterable[Trivia] = (),
    trailing: Iterable[Trivia] = (),
) -> ReturnStatement:
    """Build ``return <expression>;`` with *leading*/*trailing* on the outer tokens."""
    keyword = token("return", leading=leading)
    if expression is not None:
        keyword = keyword.with_trailing((space(),))
    return ReturnStatement(keyword, expression, token(";", trailing=trailing))

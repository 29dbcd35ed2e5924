"""Precondition checks shared by the rewrites."""

from typing import Optional

from ..syntax.nodes import LocalDeclaration, Statement
from ..syntax.trivia import contains_only_whitespace_trivia
from ..type_resolver import TypeIdentity, TypeResolver

__all__ = [
    "contains_any_initialization",
    "contains_only_whitespace_trivia",
    "mergeable_type",
]


def contains_any_initialization(declaration: LocalDeclaration) -> bool:
    return any(v.initializer is not None for v in declaration.variables)


def mergeable_type(
    statement: Statement, resolver: Optional[TypeResolver], position: int
) -> Optional[TypeIdentity]:
    """Return the declared type if *statement* can join a merged declaration.

    To be mergeable, a statement must be
    1. a local declaration without modifiers, const or missing tokens
    2. free of initializers on all of its variables
    3. free of trivia other than whitespace
    4. declared with a type that resolves to a known identity
    Returns None otherwise.
    """
    if not isinstance(statement, LocalDeclaration):
        return None

    if statement.modifiers or statement.is_const or statement.is_missing:
        return None

    if contains_any_initialization(statement):
        return None

    if not contains_only_whitespace_trivia(statement):
        return None

    if resolver is None:
        return None
    identity = resolver.resolve(statement.type, position)
    if identity is None or not identity.is_known:
        return None
    return identity

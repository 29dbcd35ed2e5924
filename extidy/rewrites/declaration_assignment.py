"""Rewrite: T x; x = e;  ->  T x = e;"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..syntax import factory
from ..syntax.nodes import (
    Assignment,
    ExpressionStatement,
    LocalDeclaration,
    Statement,
)
from .base import Rewrite
from .predicates import contains_any_initialization, contains_only_whitespace_trivia

logger = logging.getLogger(__name__)


class RemoveDeclarationAssignmentPattern(Rewrite):
    """Fold an assignment into the declaration right before it.

    Only the first two statements are considered. The declaration must have a
    single uninitialized variable and the next statement must be a plain
    ``name = value;`` for that same name. Names are compared as text: the two
    statements are adjacent, so nothing in between can shadow the local.
    """

    def apply(self, statements: Iterable[Statement]) -> List[Statement]:
        statements = list(statements)
        if len(statements) < 2:
            return statements

        declaration, statement = statements[0], statements[1]
        if not isinstance(declaration, LocalDeclaration) or not isinstance(
            statement, ExpressionStatement
        ):
            return statements

        assignment = statement.expression
        if (
            contains_any_initialization(declaration)
            or len(declaration.variables) != 1
            or not isinstance(assignment, Assignment)
            or not assignment.is_simple
        ):
            return statements

        if not contains_only_whitespace_trivia(
            declaration
        ) or not contains_only_whitespace_trivia(statement):
            return statements

        variable = declaration.variables[0]
        if assignment.left.text != variable.name:
            return statements

        initialized = variable.with_changes(
            initializer=factory.equals_value(assignment.right)
        )
        # the assignment's `;` ends the folded statement
        semicolon = statement.semicolon.copy_annotations_to(
            declaration.semicolon
        ).with_trailing(statement.semicolon.trailing)
        new_declaration = declaration.with_changes(
            declaration=declaration.declaration.with_changes(
                variables=factory.separated_list([initialized])
            ),
            semicolon=semicolon,
        )

        self.stats.assignments_folded += 1
        message = f"{self.name()}: folded assignment into declaration of {variable.name}"
        self.changes_made.append(message)
        logger.debug(message)
        return [new_declaration] + statements[2:]

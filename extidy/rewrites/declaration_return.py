"""Rewrite: T x = e; return x;  ->  return e;"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..syntax import factory
from ..syntax.nodes import LocalDeclaration, ReturnStatement, StackAlloc, Statement
from .base import Rewrite
from .predicates import contains_only_whitespace_trivia

logger = logging.getLogger(__name__)


class RemoveInitializedDeclarationAndReturnPattern(Rewrite):
    """Return an initializer directly instead of through a temporary.

    Applies only to a list of exactly two statements: a single-variable
    declaration with an initializer, then ``return <that name>;``. A
    ``stackalloc`` initializer is left alone since it cannot be returned.
    """

    def apply(self, statements: Iterable[Statement]) -> List[Statement]:
        statements = list(statements)
        if len(statements) != 2:
            return statements

        declaration, return_statement = statements
        if not isinstance(declaration, LocalDeclaration) or not isinstance(
            return_statement, ReturnStatement
        ):
            return statements

        variables = declaration.variables
        if (
            len(variables) != 1
            or variables[0].initializer is None
            or isinstance(variables[0].initializer.value, StackAlloc)
            or return_statement.expression is None
        ):
            return statements

        if not contains_only_whitespace_trivia(
            declaration
        ) or not contains_only_whitespace_trivia(return_statement):
            return statements

        variable = variables[0]
        if return_statement.expression.text != variable.name:
            return statements

        first_token = declaration.first_token()
        new_return = factory.return_statement(
            variable.initializer.value,
            leading=first_token.leading,
            trailing=return_statement.semicolon.trailing,
        )
        keyword = return_statement.return_keyword.copy_annotations_to(
            first_token.copy_annotations_to(new_return.return_keyword)
        )
        semicolon = return_statement.semicolon.copy_annotations_to(
            new_return.semicolon
        )
        new_return = new_return.with_changes(
            return_keyword=keyword, semicolon=semicolon
        )

        self.stats.returns_folded += 1
        message = f"{self.name()}: returned initializer of {variable.name} directly"
        self.changes_made.append(message)
        logger.debug(message)
        return [new_return]

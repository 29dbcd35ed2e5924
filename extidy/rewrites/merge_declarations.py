"""Rewrite: int a; int b;  ->  int a, b;"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

from ..syntax import factory
from ..syntax.nodes import LocalDeclaration, Statement
from ..type_resolver import TypeIdentity
from .base import Rewrite
from .predicates import mergeable_type

logger = logging.getLogger(__name__)


class MergeDeclarationStatements(Rewrite):
    """Merge runs of uninitialized local declarations that share a type.

    Transforms:
        int a;
        string s;
        int b;
        Run();

    Into:
        int a, b;
        string s;
        Run();

    Declarations are grouped by resolved type within a maximal run of
    mergeable declarations; a non-mergeable statement flushes the run. Groups
    are emitted in order of first occurrence, and each keeps its variables in
    source order. The output is produced lazily.
    """

    def apply(self, statements: Iterable[Statement]) -> Iterator[Statement]:
        pending: Dict[TypeIdentity, List[LocalDeclaration]] = {}
        for statement in statements:
            identity = mergeable_type(
                statement, self.resolver, self.context_position
            )
            if identity is None:
                yield from self._flush(pending)
                yield statement
                continue

            pending.setdefault(identity, []).append(statement)

        # merge leftover
        yield from self._flush(pending)

    def _flush(
        self, pending: Dict[TypeIdentity, List[LocalDeclaration]]
    ) -> Iterator[Statement]:
        for identity, group in pending.items():
            if len(group) == 1:
                yield group[0]
                continue

            # one declaration for the whole group, typed like the first
            variables = [v for declaration in group for v in declaration.variables]
            type_node = group[0].type
            first = type_node.first_token()
            kept_first = first
            semicolon = factory.token(";", trailing=group[-1].semicolon.trailing)
            for declaration in group:
                # annotations of the dropped type tokens and semicolons
                kept_first = declaration.first_token().copy_annotations_to(kept_first)
                semicolon = declaration.semicolon.copy_annotations_to(semicolon)
            type_node = type_node.replace_tokens({first: kept_first})
            yield factory.local_declaration(type_node, variables, semicolon)

            self.stats.declarations_merged += len(group)
            message = (
                f"{self.name()}: merged {len(group)} declarations of {identity}"
            )
            self.changes_made.append(message)
            logger.debug(message)
        pending.clear()

"""Clean up the statement lists produced by an Extract Method refactoring."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .rewrites.declaration_assignment import RemoveDeclarationAssignmentPattern
from .rewrites.declaration_return import RemoveInitializedDeclarationAndReturnPattern
from .rewrites.merge_declarations import MergeDeclarationStatements
from .rewrites.redundant_block import RemoveRedundantBlock
from .syntax.nodes import Statement
from .type_resolver import TypeResolver


class PostProcessor:
    """The four statement-list cleanups behind one object.

    *context_position* is the binding position used when resolving declared
    types, i.e. where the statements will end up.
    """

    def __init__(
        self, resolver: Optional[TypeResolver] = None, context_position: int = 0
    ) -> None:
        self.resolver = resolver
        self.context_position = context_position

    def merge_declaration_statements(
        self, statements: Iterable[Statement]
    ) -> Iterable[Statement]:
        rewrite = MergeDeclarationStatements(self.resolver, self.context_position)
        return rewrite.apply(statements)

    def remove_redundant_block(self, statements: Iterable[Statement]) -> List[Statement]:
        return RemoveRedundantBlock().apply(statements)

    def remove_declaration_assignment_pattern(
        self, statements: Iterable[Statement]
    ) -> List[Statement]:
        return RemoveDeclarationAssignmentPattern().apply(statements)

    def remove_initialized_declaration_and_return_pattern(
        self, statements: Iterable[Statement]
    ) -> List[Statement]:
        return RemoveInitializedDeclarationAndReturnPattern().apply(statements)

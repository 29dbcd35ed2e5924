"""Base class for statement-list rewrites."""

from typing import Iterable, List, Optional, Sequence

from ..stats import RunStats
from ..syntax.nodes import Statement
from ..type_resolver import TypeResolver


class Rewrite:
    """Base class for all extidy rewrites.

    A rewrite takes an ordered statement sequence and returns a new one. When
    its pattern does not match, the input comes back unchanged: there is no
    error channel and nothing is ever mutated.
    """

    def __init__(
        self,
        resolver: Optional[TypeResolver] = None,
        context_position: int = 0,
    ) -> None:
        self.resolver = resolver
        self.context_position = context_position
        self.changes_made: List[str] = []
        self.stats: RunStats = RunStats()

    @classmethod
    def name(cls) -> str:
        return cls.__name__

    def get_changes(self) -> Sequence[str]:
        return self.changes_made

    def apply(self, statements: Iterable[Statement]) -> Iterable[Statement]:
        raise NotImplementedError

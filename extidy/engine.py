"""Run the enabled rewrites, in order, over one statement list."""

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Sequence

from .config import ExtidyConfig, load_config
from .rewrites.base import Rewrite
from .rewrites.declaration_assignment import RemoveDeclarationAssignmentPattern
from .rewrites.declaration_return import RemoveInitializedDeclarationAndReturnPattern
from .rewrites.merge_declarations import MergeDeclarationStatements
from .rewrites.redundant_block import RemoveRedundantBlock
from .stats import RunStats
from .syntax.nodes import Statement, to_source
from .syntax.parser import parse_statements
from .type_resolver import TypeKind, TypeResolver, TypeTable

logger = logging.getLogger(__name__)

# Applied in this order. Unwrapping first exposes the body to the folds;
# folding before merging keeps `T x; x = e;` from being merged away.
_REWRITES = [
    RemoveRedundantBlock,
    RemoveDeclarationAssignmentPattern,
    RemoveInitializedDeclarationAndReturnPattern,
    MergeDeclarationStatements,
]

# Canonical snake_case name for each rewrite class (used by _should_run).
_REWRITE_KEY: Dict[type, str] = {
    RemoveRedundantBlock: "remove_redundant_block",
    RemoveDeclarationAssignmentPattern: "remove_declaration_assignment",
    RemoveInitializedDeclarationAndReturnPattern: "remove_declaration_return",
    MergeDeclarationStatements: "merge_declarations",
}


class EngineResult(NamedTuple):
    statements: List[Statement]
    messages: List[str]


def _should_run(name: str, config: ExtidyConfig) -> bool:
    """Return True if the named rewrite should run given the config.

    When ``config.enabled_rewrites`` is non-empty only names in that list run.
    Otherwise names in ``config.disabled_rewrites`` are skipped.
    """
    if config.enabled_rewrites:
        return name in config.enabled_rewrites
    return name not in config.disabled_rewrites


def type_table_from_config(config: ExtidyConfig) -> TypeTable:
    """Build the reference resolver seeded with the configured types."""
    table = TypeTable()
    for qualified_name, kind_name in config.known_types.items():
        namespace, _, name = qualified_name.rpartition(".")
        try:
            kind = TypeKind(kind_name)
        except ValueError:
            logger.warning(
                "unknown type kind %r for %s; using class", kind_name, qualified_name
            )
            kind = TypeKind.CLASS
        table.declare(name, kind, namespace)
    for alias, target in config.type_aliases.items():
        table.alias(alias, target)
    return table


def run_engine(
    statements: Sequence[Statement],
    resolver: Optional[TypeResolver] = None,
    config: Optional[ExtidyConfig] = None,
    stats: Optional[RunStats] = None,
) -> EngineResult:
    """Apply every enabled rewrite to *statements* and collect change messages."""
    if config is None:
        config = load_config()
    if stats is None:
        stats = RunStats()
    if resolver is None:
        resolver = type_table_from_config(config)

    current = list(statements)
    stats.statements_in += len(current)
    messages: List[str] = []
    for rewrite_cls in _REWRITES:
        if not _should_run(_REWRITE_KEY[rewrite_cls], config):
            continue
        rewrite: Rewrite = rewrite_cls(resolver, config.context_position)
        current = list(rewrite.apply(current))
        messages.extend(rewrite.get_changes())
        stats.merge(rewrite.stats)

    stats.statements_out += len(current)
    return EngineResult(current, messages)


def tidy_source(
    source: str,
    config: Optional[ExtidyConfig] = None,
    stats: Optional[RunStats] = None,
    resolver: Optional[TypeResolver] = None,
) -> str:
    """Parse *source*, run the pipeline and render the result."""
    result = run_engine(parse_statements(source), resolver, config, stats)
    return to_source(result.statements)

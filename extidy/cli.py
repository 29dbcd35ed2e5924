"""CLI entry point: reads statements on stdin, writes the tidied statements."""

import logging
import sys

from .config import load_config
from .engine import run_engine, type_table_from_config
from .errors import ExtidyParseError
from .stats import RunStats
from .syntax.nodes import to_source
from .syntax.parser import parse_statements


def _log_level(name) -> int:
    """Return the numeric level for *name*, falling back to WARNING."""
    level = logging.getLevelNamesMapping().get(str(name).upper())
    if level is None:
        print(f"extidy: unknown log_level {name!r}; using WARNING", file=sys.stderr)
        return logging.WARNING
    return level


def main() -> None:
    source = sys.stdin.read()
    if not source.strip():
        print("extidy: no statements provided on stdin", file=sys.stderr)
        sys.exit(1)

    config = load_config()
    logging.basicConfig(level=_log_level(config.log_level))
    try:
        statements = parse_statements(source)
    except ExtidyParseError as exc:
        print(f"extidy: {exc}", file=sys.stderr)
        sys.exit(1)

    run_stats = RunStats()
    result = run_engine(
        statements,
        type_table_from_config(config),
        config=config,
        stats=run_stats,
    )
    sys.stdout.write(to_source(result.statements))
    for message in result.messages:
        print(message, file=sys.stderr)
    for line in run_stats.format_summary():
        print(line, file=sys.stderr)

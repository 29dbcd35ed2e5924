"""Load extidy configuration from pyproject.toml and optional .extidy.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class ExtidyConfig:
    """Runtime configuration for extidy."""

    # Rewrite allow-list: if non-empty, only the named rewrites are run.
    # Valid names: "remove_redundant_block", "remove_declaration_assignment",
    # "remove_declaration_return", "merge_declarations".
    # An empty list means "run all" (the default).
    enabled_rewrites: List[str] = field(default_factory=list)
    # Rewrite deny-list: named rewrites are always skipped.
    # Ignored when enabled_rewrites is non-empty.
    disabled_rewrites: List[str] = field(default_factory=list)

    # Binding position at which declared types are resolved (where the
    # statements will be spliced back in).
    context_position: int = 0

    # Extra types known to the resolver, name -> kind ("class", "struct",
    # "interface", "enum", "delegate").  Dotted names register both the
    # qualified and the simple name.
    known_types: Dict[str, str] = field(default_factory=dict)
    # Type aliases in scope, alias -> target name (e.g. {"Id": "long"}).
    type_aliases: Dict[str, str] = field(default_factory=dict)

    # Logging level name for the CLI ("DEBUG" shows every applied rewrite).
    log_level: str = "WARNING"


def _read_toml(path: Path) -> dict:
    """Read a TOML file; return empty dict if missing or unparseable."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _apply(cfg: ExtidyConfig, d: dict) -> None:
    """Overlay dict values onto cfg, ignoring unknown keys."""
    valid = set(cfg.__dataclass_fields__)
    for key, val in d.items():
        if key in valid:
            setattr(cfg, key, val)


def load_config(project_root: Optional[Path] = None) -> ExtidyConfig:
    """Load config from pyproject.toml [tool.extidy], then .extidy.toml."""
    if project_root is None:
        project_root = Path.cwd()
    cfg = ExtidyConfig()
    pyproject = _read_toml(project_root / "pyproject.toml")
    _apply(cfg, pyproject.get("tool", {}).get("extidy", {}))
    local = _read_toml(project_root / ".extidy.toml")
    _apply(cfg, local)
    return cfg

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

from .helpers import DEFAULT_CHILDREN_HEADINGS
from .resolver import DEFAULT_ALLOWED_HOST

TASKLIST_HEADER = "```[tasklist]"
CHILDREN_HEADER = "children:"
DEFAULT_STRATEGIES = ["tasklist", "children", "legacy_html"]
KNOWN_STRATEGIES = frozenset(DEFAULT_STRATEGIES)


class ConfigError(RuntimeError):
    pass


@dataclass
class ParserConfig:
    tasklist_header: str = TASKLIST_HEADER
    children_header: str = CHILDREN_HEADER
    allowed_host: str = DEFAULT_ALLOWED_HOST
    strategies: list[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    # Legacy rendered-HTML lists
    children_headings: list[str] = field(default_factory=lambda: list(DEFAULT_CHILDREN_HEADINGS))
    legacy_validate_host: bool = False
    # Due-date diagnostics
    eta_user_guide_section: str = "#eta"
    # Logging configuration
    logging_json_enabled: bool = False
    logging_level: str = "INFO"


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {}) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return cast(dict[str, Any], value)


def _validate_strategies(names: Any) -> list[str]:
    if not isinstance(names, list) or not names:
        raise ConfigError("parser.strategies must be a non-empty list")
    unknown = [n for n in names if n not in KNOWN_STRATEGIES]
    if unknown:
        raise ConfigError(f"Unknown strategies: {', '.join(map(str, unknown))}")
    return [str(n) for n in names]


def config_from_dict(raw: dict[str, Any]) -> ParserConfig:
    parser = _section(raw, "parser")
    legacy = _section(raw, "legacy_html")
    eta = _section(raw, "eta")
    logging_config = _section(raw, "logging")
    defaults = ParserConfig()
    return ParserConfig(
        tasklist_header=str(parser.get("tasklist_header", defaults.tasklist_header)),
        children_header=str(parser.get("children_header", defaults.children_header)),
        allowed_host=str(parser.get("allowed_host", defaults.allowed_host)),
        strategies=_validate_strategies(parser.get("strategies", defaults.strategies)),
        children_headings=[str(h) for h in legacy.get("headings", defaults.children_headings)],
        legacy_validate_host=bool(legacy.get("validate_host", False)),
        eta_user_guide_section=str(eta.get("user_guide_section", defaults.eta_user_guide_section)),
        logging_json_enabled=bool(logging_config.get("json_enabled", False)),
        logging_level=str(logging_config.get("level", "INFO")),
    )


def load_config(path: str | Path) -> ParserConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")
    try:
        raw_any = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if not isinstance(raw_any, dict):
        raise ConfigError(f"Configuration in {p} must be a mapping")
    return config_from_dict(cast(dict[str, Any], raw_any))


__all__ = [
    "ParserConfig",
    "ConfigError",
    "load_config",
    "config_from_dict",
    "TASKLIST_HEADER",
    "CHILDREN_HEADER",
    "DEFAULT_STRATEGIES",
]

"""issuetree CLI.

Subcommands:
  children  -> print the children records of one or more issue payloads
  eta       -> print the ETA (and collected diagnostics) of issue payloads
  schema    -> write JSON Schemas for issue input & children output

Issue payloads are read from a JSON file (``-`` for stdin) holding either a
single GitHub issue object or a list of them. Nothing here talks to GitHub.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from issuetree.config import ConfigError, ParserConfig, load_config
from issuetree.error_manager import ErrorManager
from issuetree.errors import ChildrenParseError
from issuetree.logging import configure_logging, get_logger
from issuetree.models import IssueRef
from issuetree.parser import ChildrenParser
from issuetree.schemas import get_schemas, validate_issue_payload

EXIT_INVALID_INPUT = 2


class InputError(ValueError):
    pass


def _build_parser() -> argparse.ArgumentParser:
    """Construct top-level CLI parser with subcommands."""
    p = argparse.ArgumentParser(
        prog="issuetree", description="Extract children and ETA from GitHub issue bodies"
    )
    p.add_argument("--config", help="YAML parser configuration")
    p.add_argument("--json-logs", action="store_true", help="Emit JSON log lines on stderr")
    p.add_argument("--log-level", help="Override logging level (DEBUG, INFO, ...)")
    sub = p.add_subparsers(dest="cmd", required=True, metavar="<command>")

    pc = sub.add_parser("children", help="Print children records as JSON")
    pc.add_argument("issue_json", help="Issue payload JSON file, or - for stdin")
    pc.add_argument("--explain", action="store_true", help="Include winning strategy and fallbacks")
    pc.add_argument("--pretty", action="store_true")

    pe = sub.add_parser("eta", help="Print the ETA of each issue as JSON")
    pe.add_argument("issue_json", help="Issue payload JSON file, or - for stdin")
    pe.add_argument("--pretty", action="store_true")

    ps = sub.add_parser("schema", help="Write JSON Schema files")
    ps.add_argument("--output-dir", default=".")
    return p


def _read_issues(source: str) -> tuple[list[IssueRef], bool]:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
        payload: Any = json.loads(text)
    except (OSError, json.JSONDecodeError) as exc:
        raise InputError(f"Cannot read issue payload from {source}: {exc}") from exc
    items = payload if isinstance(payload, list) else [payload]
    issues: list[IssueRef] = []
    for index, item in enumerate(items):
        problems = validate_issue_payload(item)
        if problems:
            raise InputError(f"Issue #{index} is invalid: " + "; ".join(problems))
        issues.append(IssueRef.from_mapping(item))
    return issues, isinstance(payload, list)


def _emit(data: Any, pretty: bool) -> None:
    print(json.dumps(data, indent=2 if pretty else None))


def _unwrap(results: list[Any], source_was_list: bool) -> Any:
    return results if source_was_list else results[0]


def _cmd_children(parser: ChildrenParser, args: argparse.Namespace) -> int:
    issues, as_list = _read_issues(args.issue_json)
    results: list[Any] = []
    with get_logger().timed_operation("children", issue_count=len(issues)):
        for issue in issues:
            report = parser.parse(issue)
            results.append(report.to_dict() if args.explain else [c.to_dict() for c in report.children])
    _emit(_unwrap(results, as_list), args.pretty)
    return 0


def _cmd_eta(parser: ChildrenParser, args: argparse.Namespace) -> int:
    issues, as_list = _read_issues(args.issue_json)
    results: list[Any] = []
    for issue in issues:
        # one collector per issue keeps diagnostics isolated
        errors = ErrorManager()
        due = parser.due_date(issue, errors)
        results.append({**due, "errors": [e.to_dict() for e in errors.errors]})
    _emit(_unwrap(results, as_list), args.pretty)
    return 0


def _cmd_schema(args: argparse.Namespace) -> int:
    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, schema in get_schemas().items():
        path = out_dir / f"{name}.schema.json"
        path.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
        print(f"[schema] wrote {path}")
    return 0


def _load_cfg(args: argparse.Namespace) -> ParserConfig:
    return load_config(args.config) if args.config else ParserConfig()


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        cfg = _load_cfg(args)
    except ConfigError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    configure_logging(
        json_logging=args.json_logs or cfg.logging_json_enabled,
        level=args.log_level or cfg.logging_level,
    )
    if args.cmd == "schema":
        return _cmd_schema(args)
    parser = ChildrenParser(cfg)
    handlers = {"children": _cmd_children, "eta": _cmd_eta}
    try:
        return handlers[args.cmd](parser, args)
    except (InputError, ChildrenParseError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

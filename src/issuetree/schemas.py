"""JSON Schemas for the CLI's input and output documents.

Schemas stay shallow: the issue schema only pins the fields the extraction
engine reads, so full GitHub API payloads validate unchanged.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft7Validator

SCHEMA_KEY = "$schema"
SCHEMA_URL = "http://json-schema.org/draft-07/schema#"

_NULLABLE_STRING = {"type": ["string", "null"]}


def get_schemas() -> dict[str, Any]:
    """Return a mapping of schema name -> JSON Schema dictionary.

    Keys:
        issue:    A GitHub issue payload (single object).
        children: The list printed by ``issuetree children``.
    """
    issue_schema: dict[str, Any] = {
        SCHEMA_KEY: SCHEMA_URL,
        "title": "IssueRef",
        "type": "object",
        "properties": {
            "body": _NULLABLE_STRING,
            "body_html": _NULLABLE_STRING,
            "html_url": _NULLABLE_STRING,
            "title": _NULLABLE_STRING,
            "root_issue": {"type": ["boolean", "null"]},
        },
    }
    children_schema: dict[str, Any] = {
        SCHEMA_KEY: SCHEMA_URL,
        "title": "ChildRecords",
        "type": "array",
        "items": {
            "type": "object",
            "required": ["group", "html_url"],
            "properties": {
                "group": {"type": "string"},
                "html_url": {"type": "string"},
            },
        },
    }
    return {"issue": issue_schema, "children": children_schema}


def validate_issue_payload(payload: Any) -> list[str]:
    """Return human-readable validation errors (empty when the payload is valid)."""
    validator = Draft7Validator(get_schemas()["issue"])
    errors = sorted(validator.iter_errors(payload), key=lambda e: list(e.path))
    return [f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]


__all__ = ["get_schemas", "validate_issue_payload"]

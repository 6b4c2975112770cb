from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class IssueRef:
    """Snapshot of the issue fields the extraction engine reads.

    ``body`` is the raw markdown the author typed, ``body_html`` the rendered
    markup GitHub returns with ``Accept: application/vnd.github.full+json``.
    """

    body: str = ""
    body_html: str = ""
    html_url: str = ""
    title: str = ""
    root_issue: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> IssueRef:
        # GitHub returns null for empty bodies
        return cls(
            body=str(data.get("body") or ""),
            body_html=str(data.get("body_html") or ""),
            html_url=str(data.get("html_url") or ""),
            title=str(data.get("title") or ""),
            root_issue=data.get("root_issue") is True,
        )


@dataclass(frozen=True)
class ChildRecord:
    group: str
    html_url: str

    def to_dict(self) -> dict[str, str]:
        return {"group": self.group, "html_url": self.html_url}


@dataclass(frozen=True)
class ParseFailure:
    strategy: str
    kind: str
    message: str


@dataclass
class ChildrenReport:
    """Outcome of one ``parse_children`` call, including why strategies fell through."""

    children: list[ChildRecord]
    strategy: str
    failures: list[ParseFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy,
            "children": [c.to_dict() for c in self.children],
            "failures": [
                {"strategy": f.strategy, "kind": f.kind, "message": f.message}
                for f in self.failures
            ],
        }


__all__ = ["IssueRef", "ChildRecord", "ParseFailure", "ChildrenReport"]

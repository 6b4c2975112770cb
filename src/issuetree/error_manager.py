"""Caller-owned collector for non-fatal per-issue diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import IssueRef


@dataclass(frozen=True)
class ErrorEntry:
    issue: IssueRef
    user_guide_section: str
    error_title: str
    error_message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "issue": {"html_url": self.issue.html_url, "title": self.issue.title},
            "userGuideSection": self.user_guide_section,
            "errorTitle": self.error_title,
            "errorMessage": self.error_message,
        }


class ErrorManager:
    def __init__(self) -> None:
        self._errors: list[ErrorEntry] = []

    def add_error(self, entry: ErrorEntry) -> None:
        self._errors.append(entry)

    @property
    def errors(self) -> list[ErrorEntry]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)


__all__ = ["ErrorEntry", "ErrorManager"]

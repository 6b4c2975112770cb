"""Children extraction strategies, one per historical body convention.

Each strategy returns the records it found or raises a
:class:`~issuetree.errors.ChildrenParseError` subclass when its convention is
not present in the issue. Ordering between strategies is the orchestrator's
concern (see :mod:`issuetree.parser`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .config import ParserConfig
from .errors import GuardViolation, InvalidUrlError, SectionMissingOrEmpty
from .helpers import is_valid_children
from .lines import get_section_lines, is_task_list_item, last_token
from .markup import parse_html, previous_element_sibling
from .models import ChildRecord, IssueRef
from .resolver import Resolution, resolve_sequence
from .urls import get_valid_url_from_input

TASKLIST_GROUP = "tasklist"
CHILDREN_GROUP = "children:"
HOVERCARD_ANCHOR_SELECTOR = 'a[href][data-hovercard-type*="issue"]'


class ChildrenStrategy(Protocol):
    name: str

    def extract(self, issue: IssueRef) -> list[ChildRecord]: ...


def _records(resolution: Resolution, group: str) -> list[ChildRecord]:
    return [ChildRecord(group=group, html_url=url) for url in resolution.urls]


class TaskListStrategy:
    """Fenced ```` ```[tasklist] ```` blocks; only checkbox/bullet lines count."""

    name = "tasklist"

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def candidate_lines(self, issue: IssueRef) -> list[str]:
        lines = [
            last_token(line)
            for line in get_section_lines(issue.body, self.config.tasklist_header)
            if is_task_list_item(line)
        ]
        lines = [line for line in lines if line]
        if not lines:
            raise SectionMissingOrEmpty("Section missing or has no children")
        return lines

    def extract(self, issue: IssueRef) -> list[ChildRecord]:
        lines = self.candidate_lines(issue)
        resolution = resolve_sequence(lines, issue, self.config.allowed_host)
        return _records(resolution, TASKLIST_GROUP)


class ChildrenLineStrategy:
    """Plain ``children:`` header followed by one reference per line."""

    name = "children"

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def candidate_lines(self, issue: IssueRef) -> list[str]:
        lines = [last_token(line) for line in get_section_lines(issue.body, self.config.children_header)]
        lines = [line for line in lines if line]
        if not lines:
            raise SectionMissingOrEmpty("Section missing or has no children")
        # rendered HTML passed where markdown was expected
        if any(line.startswith("<") for line in lines):
            raise GuardViolation("HTML tags found in body text")
        return lines

    def extract(self, issue: IssueRef) -> list[ChildRecord]:
        lines = self.candidate_lines(issue)
        resolution = resolve_sequence(lines, issue, self.config.allowed_host)
        return _records(resolution, CHILDREN_GROUP)


class LegacyHtmlListStrategy:
    """``<ul>`` lists in rendered ``body_html`` whose preceding element is a children heading.

    Hrefs are returned verbatim. Host checks only apply when
    ``legacy_validate_host`` is enabled.
    """

    name = "legacy_html"

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def _host_allowed(self, href: str) -> bool:
        if not self.config.legacy_validate_host:
            return True
        try:
            return self.config.allowed_host in get_valid_url_from_input(href).host
        except InvalidUrlError:
            return False

    def extract_html(self, body_html: str) -> list[ChildRecord]:
        document = parse_html(body_html)
        children: list[ChildRecord] = []
        for ul in document.find_all("ul"):
            heading = previous_element_sibling(ul)
            title = heading.get_text().strip() if heading is not None else None
            if title is None or not is_valid_children(title, self.config.children_headings):
                continue
            for anchor in ul.select(HOVERCARD_ANCHOR_SELECTOR):
                href = str(anchor.get("href"))
                if self._host_allowed(href):
                    children.append(ChildRecord(group=title, html_url=href))
        return children

    def extract(self, issue: IssueRef) -> list[ChildRecord]:
        return self.extract_html(issue.body_html)


STRATEGY_TYPES: dict[str, Callable[[ParserConfig], ChildrenStrategy]] = {
    TaskListStrategy.name: TaskListStrategy,
    ChildrenLineStrategy.name: ChildrenLineStrategy,
    LegacyHtmlListStrategy.name: LegacyHtmlListStrategy,
}


def build_strategies(config: ParserConfig | None = None) -> list[ChildrenStrategy]:
    cfg = config or ParserConfig()
    return [STRATEGY_TYPES[name](cfg) for name in cfg.strategies]


__all__ = [
    "ChildrenStrategy",
    "TaskListStrategy",
    "ChildrenLineStrategy",
    "LegacyHtmlListStrategy",
    "build_strategies",
    "TASKLIST_GROUP",
    "CHILDREN_GROUP",
]

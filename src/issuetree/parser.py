"""Extract children and the ETA from an issue body.

Authors describe children with one of three conventions, tried in order:

1. a fenced ```` ```[tasklist] ```` block,
2. a ``children:`` line list,
3. a legacy rendered ``<ul>`` under a "children" heading in ``body_html``.

The first strategy that applies wins; its records are returned unmerged.
Every strategy except the last is guarded, so a failure there only moves on
to the next one. Errors raised by the last strategy reach the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from .config import ParserConfig
from .error_manager import ErrorEntry, ErrorManager
from .errors import ChildrenParseError, EtaNotFoundError, classify_error
from .helpers import get_eta_date
from .logging import get_logger
from .markup import flatten_text, parse_html
from .models import ChildRecord, ChildrenReport, IssueRef, ParseFailure
from .strategies import ChildrenStrategy, build_strategies

ETA_ERROR_TITLE = "ETA not found"
ETA_ERROR_MESSAGE = "ETA not found in issue body"


class ChildrenParser:
    def __init__(
        self,
        config: ParserConfig | None = None,
        strategies: Sequence[ChildrenStrategy] | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.strategies = list(strategies) if strategies is not None else build_strategies(self.config)
        if not self.strategies:
            raise ValueError("ChildrenParser needs at least one strategy")

    def parse(self, issue: IssueRef) -> ChildrenReport:
        logger = get_logger()
        failures: list[ParseFailure] = []
        *guarded, last = self.strategies
        for strategy in guarded:
            try:
                children = strategy.extract(issue)
            except ChildrenParseError as exc:
                info = classify_error(exc)
                failures.append(ParseFailure(strategy.name, info.category, info.message))
                logger.log_fallback(strategy.name, info.category, issue.html_url)
                continue
            return self._report(children, strategy.name, failures, issue)
        return self._report(last.extract(issue), last.name, failures, issue)

    def _report(
        self,
        children: list[ChildRecord],
        strategy: str,
        failures: list[ParseFailure],
        issue: IssueRef,
    ) -> ChildrenReport:
        get_logger().log_operation(
            "parse_children",
            strategy=strategy,
            issue_url=issue.html_url,
            child_count=len(children),
        )
        return ChildrenReport(children=children, strategy=strategy, failures=failures)

    def due_date(self, issue: IssueRef, error_manager: ErrorManager) -> dict[str, str]:
        logger = get_logger()
        try:
            eta = get_eta_date(flatten_text(parse_html(issue.body_html)))
        except EtaNotFoundError:
            logger.debug("no ETA in issue body", operation="due_date", issue_url=issue.html_url)
            eta = self._missing_eta(issue, error_manager)
        except Exception as exc:
            logger.debug(
                f"issue body could not be scanned: {exc}", operation="due_date", issue_url=issue.html_url
            )
            eta = self._missing_eta(issue, error_manager)
        return {"eta": eta}

    def _missing_eta(self, issue: IssueRef, error_manager: ErrorManager) -> str:
        # root issues and issues without a URL are not reported
        if issue.html_url and issue.root_issue is not True:
            error_manager.add_error(
                ErrorEntry(
                    issue=issue,
                    user_guide_section=self.config.eta_user_guide_section,
                    error_title=ETA_ERROR_TITLE,
                    error_message=ETA_ERROR_MESSAGE,
                )
            )
        return ""


def parse_children(issue: IssueRef, config: ParserConfig | None = None) -> ChildrenReport:
    return ChildrenParser(config).parse(issue)


def get_children(issue: IssueRef, config: ParserConfig | None = None) -> list[ChildRecord]:
    return parse_children(issue, config).children


def get_due_date(
    issue: IssueRef, error_manager: ErrorManager, config: ParserConfig | None = None
) -> dict[str, str]:
    return ChildrenParser(config).due_date(issue, error_manager)


__all__ = [
    "ChildrenParser",
    "parse_children",
    "get_children",
    "get_due_date",
    "ETA_ERROR_TITLE",
    "ETA_ERROR_MESSAGE",
]

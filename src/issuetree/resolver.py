"""Turn normalized child lines into absolute issue URLs.

Sections are usually followed by unrelated prose or links ("View in ..."),
so ``resolve_sequence`` treats the first line that does not resolve as the end
of the list instead of as an error. A malformed early line therefore
truncates the section; ``Resolution.consumed`` shows where it stopped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import InvalidChildReference, InvalidUrlError
from .models import IssueRef
from .urls import get_valid_url_from_input, params_from_url

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_HOST = "github.com"
_LOCAL_REFERENCE = re.compile(r"^#\d+$")


@dataclass(frozen=True)
class Resolution:
    urls: list[str]
    total: int
    stopped_by: str | None = None

    @property
    def consumed(self) -> int:
        return len(self.urls)

    @property
    def truncated(self) -> bool:
        return self.consumed < self.total


def expand_local_reference(line: str, issue: IssueRef) -> str:
    """``#123`` -> ``owner/repo#123`` using the current issue's URL."""
    if not _LOCAL_REFERENCE.match(line):
        return line
    params = params_from_url(issue.html_url)
    return f"{params.owner}/{params.repo}{line}"


def resolve_child_reference(
    line: str, issue: IssueRef, allowed_host: str = DEFAULT_ALLOWED_HOST
) -> str:
    try:
        url = get_valid_url_from_input(expand_local_reference(line, issue))
    except InvalidUrlError as exc:
        raise InvalidChildReference(str(exc)) from exc
    if allowed_host not in url.host:
        raise InvalidChildReference(f"Invalid host for children item: {url.host}")
    return url.href


def resolve_sequence(
    lines: Sequence[str], issue: IssueRef, allowed_host: str = DEFAULT_ALLOWED_HOST
) -> Resolution:
    urls: list[str] = []
    for line in lines:
        try:
            urls.append(resolve_child_reference(line, issue, allowed_host))
        except InvalidChildReference as exc:
            logger.debug("children list ends at %r after %d item(s): %s", line, len(urls), exc)
            return Resolution(urls=urls, total=len(lines), stopped_by=str(exc))
    return Resolution(urls=urls, total=len(lines))


__all__ = [
    "Resolution",
    "DEFAULT_ALLOWED_HOST",
    "expand_local_reference",
    "resolve_child_reference",
    "resolve_sequence",
]

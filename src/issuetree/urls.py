"""URL validation and GitHub owner/repo resolution.

``get_valid_url_from_input`` is deliberately forgiving about what authors type
into issue bodies: absolute URLs, scheme-less ``github.com/...`` paths and
``owner/repo#123`` short ids are all accepted. It is strict about the result:
only http(s) URLs with a syntactically valid host come back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit, urlunsplit

from .errors import InvalidUrlError

SHORT_ID_PATTERN = re.compile(r"^([A-Za-z0-9][\w.-]*)/([\w.-]+)#(\d+)$")
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_HOST_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9-]*[a-z0-9])?)*$")
_ALLOWED_SCHEMES = {"http", "https"}
GITHUB_ISSUE_URL = "https://github.com/{owner}/{repo}/issues/{number}"


@dataclass(frozen=True)
class ValidUrl:
    href: str
    host: str


@dataclass(frozen=True)
class IssueParams:
    owner: str
    repo: str
    issue_number: int | None = None


def _split(candidate: str) -> SplitResult:
    try:
        parts = urlsplit(candidate)
        # .port raises ValueError on non-numeric ports
        _ = parts.port
    except ValueError as exc:
        raise InvalidUrlError(f"Malformed URL {candidate!r}: {exc}") from exc
    return parts


def get_valid_url_from_input(candidate: str) -> ValidUrl:
    text = (candidate or "").strip()
    if not text:
        raise InvalidUrlError("Empty URL")
    if any(ch.isspace() for ch in text):
        raise InvalidUrlError(f"URL contains whitespace: {text!r}")
    m = SHORT_ID_PATTERN.match(text)
    if m:
        text = GITHUB_ISSUE_URL.format(owner=m.group(1), repo=m.group(2), number=m.group(3))
    elif not _SCHEME_PATTERN.match(text):
        text = f"https://{text}"
    parts = _split(text)
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidUrlError(f"Unsupported URL scheme {scheme!r} in {candidate!r}")
    if parts.username is not None or "@" in parts.netloc:
        raise InvalidUrlError(f"URL carries user info: {candidate!r}")
    host = parts.hostname or ""
    if not _HOST_PATTERN.match(host):
        raise InvalidUrlError(f"Invalid host in {candidate!r}")
    href = urlunsplit((scheme, parts.netloc.lower(), parts.path or "/", parts.query, parts.fragment))
    return ValidUrl(href=href, host=host)


def params_from_url(url: str) -> IssueParams:
    """Return owner/repo (and issue number when present) from a GitHub issue URL."""
    if not url:
        raise InvalidUrlError("Cannot resolve owner/repo from an empty URL")
    parts = _split(url)
    segments = [s for s in parts.path.split("/") if s]
    if not parts.hostname or len(segments) < 2:
        raise InvalidUrlError(f"Cannot resolve owner/repo from {url!r}")
    owner, repo = segments[0], segments[1]
    issue_number: int | None = None
    if len(segments) >= 4 and segments[2] in ("issues", "pull") and segments[3].isdigit():
        issue_number = int(segments[3])
    return IssueParams(owner=owner, repo=repo, issue_number=issue_number)


__all__ = [
    "ValidUrl",
    "IssueParams",
    "get_valid_url_from_input",
    "params_from_url",
    "SHORT_ID_PATTERN",
]

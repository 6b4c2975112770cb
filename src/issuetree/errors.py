"""Error taxonomy for children extraction.

Extraction strategies signal "this convention does not apply to the issue"
by raising a subclass of :class:`ChildrenParseError`. The orchestrator turns
those into fallbacks, so none of them carry more than a short message.

Public API:
- ChildrenParseError and its kinds (SectionMissingOrEmpty, InvalidChildReference, GuardViolation)
- InvalidUrlError, EtaNotFoundError
- classify_error(exc) -> ErrorInfo
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class ChildrenParseError(ValueError):
    """Base class for failures that make the next strategy worth trying."""

    kind = "generic"


class SectionMissingOrEmpty(ChildrenParseError):
    kind = "section_missing"


class InvalidChildReference(ChildrenParseError):
    kind = "invalid_reference"


class GuardViolation(ChildrenParseError):
    kind = "guard"


class InvalidUrlError(ValueError):
    pass


class EtaNotFoundError(ValueError):
    pass


@dataclass
class ErrorInfo:
    category: str
    message: str
    original_type: str
    recoverable: bool = False
    details: dict[str, Any] | None = None


def classify_error(exc: BaseException) -> ErrorInfo:
    """Best-effort classification of an exception raised during extraction.

    - ChildrenParseError subclasses -> their ``kind``, recoverable (next strategy runs)
    - InvalidUrlError -> 'url'
    - EtaNotFoundError -> 'eta', recoverable (due-date scan absorbs it)
    - Fallback -> 'generic'
    """
    msg = str(exc) if exc else ""
    name = exc.__class__.__name__
    if isinstance(exc, ChildrenParseError):
        return ErrorInfo(exc.kind, msg, name, recoverable=True)
    if isinstance(exc, InvalidUrlError):
        return ErrorInfo("url", msg, name)
    if isinstance(exc, EtaNotFoundError):
        return ErrorInfo("eta", msg, name, recoverable=True)
    return ErrorInfo("generic", msg, name)


__all__ = [
    "ChildrenParseError",
    "SectionMissingOrEmpty",
    "InvalidChildReference",
    "GuardViolation",
    "InvalidUrlError",
    "EtaNotFoundError",
    "ErrorInfo",
    "classify_error",
]

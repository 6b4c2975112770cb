from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import EtaNotFoundError

DEFAULT_CHILDREN_HEADINGS: tuple[str, ...] = ("children", "children:")

# eta: 2023-10-15 | eta: 2023-10 | eta: 2023Q4
_ETA_LINE = re.compile(r"^\s*eta\s*:\s*(\S+)", re.IGNORECASE | re.MULTILINE)
_ETA_TOKEN = re.compile(r"^(\d{4}-(0[1-9]|1[0-2])(-(0[1-9]|[12]\d|3[01]))?|\d{4}[Qq][1-4])$")


def is_valid_children(
    title: str | None, headings: Iterable[str] = DEFAULT_CHILDREN_HEADINGS
) -> bool:
    """True when a heading label introduces a list of children."""
    if not title:
        return False
    return title.strip().lower() in {h.lower() for h in headings}


def get_eta_date(text: str) -> str:
    for m in _ETA_LINE.finditer(text or ""):
        token = m.group(1)
        if _ETA_TOKEN.match(token):
            return token
    raise EtaNotFoundError("ETA not found in text")


__all__ = ["DEFAULT_CHILDREN_HEADINGS", "is_valid_children", "get_eta_date"]

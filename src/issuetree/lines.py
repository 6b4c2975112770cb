"""Line-level helpers for the plain-text children conventions."""

from __future__ import annotations

import re

_LINE_BREAKS = re.compile(r"[\r\n]+")
_MARKDOWN_LINK_SEPARATOR = "]("


def unwrap_markdown_link(line: str) -> str:
    """``[label](url)`` -> ``url``; lines without a link come back trimmed.

    The line is trimmed before the split, so trailing whitespace after the
    closing ``)`` does not keep it from being stripped.
    """
    target = line.strip().split(_MARKDOWN_LINK_SEPARATOR)[-1]
    if target.endswith(")"):
        target = target[:-1]
    return target


def get_section_lines(text: str, header: str) -> list[str]:
    """Lines following the first occurrence of ``header``; empty when absent.

    Blank lines collapse because the split is on runs of line breaks.
    """
    index = text.find(header)
    if index == -1:
        return []
    lines = _LINE_BREAKS.split(text[index:])[1:]
    return [unwrap_markdown_link(line) for line in lines]


def is_task_list_item(line: str) -> bool:
    return line.strip().startswith("-")


def last_token(line: str) -> str:
    # single-space split, so "- [ ] #12" -> "#12"
    return line.strip().split(" ")[-1]


__all__ = ["get_section_lines", "unwrap_markdown_link", "is_task_list_item", "last_token"]

"""issuetree - extract parent/children structure and ETAs from GitHub issue bodies.

High-level public API (stable):

from issuetree import IssueRef, ErrorManager, get_children, get_due_date

issue = IssueRef.from_mapping(github_issue_payload)
for child in get_children(issue):
    print(child.group, child.html_url)
print(get_due_date(issue, ErrorManager())['eta'])

Use ``parse_children`` for the full report (winning strategy plus the reason
each earlier strategy fell through) and ``load_config`` to tune header
tokens, strategy order and logging from YAML.
"""

from __future__ import annotations

from .config import ParserConfig, load_config
from .error_manager import ErrorEntry, ErrorManager
from .models import ChildRecord, ChildrenReport, IssueRef, ParseFailure
from .parser import ChildrenParser, get_children, get_due_date, parse_children

__version__ = "0.1.0"

__all__ = [
    "ChildRecord",
    "ChildrenParser",
    "ChildrenReport",
    "ErrorEntry",
    "ErrorManager",
    "IssueRef",
    "ParseFailure",
    "ParserConfig",
    "get_children",
    "get_due_date",
    "load_config",
    "parse_children",
    "__version__",
]

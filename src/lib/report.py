"""
Rendering of lint results

Plain text for the terminal, pygments highlighting for the offending
manifest lines, and a JSON report file for downstream tooling.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter
from pygments import highlight
from pygments.formatters import TerminalFormatter

from ..models.requires import Issue
from .lexer import GoModLexer


_issues_adapter = TypeAdapter(List[Issue])


def issues_format(issues: List[Issue]) -> str:
    """
    One "file:line: text" line per issue

    Example:
        >>> issues_format([Issue(Position("go.mod", 5), "require block should not contain mixed dependencies.")])
        'go.mod:5: require block should not contain mixed dependencies.'
    """
    return '\n'.join(str(issue) for issue in issues)


def issue_highlight(issue: Issue, source: str) -> Optional[str]:
    """
    Render the manifest line an issue points at with terminal colors

    Args:
        issue: Issue to show
        source: Full manifest text the issue was found in

    Returns:
        Highlighted line (with trailing newline), or None if the position
        lies outside the source
    """
    lines = source.splitlines()
    if not 0 < issue.position.line <= len(lines):
        return None

    return highlight(lines[issue.position.line - 1] + '\n', GoModLexer(), TerminalFormatter())


def report_build(issues: List[Issue], manifest: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the JSON-ready report

    Returns:
        dict with keys:
            - manifest: str | None (path of the checked manifest)
            - compliant: bool (no issues found)
            - issues: list of {"position": {"filename", "line"}, "text"}
    """
    return {
        'manifest': manifest,
        'compliant': not issues,
        'issues': _issues_adapter.dump_python(issues, mode='json'),
    }


def report_write(
    issues: List[Issue], path: Union[str, Path], manifest: Optional[str] = None
) -> Path:
    """Write the JSON report and return its path"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report_build(issues, manifest), indent=2) + '\n', encoding='utf-8')
    return path

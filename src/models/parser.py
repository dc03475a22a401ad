"""
Parser-specific data models

Type-safe structures for parser operations and return values.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ScannedRow:
    """
    One physical source line after lexing

    Produced by Parser.rows_scan() and grouped into statements by
    Parser.parse(). Whitespace is dropped; every other token keeps its raw
    text so quoted strings still carry their quotes.

    Attributes:
        line_number: 1-based line number where the row starts
        tokens: Significant token strings in source order
        comment: Trailing (or standalone) // comment, or None

    Example:
        For "\\tgithub.com/pkg/errors v0.9.1 // indirect" on line 4:
        ScannedRow(
            line_number=4,
            tokens=["github.com/pkg/errors", "v0.9.1"],
            comment="// indirect"
        )
    """
    line_number: int
    tokens: List[str] = field(default_factory=list)
    comment: Optional[str] = None

    def blank_is(self) -> bool:
        """True if the row holds neither tokens nor a comment"""
        return not self.tokens and self.comment is None

"""
Syntax tree models for go.mod manifests

Type-safe structures produced by the Parser and consumed by the Extractor.
The tree keeps raw token text and line numbers only; it carries no
knowledge of what any directive means.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class Position:
    """
    Source location of a line or block header

    Attributes:
        filename: Manifest file name (e.g., "go.mod")
        line: 1-based line number

    Example:
        >>> str(Position("go.mod", 5))
        'go.mod:5'
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


@dataclass
class Line:
    """
    A single directive line

    At the top level the first token is the verb (e.g., "require"); inside a
    LineBlock the verb lives in the block header and is not repeated.

    Attributes:
        tokens: Raw token strings in source order (quoted strings keep quotes)
        comment: Raw trailing comment including the slashes (e.g.,
                 "// indirect"), or None
        position: Location of the line

    Example:
        For "require golang.org/x/mod v0.17.0 // indirect" at line 7:
        Line(
            tokens=["require", "golang.org/x/mod", "v0.17.0"],
            comment="// indirect",
            position=Position("go.mod", 7)
        )
    """
    tokens: List[str]
    comment: Optional[str]
    position: Position


@dataclass
class LineBlock:
    """
    A factored directive block such as "require ( ... )"

    Attributes:
        tokens: Header tokens before the opening parenthesis (e.g., ["require"])
        lines: Inner lines in source order (blank and comment-only lines dropped)
        position: Location of the header line
    """
    tokens: List[str]
    lines: List[Line]
    position: Position


@dataclass
class CommentBlock:
    """Run of consecutive standalone comment lines"""
    comments: List[str]
    position: Position


Statement = Union[Line, LineBlock, CommentBlock]


@dataclass
class ManifestSyntax:
    """
    Parsed manifest: file name plus top-level statements in document order
    """
    name: str
    stmts: List[Statement] = field(default_factory=list)

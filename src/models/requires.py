"""
Require statement models

Holds the require directives of a manifest split into isolated lines and
blocks, plus the Issue record the rule engine reports against them.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from .syntax import Position


class Consistency(Enum):
    """
    Kind of dependencies a require block holds

    ONLY_DIRECT and ONLY_INDIRECT are pure; MIXED is absorbing.
    """
    ONLY_DIRECT = "ONLY_DIRECT"
    ONLY_INDIRECT = "ONLY_INDIRECT"
    MIXED = "MIXED"


def consistency_combine(current: Optional[Consistency], indirect: bool) -> Consistency:
    """
    Fold one more directive into a block's consistency

    Args:
        current: Consistency so far, or None for an empty block
        indirect: Whether the added directive is indirect

    Returns:
        The consistency after the addition

    Example:
        >>> consistency_combine(None, True)
        <Consistency.ONLY_INDIRECT: 'ONLY_INDIRECT'>
        >>> consistency_combine(Consistency.ONLY_INDIRECT, False)
        <Consistency.MIXED: 'MIXED'>
    """
    if current is None:
        return Consistency.ONLY_INDIRECT if indirect else Consistency.ONLY_DIRECT
    if current is Consistency.ONLY_DIRECT and indirect:
        return Consistency.MIXED
    if current is Consistency.ONLY_INDIRECT and not indirect:
        return Consistency.MIXED
    return current


@dataclass(frozen=True)
class Directive:
    """
    One require entry

    Attributes:
        name: Module path (not validated)
        version: Version string (not parsed as semver)
        indirect: True if the trailing comment marks it indirect
        position: Location of the entry
    """
    name: str
    version: str
    indirect: bool
    position: Position


@dataclass
class Block:
    """
    A require block and the consistency of its lines

    Attributes:
        position: Location of the "require (" header
        lines: Directives in source order
        consistency: Derived from lines; None while the block is empty
    """
    position: Position
    lines: List[Directive] = field(default_factory=list)
    consistency: Optional[Consistency] = None

    def line_add(self, directive: Directive) -> None:
        """Append a directive and update the block consistency"""
        self.lines.append(directive)
        self.consistency = consistency_combine(self.consistency, directive.indirect)


@dataclass
class StatementModel:
    """
    All require directives of one manifest

    Attributes:
        directLines: Isolated direct directives, in document order
        indirectLines: Isolated indirect directives, in document order
        blocks: Require blocks, in document order
    """
    directLines: List[Directive] = field(default_factory=list)
    indirectLines: List[Directive] = field(default_factory=list)
    blocks: List[Block] = field(default_factory=list)

    def line_add(self, directive: Directive) -> None:
        """Route an isolated directive to the direct or indirect container"""
        if directive.indirect:
            self.indirectLines.append(directive)
        else:
            self.directLines.append(directive)

    def block_add(self, block: Block) -> None:
        self.blocks.append(block)


@dataclass(frozen=True)
class Issue:
    """
    A style violation found in the manifest

    Example:
        >>> str(Issue(Position("go.mod", 5), "require block should not contain mixed dependencies."))
        'go.mod:5: require block should not contain mixed dependencies.'
    """
    position: Position
    text: str

    def __str__(self) -> str:
        return f"{self.position}: {self.text}"

"""
Extraction of require directives from a parsed manifest

Walks the top-level statements of a ManifestSyntax and builds the
StatementModel the rule engine evaluates. Extraction is best-effort:
anything it cannot interpret is skipped, never reported.
"""

from typing import List, Optional

from ..models.requires import Block, Directive, StatementModel
from ..models.syntax import Line, LineBlock, ManifestSyntax
from .log import LOG


REQUIRE_VERB = "require"
INDIRECT_MARKER = "indirect"


def require_is(tokens: List[str]) -> bool:
    """Check if a line or block header is a require directive"""
    return bool(tokens) and tokens[0] == REQUIRE_VERB


def indirect_is(comment: Optional[str]) -> bool:
    """Check if a trailing comment marks its directive as indirect"""
    return comment is not None and INDIRECT_MARKER in comment


class Extractor:
    """
    Builds a StatementModel from a ManifestSyntax

    Isolated require lines go to the direct or indirect container by their
    marker; every require block becomes a Block. Statements that are not
    require directives are ignored.
    """

    def __init__(self, syntax: ManifestSyntax) -> None:
        self.syntax = syntax

    def extract(self) -> StatementModel:
        """
        Extract all require directives

        Returns:
            StatementModel with containers in document order
        """
        model = StatementModel()

        for stmt in self.syntax.stmts:
            if isinstance(stmt, Line):
                self.line_process(stmt, model)
            elif isinstance(stmt, LineBlock):
                self.block_process(stmt, model)

        LOG(
            f"Extracted {len(model.directLines)} direct lines, "
            f"{len(model.indirectLines)} indirect lines, {len(model.blocks)} blocks",
            level=3,
        )
        return model

    def line_process(self, line: Line, model: StatementModel) -> None:
        """Add an isolated "require name version" line to the model"""
        if not require_is(line.tokens):
            return
        # Lines missing a name or version are skipped
        if len(line.tokens) < 3:
            return
        model.line_add(self.directive_build(line.tokens[1], line.tokens[2], line))

    def block_process(self, lineblock: LineBlock, model: StatementModel) -> None:
        """Add a "require ( ... )" block to the model"""
        if not require_is(lineblock.tokens):
            return

        block = Block(position=lineblock.position)
        for line in lineblock.lines:
            if len(line.tokens) > 1:
                block.line_add(self.directive_build(line.tokens[0], line.tokens[1], line))

        model.block_add(block)

    def directive_build(self, name: str, version: str, line: Line) -> Directive:
        return Directive(
            name=name,
            version=version,
            indirect=indirect_is(line.comment),
            position=line.position,
        )

"""
Models package for gomodclean

Contains data structures and type definitions for the lint pipeline.
"""

from .state import ProgramState, pipeline
from .syntax import Position, Line, LineBlock, CommentBlock, ManifestSyntax
from .requires import Consistency, consistency_combine, Directive, Block, StatementModel, Issue
from .parser import ScannedRow

__all__ = [
    "ProgramState",
    "pipeline",
    "Position",
    "Line",
    "LineBlock",
    "CommentBlock",
    "ManifestSyntax",
    "Consistency",
    "consistency_combine",
    "Directive",
    "Block",
    "StatementModel",
    "Issue",
    "ScannedRow",
]

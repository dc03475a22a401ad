"""
gomodclean - require layout linter for go.mod manifests

Checks that require directives are grouped into at most two blocks, direct
dependencies first and indirect ones second.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .lib import (
    Parser,
    Extractor,
    RuleEngine,
    analyze,
    requires_lint,
    ManifestError,
    ManifestNotFoundError,
    ManifestReadError,
    ManifestParseError,
    LOG,
    state_connectToLogger,
)
from .models import Issue, Position

__all__ = [
    "Parser",
    "Extractor",
    "RuleEngine",
    "analyze",
    "requires_lint",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestReadError",
    "ManifestParseError",
    "Issue",
    "Position",
    "LOG",
    "state_connectToLogger",
    "__version__",
]

"""
gomodclean - require layout linter for go.mod manifests
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .parser import Parser
from .extractor import Extractor
from .rules import RuleEngine
from .analyzer import analyze, requires_lint
from .manifest import (
    ManifestError,
    ManifestNotFoundError,
    ManifestReadError,
    ManifestParseError,
)
from .log import LOG, state_connectToLogger

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
    "LOG",
    "state_connectToLogger",
    "__version__",
]

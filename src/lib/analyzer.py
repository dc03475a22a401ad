"""
Public analysis entry points

    >>> from gomodclean import analyze
    >>> for issue in analyze("path/to/module"):
    ...     print(issue)
"""

from pathlib import Path
from typing import List, Optional, Union

from ..models.requires import Issue
from ..models.syntax import ManifestSyntax
from .extractor import Extractor
from .log import LOG
from .manifest import manifest_load, manifest_locate
from .rules import RuleEngine


def requires_lint(syntax: ManifestSyntax) -> List[Issue]:
    """
    Check the require layout of an already parsed manifest

    Args:
        syntax: Parsed manifest

    Returns:
        Ordered issues; empty if the manifest is compliant
    """
    model = Extractor(syntax).extract()
    return RuleEngine().evaluate(model)


def analyze(
    workdir: Union[str, Path] = ".",
    use_go_env: Optional[bool] = None,
) -> List[Issue]:
    """
    Locate, parse and lint the manifest of a working directory

    Args:
        workdir: Directory whose manifest is checked
        use_go_env: Locate the manifest with `go env GOMOD` (defaults to
                    the configured setting)

    Returns:
        Ordered issues; empty if the manifest is compliant

    Raises:
        ManifestError: If the manifest is missing, unreadable or unparsable
    """
    path = manifest_locate(workdir, use_go_env=use_go_env)
    issues = requires_lint(manifest_load(path))
    LOG(f"{path}: {len(issues)} issue(s)", level=2)
    return issues

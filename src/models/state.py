"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import List, Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field, fields

from .requires import Issue, StatementModel
from .syntax import ManifestSyntax


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the lint pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the analysis progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, manifestFile, goEnv, reportFile
        - env_check: manifestPath, reportPath, envOK
        - manifest_parse: manifestSource, manifestSyntax
        - requires_analyze: statementModel, issues
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory holding the Go module
        outputdir: Directory the JSON report is written to
        verbosity: Logging verbosity level (1-3)
        manifestFile: Manifest file name inside inputdir
        goEnv: Locate the manifest with `go env GOMOD`
        reportFile: JSON report file name inside outputdir
        envOK: Environment validation passed
        manifestPath: Resolved path to the manifest
        reportPath: Path of the JSON report
        manifestSource: Manifest text
        manifestSyntax: Parsed manifest
        statementModel: Extracted require statements
        issues: Style issues found
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    manifestFile: Optional[str] = field(default=None)
    goEnv: bool = field(default=False)
    reportFile: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    manifestPath: Path = field(default=Path("/"))
    reportPath: Path = field(default=Path("/"))
    manifestSource: str = field(default="")
    manifestSyntax: Optional[ManifestSyntax] = field(default=None)
    statementModel: Optional[StatementModel] = field(default=None)
    issues: Optional[List[Issue]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (manifestFile, goEnv, etc.)
            inputdir: Directory holding the Go module
            outputdir: Directory for the report

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in fields(cls)}

        # Drop options ProgramState does not know about
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            manifest_parse,
            requires_analyze,
            results_report
        )

    This is equivalent to:
        results_report(requires_analyze(manifest_parse(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)

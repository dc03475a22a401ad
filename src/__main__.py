#!/usr/bin/env python3
"""
gomodclean - require layout linter for go.mod manifests

Checks the require directives of a Go module manifest against a fixed
layout policy:

    1. require lines are grouped into blocks
    2. there are at most 2 require blocks
    3. the first block holds direct dependencies only, the second indirect
       dependencies only

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    gomodclean inputdir/ outputdir/

    The go.mod in inputdir/ is checked, issues are printed one per line as
    file:line: message, and a JSON report is written to outputdir/.

Examples:
    # Check ./go.mod
    gomodclean . /tmp/out

    # Let the go toolchain find the active go.mod
    gomodclean . /tmp/out --goEnv

    # Verbose output with highlighted offending lines
    gomodclean . /tmp/out -vv

Exit status:
    0 manifest is compliant
    1 style issues were found
    2 manifest is missing, unreadable or unparsable
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    Extractor,
    RuleEngine,
    ManifestError,
    __version__,
    LOG,
    state_connectToLogger,
)
from .lib.manifest import manifest_locate, manifest_read, manifest_parse as syntax_parse
from .lib.report import issues_format, issue_highlight, report_write
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  gomodclean
  ==========

  require layout linter for go.mod
"""

EXIT_ISSUES = 1
EXIT_FATAL = 2

# Define CLI arguments
parser = ArgumentParser(
    description="gomodclean - require layout linter for go.mod manifests",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--manifestFile",
    default=appsettings.manifest_name,
    type=str,
    help="Manifest file name (relative to inputdir)",
)

parser.add_argument(
    "--goEnv",
    default=appsettings.use_go_env,
    action="store_true",
    help="Locate the manifest with 'go env GOMOD' run in inputdir",
)

parser.add_argument(
    "--reportFile",
    default=appsettings.report_name,
    type=str,
    help="JSON report file name (relative to outputdir)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def fatal(state: ProgramState, error: Exception) -> None:
    """Report a manifest failure and exit"""
    print(f"Error: {error}", file=sys.stderr)
    if state.verbosity >= 3:
        import traceback

        traceback.print_exc()
    sys.exit(EXIT_FATAL)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Locate the manifest and prepare the output directory.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - manifestPath: Resolved path to go.mod
            - reportPath: Path of the JSON report
            - envOK: True if environment is valid

    Exits:
        2 if no manifest can be found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    try:
        state.manifestPath = manifest_locate(
            state.inputdir, use_go_env=state.goEnv, name=state.manifestFile
        )
    except ManifestError as e:
        state.envOK = False
        fatal(state, e)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.reportPath = state.outputdir / (state.reportFile or appsettings.report_name)
    LOG(f"Report file: {state.reportPath}", level=2)

    state.envOK = True
    return state


def manifest_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read and parse the manifest into a syntax tree.

    Returns:
        ProgramState with added fields:
            - manifestSource: Manifest text
            - manifestSyntax: Parsed ManifestSyntax

    Exits:
        2 if the file cannot be read or is not valid go.mod syntax
    """

    state = inputstate.copy()

    LOG("Reading manifest...", level=1)
    try:
        state.manifestSource = manifest_read(state.manifestPath)
        state.manifestSyntax = syntax_parse(state.manifestSource, filename=state.manifestPath.name)
    except ManifestError as e:
        fatal(state, e)

    LOG(f"Parsed {len(state.manifestSyntax.stmts)} top-level statements", level=2)
    return state


def requires_analyze(inputstate: ProgramState) -> ProgramState:
    """
    Extract require statements and evaluate the layout rules.

    Returns:
        ProgramState with added fields:
            - statementModel: Extracted StatementModel
            - issues: List[Issue] (empty if compliant)
    """

    state = inputstate.copy()

    LOG("Analyzing require statements...", level=1)
    state.statementModel = Extractor(state.manifestSyntax).extract()
    LOG(
        f"Found {len(state.statementModel.blocks)} require blocks, "
        f"{len(state.statementModel.directLines)} isolated direct and "
        f"{len(state.statementModel.indirectLines)} isolated indirect lines",
        level=2,
    )
    state.issues = RuleEngine().evaluate(state.statementModel)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Print issues, write the JSON report and exit with the lint status.

    Returns:
        ProgramState unchanged if the manifest is compliant

    Exits:
        1 if any issue was found
    """
    state: ProgramState = inputstate.copy()

    report_write(state.issues, state.reportPath, manifest=str(state.manifestPath))
    LOG(f"Wrote {state.reportPath}", level=2)

    if not state.issues:
        LOG(f"✓ {state.manifestPath.name} is clean", level=1)
        return state

    for issue in state.issues:
        print(issue)
        if state.verbosity >= 2 and appsettings.highlight_source:
            rendered = issue_highlight(issue, state.manifestSource)
            if rendered:
                print(f"    {rendered}", end="")

    LOG(f"✗ {len(state.issues)} issue(s) found", level=1)
    LOG(issues_format(state.issues), level=3)
    sys.exit(EXIT_ISSUES)


@chris_plugin(
    parser=parser,
    title="gomodclean - require layout linter for go.mod",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - lint the require layout of inputdir's go.mod.

    Orchestrates the full pipeline:
        1. env_check: Locate the manifest, prepare the output directory
        2. manifest_parse: Read and parse go.mod
        3. requires_analyze: Extract require statements and run the rules
        4. results_report: Print issues, write the report, set exit status

    Args:
        options: CLI arguments from argparse
            - manifestFile: str - Manifest file name
            - goEnv: bool - Locate the manifest with go env GOMOD
            - reportFile: str - JSON report file name
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory holding the Go module
        outputdir: Directory where the JSON report will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, manifest_parse, requires_analyze, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature

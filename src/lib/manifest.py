"""
Locating, reading and parsing the go.mod manifest

Everything that touches the filesystem or the go toolchain lives here.
Failures are raised as ManifestError subclasses and never turned into
style issues.
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from ..config import appsettings
from ..models.syntax import ManifestSyntax
from .log import LOG
from .parser import Parser


# Value reported by `go env GOMOD` outside a module (GO111MODULE on)
GOMOD_NULL_DEVICES = {"/dev/null", "NUL"}


class ManifestError(Exception):
    """Base class for manifest retrieval failures"""


class ManifestNotFoundError(ManifestError):
    """No manifest is associated with the working directory"""


class ManifestReadError(ManifestError):
    """The manifest exists but could not be read"""


class ManifestParseError(ManifestError):
    """The manifest is not syntactically valid"""


def goModPath_query(workdir: Union[str, Path] = ".") -> Path:
    """
    Ask the go toolchain which go.mod governs a directory

    Runs `go env GOMOD` inside workdir.

    Args:
        workdir: Directory the query runs in

    Returns:
        Absolute path of the active go.mod

    Raises:
        ManifestNotFoundError: If go cannot be run, fails, or reports that
                               workdir is outside a module
    """
    command = [appsettings.go_binary, "env", "GOMOD"]
    LOG(f"Running {' '.join(command)} in {workdir}", level=2)

    try:
        result = subprocess.run(
            command,
            cwd=str(workdir),
            capture_output=True,
            text=True,
            check=True,
            timeout=appsettings.go_env_timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise ManifestNotFoundError(f"could not get go.mod path: {e}") from e

    gomod = result.stdout.strip()
    if not gomod or gomod in GOMOD_NULL_DEVICES:
        raise ManifestNotFoundError("could not find go.mod env (outside a go module?)")

    return Path(gomod)


def manifest_locate(
    workdir: Union[str, Path] = ".",
    use_go_env: Optional[bool] = None,
    name: Optional[str] = None,
) -> Path:
    """
    Find the manifest for a working directory

    Args:
        workdir: Directory to inspect
        use_go_env: Ask `go env GOMOD` instead of looking for the file
                    directly (defaults to appsettings.use_go_env)
        name: Manifest file name (defaults to appsettings.manifest_name)

    Returns:
        Path to an existing manifest file

    Raises:
        ManifestNotFoundError: If no manifest can be found
    """
    if use_go_env is None:
        use_go_env = appsettings.use_go_env

    if use_go_env:
        path = goModPath_query(workdir)
    else:
        path = Path(workdir) / (name or appsettings.manifest_name)

    if not path.is_file():
        raise ManifestNotFoundError(f"could not find go.mod file: {path}")

    LOG(f"Manifest: {path}", level=2)
    return path


def manifest_read(path: Union[str, Path]) -> str:
    """
    Read manifest text

    Raises:
        ManifestNotFoundError: If the file does not exist
        ManifestReadError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestNotFoundError(f"could not find go.mod file: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"could not read go.mod file: {e}") from e

    LOG(f"Read {len(source)} characters from {path.name}", level=2)
    return source


def manifest_parse(source: str, filename: str = "go.mod") -> ManifestSyntax:
    """
    Parse manifest text

    Raises:
        ManifestParseError: If the text is not valid go.mod syntax
    """
    try:
        return Parser(source, filename=filename).parse()
    except SyntaxError as e:
        raise ManifestParseError(f"could not parse go.mod file: {e}") from e


def manifest_load(path: Union[str, Path]) -> ManifestSyntax:
    """
    Read and parse a manifest file

    Positions in the returned tree carry the file's base name.

    Raises:
        ManifestError: Any of its subclasses, see manifest_read and
                       manifest_parse
    """
    path = Path(path)
    return manifest_parse(manifest_read(path), filename=path.name)

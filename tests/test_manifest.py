"""
Manifest collaborator tests

Locating, reading and parsing go.mod files, including the go env query
(with subprocess.run replaced by a fake).
"""

import subprocess
from pathlib import Path

import pytest

from gomodclean.lib import manifest
from gomodclean.lib.manifest import (
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
    goModPath_query,
    manifest_load,
    manifest_locate,
    manifest_parse,
    manifest_read,
)


GOMOD = "module example.com/m\n\ngo 1.22\n\nrequire golang.org/x/mod v0.17.0\n"


def fake_go_env(monkeypatch, stdout: str = "", error: Exception = None):
    """Replace subprocess.run in the manifest module"""
    calls = []

    def run(command, **kwargs):
        calls.append((command, kwargs))
        if error is not None:
            raise error
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")

    monkeypatch.setattr(manifest.subprocess, "run", run)
    return calls


class TestExceptions:
    """Failures share one base class"""

    def test_hierarchy(self):
        for error in (ManifestNotFoundError, ManifestReadError, ManifestParseError):
            assert issubclass(error, ManifestError)


class TestGoEnvQuery:
    """Test go env GOMOD handling"""

    def test_returns_path(self, monkeypatch, tmp_path):
        calls = fake_go_env(monkeypatch, stdout=f"{tmp_path / 'go.mod'}\n")

        assert goModPath_query(tmp_path) == tmp_path / "go.mod"
        command, kwargs = calls[0]
        assert command[1:] == ["env", "GOMOD"]
        assert kwargs["cwd"] == str(tmp_path)

    @pytest.mark.parametrize("stdout", ["/dev/null\n", "NUL\r\n", "\n", ""])
    def test_outside_module(self, monkeypatch, tmp_path, stdout):
        fake_go_env(monkeypatch, stdout=stdout)

        with pytest.raises(ManifestNotFoundError, match="outside a go module"):
            goModPath_query(tmp_path)

    def test_go_missing(self, monkeypatch, tmp_path):
        fake_go_env(monkeypatch, error=FileNotFoundError("go"))

        with pytest.raises(ManifestNotFoundError, match="could not get go.mod path"):
            goModPath_query(tmp_path)

    def test_go_fails(self, monkeypatch, tmp_path):
        fake_go_env(monkeypatch, error=subprocess.CalledProcessError(1, ["go", "env", "GOMOD"]))

        with pytest.raises(ManifestNotFoundError):
            goModPath_query(tmp_path)


class TestLocate:
    """Test manifest_locate"""

    def test_in_directory(self, tmp_path):
        (tmp_path / "go.mod").write_text(GOMOD)
        assert manifest_locate(tmp_path, use_go_env=False) == tmp_path / "go.mod"

    def test_custom_name(self, tmp_path):
        (tmp_path / "tools.mod").write_text(GOMOD)
        assert manifest_locate(tmp_path, use_go_env=False, name="tools.mod") == tmp_path / "tools.mod"

    def test_missing(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            manifest_locate(tmp_path, use_go_env=False)

    def test_via_go_env(self, monkeypatch, tmp_path):
        module_root = tmp_path / "module"
        module_root.mkdir()
        (module_root / "go.mod").write_text(GOMOD)
        fake_go_env(monkeypatch, stdout=f"{module_root / 'go.mod'}\n")

        assert manifest_locate(tmp_path, use_go_env=True) == module_root / "go.mod"

    def test_go_env_reports_missing_file(self, monkeypatch, tmp_path):
        fake_go_env(monkeypatch, stdout=f"{tmp_path / 'gone' / 'go.mod'}\n")

        with pytest.raises(ManifestNotFoundError):
            manifest_locate(tmp_path, use_go_env=True)


class TestReadAndParse:
    """Test reading and parsing"""

    def test_read(self, tmp_path):
        path = tmp_path / "go.mod"
        path.write_text(GOMOD)
        assert manifest_read(path) == GOMOD

    def test_read_missing(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            manifest_read(tmp_path / "go.mod")

    def test_read_directory(self, tmp_path):
        """A directory named go.mod cannot be read"""
        (tmp_path / "go.mod").mkdir()
        with pytest.raises(ManifestReadError):
            manifest_read(tmp_path / "go.mod")

    def test_read_undecodable(self, tmp_path):
        path = tmp_path / "go.mod"
        path.write_bytes(b"module \xff\xfe\n")
        with pytest.raises(ManifestReadError):
            manifest_read(path)

    def test_parse_error(self):
        with pytest.raises(ManifestParseError, match="could not parse go.mod file"):
            manifest_parse("require (\n\ta v1.0.0\n")

    def test_parse_error_chains_syntax_error(self):
        with pytest.raises(ManifestParseError) as excinfo:
            manifest_parse(")\n")
        assert isinstance(excinfo.value.__cause__, SyntaxError)

    def test_load_uses_base_name(self, tmp_path):
        path = tmp_path / "go.mod"
        path.write_text(GOMOD)
        syntax = manifest_load(path)

        assert syntax.name == "go.mod"
        assert syntax.stmts[-1].tokens == ["require", "golang.org/x/mod", "v0.17.0"]
        assert syntax.stmts[-1].position.line == 5

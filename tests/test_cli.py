"""Tests for the command-line interface."""

import pytest

from crosspaths import POSIX, WINDOWS
from crosspaths.cli import main, resolve_paths
from crosspaths.errors import UnrecognizedPlatformError


pytestmark = pytest.mark.usefixtures("isolated_config", "restore_logging")


def run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out.splitlines()


class TestCommands:
    """Each subcommand prints its result."""

    def test_clean(self, capsys):
        assert run(capsys, "--variant", "windows", "clean", "c:/a/../b") == (0, ["c:\\b"])

    def test_base_dir_ext(self, capsys):
        assert run(capsys, "--variant", "posix", "base", "/a/b.txt") == (0, ["b.txt"])
        assert run(capsys, "--variant", "posix", "dir", "/a/b.txt") == (0, ["/a"])
        assert run(capsys, "--variant", "posix", "ext", "/a/b.txt") == (0, [".txt"])

    def test_split(self, capsys):
        assert run(capsys, "--variant", "posix", "split", "/a/b") == (0, ["/a/", "b"])

    def test_is_abs(self, capsys):
        assert run(capsys, "--variant", "windows", "is-abs", "c:a") == (0, ["false"])
        assert run(capsys, "--variant", "windows", "is-abs", "NUL") == (0, ["true"])

    def test_volume(self, capsys):
        assert run(capsys, "--variant", "windows", "volume", "\\\\h\\s\\x") == (0, ["\\\\h\\s"])

    def test_join(self, capsys):
        assert run(capsys, "--variant", "windows", "join", "C:", "a", "b") == (0, ["C:a\\b"])

    def test_rel(self, capsys):
        assert run(capsys, "--variant", "posix", "rel", "a/b/c/d", "a/b") == (0, ["../.."])

    def test_to_url(self, capsys):
        assert run(capsys, "--variant", "posix", "to-url", "/a b") == (0, ["file:///a%20b"])

    def test_from_url(self, capsys):
        code, out = run(capsys, "--variant", "windows", "from-url", "file:///C|/autoexec.bat")
        assert (code, out) == (0, ["C:\\autoexec.bat"])


class TestFailures:
    """Rejected input and unknown platforms."""

    def test_rel_failure_exits_one(self, capsys):
        code, out = run(capsys, "--variant", "windows", "rel", "C:\\", "D:\\")
        assert code == 1
        assert out == []

    def test_bad_scheme_exits_one(self, capsys):
        assert run(capsys, "--variant", "posix", "from-url", "ftp://x/y")[0] == 1

    def test_unrecognized_platform_exits_two(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.platform", "plan9")
        assert run(capsys, "clean", "a")[0] == 2

    def test_variant_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("CROSSPATHS_PATHS_VARIANT", "windows")
        assert run(capsys, "clean", "a/b") == (0, ["a\\b"])


class TestResolvePaths:
    """Variant names to path operations."""

    def test_named_variants(self):
        assert resolve_paths("posix") is POSIX
        assert resolve_paths("windows") is WINDOWS

    def test_target(self):
        assert resolve_paths("target", platform="win32") is WINDOWS

    def test_unknown_target(self):
        with pytest.raises(UnrecognizedPlatformError):
            resolve_paths("target", platform="plan9")

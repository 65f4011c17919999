"""Tests for base, dir, ext, split and is_abs."""

import pytest

from crosspaths import POSIX, WINDOWS, SLASH


class TestBase:
    """Last path element."""

    @pytest.mark.parametrize("path,expected", [
        ("", "."),
        (".", "."),
        ("/.", "."),
        ("/", "/"),
        ("////", "/"),
        ("x/", "x"),
        ("abc", "abc"),
        ("abc/def", "def"),
        ("a/b/.x", ".x"),
        ("a/b/c.", "c."),
        ("a/b/c.x", "c.x"),
    ])
    def test_posix(self, path, expected):
        assert POSIX.base(path) == expected
        assert SLASH.base(path) == expected

    @pytest.mark.parametrize("path,expected", [
        ("c:\\", "\\"),
        ("c:.", "."),
        ("c:\\a\\b", "b"),
        ("c:a\\b", "b"),
        ("c:a\\b\\c", "c"),
        ("\\\\host\\share\\", "\\"),
        ("\\\\host\\share\\a", "a"),
        ("\\\\host\\share\\a\\b", "b"),
        ("c:/a/b/", "b"),
    ])
    def test_windows(self, path, expected):
        assert WINDOWS.base(path) == expected


class TestDir:
    """Everything but the last element."""

    @pytest.mark.parametrize("path,expected", [
        ("", "."),
        (".", "."),
        ("/.", "/"),
        ("/", "/"),
        ("////", "/"),
        ("/foo", "/"),
        ("x/", "x"),
        ("abc", "."),
        ("abc/def", "abc"),
        ("a/b/.x", "a/b"),
        ("a/b/c.", "a/b"),
        ("a/b/c.x", "a/b"),
    ])
    def test_posix(self, path, expected):
        assert POSIX.dir(path) == expected

    @pytest.mark.parametrize("path,expected", [
        ("c:\\", "c:\\"),
        ("c:.", "c:."),
        ("c:\\a\\b", "c:\\a"),
        ("c:a\\b", "c:a"),
        ("c:a\\b\\c", "c:a\\b"),
        ("\\\\host\\share", "\\\\host\\share"),
        ("\\\\host\\share\\", "\\\\host\\share\\"),
        ("\\\\host\\share\\a", "\\\\host\\share\\"),
        ("\\\\host\\share\\a\\b", "\\\\host\\share\\a"),
        ("c:\\windows\\system32\\shell32.dll", "c:\\windows\\system32"),
    ])
    def test_windows(self, path, expected):
        assert WINDOWS.dir(path) == expected


class TestExt:
    """Extension of the final element."""

    @pytest.mark.parametrize("path,expected", [
        ("path.go", ".go"),
        ("path.pb.go", ".go"),
        ("a.dir/b", ""),
        ("a.dir/b.go", ".go"),
        ("a.dir/", ""),
        ("", ""),
        (".bashrc", ".bashrc"),
    ])
    def test_posix(self, path, expected):
        assert POSIX.ext(path) == expected

    def test_windows_stops_at_either_separator(self):
        assert WINDOWS.ext("a.dir\\b") == ""
        assert WINDOWS.ext("a.dir/b") == ""
        assert WINDOWS.ext("c:\\x\\y.txt") == ".txt"

    def test_posix_backslash_is_not_a_separator(self):
        assert POSIX.ext("a.dir\\b") == ".dir\\b"


class TestSplit:
    """Splitting after the last separator."""

    @pytest.mark.parametrize("path,expected", [
        ("a/b", ("a/", "b")),
        ("a/b/", ("a/b/", "")),
        ("a/", ("a/", "")),
        ("a", ("", "a")),
        ("/", ("/", "")),
        ("", ("", "")),
        ("/home/fred/.config/bar/baz", ("/home/fred/.config/bar/", "baz")),
    ])
    def test_posix(self, path, expected):
        assert POSIX.split(path) == expected
        assert SLASH.split(path) == expected

    @pytest.mark.parametrize("path,expected", [
        ("c:", ("c:", "")),
        ("c:/", ("c:/", "")),
        ("c:/foo", ("c:/", "foo")),
        ("c:/foo/bar", ("c:/foo/", "bar")),
        ("c:foo", ("c:", "foo")),
        ("//host/share", ("//host/share", "")),
        ("//host/share/", ("//host/share/", "")),
        ("//host/share/foo", ("//host/share/", "foo")),
        ("\\\\host\\share", ("\\\\host\\share", "")),
        ("\\\\host\\share\\", ("\\\\host\\share\\", "")),
        ("\\\\host\\share\\foo", ("\\\\host\\share\\", "foo")),
        ("c:\\windows\\system32\\shell32.dll", ("c:\\windows\\system32\\", "shell32.dll")),
    ])
    def test_windows(self, path, expected):
        assert WINDOWS.split(path) == expected

    def test_parts_concatenate_to_input(self):
        for path in ["a/b/c", "c:\\x\\y", "\\\\h\\s\\t", "x"]:
            d, f = WINDOWS.split(path)
            assert d + f == path


class TestIsAbs:
    """Absolute path detection."""

    @pytest.mark.parametrize("path,expected", [
        ("", False),
        ("/", True),
        ("/usr/bin/gcc", True),
        ("..", False),
        ("/a/../bb", True),
        (".", False),
        ("./", False),
        ("lala", False),
        ("c:\\", False),
    ])
    def test_posix(self, path, expected):
        assert POSIX.is_abs(path) is expected
        assert SLASH.is_abs(path) is expected

    @pytest.mark.parametrize("path,expected", [
        ("C:\\", True),
        ("c\\", False),
        ("c::", False),
        ("c:", False),
        ("/", False),
        ("\\", False),
        ("\\Windows", False),
        ("c:a\\b", False),
        ("c:\\a\\b", True),
        ("c:/a/b", True),
        ("\\\\host\\share", False),
        ("\\\\host\\share\\", True),
        ("\\\\host\\share\\foo", True),
        ("//host/share/foo/bar", True),
        ("", False),
    ])
    def test_windows(self, path, expected):
        assert WINDOWS.is_abs(path) is expected

    @pytest.mark.parametrize("name", ["NUL", "nul", "CON", "Com1", "LPT9", "aux", "prn"])
    def test_reserved_names_are_absolute(self, name):
        assert WINDOWS.is_abs(name) is True

    @pytest.mark.parametrize("name", ["COM0", "LPT10", "CONIN", "nul.txt"])
    def test_similar_names_are_not_reserved(self, name):
        assert WINDOWS.is_abs(name) is False

    def test_reserved_names_mean_nothing_on_posix(self):
        assert POSIX.is_abs("NUL") is False

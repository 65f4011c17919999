"""Selecting the path syntax of a platform."""

import re
import sys
from typing import Optional

from .paths import POSIX, WINDOWS, Paths

# Go GOOS names and Python sys.platform prefixes.
_POSIX_PLATFORMS = frozenset([
    "aix", "darwin", "dragonfly", "freebsd", "linux", "netbsd", "openbsd",
    "solaris", "sunos", "cygwin", "msys", "illumos",
])
_WINDOWS_PLATFORMS = frozenset(["windows", "win32"])


def for_os(name: str) -> Optional[Paths]:
    """Return the path operations for an OS identifier.

    Accepts Go-style names (``linux``, ``windows``) as well as
    ``sys.platform`` values (``win32``, ``freebsd13``, ``sunos5``).
    Unknown identifiers give ``None``; callers must handle that case.
    """
    key = name.strip().lower()
    if key in _WINDOWS_PLATFORMS:
        return WINDOWS
    if re.sub(r"\d+$", "", key) in _POSIX_PLATFORMS:
        return POSIX
    return None


def detect_target(platform: Optional[str] = None) -> Optional[Paths]:
    """Return the path operations for the running platform, if known."""
    return for_os(platform if platform is not None else sys.platform)

"""Volume prefix detection."""

import string

from .variant import Variant


def volume_name_len(path: str, variant: Variant) -> int:
    """Return the length of the leading volume prefix of ``path``.

    Variants without drive volumes never have one. Otherwise the prefix is
    either a drive letter and colon (``C:``) or a UNC server and share
    (``\\\\server\\share``). A server segment starting with ``.`` and a
    share segment starting with ``.`` are not considered UNC.
    """
    if not variant.drive_volumes or len(path) < 2:
        return 0

    if path[1] == ":" and path[0] in string.ascii_letters:
        return 2

    sep = variant.is_separator
    length = len(path)
    if length >= 5 and sep(path[0]) and sep(path[1]) and not sep(path[2]) and path[2] != ".":
        # server name runs up to the next separator
        n = 3
        while n < length - 1:
            if sep(path[n]):
                n += 1
                if sep(path[n]) or path[n] == ".":
                    break
                # share name runs up to the next separator or the end
                while n < length and not sep(path[n]):
                    n += 1
                return n
            n += 1
    return 0


def volume_name(path: str, variant: Variant) -> str:
    return path[:volume_name_len(path, variant)]


def is_unc(path: str, variant: Variant) -> bool:
    return volume_name_len(path, variant) > 2


def last_separator(path: str, variant: Variant, start: int = 0) -> int:
    """Index of the last separator at or after ``start``, or -1."""
    return max(path.rfind(s, start) for s in variant.separators)

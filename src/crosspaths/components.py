"""Path component extraction: base, dir, ext, split and is_abs."""

from typing import Tuple

from .clean import clean
from .variant import Variant
from .volume import last_separator, volume_name, volume_name_len


def base(path: str, variant: Variant) -> str:
    """Return the last element of ``path``.

    Trailing separators are removed before extracting the last element.
    An empty path yields ``.`` and a path of only separators yields the
    canonical separator.
    """
    if not path:
        return "."
    path = path.rstrip(variant.separators)
    path = path[volume_name_len(path, variant):]
    i = last_separator(path, variant)
    if i >= 0:
        path = path[i + 1:]
    if not path:
        return variant.separator
    return path


def _dir_end(path: str, vol_len: int, variant: Variant) -> int:
    i = last_separator(path, variant, vol_len)
    return i if i >= 0 else vol_len - 1


def directory(path: str, variant: Variant) -> str:
    """Return all but the last element of ``path``, cleaned.

    The volume prefix is kept as is. A UNC path whose directory part cleans
    to ``.`` yields the share root alone.
    """
    vol = volume_name(path, variant)
    i = _dir_end(path, len(vol), variant)
    d = clean(path[len(vol):i + 1], variant)
    if d == "." and len(vol) > 2:
        return vol
    return vol + d


def ext(path: str, variant: Variant) -> str:
    """Return the extension of the final element, including the dot."""
    for i in range(len(path) - 1, -1, -1):
        if variant.is_separator(path[i]):
            break
        if path[i] == ".":
            return path[i:]
    return ""


def split(path: str, variant: Variant) -> Tuple[str, str]:
    """Split ``path`` just after its last separator.

    Returns ``(dir, file)`` with ``dir + file == path``. If there is no
    separator after the volume prefix, ``dir`` is the volume prefix.
    """
    vol_len = volume_name_len(path, variant)
    i = _dir_end(path, vol_len, variant)
    return path[:i + 1], path[i + 1:]


def is_abs(path: str, variant: Variant) -> bool:
    """Report whether ``path`` is absolute.

    Without drive volumes a path is absolute when it starts with the
    separator. With them, reserved device names are always absolute and
    otherwise a volume followed by a separator is required.
    """
    if not variant.drive_volumes:
        return path.startswith(variant.separator)
    if variant.is_reserved_name(path):
        return True
    vol_len = volume_name_len(path, variant)
    if vol_len == 0:
        return False
    path = path[vol_len:]
    if not path:
        return False
    return variant.is_separator(path[0])

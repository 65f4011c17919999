"""Lexical path cleaning."""

from typing import List

from .variant import Variant
from .volume import volume_name_len


class _OutputBuffer:
    """Append-only character buffer with a movable write cursor.

    Moving the cursor back (``w -= 1``) discards already-written characters,
    which is how ``..`` elements erase the element before them.
    """

    def __init__(self) -> None:
        self._buf: List[str] = []
        self.w = 0

    def index(self, i: int) -> str:
        return self._buf[i]

    def append(self, c: str) -> None:
        if self.w < len(self._buf):
            self._buf[self.w] = c
        else:
            self._buf.append(c)
        self.w += 1

    def string(self) -> str:
        return "".join(self._buf[:self.w])


def clean(path: str, variant: Variant) -> str:
    """Return the shortest path name lexically equivalent to ``path``.

    Applies the following rules until no further processing can be done:

    1. Replace multiple separators with a single one.
    2. Eliminate each ``.`` path name element.
    3. Eliminate each inner ``..`` along with the non-``..`` element before it.
    4. Eliminate ``..`` elements that begin a rooted path.

    The volume prefix is kept as is and all separators in the result are
    replaced by the variant's canonical separator. An empty path cleans to
    ``.``.
    """
    original = path
    vol_len = volume_name_len(path, variant)
    volume = original[:vol_len]
    path = path[vol_len:]
    if not path:
        if vol_len > 2:
            # UNC share root
            return variant.from_slash(original)
        return original + "."

    sep = variant.separator
    is_sep = variant.is_separator
    n = len(path)
    rooted = is_sep(path[0])

    # r is the index of the next character to read from path, out.w the
    # index of the next character to write. dotdot is the index in out
    # where .. must stop: after the root separator or a leading ../.. run.
    out = _OutputBuffer()
    r = dotdot = 0
    if rooted:
        out.append(sep)
        r = dotdot = 1

    while r < n:
        if is_sep(path[r]):
            r += 1
        elif path[r] == "." and (r + 1 == n or is_sep(path[r + 1])):
            r += 1
        elif path[r] == "." and path[r + 1] == "." and (r + 2 == n or is_sep(path[r + 2])):
            r += 2
            if out.w > dotdot:
                out.w -= 1
                while out.w > dotdot and not is_sep(out.index(out.w)):
                    out.w -= 1
            elif not rooted:
                if out.w > 0:
                    out.append(sep)
                out.append(".")
                out.append(".")
                dotdot = out.w
        else:
            if (rooted and out.w != 1) or (not rooted and out.w != 0):
                out.append(sep)
            while r < n and not is_sep(path[r]):
                out.append(path[r])
                r += 1

    if out.w == 0:
        out.append(".")

    cleaned = out.string()
    if vol_len > 2 and cleaned == sep:
        return variant.from_slash(volume)
    if vol_len == 0 and volume_name_len(cleaned, variant) > 0:
        # x/../c: must not turn into the drive c:
        cleaned = "." + sep + cleaned
    return variant.from_slash(volume + cleaned)

"""Relative path computation."""

import logging

from .clean import clean
from .errors import RelativePathNotRepresentableError
from .variant import Variant
from .volume import volume_name

logger = logging.getLogger(__name__)


def rel(basepath: str, targpath: str, variant: Variant) -> str:
    """Return a relative path that reaches ``targpath`` from ``basepath``.

    Joining ``basepath`` and the result and cleaning gives the cleaned
    ``targpath``. Both paths must be either rooted or unrooted and must
    share the same volume.

    Raises:
        RelativePathNotRepresentableError: If the relationship depends on
            the current directory or on a ``..`` element in ``basepath``.
    """
    sep = variant.separator
    base_vol = variant.from_slash(volume_name(basepath, variant))
    targ_vol = variant.from_slash(volume_name(targpath, variant))
    base = clean(basepath, variant)
    targ = clean(targpath, variant)
    if variant.same_word(targ, base):
        return "."

    base = base[len(base_vol):]
    targ = targ[len(targ_vol):]
    base = _strip_dot(base, base_vol, sep)
    targ = _strip_dot(targ, targ_vol, sep)

    # is_abs is no use here: \a and a are both relative on Windows.
    base_rooted = base.startswith(sep)
    targ_rooted = targ.startswith(sep)
    if base_rooted != targ_rooted or not variant.same_word(base_vol, targ_vol):
        raise _not_representable(basepath, targpath)

    # Position base[b0:bi] and targ[t0:ti] at the first differing elements.
    bl = len(base)
    tl = len(targ)
    b0 = bi = t0 = ti = 0
    while True:
        while bi < bl and base[bi] != sep:
            bi += 1
        while ti < tl and targ[ti] != sep:
            ti += 1
        if not variant.same_word(targ[t0:ti], base[b0:bi]):
            break
        if bi < bl:
            bi += 1
        if ti < tl:
            ti += 1
        b0 = bi
        t0 = ti

    if base[b0:bi] == "..":
        raise _not_representable(basepath, targpath)

    if b0 != bl:
        # Base elements left: go up before going down.
        parts = [".."] * (base.count(sep, b0) + 1)
        if t0 != tl:
            parts.append(targ[t0:])
        return sep.join(parts)
    return targ[t0:]


def _strip_dot(path: str, vol: str, sep: str) -> str:
    if path == ".":
        return ""
    if path == "" and len(vol) > 2:
        # a bare UNC share is the root of that share
        return sep
    return path


def _not_representable(basepath: str, targpath: str) -> RelativePathNotRepresentableError:
    logger.debug(f"Cannot relate {targpath!r} to {basepath!r}")
    return RelativePathNotRepresentableError(
        f"can't make {targpath} relative to {basepath}",
        base=basepath,
        target=targpath,
    )

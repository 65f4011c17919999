"""Joining path elements."""

from typing import Sequence

from .clean import clean
from .variant import Variant
from .volume import is_unc


def join(elems: Sequence[str], variant: Variant) -> str:
    """Join path elements with the separator and clean the result.

    Leading empty elements are skipped. Joining nothing, or only empty
    elements, returns an empty string.
    """
    for i, elem in enumerate(elems):
        if elem:
            if variant.drive_volumes:
                return _join_with_volumes(elems[i:], variant)
            return clean(variant.separator.join(elems[i:]), variant)
    return ""


def _join_with_volumes(elems: Sequence[str], variant: Variant) -> str:
    sep = variant.separator
    first = elems[0]
    if len(first) == 2 and first[1] == ":":
        # Bare drive letter: stay relative to the current directory of that
        # drive, so C: + a is C:a and not C:\a.
        rest = [e for e in elems[1:] if e]
        return clean(first + sep.join(rest), variant)

    joined = clean(sep.join(elems), variant)
    if not is_unc(joined, variant):
        return joined

    # A UNC result is only allowed when the first element is UNC itself.
    head = clean(first, variant)
    if is_unc(head, variant):
        return joined

    tail = clean(sep.join(elems[1:]), variant)
    if head.endswith(sep):
        return head + tail
    return head + sep + tail

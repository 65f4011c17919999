"""Path operations bound to one path syntax."""

from typing import Tuple, Union

from . import components
from .clean import clean
from .join import join
from .relative import rel
from .urls import FileURL, from_url, to_url
from .variant import POSIX_VARIANT, SLASH_VARIANT, WINDOWS_VARIANT, Variant
from .volume import volume_name


class Paths:
    """Lexical path manipulation for a single :class:`Variant`.

    None of the methods touch a filesystem. ``rel`` and ``from_url`` are the
    only ones that raise; everything else accepts any string.

    Examples:
        >>> POSIX.split("/home/fred/.config/bar/baz")
        ('/home/fred/.config/bar/', 'baz')
        >>> POSIX.join("/home/fred/.config/bar/", "boz")
        '/home/fred/.config/bar/boz'
    """

    def __init__(self, variant: Variant) -> None:
        self.variant = variant

    @property
    def name(self) -> str:
        return self.variant.name

    @property
    def separator(self) -> str:
        return self.variant.separator

    def __repr__(self) -> str:
        return f"Paths({self.variant.name!r})"

    def base(self, path: str) -> str:
        return components.base(path, self.variant)

    def clean(self, path: str) -> str:
        return clean(path, self.variant)

    def dir(self, path: str) -> str:
        return components.directory(path, self.variant)

    def ext(self, path: str) -> str:
        return components.ext(path, self.variant)

    def is_abs(self, path: str) -> bool:
        return components.is_abs(path, self.variant)

    def join(self, *elems: str) -> str:
        return join(elems, self.variant)

    def rel(self, basepath: str, targpath: str) -> str:
        return rel(basepath, targpath, self.variant)

    def split(self, path: str) -> Tuple[str, str]:
        return components.split(path, self.variant)

    def volume_name(self, path: str) -> str:
        return volume_name(path, self.variant)

    def to_url(self, path: str) -> FileURL:
        return to_url(path, self.variant)

    def from_url(self, url: Union[FileURL, str]) -> str:
        return from_url(url, self.variant)


POSIX = Paths(POSIX_VARIANT)
WINDOWS = Paths(WINDOWS_VARIANT)
# Slash-separated paths as seen in URLs. The descriptor has no volumes, so
# relating and URL conversion follow the POSIX rules.
SLASH = Paths(SLASH_VARIANT)

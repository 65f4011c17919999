"""Path syntax descriptors.

A :class:`Variant` captures everything that differs between path syntaxes:
the canonical separator, which other characters are accepted as separators,
how path elements compare, whether drive letters and UNC shares form a
volume prefix, and the reserved device names.
"""

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict, Field


WINDOWS_RESERVED_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


class Variant(BaseModel):
    """Immutable description of one path syntax."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = Field(description="Short variant name")
    separator: str = Field(min_length=1, max_length=1, description="Canonical separator")
    alt_separators: FrozenSet[str] = Field(
        default=frozenset(),
        description="Other characters accepted as separators on input"
    )
    case_insensitive: bool = Field(
        default=False,
        description="Compare path elements case-insensitively"
    )
    drive_volumes: bool = Field(
        default=False,
        description="Drive letters and UNC shares form a volume prefix"
    )
    reserved_names: FrozenSet[str] = Field(
        default=frozenset(),
        description="Device names that are always treated as absolute"
    )

    @property
    def separators(self) -> str:
        """All characters accepted as separators, canonical one first."""
        return self.separator + "".join(sorted(self.alt_separators - {self.separator}))

    def is_separator(self, c: str) -> bool:
        return c == self.separator or c in self.alt_separators

    def from_slash(self, path: str) -> str:
        """Replace every accepted separator with the canonical one."""
        for alt in self.alt_separators:
            path = path.replace(alt, self.separator)
        return path

    def to_slash(self, path: str) -> str:
        if self.separator == "/":
            return path
        return path.replace(self.separator, "/")

    def same_word(self, a: str, b: str) -> bool:
        if self.case_insensitive:
            return a.lower() == b.lower()
        return a == b

    def is_reserved_name(self, path: str) -> bool:
        if not path:
            return False
        return path.upper() in self.reserved_names


POSIX_VARIANT = Variant(name="posix", separator="/")

WINDOWS_VARIANT = Variant(
    name="windows",
    separator="\\",
    alt_separators=frozenset("/"),
    case_insensitive=True,
    drive_volumes=True,
    reserved_names=WINDOWS_RESERVED_NAMES,
)

SLASH_VARIANT = Variant(name="slash", separator="/")

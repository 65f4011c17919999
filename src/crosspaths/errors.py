"""Error definitions for crosspaths."""

from typing import Any, Dict


class PathsError(Exception):
    """Base exception for all crosspaths errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class RelativePathNotRepresentableError(PathsError):
    """Target cannot be expressed relative to base without a filesystem."""
    pass


class URLError(PathsError):
    """URL cannot be converted to a path."""
    pass


class InvalidURLSchemeError(URLError):
    """URL scheme is neither empty nor file."""
    pass


class URLUserInfoNotAllowedError(URLError):
    """file: URL carries a user-info component."""
    pass


class URLHostNotAllowedError(URLError):
    """file: URL names a non-local host."""
    pass


class MalformedWindowsDriveURLError(URLError):
    """file: URL path does not start with a drive letter and colon."""
    pass


class UnrecognizedPlatformError(PathsError):
    """Running platform has no known path syntax."""
    pass

"""Lexical manipulation of POSIX and Windows paths on any host."""

from .variant import Variant, POSIX_VARIANT, WINDOWS_VARIANT, SLASH_VARIANT
from .paths import Paths, POSIX, WINDOWS, SLASH
from .target import for_os, detect_target
from .urls import FileURL
from .errors import (
    PathsError, RelativePathNotRepresentableError, URLError,
    InvalidURLSchemeError, URLUserInfoNotAllowedError, URLHostNotAllowedError,
    MalformedWindowsDriveURLError, UnrecognizedPlatformError
)

__all__ = [
    'Variant',
    'POSIX_VARIANT',
    'WINDOWS_VARIANT',
    'SLASH_VARIANT',
    'Paths',
    'POSIX',
    'WINDOWS',
    'SLASH',
    'for_os',
    'detect_target',
    'FileURL',
    'PathsError',
    'RelativePathNotRepresentableError',
    'URLError',
    'InvalidURLSchemeError',
    'URLUserInfoNotAllowedError',
    'URLHostNotAllowedError',
    'MalformedWindowsDriveURLError',
    'UnrecognizedPlatformError',
]

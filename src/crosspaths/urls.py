"""Conversion between native paths and file: URLs."""

import logging
import string
from typing import Optional, Union
from urllib.parse import quote, unquote, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field

from .clean import clean
from .components import is_abs
from .errors import (
    InvalidURLSchemeError,
    MalformedWindowsDriveURLError,
    URLHostNotAllowedError,
    URLUserInfoNotAllowedError,
)
from .variant import Variant
from .volume import volume_name_len

logger = logging.getLogger(__name__)

_PATH_SAFE = "/:@!$&'()*+,;=~"


class FileURL(BaseModel):
    """The parts of a URL that matter for path conversion.

    ``path`` holds the decoded path. ``user`` is ``None`` when the URL has
    no user-info at all, and ``""`` when it has an empty one (``file://@h/``).
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    scheme: str = Field(default="", description="URL scheme, lowercase")
    user: Optional[str] = Field(default=None, description="User-info component")
    host: str = Field(default="", description="Host, including any port")
    path: str = Field(default="", description="Decoded path")
    query: str = Field(default="", description="Raw query string")
    fragment: str = Field(default="", description="Raw fragment")

    @classmethod
    def parse(cls, text: str) -> "FileURL":
        parts = urlsplit(text)
        netloc = parts.netloc
        user = None
        if "@" in netloc:
            user, _, netloc = netloc.rpartition("@")
            user = unquote(user)
        return cls(
            scheme=parts.scheme,
            user=user,
            host=netloc,
            path=unquote(parts.path),
            query=parts.query,
            fragment=parts.fragment,
        )

    def __str__(self) -> str:
        netloc = self.host
        if self.user is not None:
            netloc = f"{quote(self.user, safe='')}@{netloc}"

        path = self.path
        if (self.scheme or netloc) and path and not path.startswith("/"):
            path = "/" + path
        encoded = quote(path, safe=_PATH_SAFE)
        if not self.scheme and not netloc and (
            encoded.startswith("//") or ":" in encoded.split("/", 1)[0]
        ):
            # keep a leading a:b element from reading as a scheme and a
            # leading // from reading as a host
            encoded = "./" + encoded

        return urlunsplit((self.scheme, netloc, encoded, self.query, self.fragment))


def to_url(path: str, variant: Variant) -> FileURL:
    """Build a URL for ``path``.

    Absolute paths become ``file:`` URLs, relative paths become schemeless
    relative URLs.
    """
    if variant.drive_volumes:
        return _to_url_with_volumes(path, variant)

    url_path = clean(path, variant)
    if is_abs(path, variant):
        return FileURL(scheme="file", path=url_path)
    return FileURL(path=url_path)


def _to_url_with_volumes(path: str, variant: Variant) -> FileURL:
    if not is_abs(path, variant):
        return FileURL(path=variant.to_slash(path))

    vol_len = volume_name_len(path, variant)
    if vol_len > 2:
        # the whole volume after \\ is the host: \\server\share\x has
        # host server\share and path /x
        return FileURL(
            scheme="file",
            host=path[2:vol_len],
            path=variant.to_slash(path[vol_len:]),
        )

    return FileURL(scheme="file", path=variant.to_slash(path))


def from_url(url: Union[FileURL, str], variant: Variant) -> str:
    """Return the path a URL refers to.

    Schemeless URLs are taken as relative paths. Query and fragment parts
    are ignored.

    Raises:
        InvalidURLSchemeError: If the scheme is neither empty nor ``file``.
        URLUserInfoNotAllowedError: If a ``file:`` URL has user-info.
        URLHostNotAllowedError: If a ``file:`` URL names a remote host and
            the variant has no UNC shares to map it to.
        MalformedWindowsDriveURLError: If a local ``file:`` URL does not
            start with a drive letter and colon.
    """
    if isinstance(url, str):
        url = FileURL.parse(url)

    if url.scheme == "":
        return clean(url.path, variant)

    if url.scheme != "file":
        logger.debug(f"Rejecting URL with scheme {url.scheme!r}")
        raise InvalidURLSchemeError(
            "file: is the only allowed URL scheme",
            url=str(url),
            scheme=url.scheme,
        )

    if url.user is not None:
        logger.debug(f"Rejecting file: URL with user-info: {url}")
        raise URLUserInfoNotAllowedError(
            "user portion not allowed in file: URLs",
            url=str(url),
        )

    if variant.drive_volumes:
        return _from_url_with_volumes(url, variant)

    if url.host and url.host.lower() != "localhost":
        logger.debug(f"Rejecting file: URL for host {url.host!r}")
        raise URLHostNotAllowedError(
            "only local file: URLs are allowed",
            url=str(url),
            host=url.host,
        )
    return clean(url.path, variant)


def _from_url_with_volumes(url: FileURL, variant: Variant) -> str:
    if url.host:
        # a host names the server of a UNC path
        return clean(f"\\\\{url.host}{url.path}", variant)

    p = url.path
    if len(p) >= 3 and p[2] == "|":
        # legacy form with a pipe in place of the colon: /C|/autoexec.bat
        p = f"{p[:2]}:{p[3:]}"
    if len(p) < 4 or p[0] != "/" or p[1] not in string.ascii_letters or p[2] != ":":
        logger.debug(f"Rejecting file: URL without drive letter: {url}")
        raise MalformedWindowsDriveURLError(
            "local file: URLs must begin with a drive letter and then a colon in the path portion",
            url=str(url),
        )
    return clean(p[1:], variant)

"""Normalization of git remote strings into canonical URLs.

Git accepts remotes in several shapes that a generic URL parser does not
understand on its own:

  - git@github.com:owner/repo.git        (SSH shorthand)
  - git@host:2222:owner/repo.git         (SSH shorthand with port)
  - git:host/owner/repo                  (short git notation)
  - /srv/git/repo.git, ../repo           (local paths)

Everything is rewritten into an explicit ``scheme://`` URL before it is split.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from urllib.parse import urlsplit

from giturl.errors import NormalizeUrlError, NormalizeUrlErrorKind
from giturl.models import CanonicalUrl
from giturl.scheme import Scheme, UnsupportedSchemeError

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")

# Schemes whose host is case-insensitive and whose path is never empty
_SPECIAL_SCHEMES: frozenset[str] = frozenset({"http", "https", "ftp"})

_DEFAULT_PORTS: dict[str, int] = {"http": 80, "https": 443, "ftp": 21}


def normalize_url(url: str) -> CanonicalUrl:
    """Normalize *url* into a :class:`CanonicalUrl`.

    Raises:
        NormalizeUrlError: the input contains null bytes, cannot be parsed,
            declares an unsupported scheme, or is an SSH shorthand with too
            many ``:`` separators.
    """
    logger.debug("Processing: %r", url)

    if "\0" in url:
        raise NormalizeUrlError(NormalizeUrlErrorKind.NULL_BYTES, url)

    url = url.strip().rstrip("/")

    # git:host/path is shorthand for git://host/path
    if url.startswith("git:") and url[4:5] != "/":
        url_to_parse = "git://" + url[4:]
    else:
        url_to_parse = url

    match = _SCHEME_RE.match(url_to_parse)
    if match is None:
        # No scheme at all: either user@host:path or a local path
        if _has_at_before_colon(url):
            logger.debug("Treating %r as ssh shorthand", url)
            return _normalize_ssh_url(url)
        logger.debug("Treating %r as a local path", url)
        return _normalize_file_path(url)

    try:
        Scheme.from_str(match.group(1).lower())
    except UnsupportedSchemeError as err:
        if url_to_parse[match.end():].startswith("//"):
            raise NormalizeUrlError(
                NormalizeUrlErrorKind.UNSUPPORTED_SCHEME, url, str(err)
            ) from err
        # host:path, where the host was read as a scheme
        return _normalize_ssh_url(url)

    return _split_url(url_to_parse)


def _normalize_ssh_url(url: str) -> CanonicalUrl:
    """Rewrite ``host:path`` or ``host:port:path`` as an ``ssh://`` URL."""
    parts = url.split(":")

    if len(parts) == 2:
        logger.debug("Normalizing ssh url: %r", parts)
        return normalize_url(f"ssh://{parts[0]}/{parts[1]}")
    if len(parts) == 3:
        logger.debug("Normalizing ssh url with ports: %r", parts)
        return normalize_url(f"ssh://{parts[0]}:{parts[1]}/{parts[2]}")

    raise NormalizeUrlError(NormalizeUrlErrorKind.UNSUPPORTED_SSH_PATTERN, url)


def _normalize_file_path(filepath: str) -> CanonicalUrl:
    """Convert a local path to a ``file://`` URL.

    Absolute paths go through :meth:`pathlib.Path.as_uri`; anything it
    rejects (relative paths) is prefixed with ``file://`` instead.
    """
    try:
        uri = Path(filepath).as_uri()
    except ValueError:
        logger.debug("Not an absolute path, prefixing file://: %r", filepath)
        return normalize_url(f"file://{filepath}")
    return _split_url(uri)


def _split_url(url: str) -> CanonicalUrl:
    try:
        parts = urlsplit(url)
        host = _raw_host(parts.netloc)
        port = parts.port
        if parts.scheme in _SPECIAL_SCHEMES and not host:
            raise ValueError("empty host")
    except ValueError as err:
        raise NormalizeUrlError(
            NormalizeUrlErrorKind.URL_PARSE, url, str(err)
        ) from err

    scheme = parts.scheme
    path = parts.path
    if scheme in _SPECIAL_SCHEMES:
        host = host.lower()
        path = path or "/"
    if port is not None and _DEFAULT_PORTS.get(scheme) == port:
        port = None

    return CanonicalUrl(
        scheme=scheme,
        host=host or None,
        username=parts.username or "",
        password=parts.password,
        port=port,
        path=path,
    )


def _raw_host(netloc: str) -> str:
    """Return the host of *netloc* as written.

    SplitResult.hostname lowercases and drops IPv6 brackets; ssh hosts such
    as config aliases are case-sensitive, so keep them verbatim.
    """
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        return hostport[: hostport.find("]") + 1]
    return hostport.partition(":")[0]


def _has_at_before_colon(url: str) -> bool:
    at = url.find("@")
    colon = url.find(":")
    return at != -1 and colon != -1 and at < colon

"""Exceptions raised while normalizing and parsing git URLs.

Both exceptions carry a ``kind`` so callers can branch without matching on
messages. New kinds may be added; do not treat the kind enums as closed.
The lower-level error, when there is one, is chained as ``__cause__`` and
also exposed as ``cause``.
"""

from __future__ import annotations

from enum import Enum


class NormalizeUrlErrorKind(Enum):
    NULL_BYTES = "null_bytes"
    URL_PARSE = "url_parse"
    UNSUPPORTED_SSH_PATTERN = "unsupported_ssh_pattern"
    UNSUPPORTED_SCHEME = "unsupported_scheme"


class ParseErrorKind(Enum):
    NORMALIZE_URL = "normalize_url"
    URL_HOST = "url_host"
    UNSUPPORTED_SCHEME = "unsupported_scheme"
    MALFORMED_GIT_URL = "malformed_git_url"


_NORMALIZE_MESSAGES: dict[NormalizeUrlErrorKind, str] = {
    NormalizeUrlErrorKind.NULL_BYTES: "input URL contains null bytes",
    NormalizeUrlErrorKind.URL_PARSE: "unable to parse URL '{url}'",
    NormalizeUrlErrorKind.UNSUPPORTED_SSH_PATTERN: "unsupported SSH pattern '{url}'",
    NormalizeUrlErrorKind.UNSUPPORTED_SCHEME: "unsupported URL scheme in '{url}'",
}

_PARSE_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.NORMALIZE_URL: "unable to normalize URL '{url}'",
    ParseErrorKind.URL_HOST: "could not isolate host from URL '{url}'",
    ParseErrorKind.UNSUPPORTED_SCHEME: "unsupported scheme in URL '{url}'",
    ParseErrorKind.MALFORMED_GIT_URL: "unknown format of git URL '{url}'",
}


class _KindError(ValueError):
    def __init__(self, kind: Enum, url: str, message: str, detail: str | None = None):
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.kind = kind
        self.url = url

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class NormalizeUrlError(_KindError):
    """Raised when a URL cannot be normalized into canonical form."""

    def __init__(
        self, kind: NormalizeUrlErrorKind, url: str, detail: str | None = None
    ):
        super().__init__(kind, url, _NORMALIZE_MESSAGES[kind].format(url=url), detail)


class GitUrlParseError(_KindError):
    """Raised when git metadata cannot be extracted from a URL."""

    def __init__(self, kind: ParseErrorKind, url: str, detail: str | None = None):
        super().__init__(kind, url, _PARSE_MESSAGES[kind].format(url=url), detail)

"""Supported git URL schemes and their canonical string tokens."""

from __future__ import annotations

from enum import Enum


class UnsupportedSchemeError(ValueError):
    """Raised when a scheme token is not one of the supported schemes."""

    def __init__(self, scheme: str):
        super().__init__(f"unsupported scheme '{scheme}'")
        self.scheme = scheme


class Scheme(Enum):
    FILE = "file"
    FTP = "ftp"
    FTPS = "ftps"
    GIT = "git"
    GIT_SSH = "git+ssh"
    HTTP = "http"
    HTTPS = "https"
    SSH = "ssh"
    UNSPECIFIED = "unspecified"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, token: str) -> Scheme:
        """Decode a lowercase scheme token. Matching is case-sensitive."""
        try:
            return _BY_TOKEN[token]
        except KeyError:
            raise UnsupportedSchemeError(token) from None


_BY_TOKEN: dict[str, Scheme] = {scheme.value: scheme for scheme in Scheme}

"""Data classes for giturl."""

from __future__ import annotations

from dataclasses import dataclass, replace

from giturl.scheme import Scheme


@dataclass(frozen=True)
class CanonicalUrl:
    """Normalized form of a git remote, as produced by the normalizer."""

    scheme: str
    path: str
    host: str | None = None
    username: str = ""
    password: str | None = None
    port: int | None = None  # None when absent or equal to the scheme default


@dataclass(frozen=True)
class RepoPath:
    path: str
    name: str
    owner: str | None = None
    organization: str | None = None  # Azure DevOps only
    fullname: str = ""
    git_suffix: bool = False


@dataclass(frozen=True)
class GitUrl:
    """Metadata extracted from a git remote URL.

    Build one with :meth:`GitUrl.parse`. ``str()`` renders a canonical
    equivalent of the input, not a verbatim copy.
    """

    host: str | None = None
    name: str = ""
    owner: str | None = None
    organization: str | None = None
    fullname: str = ""
    scheme: Scheme = Scheme.UNSPECIFIED
    user: str | None = None
    token: str | None = None
    port: int | None = None
    path: str = ""
    git_suffix: bool = False
    scheme_prefix: bool = False

    def __str__(self) -> str:
        from giturl.renderer import render_git_url

        return render_git_url(self)

    @classmethod
    def parse(cls, url: str) -> GitUrl:
        from giturl.url_parser import parse_git_url

        return parse_git_url(url)

    from_str = parse

    def trim_auth(self) -> GitUrl:
        """Return a copy without ``user`` and ``token``, e.g. for printing."""
        return replace(self, user=None, token=None)

"""Canonical string rendering of parsed git URLs."""

from __future__ import annotations

from giturl.models import GitUrl
from giturl.scheme import Scheme

_SSH_LIKE: frozenset[Scheme] = frozenset({Scheme.SSH, Scheme.GIT, Scheme.GIT_SSH})
_HTTP_LIKE: frozenset[Scheme] = frozenset({Scheme.HTTP, Scheme.HTTPS})


def render_git_url(git_url: GitUrl) -> str:
    """Render *git_url* back into a URL string.

    The result is a canonical equivalent of the parsed input, e.g.
    ``git@github.com:owner/repo.git`` or ``https://github.com/owner/repo``.
    """
    parts: list[str] = []

    if git_url.scheme_prefix:
        parts.append(f"{git_url.scheme}://")

    parts.append(_auth_info(git_url))
    parts.append(git_url.host or "")

    if git_url.port is not None:
        parts.append(f":{git_url.port}")

    if git_url.scheme is Scheme.SSH:
        # ssh://host:path would read the path as a port on re-parse, so the
        # prefixed form always uses "/"; shorthand without a port uses ":"
        if git_url.port is not None or git_url.scheme_prefix:
            parts.append(f"/{git_url.path}")
        else:
            parts.append(f":{git_url.path}")
    else:
        parts.append(git_url.path)

    return "".join(parts)


def _auth_info(git_url: GitUrl) -> str:
    user, token = git_url.user, git_url.token

    if git_url.scheme in _SSH_LIKE:
        return f"{user}@" if user else ""

    if git_url.scheme in _HTTP_LIKE:
        if user and token is not None:
            return f"{user}:{token}@"
        if user:
            return f"{user}@"
        if token is not None:
            return f"{token}@"

    return ""

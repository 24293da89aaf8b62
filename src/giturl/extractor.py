"""Owner, organization and repository name extraction from URL paths."""

from __future__ import annotations

import logging

from giturl.errors import GitUrlParseError, ParseErrorKind
from giturl.models import CanonicalUrl, RepoPath
from giturl.scheme import Scheme

logger = logging.getLogger(__name__)

# Hosts whose repository path carries an organization segment above the
# owner. Legacy *.visualstudio.com hosts put the organization in the
# hostname instead and are not handled here.
HOSTS_WITH_ORGANIZATION_IN_PATH: frozenset[str] = frozenset({
    "dev.azure.com",
    "ssh.dev.azure.com",
})

_AZURE_GIT_MARKER = "_git"


def extract_metadata(url: str, canonical: CanonicalUrl, scheme: Scheme) -> RepoPath:
    """Derive repository metadata from the path of a normalized URL.

    Most hosts lay paths out as ``owner/name``. Hosts listed in
    HOSTS_WITH_ORGANIZATION_IN_PATH add an organization level, and the layout
    differs between SSH and HTTPS:

      - git@ssh.dev.azure.com:v3/Org/Project/Repo
      - https://dev.azure.com/Org/Project/_git/Repo

    Args:
        url: The raw input, used in error messages and to detect SSH input.
        canonical: The normalized form of *url*.
        scheme: The classified scheme of *canonical*.
    """
    if scheme is Scheme.SSH:
        # Normalized ssh urls always carry exactly one leading '/'
        path = canonical.path.removeprefix("/")
    elif scheme is Scheme.FILE:
        # Relative paths end up with their first component as the host
        path = f"{canonical.host or ''}{canonical.path}"
    else:
        path = canonical.path

    logger.debug("The urlpath: %r", path)
    segments = _reversed_segments(path)
    logger.debug("rsplit results for metadata: %r", segments)

    if not segments:
        raise GitUrlParseError(ParseErrorKind.MALFORMED_GIT_URL, url, "empty path")

    name = segments[0]
    while name.endswith(".git"):
        name = name.removesuffix(".git")
    if not name:
        raise GitUrlParseError(
            ParseErrorKind.MALFORMED_GIT_URL, url, "missing repository name"
        )
    git_suffix = path.endswith(".git")

    # Nothing is assumed about owners from a filepath
    if scheme is Scheme.FILE:
        return RepoPath(path=path, name=name, fullname=name, git_suffix=git_suffix)

    if not canonical.host:
        raise GitUrlParseError(ParseErrorKind.URL_HOST, url)

    organization = None
    if canonical.host in HOSTS_WITH_ORGANIZATION_IN_PATH:
        logger.debug("Found a git provider with an org: %s", canonical.host)
        organization, owner = _organization_and_owner(url, segments, scheme)
    else:
        owner = _owner(url, segments, scheme)

    fullname = "/".join(part for part in (organization, owner, name) if part)

    return RepoPath(
        path=path,
        name=name,
        owner=owner,
        organization=organization,
        fullname=fullname,
        git_suffix=git_suffix,
    )


def _reversed_segments(path: str) -> list[str]:
    """Split *path* on '/' from the right, ignoring one trailing separator.

    Leading and interior empty pieces are kept, so "/repo" yields
    ["repo", ""].
    """
    pieces = path.split("/")
    if pieces[-1] == "":
        pieces.pop()
    pieces.reverse()
    return pieces


def _organization_and_owner(
    url: str, segments: list[str], scheme: Scheme
) -> tuple[str, str]:
    if scheme is Scheme.SSH:
        # v3/{organization}/{project}/{repo}
        if len(segments) < 3:
            raise GitUrlParseError(
                ParseErrorKind.MALFORMED_GIT_URL,
                url,
                "expected v3/organization/project/repo",
            )
        organization, owner = segments[2], segments[1]
    elif scheme is Scheme.HTTPS:
        # {organization}/{project}/_git/{repo}
        if len(segments) < 4 or segments[1] != _AZURE_GIT_MARKER:
            raise GitUrlParseError(
                ParseErrorKind.MALFORMED_GIT_URL,
                url,
                "expected organization/project/_git/repo",
            )
        organization, owner = segments[3], segments[2]
    else:
        raise GitUrlParseError(
            ParseErrorKind.UNSUPPORTED_SCHEME,
            url,
            f"'{scheme}' is not supported for this host",
        )

    if not organization or not owner:
        raise GitUrlParseError(
            ParseErrorKind.MALFORMED_GIT_URL, url, "empty organization or project"
        )
    return organization, owner


def _owner(url: str, segments: list[str], scheme: Scheme) -> str | None:
    # user@host:repo.git has no owner level
    ssh_input = url.startswith("ssh") or (scheme is Scheme.SSH and "://" not in url)
    if len(segments) < 2 and not ssh_input:
        raise GitUrlParseError(
            ParseErrorKind.MALFORMED_GIT_URL, url, "expected owner/name"
        )

    owner = segments[1] if len(segments) >= 2 else segments[0]
    return owner or None

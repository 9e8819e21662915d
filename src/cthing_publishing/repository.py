"""Select the repository that a build publishes to."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from cthing_publishing.config import is_absolute_url
from cthing_publishing.exceptions import InvalidRepositoryUrlError, MissingCredentialsError
from cthing_publishing.models import (
    UNCONFIGURED,
    BuildType,
    RepositoryCandidate,
    RepositoryCredentials,
    Unconfigured,
)

log = logging.getLogger(__name__)


def select_repository(
    build_type: BuildType,
    candidates: Mapping[BuildType, RepositoryCandidate | None],
) -> RepositoryCredentials | Unconfigured:
    """Resolve the upload target for a build.

    Only the candidate for `build_type` is consulted.

    Args:
        build_type: Snapshot or release.
        candidates: Repository configuration per build type; entries may be
            missing or partially filled.

    Raises:
        InvalidRepositoryUrlError: If the URL is set but is not an absolute URL.
        MissingCredentialsError: If the URL is set but the username or password is not.

    Returns:
        The credentials triple, or `UNCONFIGURED` when no URL is set. The
        latter means remote publishing should be skipped.
    """
    candidate = candidates.get(build_type)
    if candidate is None or candidate.url is None:
        log.debug("No %s repository configured", build_type.value)
        return UNCONFIGURED

    if not is_absolute_url(candidate.url):
        raise InvalidRepositoryUrlError(f"{build_type.value}.url", candidate.url)
    if not candidate.username or not candidate.username.strip():
        raise MissingCredentialsError("username", build_type=build_type.value, url=candidate.url)
    if not candidate.password or not candidate.password.strip():
        raise MissingCredentialsError("password", build_type=build_type.value, url=candidate.url)

    log.debug("Selected %s repository %s as %s", build_type.value, candidate.url, candidate.username)
    return RepositoryCredentials(url=candidate.url, username=candidate.username, password=candidate.password)


class RepositorySelector:
    """Repository selection bound to a fixed set of candidates."""

    def __init__(self, candidates: Mapping[BuildType, RepositoryCandidate | None]) -> None:
        self.candidates = dict(candidates)

    def select(self, build_type: BuildType) -> RepositoryCredentials | Unconfigured:
        return select_repository(build_type, self.candidates)

    def select_for_version(self, version: str) -> RepositoryCredentials | Unconfigured:
        """Select using the build type implied by a version string."""
        return self.select(BuildType.from_version(version))

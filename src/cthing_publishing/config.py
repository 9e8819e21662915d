"""Publishing configuration module.

Organization constants live in an immutable `PublishingConfig` that callers
pass to the assembler. Repository locations and credentials are read from
Gradle-style project properties or from environment variables.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlparse

from cthing_publishing.exceptions import InvalidRepositoryUrlError
from cthing_publishing.models import BuildType, Developer, RepositoryCandidate


_URL_SCHEMES = frozenset({"http", "https", "file"})


def is_absolute_url(value: str | None) -> bool:
    """Return True for an absolute http, https or file URL."""
    if not value:
        return False
    parsed = urlparse(value)
    if parsed.scheme not in _URL_SCHEMES:
        return False
    if parsed.scheme == "file":
        return bool(parsed.path)
    return bool(parsed.netloc)


@dataclass(frozen=True)
class PublishingConfig:
    """Organization constants used to build publication descriptors.

    Attributes:
        organization_name: Name placed in the organization and developer blocks
        organization_url: Organization home page
        scm_host: Host serving the organization's repositories
        scm_owner: Account on `scm_host` owning the repositories
        issue_system: Issue tracker name
        jenkins_url: Base URL of the organization's Jenkins server
        developers: Developers listed when the caller does not supply any
        organization_groups: Maven groups considered organization artifacts
        plugin_group: Group of this publishing plugin
        plugin_artifact: Artifact of this publishing plugin
        plugin_id: Gradle plugin identifier of this publishing plugin
    """

    organization_name: str = "C Thing Software"
    organization_url: str = "https://www.cthing.com"
    scm_host: str = "github.com"
    scm_owner: str = "cthing"
    issue_system: str = "GitHub Issues"
    jenkins_url: str = "https://jenkins.cthing.com"
    developers: tuple[Developer, ...] = field(
        default_factory=lambda: (Developer(id="baron", name="Baron Roberts", email="baron@cthing.com"),)
    )
    organization_groups: frozenset[str] = frozenset({"org.cthing", "com.cthing"})
    plugin_group: str = "org.cthing"
    plugin_artifact: str = "gradle-cthing-publishing"
    plugin_id: str = "org.cthing.cthing-publishing"

    @property
    def scm_base_url(self) -> str:
        return f"https://{self.scm_host}/{self.scm_owner}"

    def plugin_coordinate(self, version: str) -> str:
        """Return the coordinate of this publishing plugin at the given version."""
        return f"{self.plugin_group}:{self.plugin_artifact}:{version}"


DEFAULT_CONFIG = PublishingConfig()


USER_PROPERTY = "cthing.nexus.user"
PASSWORD_PROPERTY = "cthing.nexus.password"
DOWNLOAD_URL_PROPERTY = "cthing.nexus.downloadUrl"
RELEASES_URL_PROPERTY = "cthing.nexus.releasesUrl"
CANDIDATES_URL_PROPERTY = "cthing.nexus.candidatesUrl"
SNAPSHOTS_URL_PROPERTY = "cthing.nexus.snapshotsUrl"
APT_RELEASES_URL_PROPERTY = "cthing.nexus.aptReleasesUrl"
APT_CANDIDATES_URL_PROPERTY = "cthing.nexus.aptCandidatesUrl"
APT_SNAPSHOTS_URL_PROPERTY = "cthing.nexus.aptSnapshotsUrl"
SITE_URL_PROPERTY = "cthing.nexus.sitesUrl"

SIGNING_PROPERTIES = ("signing.keyId", "signing.password", "signing.secretKeyRingFile")
PLUGIN_PORTAL_PROPERTIES = ("gradle.publish.key", "gradle.publish.secret")

# attribute -> (project property, environment variable)
_NEXUS_SOURCES: dict[str, tuple[str, str]] = {
    "user": (USER_PROPERTY, "CTHING_NEXUS_USER"),
    "password": (PASSWORD_PROPERTY, "CTHING_NEXUS_PASSWORD"),
    "download_url": (DOWNLOAD_URL_PROPERTY, "CTHING_NEXUS_DOWNLOAD_URL"),
    "releases_url": (RELEASES_URL_PROPERTY, "CTHING_NEXUS_RELEASES_URL"),
    "candidates_url": (CANDIDATES_URL_PROPERTY, "CTHING_NEXUS_CANDIDATES_URL"),
    "snapshots_url": (SNAPSHOTS_URL_PROPERTY, "CTHING_NEXUS_SNAPSHOTS_URL"),
    "apt_releases_url": (APT_RELEASES_URL_PROPERTY, "CTHING_NEXUS_APT_RELEASES_URL"),
    "apt_candidates_url": (APT_CANDIDATES_URL_PROPERTY, "CTHING_NEXUS_APT_CANDIDATES_URL"),
    "apt_snapshots_url": (APT_SNAPSHOTS_URL_PROPERTY, "CTHING_NEXUS_APT_SNAPSHOTS_URL"),
    "site_url": (SITE_URL_PROPERTY, "CTHING_NEXUS_SITES_URL"),
}


@dataclass(frozen=True)
class NexusProperties:
    """Repository manager locations and credentials.

    Every field is optional; `None` means the property was not supplied.
    """

    user: str | None = None
    password: str | None = None
    download_url: str | None = None
    releases_url: str | None = None
    candidates_url: str | None = None
    snapshots_url: str | None = None
    apt_releases_url: str | None = None
    apt_candidates_url: str | None = None
    apt_snapshots_url: str | None = None
    site_url: str | None = None

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "NexusProperties":
        """Create configuration from Gradle-style project properties.

        Properties:
            cthing.nexus.user, cthing.nexus.password, cthing.nexus.downloadUrl,
            cthing.nexus.releasesUrl, cthing.nexus.candidatesUrl,
            cthing.nexus.snapshotsUrl, cthing.nexus.aptReleasesUrl,
            cthing.nexus.aptCandidatesUrl, cthing.nexus.aptSnapshotsUrl,
            cthing.nexus.sitesUrl
        """
        return cls(**{attr: properties.get(prop) for attr, (prop, _) in _NEXUS_SOURCES.items()})

    @classmethod
    def from_env(cls) -> "NexusProperties":
        """Create configuration from environment variables.

        Environment variables:
            CTHING_NEXUS_USER: Repository user
            CTHING_NEXUS_PASSWORD: Repository password
            CTHING_NEXUS_SNAPSHOTS_URL: Repository for snapshot builds
            CTHING_NEXUS_CANDIDATES_URL: Staging repository for release builds
            CTHING_NEXUS_RELEASES_URL, CTHING_NEXUS_DOWNLOAD_URL,
            CTHING_NEXUS_APT_*_URL, CTHING_NEXUS_SITES_URL: Other repositories
        """
        return cls(**{attr: os.getenv(env) for attr, (_, env) in _NEXUS_SOURCES.items()})

    def has_credentials(self) -> bool:
        return self.user is not None and self.password is not None

    def repo_url(self, build_type: BuildType) -> str | None:
        """Return the Maven repository for a build type.

        Snapshots go to the snapshots repository; releases go to the
        candidates repository, from which they are promoted.
        """
        if build_type is BuildType.SNAPSHOT:
            return self.snapshots_url
        return self.candidates_url

    def candidates(self) -> dict[BuildType, RepositoryCandidate]:
        """Return the repository candidate for each build type."""
        return {
            build_type: RepositoryCandidate(
                url=self.repo_url(build_type),
                username=self.user,
                password=self.password,
            )
            for build_type in BuildType
        }

    def validate(self) -> None:
        """Validate the configured repository URLs.

        Raises:
            InvalidRepositoryUrlError: If a supplied URL is not absolute.
        """
        for attr, (prop, _) in _NEXUS_SOURCES.items():
            if not attr.endswith("_url"):
                continue
            value = getattr(self, attr)
            if value is not None and not is_absolute_url(value):
                raise InvalidRepositoryUrlError(prop, value)


def can_sign(properties: Mapping[str, str]) -> bool:
    """Return True when all artifact signing properties are present."""
    return all(name in properties for name in SIGNING_PROPERTIES)


def has_plugin_portal_credentials(properties: Mapping[str, str]) -> bool:
    """Return True when the Gradle Plugin Portal key and secret are present."""
    return all(name in properties for name in PLUGIN_PORTAL_PROPERTIES)

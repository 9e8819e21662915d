"""Pydantic models for publication descriptors and repository targets."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


SNAPSHOT_SUFFIX = "-SNAPSHOT"


class PomLicense(str, Enum):
    """Licenses under which C Thing Software artifacts are published."""

    ASL2 = "ASL2"
    GPL2 = "GPL2"
    INTERNAL = "INTERNAL"
    JETBRAINS = "JETBRAINS"
    MIT = "MIT"


class CISystem(str, Enum):
    """Continuous integration systems that can build a project."""

    NONE = "none"
    GITHUB_ACTIONS = "github-actions"
    CTHING_JENKINS = "cthing-jenkins"


class BuildType(str, Enum):
    """Snapshot or release classification of a build."""

    SNAPSHOT = "snapshot"
    RELEASE = "release"

    @classmethod
    def from_version(cls, version: str) -> BuildType:
        """Classify a version string.

        Returns:
            SNAPSHOT for versions ending in `-SNAPSHOT` (any case), otherwise RELEASE.
        """
        if version.strip().upper().endswith(SNAPSHOT_SUFFIX):
            return cls.SNAPSHOT
        return cls.RELEASE


class Unconfigured(Enum):
    """Marker returned when no repository is configured for a build type."""

    UNCONFIGURED = "unconfigured"

    def __repr__(self) -> str:
        return "UNCONFIGURED"


UNCONFIGURED = Unconfigured.UNCONFIGURED


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class Developer(_Frozen):
    """A project developer."""

    id: str = Field(..., min_length=1)
    name: str
    email: str


class ProjectIdentity(_Frozen):
    """Project facts supplied by the build orchestrator.

    The name is validated by the assembler rather than here so that a bad
    name is reported as `InvalidProjectNameError`.
    """

    name: str
    description: str | None = None
    group: str | None = None
    version: str | None = None
    build_date: str | None = None
    build_number: str | None = None


class ArtifactCoordinate(_Frozen):
    """Maven coordinates of a resolved artifact, with optional classifier and extension."""

    group_id: str = Field(..., min_length=1)
    artifact_id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    classifier: str | None = None
    extension: str | None = None

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `group:artifact:version[:classifier][@extension]`.
            The extension is omitted when it is `jar` or unset.
        """
        text = f"{self.group_id}:{self.artifact_id}:{self.version}"
        if self.classifier is not None:
            text += f":{self.classifier}"
        if self.extension is not None and self.extension != "jar":
            text += f"@{self.extension}"
        return text


class OrganizationBlock(_Frozen):
    name: str
    url: str


class LicenseBlock(_Frozen):
    name: str
    url: str


class DeveloperBlock(_Frozen):
    id: str
    name: str
    email: str
    organization: str
    organization_url: str


class ScmBlock(_Frozen):
    """Source control URLs in Maven form.

    `https_url` and `ssh_url` are the raw clone URLs; they are unset when
    the block was derived from a remote that does not provide them.
    """

    url: str
    connection: str
    developer_connection: str
    https_url: str | None = None
    ssh_url: str | None = None


class IssueManagementBlock(_Frozen):
    system: str
    url: str


class CIManagementBlock(_Frozen):
    system: str
    url: str | None = None


class PublicationDescriptor(_Frozen):
    """Complete publication metadata for one artifact."""

    name: str
    description: str | None = None
    url: str
    group: str | None = None
    version: str | None = None
    organization: OrganizationBlock
    license: LicenseBlock
    developers: tuple[DeveloperBlock, ...] = ()
    scm: ScmBlock
    issue_management: IssueManagementBlock
    ci_management: CIManagementBlock | None = None
    properties: tuple[tuple[str, str], ...] = ()

    def properties_dict(self) -> dict[str, str]:
        """Return the custom properties as a new ordered dict."""
        return dict(self.properties)


class RepositoryCandidate(_Frozen):
    """A possibly incomplete repository configuration. `None` means unset."""

    url: str | None = None
    username: str | None = None
    password: str | None = Field(default=None, repr=False)


class RepositoryCredentials(_Frozen):
    """A fully configured upload target."""

    url: str
    username: str
    password: str = Field(..., repr=False)


class ResolvedArtifact(_Frozen):
    """An artifact file of a resolved dependency, as reported by the build tool."""

    name: str
    classifier: str | None = None
    extension: str | None = None


class ResolvedModule(_Frozen):
    """A first-level resolved dependency and its transitive children."""

    group: str
    module: str
    version: str
    artifacts: tuple[ResolvedArtifact, ...] = ()
    children: tuple[ResolvedModule, ...] = ()

"""Assemble publication descriptors for C Thing Software artifacts."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from cthing_publishing.config import DEFAULT_CONFIG, PublishingConfig
from cthing_publishing.exceptions import InvalidProjectNameError
from cthing_publishing.licenses import resolve_license
from cthing_publishing.models import (
    CIManagementBlock,
    CISystem,
    Developer,
    DeveloperBlock,
    IssueManagementBlock,
    OrganizationBlock,
    PomLicense,
    ProjectIdentity,
    PublicationDescriptor,
)
from cthing_publishing.scm import canonical_scm

log = logging.getLogger(__name__)


_PROJECT_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")

BUILD_DATE_PROPERTY = "cthing.build.date"
BUILD_NUMBER_PROPERTY = "cthing.build.number"
DEPENDENCIES_PROPERTY = "cthing.dependencies"
GRADLE_PLUGINS_PROPERTY = "cthing.gradle.plugins"


def validate_project_name(name: str) -> str:
    """Check that a project name can be used as a URL path segment.

    Raises:
        InvalidProjectNameError: If the name is empty or contains unsafe characters.

    Returns:
        The name, unchanged.
    """
    if not isinstance(name, str) or not name:
        raise InvalidProjectNameError(name, "must not be empty")
    if not _PROJECT_NAME_RE.fullmatch(name):
        raise InvalidProjectNameError(
            name,
            "must start with a letter or digit and contain only letters, digits, '.', '_' or '-'",
        )
    return name


class PomAssembler:
    """Builds `PublicationDescriptor` values from project facts.

    The assembler holds only the injected organization constants, so one
    instance may be shared by any number of builds.
    """

    def __init__(self, config: PublishingConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def assemble(
        self,
        identity: ProjectIdentity,
        license: PomLicense | str = PomLicense.ASL2,
        *,
        ci_system: CISystem = CISystem.GITHUB_ACTIONS,
        developers: Iterable[Developer] | None = None,
        dependencies: Iterable[str] = (),
        plugins: Iterable[str] = (),
    ) -> PublicationDescriptor:
        """Build the descriptor for one publication.

        Args:
            identity: Project facts from the build.
            license: License choice; a `PomLicense` or its name.
            ci_system: CI system that builds the project.
            developers: Developers to list; the configured developers when None.
            dependencies: Compact coordinates of organization dependencies.
            plugins: Gradle plugin ids the project publishes.

        Raises:
            UnknownLicenseError: If the license is not supported.
            InvalidProjectNameError: If the project name is empty or unsafe for URLs.

        Returns:
            A new immutable descriptor.
        """
        name = validate_project_name(identity.name)
        license_info = resolve_license(license)
        cfg = self.config

        scm = canonical_scm(cfg, name)
        organization = OrganizationBlock(name=cfg.organization_name, url=cfg.organization_url)

        descriptor = PublicationDescriptor(
            name=name,
            description=identity.description,
            url=scm.url,
            group=identity.group,
            version=identity.version,
            organization=organization,
            license=license_info,
            developers=self._developer_blocks(cfg.developers if developers is None else developers),
            scm=scm,
            issue_management=IssueManagementBlock(system=cfg.issue_system, url=f"{scm.url}/issues"),
            ci_management=self._ci_block(ci_system, name, scm.url),
            properties=self._properties(identity, dependencies, plugins),
        )
        log.debug("Assembled descriptor for %s (license=%s, ci=%s)", name, license_info.name, ci_system.value)
        return descriptor

    def _developer_blocks(self, developers: Iterable[Developer]) -> tuple[DeveloperBlock, ...]:
        by_id: dict[str, Developer] = {}
        for dev in developers:
            by_id.setdefault(dev.id, dev)
        return tuple(
            DeveloperBlock(
                id=dev.id,
                name=dev.name,
                email=dev.email,
                organization=self.config.organization_name,
                organization_url=self.config.organization_url,
            )
            for _, dev in sorted(by_id.items())
        )

    def _ci_block(self, ci_system: CISystem, name: str, browse_url: str) -> CIManagementBlock | None:
        match ci_system:
            case CISystem.GITHUB_ACTIONS:
                return CIManagementBlock(system="GitHub Actions", url=f"{browse_url}/actions")
            case CISystem.CTHING_JENKINS:
                return CIManagementBlock(
                    system=f"{self.config.organization_name} Jenkins",
                    url=f"{self.config.jenkins_url}/job/{name}/",
                )
            case CISystem.NONE:
                return None
            case _:
                raise ValueError(f"Unsupported CI system: {ci_system!r}")

    @staticmethod
    def _properties(
        identity: ProjectIdentity,
        dependencies: Iterable[str],
        plugins: Iterable[str],
    ) -> tuple[tuple[str, str], ...]:
        props: list[tuple[str, str]] = []
        if identity.build_date:
            props.append((BUILD_DATE_PROPERTY, identity.build_date))
        if identity.build_number:
            props.append((BUILD_NUMBER_PROPERTY, identity.build_number))
        deps = sorted(set(dependencies))
        if deps:
            props.append((DEPENDENCIES_PROPERTY, " ".join(deps)))
        plugin_ids = sorted(set(plugins))
        if plugin_ids:
            props.append((GRADLE_PLUGINS_PROPERTY, " ".join(plugin_ids)))
        return tuple(props)


def assemble_pom(
    identity: ProjectIdentity,
    license: PomLicense | str = PomLicense.ASL2,
    **kwargs,
) -> PublicationDescriptor:
    """Assemble a descriptor using the default organization configuration."""
    return PomAssembler().assemble(identity, license, **kwargs)

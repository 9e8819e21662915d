"""Collect organization dependencies and plugin ids for descriptor properties."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath

from cthing_publishing.config import PublishingConfig
from cthing_publishing.models import ArtifactCoordinate, ResolvedModule


GRADLE_PLUGIN_SUFFIX = ".gradle.plugin"


def is_gradle_plugin_marker(module: str) -> bool:
    """Return True if a module name is a Gradle plugin marker."""
    return module.endswith(GRADLE_PLUGIN_SUFFIX)


def normalize_artifact_name(name: str) -> str:
    """Reduce an absolute artifact path to its file name."""
    if name.startswith("/"):
        return PurePath(name).name
    return name


def _coordinates(module: ResolvedModule) -> Iterable[ArtifactCoordinate]:
    for artifact in module.artifacts:
        yield ArtifactCoordinate(
            group_id=module.group,
            artifact_id=normalize_artifact_name(artifact.name),
            version=module.version,
            classifier=artifact.classifier,
            extension=artifact.extension,
        )


def collect_dependencies(
    config: PublishingConfig,
    project_group: str | None,
    project_name: str,
    resolved: Iterable[ResolvedModule],
) -> list[str]:
    """Return the organization artifacts a project directly depends on.

    A plugin marker is replaced by its children, which are the plugin
    implementation artifacts. Dependencies on the project itself are skipped.

    Args:
        config: Organization constants (supplies the organization groups).
        project_group: Group of the project being published.
        project_name: Name of the project being published.
        resolved: First-level resolved dependencies.

    Returns:
        Sorted, unique compact coordinates.
    """
    found: set[str] = set()
    for module in resolved:
        targets = module.children if is_gradle_plugin_marker(module.module) else (module,)
        for target in targets:
            if target.group not in config.organization_groups:
                continue
            if target.group == project_group and target.module == project_name:
                continue
            found.update(c.compact() for c in _coordinates(target))
    return sorted(found)


def collect_plugin_ids(config: PublishingConfig, plugin_ids: Iterable[str]) -> list[str]:
    """Return the organization's Gradle plugin ids, sorted and unique."""
    return sorted(
        {pid for pid in plugin_ids if any(pid.startswith(group) for group in config.organization_groups)}
    )

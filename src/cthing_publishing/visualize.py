"""Rich rendering utilities for publication descriptors."""

from __future__ import annotations

from rich.tree import Tree

from cthing_publishing.models import PublicationDescriptor, RepositoryCredentials


def build_descriptor_tree(descriptor: PublicationDescriptor) -> Tree:
    """Build a Rich Tree showing every block of a descriptor.

    Args:
        descriptor: Assembled publication descriptor.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(f"[bold]{descriptor.name}[/bold]")
    if descriptor.description:
        root.add(f"[dim]{descriptor.description}[/dim]")
    if descriptor.group or descriptor.version:
        root.add(f"coordinates: {descriptor.group or '?'}:{descriptor.name}:{descriptor.version or '?'}")
    root.add(f"url: {descriptor.url}")
    root.add(f"organization: {descriptor.organization.name} ({descriptor.organization.url})")
    root.add(f"license: {descriptor.license.name} ({descriptor.license.url})")

    devs = root.add("developers")
    if not descriptor.developers:
        devs.add("[dim]None[/dim]")
    for dev in descriptor.developers:
        devs.add(f"{dev.id}: {dev.name} <{dev.email}>")

    scm = root.add("scm")
    scm.add(f"connection: {descriptor.scm.connection}")
    scm.add(f"developerConnection: {descriptor.scm.developer_connection}")
    scm.add(f"url: {descriptor.scm.url}")

    root.add(f"issues: {descriptor.issue_management.system} ({descriptor.issue_management.url})")
    if descriptor.ci_management is not None:
        ci = descriptor.ci_management
        root.add(f"ci: {ci.system}" + (f" ({ci.url})" if ci.url else ""))

    if descriptor.properties:
        props = root.add("properties")
        for key, value in descriptor.properties:
            props.add(f"{key} = {value}")
    return root


def describe_repository(credentials: RepositoryCredentials) -> str:
    """Return a one-line, password-masked summary of a repository target."""
    return f"{credentials.url} (user: {credentials.username}, password: ****)"

"""Typer CLI entry point for C Thing Software publishing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from cthing_publishing.config import NexusProperties
from cthing_publishing.dependencies import collect_plugin_ids
from cthing_publishing.exceptions import PublishingError
from cthing_publishing.models import (
    BuildType,
    CISystem,
    ProjectIdentity,
    PublicationDescriptor,
    Unconfigured,
)
from cthing_publishing.pom import PomAssembler
from cthing_publishing.pom_xml import pom_to_string
from cthing_publishing.repository import select_repository
from cthing_publishing.scm import read_git_remote, scm_from_remote
from cthing_publishing.visualize import build_descriptor_tree, describe_repository

app = typer.Typer(add_completion=False, help="Build C Thing Software publication metadata.")
console = Console()

NameArg = Annotated[str, typer.Argument(help="Project name (used in repository URLs).")]
DescriptionOpt = Annotated[Optional[str], typer.Option("--description", help="Project description.")]
GroupOpt = Annotated[Optional[str], typer.Option("--group", help="Project group.")]
VersionOpt = Annotated[Optional[str], typer.Option("--version", help="Project version.")]
LicenseOpt = Annotated[str, typer.Option("--license", help="License, e.g. ASL2, MIT or Apache-2.0.")]
CIOpt = Annotated[CISystem, typer.Option("--ci", help="CI system that builds the project.")]
BuildDateOpt = Annotated[Optional[str], typer.Option("--build-date", help="ISO-8601 build date.")]
BuildNumberOpt = Annotated[Optional[str], typer.Option("--build-number", help="Build number.")]
DependencyOpt = Annotated[
    Optional[list[str]],
    typer.Option("--dependency", help="Organization dependency coordinate (repeatable)."),
]
PluginOpt = Annotated[
    Optional[list[str]],
    typer.Option("--plugin", help="Published plugin id (repeatable); non-organization ids are dropped."),
]


@app.callback()
def _main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _error(exc: Exception) -> typer.Exit:
    console.print(f"[bold red]Error:[/bold red] {exc}")
    return typer.Exit(code=1)


def _assemble(
    name: str,
    description: str | None,
    group: str | None,
    version: str | None,
    license: str,
    ci: CISystem,
    build_date: str | None,
    build_number: str | None,
    dependency: list[str] | None,
    plugin: list[str] | None,
) -> PublicationDescriptor:
    identity = ProjectIdentity(
        name=name,
        description=description,
        group=group,
        version=version,
        build_date=build_date,
        build_number=build_number,
    )
    assembler = PomAssembler()
    return assembler.assemble(
        identity,
        license,
        ci_system=ci,
        dependencies=dependency or (),
        plugins=collect_plugin_ids(assembler.config, plugin or ()),
    )


@app.command()
def describe(
    name: NameArg,
    description: DescriptionOpt = None,
    group: GroupOpt = None,
    version: VersionOpt = None,
    license: LicenseOpt = "ASL2",
    ci: CIOpt = CISystem.GITHUB_ACTIONS,
    build_date: BuildDateOpt = None,
    build_number: BuildNumberOpt = None,
    dependency: DependencyOpt = None,
    plugin: PluginOpt = None,
) -> None:
    """Print the publication descriptor as a tree."""
    try:
        descriptor = _assemble(
            name, description, group, version, license, ci, build_date, build_number, dependency, plugin
        )
    except PublishingError as exc:
        raise _error(exc) from None
    console.print(build_descriptor_tree(descriptor))


@app.command()
def pom(
    name: NameArg,
    description: DescriptionOpt = None,
    group: GroupOpt = None,
    version: VersionOpt = None,
    license: LicenseOpt = "ASL2",
    ci: CIOpt = CISystem.GITHUB_ACTIONS,
    build_date: BuildDateOpt = None,
    build_number: BuildNumberOpt = None,
    dependency: DependencyOpt = None,
    plugin: PluginOpt = None,
) -> None:
    """Print the POM metadata fragment as XML."""
    try:
        descriptor = _assemble(
            name, description, group, version, license, ci, build_date, build_number, dependency, plugin
        )
    except PublishingError as exc:
        raise _error(exc) from None
    typer.echo(pom_to_string(descriptor), nl=False)


def _parse_properties(pairs: list[str]) -> dict[str, str]:
    props: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got {pair!r}", param_hint="--property")
        props[key.strip()] = value
    return props


@app.command()
def repository(
    version: Annotated[
        Optional[str],
        typer.Option("--version", help="Project version; -SNAPSHOT versions are snapshot builds."),
    ] = None,
    build_type: Annotated[
        Optional[BuildType],
        typer.Option("--build-type", help="Build type (overrides --version)."),
    ] = None,
    prop: Annotated[
        Optional[list[str]],
        typer.Option("--property", "-P", help="Project property key=value (repeatable)."),
    ] = None,
) -> None:
    """Show the repository a build would publish to.

    Reads cthing.nexus.* properties when given, otherwise CTHING_NEXUS_* environment variables.
    """
    if build_type is None:
        build_type = BuildType.from_version(version) if version else BuildType.SNAPSHOT

    nexus = NexusProperties.from_properties(_parse_properties(prop)) if prop else NexusProperties.from_env()
    try:
        nexus.validate()
        result = select_repository(build_type, nexus.candidates())
    except PublishingError as exc:
        raise _error(exc) from None

    if isinstance(result, Unconfigured):
        console.print(f"[dim]No {build_type.value} repository configured; remote publishing is skipped.[/dim]")
        return
    console.print(f"[green]{build_type.value}[/green] {describe_repository(result)}")


@app.command()
def scm(
    root: Annotated[Path, typer.Argument(help="Root of a git checkout.")] = Path("."),
) -> None:
    """Show SCM URLs derived from a checkout's first git remote."""
    remote = read_git_remote(root)
    if remote is None:
        console.print("[bold red]Error:[/bold red] No git remote found.")
        raise typer.Exit(code=1)

    urls = scm_from_remote(remote)
    table = Table(title=f"SCM for {remote}")
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("connection", urls.connection)
    table.add_row("developerConnection", urls.developer_connection)
    table.add_row("url", urls.url)
    console.print(table)


def main() -> None:
    """Console-script entry point."""
    app()

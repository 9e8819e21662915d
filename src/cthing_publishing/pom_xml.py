"""Render publication descriptors as Maven POM XML using lxml."""

from __future__ import annotations

from lxml import etree

from cthing_publishing.models import PublicationDescriptor


def _child(parent: etree._Element, tag: str, text: str | None) -> None:
    if text is not None:
        etree.SubElement(parent, tag).text = text


def render_pom(descriptor: PublicationDescriptor) -> etree._Element:
    """Build a `<project>` element holding the descriptor's metadata.

    Only the metadata sections are produced; coordinates, dependencies and
    packaging belong to the build tool's own POM generation.

    Args:
        descriptor: Assembled publication descriptor.

    Returns:
        Root `<project>` element (no namespace).
    """
    project = etree.Element("project")
    _child(project, "name", descriptor.name)
    _child(project, "description", descriptor.description)
    _child(project, "url", descriptor.url)

    org = etree.SubElement(project, "organization")
    _child(org, "name", descriptor.organization.name)
    _child(org, "url", descriptor.organization.url)

    lic = etree.SubElement(etree.SubElement(project, "licenses"), "license")
    _child(lic, "name", descriptor.license.name)
    _child(lic, "url", descriptor.license.url)

    devs = etree.SubElement(project, "developers")
    for dev in descriptor.developers:
        node = etree.SubElement(devs, "developer")
        _child(node, "id", dev.id)
        _child(node, "name", dev.name)
        _child(node, "email", dev.email)
        _child(node, "organization", dev.organization)
        _child(node, "organizationUrl", dev.organization_url)

    scm = etree.SubElement(project, "scm")
    _child(scm, "connection", descriptor.scm.connection)
    _child(scm, "developerConnection", descriptor.scm.developer_connection)
    _child(scm, "url", descriptor.scm.url)

    issues = etree.SubElement(project, "issueManagement")
    _child(issues, "system", descriptor.issue_management.system)
    _child(issues, "url", descriptor.issue_management.url)

    if descriptor.ci_management is not None:
        ci = etree.SubElement(project, "ciManagement")
        _child(ci, "system", descriptor.ci_management.system)
        _child(ci, "url", descriptor.ci_management.url)

    if descriptor.properties:
        props = etree.SubElement(project, "properties")
        for key, value in descriptor.properties:
            _child(props, key, value)

    return project


def pom_to_string(descriptor: PublicationDescriptor) -> str:
    """Serialize the descriptor's POM fragment as pretty-printed XML."""
    return etree.tostring(render_pom(descriptor), pretty_print=True, encoding="unicode")

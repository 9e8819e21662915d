from __future__ import annotations

import pytest

from cthing_publishing.config import (
    DEFAULT_CONFIG,
    NexusProperties,
    can_sign,
    has_plugin_portal_credentials,
    is_absolute_url,
)
from cthing_publishing.exceptions import InvalidRepositoryUrlError
from cthing_publishing.models import BuildType, RepositoryCandidate


PROPERTIES = {
    "cthing.nexus.user": "joe",
    "cthing.nexus.password": "secret",
    "cthing.nexus.snapshotsUrl": "https://nexus.cthing.com/repository/snapshots/",
    "cthing.nexus.candidatesUrl": "https://nexus.cthing.com/repository/candidates/",
    "cthing.nexus.releasesUrl": "https://nexus.cthing.com/repository/releases/",
    "cthing.nexus.sitesUrl": "https://nexus.cthing.com/repository/sites/",
}


def test_default_config() -> None:
    assert DEFAULT_CONFIG.organization_name == "C Thing Software"
    assert DEFAULT_CONFIG.scm_base_url == "https://github.com/cthing"
    assert DEFAULT_CONFIG.organization_groups == {"org.cthing", "com.cthing"}
    assert DEFAULT_CONFIG.plugin_id == "org.cthing.cthing-publishing"
    assert DEFAULT_CONFIG.plugin_coordinate("2.0.0") == "org.cthing:gradle-cthing-publishing:2.0.0"


def test_from_properties() -> None:
    nexus = NexusProperties.from_properties(PROPERTIES)

    assert nexus.user == "joe"
    assert nexus.password == "secret"
    assert nexus.releases_url == "https://nexus.cthing.com/repository/releases/"
    assert nexus.site_url == "https://nexus.cthing.com/repository/sites/"
    assert nexus.download_url is None
    assert nexus.apt_snapshots_url is None
    assert nexus.has_credentials()


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CTHING_NEXUS_USER", "joe")
    monkeypatch.setenv("CTHING_NEXUS_SNAPSHOTS_URL", "https://nexus.cthing.com/snapshots")

    nexus = NexusProperties.from_env()

    assert nexus.user == "joe"
    assert nexus.password is None
    assert nexus.snapshots_url == "https://nexus.cthing.com/snapshots"
    assert not nexus.has_credentials()


def test_repo_url_by_build_type() -> None:
    nexus = NexusProperties.from_properties(PROPERTIES)

    assert nexus.repo_url(BuildType.SNAPSHOT) == PROPERTIES["cthing.nexus.snapshotsUrl"]
    assert nexus.repo_url(BuildType.RELEASE) == PROPERTIES["cthing.nexus.candidatesUrl"]


def test_candidates() -> None:
    candidates = NexusProperties.from_properties(PROPERTIES).candidates()

    assert candidates == {
        BuildType.SNAPSHOT: RepositoryCandidate(
            url=PROPERTIES["cthing.nexus.snapshotsUrl"], username="joe", password="secret"
        ),
        BuildType.RELEASE: RepositoryCandidate(
            url=PROPERTIES["cthing.nexus.candidatesUrl"], username="joe", password="secret"
        ),
    }


def test_candidates_when_nothing_configured() -> None:
    candidates = NexusProperties().candidates()
    assert all(c.url is None for c in candidates.values())


def test_validate_accepts_configured_urls() -> None:
    NexusProperties.from_properties(PROPERTIES).validate()
    NexusProperties().validate()


def test_validate_rejects_relative_url() -> None:
    nexus = NexusProperties(snapshots_url="nexus/snapshots")
    with pytest.raises(InvalidRepositoryUrlError) as excinfo:
        nexus.validate()
    assert excinfo.value.field == "cthing.nexus.snapshotsUrl"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://nexus.cthing.com/repo", True),
        ("http://localhost:8081", True),
        ("file:///tmp/repo", True),
        ("", False),
        (None, False),
        ("/tmp/repo", False),
        ("https://", False),
        ("s3://bucket/repo", False),
    ],
)
def test_is_absolute_url(url: str | None, expected: bool) -> None:
    assert is_absolute_url(url) is expected


@pytest.mark.parametrize(
    ("props", "expected"),
    [
        ({}, False),
        ({"signing.keyId": "abcd"}, False),
        ({"signing.keyId": "abcd", "signing.password": "efgh"}, False),
        ({"signing.keyId": "abcd", "signing.password": "efgh", "signing.secretKeyRingFile": "wxyz"}, True),
    ],
)
def test_can_sign(props: dict[str, str], expected: bool) -> None:
    assert can_sign(props) is expected


@pytest.mark.parametrize(
    ("props", "expected"),
    [
        ({}, False),
        ({"gradle.publish.key": "abcd"}, False),
        ({"gradle.publish.secret": "efgh"}, False),
        ({"gradle.publish.key": "abcd", "gradle.publish.secret": "efgh"}, True),
    ],
)
def test_plugin_portal_credentials(props: dict[str, str], expected: bool) -> None:
    assert has_plugin_portal_credentials(props) is expected


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("1.2.3-SNAPSHOT", BuildType.SNAPSHOT),
        ("1.2.3-snapshot", BuildType.SNAPSHOT),
        ("1.2.3", BuildType.RELEASE),
        ("1.2.3-RC1", BuildType.RELEASE),
    ],
)
def test_build_type_from_version(version: str, expected: BuildType) -> None:
    assert BuildType.from_version(version) is expected

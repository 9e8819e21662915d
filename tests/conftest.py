"""Pytest configuration and fixtures for cthing-publishing tests."""
from __future__ import annotations

import os

import pytest

from cthing_publishing.config import PublishingConfig
from cthing_publishing.models import ProjectIdentity
from cthing_publishing.pom import PomAssembler


@pytest.fixture
def config() -> PublishingConfig:
    return PublishingConfig()


@pytest.fixture
def assembler(config: PublishingConfig) -> PomAssembler:
    return PomAssembler(config)


@pytest.fixture
def identity() -> ProjectIdentity:
    return ProjectIdentity(name="test")


@pytest.fixture(autouse=True)
def clear_nexus_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CTHING_NEXUS_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("CTHING_NEXUS_"):
            monkeypatch.delenv(key)

"""Custom exceptions for C Thing Software publishing."""

from __future__ import annotations

from typing import Any


class PublishingError(Exception):
    """Base exception for publication configuration errors.

    Attributes:
        field: Name of the offending input field, when known.
        value: The offending value, when known.
    """

    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class UnknownLicenseError(PublishingError):
    """Raised when a license choice is not one of the supported licenses."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown license: {value!r}", field="license", value=value)


class InvalidProjectNameError(PublishingError):
    """Raised when a project name is empty or cannot be used in a URL path."""

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"Invalid project name {value!r}: {reason}", field="name", value=value)


class MissingCredentialsError(PublishingError):
    """Raised when a repository URL is configured without a username or password."""

    def __init__(self, field: str, *, build_type: str, url: str) -> None:
        super().__init__(
            f"Repository {url} for {build_type} builds is configured but {field} is not set",
            field=field,
            value=None,
        )
        self.build_type = build_type
        self.url = url


class InvalidRepositoryUrlError(PublishingError):
    """Raised when a configured repository URL is empty or not absolute."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid repository URL for {field}: {value!r}", field=field, value=value)

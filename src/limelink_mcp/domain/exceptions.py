from __future__ import annotations

from collections.abc import Iterable


class LimelinkMcpError(Exception):
    """Base exception for all Limelink MCP errors."""


class ValidationError(LimelinkMcpError):
    """Raised when input parameters fail validation before any network call."""


class InvalidDocSlugError(ValidationError):
    """Raised when a documentation slug is not one of the known pages."""

    def __init__(self, slug: str, valid_slugs: Iterable[str]) -> None:
        self.slug = slug
        self.valid_slugs = tuple(valid_slugs)
        super().__init__(
            f'Invalid documentation slug: "{slug}". '
            f"Valid slugs: {', '.join(self.valid_slugs)}"
        )


class ConfigurationError(LimelinkMcpError):
    """Raised when a required setting (API key, project id) is missing."""


class ApiError(LimelinkMcpError):
    """Raised when an upstream Limelink endpoint returns an unexpected HTTP error status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        self.status_code = status_code
        super().__init__(message or f"Upstream API error ({status_code})")


class DocumentFetchError(ApiError):
    """Raised when a documentation page cannot be fetched from limelink.org."""

    def __init__(self, resource: str, status_code: int, reason: str = "") -> None:
        self.resource = resource
        status = f"HTTP {status_code} {reason}".rstrip()
        super().__init__(status_code, f"Failed to fetch {resource}: {status}")

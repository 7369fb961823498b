from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class NotInstalledOptions(BaseModel):
    """Fallback behaviour when the target app is not installed."""

    custom_url: str = Field(max_length=500, description="Redirect URL when the app is not installed")


class PlatformOptions(BaseModel):
    """iOS or Android deep linking options for a dynamic link."""

    application_id: str = Field(
        max_length=100, description="Application ID registered in the Limelink dashboard"
    )
    request_uri: str | None = Field(default=None, description="Deep link path inside the app")
    not_installed_options: NotInstalledOptions | None = None


class AdditionalOptions(BaseModel):
    """Social preview and UTM tracking options."""

    preview_title: str = Field(max_length=100, description="Social preview title")
    preview_description: str = Field(max_length=200, description="Social preview description")
    preview_image_url: str = Field(max_length=500, description="Social preview image URL")
    utm_source: str | None = Field(default=None, description="UTM source parameter")
    utm_medium: str | None = Field(default=None, description="UTM medium parameter")
    utm_campaign: str | None = Field(default=None, description="UTM campaign parameter")


class CreateLinkRequest(BaseModel):
    """Payload for POST /core/link."""

    dynamic_link_suffix: str = Field(max_length=50)
    dynamic_link_url: str = Field(max_length=500)
    dynamic_link_name: str = Field(max_length=100)
    project_id: str
    stats_flag: bool | None = None  # omitted from the payload when None
    apple_options: PlatformOptions | None = None
    android_options: PlatformOptions | None = None
    additional_options: AdditionalOptions | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body, dropping every field (and nested field) left unset."""
        return self.model_dump(exclude_none=True)

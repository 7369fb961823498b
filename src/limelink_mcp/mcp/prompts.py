from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from limelink_mcp.domain.value_objects import LinkPlatform, SdkPlatform

_LINK_PLATFORM_INSTRUCTIONS = {
    LinkPlatform.IOS: (
        "Configure apple_options with the iOS application_id and appropriate request_uri. "
        "Set not_installed_options.custom_url to the App Store link."
    ),
    LinkPlatform.ANDROID: (
        "Configure android_options with the Android application_id and appropriate request_uri. "
        "Set not_installed_options.custom_url to the Play Store link."
    ),
    LinkPlatform.BOTH: (
        "Configure both apple_options and android_options with their respective application_ids "
        "and request_uris. Set not_installed_options.custom_url for each platform's store link."
    ),
    LinkPlatform.WEB: (
        "No platform-specific options needed. "
        "The link will redirect to the target URL on all platforms."
    ),
}

_IOS_GUIDE = """## iOS Setup

1. Read the iOS SDK documentation using the `limelink://docs/ios-sdk` resource.
2. Follow the SDK integration steps:
   - Install the LimeLink iOS SDK via CocoaPods or Swift Package Manager
   - Configure the URL scheme and associated domains
   - Initialize the SDK in your AppDelegate
   - Handle incoming deep links in your app"""

_ANDROID_GUIDE = """## Android Setup

1. Read the Android SDK documentation using the `limelink://docs/android-sdk` resource.
2. Follow the SDK integration steps:
   - Add the LimeLink Android SDK dependency via Gradle
   - Configure intent filters in AndroidManifest.xml
   - Initialize the SDK in your Application class
   - Handle incoming deep links in your Activity"""

_SINGLE_PLATFORM_TEST_STEP = (
    "3. Test deep link handling using a dynamic link created with the `create-link` tool."
)

_CROSS_PLATFORM_TESTING = """## Cross-Platform Testing

Test deep link handling on both platforms using dynamic links created with the `create-link` tool."""


def _parse_link_platform(value: str) -> LinkPlatform:
    try:
        return LinkPlatform(value.lower())
    except ValueError:
        valid = ", ".join(p.value for p in LinkPlatform)
        raise ValueError(f"Unknown platform: {value}. Expected one of: {valid}")


def _parse_sdk_platform(value: str) -> SdkPlatform:
    try:
        return SdkPlatform(value.lower())
    except ValueError:
        valid = ", ".join(p.value for p in SdkPlatform)
        raise ValueError(f"Unknown platform: {value}. Expected one of: {valid}")


def build_create_link_prompt(target_url: str, platforms: str, suffix: str | None = None) -> str:
    """Render the create-dynamic-link guide."""
    platform = _parse_link_platform(platforms)
    suffix_note = (
        f'Use "{suffix}" as the link suffix.'
        if suffix
        else "Generate an appropriate suffix based on the target URL content."
    )
    return f"""Create a Limelink dynamic link with the following requirements:

**Target URL**: {target_url}
**Suffix**: {suffix_note}
**Platforms**: {platform.value}

## Instructions

1. Use the `create-link` tool to create the dynamic link.
2. {_LINK_PLATFORM_INSTRUCTIONS[platform]}
3. Set a descriptive dynamic_link_name based on the target URL content.
4. Enable stats_flag for analytics tracking.
5. Consider adding additional_options with preview_title, preview_description, and preview_image_url for social sharing.

## Important Notes

- The project_id will be resolved from the environment variable if not specified.
- Ensure the suffix is unique and URL-safe (max 50 characters).
- The target URL must be valid and accessible (max 500 characters).
- For platform options, you need the application_id from the Limelink dashboard."""


def build_deep_link_prompt(platform: str) -> str:
    """Render the setup-deep-linking guide with the docs resources relevant to platform."""
    sdk_platform = _parse_sdk_platform(platform)
    if sdk_platform is SdkPlatform.IOS:
        resources = ["limelink://docs/ios-sdk"]
        guide = f"{_IOS_GUIDE}\n{_SINGLE_PLATFORM_TEST_STEP}"
        label = "ios"
    elif sdk_platform is SdkPlatform.ANDROID:
        resources = ["limelink://docs/android-sdk"]
        guide = f"{_ANDROID_GUIDE}\n{_SINGLE_PLATFORM_TEST_STEP}"
        label = "android"
    else:
        resources = ["limelink://docs/ios-sdk", "limelink://docs/android-sdk"]
        guide = f"{_IOS_GUIDE}\n\n{_ANDROID_GUIDE}\n\n{_CROSS_PLATFORM_TESTING}"
        label = "iOS and Android"

    resource_lines = "\n".join(f"- `{uri}`" for uri in resources)
    return f"""Set up Limelink deep linking for {label}.

## Prerequisites

- Read the SDK integration overview from `limelink://docs/sdk-integration` resource first.
- Ensure you have a Limelink project with registered applications for your target platform(s).

{guide}

## Available Resources

The following documentation resources can help:
{resource_lines}
- `limelink://docs/sdk-integration`: General SDK integration overview
- `limelink://docs/dynamic-link`: Dynamic link concepts
- `limelink://docs/create-link`: Link creation guide"""


def register_prompts(mcp: FastMCP) -> None:
    """Bind all @mcp.prompt decorators. Called once during server setup."""

    @mcp.prompt(
        name="create-dynamic-link",
        description="Guide for creating a Limelink dynamic link with platform-specific deep linking",
    )
    def create_dynamic_link(
        target_url: Annotated[str, Field(description="The destination URL for the dynamic link")],
        platforms: Annotated[
            str, Field(description="Target platforms for deep linking: ios, android, both or web")
        ],
        suffix: Annotated[
            str | None,
            Field(description="Custom suffix for the short link (auto-generated if omitted)"),
        ] = None,
    ) -> str:
        return build_create_link_prompt(target_url, platforms, suffix)

    @mcp.prompt(
        name="setup-deep-linking",
        description="Guide for setting up Limelink SDK deep linking on iOS and/or Android",
    )
    def setup_deep_linking(
        platform: Annotated[
            str, Field(description="Target platform(s) for deep link SDK setup: ios, android or both")
        ],
    ) -> str:
        return build_deep_link_prompt(platform)

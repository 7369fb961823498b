from __future__ import annotations

from enum import Enum


class DocSlug(str, Enum):
    """Documentation pages published under https://limelink.org/md/<slug>.md.

    Member order is the order pages are listed to clients.
    """

    INTRODUCTION = "introduction"
    GETTING_STARTED = "getting-started"
    PROJECT = "project"
    APPLICATION = "application"
    DYNAMIC_LINK = "dynamic-link"
    CREATE_LINK = "create-link"
    LINK_DETAIL = "link-detail"
    LINK_MANAGEMENT = "link-management"
    APPEARANCE = "appearance"
    SDK_INTEGRATION = "sdk-integration"
    IOS_SDK = "ios-sdk"
    ANDROID_SDK = "android-sdk"
    API_INTEGRATION = "api-integration"
    ADVANCED = "advanced"
    LLM_AGENT = "llm-agent"


VALID_SLUGS: tuple[str, ...] = tuple(s.value for s in DocSlug)


class LinkPlatform(str, Enum):
    """Target platforms accepted by the create-dynamic-link prompt."""

    IOS = "ios"
    ANDROID = "android"
    BOTH = "both"
    WEB = "web"


class SdkPlatform(str, Enum):
    """Platforms with a Limelink SDK, used by the setup-deep-linking prompt."""

    IOS = "ios"
    ANDROID = "android"
    BOTH = "both"

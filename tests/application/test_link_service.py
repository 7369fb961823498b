"""Tests for LinkService."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from limelink_mcp.application.link_service import LinkService
from limelink_mcp.domain.entities import PlatformOptions
from limelink_mcp.domain.exceptions import ConfigurationError, ValidationError
from limelink_mcp.infrastructure.limelink_client import LimelinkClient


def make_mock_client() -> MagicMock:
    client = MagicMock(spec=LimelinkClient)
    client.create_link = AsyncMock(return_value={"id": "link-1"})
    client.get_link_by_suffix = AsyncMock(return_value={"dynamic_link_suffix": "promo"})
    return client


async def test_create_link_builds_payload() -> None:
    client = make_mock_client()
    service = LinkService(client, default_project_id="proj-env")

    result = await service.create_link(
        dynamic_link_suffix="promo",
        dynamic_link_url="https://example.com",
        dynamic_link_name="Promo",
        stats_flag=True,
        android_options=PlatformOptions(application_id="com.example.app"),
    )

    assert result == {"id": "link-1"}
    client.create_link.assert_awaited_once_with(
        {
            "dynamic_link_suffix": "promo",
            "dynamic_link_url": "https://example.com",
            "dynamic_link_name": "Promo",
            "project_id": "proj-env",
            "stats_flag": True,
            "android_options": {"application_id": "com.example.app"},
        }
    )


async def test_explicit_project_id_wins() -> None:
    client = make_mock_client()
    service = LinkService(client, default_project_id="proj-env")

    await service.get_link_by_suffix("promo", project_id="proj-arg")

    client.get_link_by_suffix.assert_awaited_once_with("proj-arg", "promo")


async def test_missing_api_key() -> None:
    service = LinkService(None, default_project_id="proj-env")

    with pytest.raises(ConfigurationError, match="LIMELINK_API_KEY"):
        await service.get_link_by_suffix("promo")


async def test_missing_project_id() -> None:
    client = make_mock_client()
    service = LinkService(client)

    with pytest.raises(ConfigurationError, match="project_id is required"):
        await service.create_link("promo", "https://example.com", "Promo")
    client.create_link.assert_not_awaited()


async def test_empty_project_id_falls_back_to_default() -> None:
    client = make_mock_client()
    service = LinkService(client, default_project_id="proj-env")

    await service.get_link_by_suffix("promo", project_id="")

    client.get_link_by_suffix.assert_awaited_once_with("proj-env", "promo")


async def test_get_link_by_url_extracts_suffix() -> None:
    client = make_mock_client()
    service = LinkService(client, default_project_id="proj-env")

    await service.get_link_by_url("https://myproject.limelink.org/link/a/b")

    client.get_link_by_suffix.assert_awaited_once_with("proj-env", "a/b")


async def test_get_link_by_url_unrecognised_url() -> None:
    client = make_mock_client()
    service = LinkService(client, default_project_id="proj-env")

    with pytest.raises(ValidationError) as exc_info:
        await service.get_link_by_url("https://example.com/link/promo")

    message = str(exc_info.value)
    assert "https://example.com/link/promo" in message
    assert "https://deep.limelink.org/{suffix}" in message
    assert "https://{project}.limelink.org/link/{suffix}" in message
    client.get_link_by_suffix.assert_not_awaited()


async def test_get_link_by_url_checks_suffix_before_project_id() -> None:
    service = LinkService(make_mock_client())

    with pytest.raises(ValidationError):
        await service.get_link_by_url("not-a-url")


async def test_get_link_by_url_checks_api_key_first() -> None:
    service = LinkService(None)

    with pytest.raises(ConfigurationError, match="LIMELINK_API_KEY"):
        await service.get_link_by_url("not-a-url")


async def test_get_link_by_suffix_empty_suffix() -> None:
    client = make_mock_client()
    service = LinkService(client)

    # Empty suffix is reported before the missing project id
    with pytest.raises(ValidationError, match="suffix cannot be empty"):
        await service.get_link_by_suffix("   ")
    client.get_link_by_suffix.assert_not_awaited()


async def test_get_link_by_suffix_empty_suffix_checks_api_key_first() -> None:
    service = LinkService(None)

    with pytest.raises(ConfigurationError, match="LIMELINK_API_KEY"):
        await service.get_link_by_suffix("")

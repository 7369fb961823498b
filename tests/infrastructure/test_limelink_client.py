"""Tests for LimelinkClient using respx to mock HTTP calls."""
from __future__ import annotations

import json

import httpx
import pytest
import respx

from limelink_mcp.domain.exceptions import ApiError
from limelink_mcp.infrastructure.config import API_BASE_URL
from limelink_mcp.infrastructure.limelink_client import LimelinkClient


def make_client() -> tuple[LimelinkClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient()
    return LimelinkClient(api_key="test-key", http_client=http_client), http_client


@respx.mock
async def test_create_link_posts_body_with_api_key() -> None:
    route = respx.post(f"{API_BASE_URL}/core/link").mock(
        return_value=httpx.Response(201, json={"id": "link-1", "dynamic_link_suffix": "promo"})
    )

    client, http_client = make_client()
    result = await client.create_link({"dynamic_link_suffix": "promo", "project_id": "proj-1"})

    assert result == {"id": "link-1", "dynamic_link_suffix": "promo"}
    request = route.calls[0].request
    assert request.headers["X-API-KEY"] == "test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"dynamic_link_suffix": "promo", "project_id": "proj-1"}
    await http_client.aclose()


@respx.mock
async def test_get_link_by_suffix_query_params() -> None:
    route = respx.get(f"{API_BASE_URL}/dynamic-link/proj-1").mock(
        return_value=httpx.Response(200, json={"dynamic_link_suffix": "a/b"})
    )

    client, http_client = make_client()
    result = await client.get_link_by_suffix("proj-1", "a/b")

    assert result == {"dynamic_link_suffix": "a/b"}
    params = route.calls[0].request.url.params
    assert params["dynamic_link_suffix"] == "a/b"
    assert params["call_type"] == "API"
    await http_client.aclose()


@respx.mock
async def test_lookups_are_not_cached() -> None:
    route = respx.get(f"{API_BASE_URL}/dynamic-link/proj-1").mock(
        return_value=httpx.Response(200, json={})
    )

    client, http_client = make_client()
    await client.get_link_by_suffix("proj-1", "promo")
    await client.get_link_by_suffix("proj-1", "promo")

    assert route.call_count == 2
    await http_client.aclose()


@respx.mock
async def test_error_uses_server_message() -> None:
    respx.post(f"{API_BASE_URL}/core/link").mock(
        return_value=httpx.Response(409, json={"message": "Suffix already exists"})
    )

    client, http_client = make_client()
    with pytest.raises(ApiError) as exc_info:
        await client.create_link({})

    assert exc_info.value.status_code == 409
    assert str(exc_info.value) == "Suffix already exists"
    await http_client.aclose()


@respx.mock
async def test_error_without_message_serializes_body() -> None:
    respx.post(f"{API_BASE_URL}/core/link").mock(
        return_value=httpx.Response(400, json={"errors": ["bad suffix"]})
    )

    client, http_client = make_client()
    with pytest.raises(ApiError) as exc_info:
        await client.create_link({})

    assert json.loads(str(exc_info.value)) == {"errors": ["bad suffix"]}
    await http_client.aclose()


@respx.mock
async def test_error_with_non_json_body() -> None:
    respx.get(f"{API_BASE_URL}/dynamic-link/proj-1").mock(
        return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
    )

    client, http_client = make_client()
    with pytest.raises(ApiError) as exc_info:
        await client.get_link_by_suffix("proj-1", "promo")

    assert exc_info.value.status_code == 502
    assert str(exc_info.value) == "HTTP 502: Bad Gateway"
    await http_client.aclose()


@respx.mock
async def test_success_with_non_json_body_raises_api_error() -> None:
    respx.get(f"{API_BASE_URL}/dynamic-link/proj-1").mock(
        return_value=httpx.Response(200, text="<html>maintenance</html>")
    )

    client, http_client = make_client()
    with pytest.raises(ApiError) as exc_info:
        await client.get_link_by_suffix("proj-1", "promo")

    assert exc_info.value.status_code == 200
    assert "Invalid JSON response" in str(exc_info.value)
    await http_client.aclose()

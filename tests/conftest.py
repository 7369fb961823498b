"""Shared pytest fixtures for the Limelink MCP Server test suite."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class MockMcp:
    """Stand-in for FastMCP that captures decorated functions by name or URI."""

    def __init__(self) -> None:
        self.tools: dict[str, Callable[..., Any]] = {}
        self.resources: dict[str, Callable[..., Any]] = {}
        self.resource_meta: dict[str, dict[str, Any]] = {}
        self.prompts: dict[str, Callable[..., Any]] = {}

    def tool(self, name: str | None = None, **kwargs: Any):  # type: ignore[no-untyped-def]
        def decorator(fn):  # type: ignore[no-untyped-def]
            self.tools[name or fn.__name__] = fn
            return fn
        return decorator

    def resource(self, uri: str, **kwargs: Any):  # type: ignore[no-untyped-def]
        def decorator(fn):  # type: ignore[no-untyped-def]
            self.resources[uri] = fn
            self.resource_meta[uri] = kwargs
            return fn
        return decorator

    def prompt(self, name: str | None = None, **kwargs: Any):  # type: ignore[no-untyped-def]
        def decorator(fn):  # type: ignore[no-untyped-def]
            self.prompts[name or fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def mock_mcp() -> MockMcp:
    return MockMcp()


@pytest.fixture
def sample_link() -> dict:  # type: ignore[type-arg]
    """Sample link record matching the Limelink /dynamic-link response schema."""
    return {
        "id": "link-1",
        "project_id": "proj-1",
        "dynamic_link_suffix": "promo",
        "dynamic_link_url": "https://example.com/sale",
        "dynamic_link_name": "Spring sale",
        "stats_flag": True,
    }

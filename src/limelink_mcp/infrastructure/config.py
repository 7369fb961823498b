"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

API_BASE_URL = "https://api.limelink.org/api/v1"
DOCS_BASE_URL = "https://limelink.org"


@dataclass(frozen=True)
class Config:
    """Limelink credentials. Both values are optional at startup.

    Without api_key the link tools report a configuration error, while the
    documentation resources and prompts keep working.
    """

    api_key: str | None = None
    project_id: str | None = None  # default project for tools called without one

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        # Empty strings count as unset
        return cls(
            api_key=env.get("LIMELINK_API_KEY") or None,
            project_id=env.get("LIMELINK_PROJECT_ID") or None,
        )

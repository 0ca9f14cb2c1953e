"""Client settings with env-var overrides."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .config_loader import ConfigLoader

DEFAULT_BASE_URL = "https://api.workos.com"


@dataclass
class ClientSettings:
    api_key: str
    config_loader: ConfigLoader
    base_url: str = DEFAULT_BASE_URL
    client_id: Optional[str] = None
    webhook_secret: Optional[str] = None


def load_client_settings(
    config_file: Optional[str] = None,
    env_file: Optional[str] = ".env",
    api_key: Optional[str] = None,
) -> ClientSettings:
    """Load settings; WORKOS_* env vars override the JSON ``workos`` section."""

    config_loader = ConfigLoader(config_file=config_file, env_file=env_file)

    settings = ClientSettings(
        api_key=api_key or os.getenv("WORKOS_API_KEY", "") or config_loader.get("workos.api_key", ""),
        config_loader=config_loader,
        base_url=os.getenv("WORKOS_BASE_URL", "") or config_loader.get("workos.base_url", DEFAULT_BASE_URL),
        client_id=os.getenv("WORKOS_CLIENT_ID") or config_loader.get("workos.client_id"),
        webhook_secret=os.getenv("WORKOS_WEBHOOK_SECRET") or config_loader.get("workos.webhook_secret"),
    )

    if not settings.api_key:
        raise ValueError("api_key is required via config file or WORKOS_API_KEY env var")

    return settings

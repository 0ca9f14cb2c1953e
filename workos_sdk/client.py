"""Async WorkOS API client built on a shared aiohttp session."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import urlparse

import aiohttp

from .admin_portal import AdminPortal
from .auth import WorkOsAuthenticator
from .config import DEFAULT_BASE_URL, ClientSettings, ConfigLoader
from .core import ApiResponse, RequestError
from .directory_sync import DirectorySync
from .mfa import Mfa
from .organizations import Organizations
from .passwordless import Passwordless
from .sso import Sso
from .user_management import UserManagement

logger = logging.getLogger(__name__)

QueryParams = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]


def _validate_base_url(base_url: str) -> str:
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid WorkOS base URL: {base_url!r}")
    return base_url.rstrip("/")


class WorkOs:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        config_loader: Optional[ConfigLoader] = None,
        session: Optional[aiohttp.ClientSession] = None,
        user_agent: Optional[str] = None,
    ):
        self.base_url = _validate_base_url(base_url)
        self.api_key = api_key
        self.config_loader = config_loader

        http_config = config_loader.get_http_config() if config_loader else {}
        self.connection_pool_size = http_config.get("connection_pool_size", 20)
        self.connection_timeout = http_config.get("connect_timeout", 10)
        self.read_timeout = http_config.get("read_timeout", 30)
        self.keep_alive = http_config.get("keep_alive", True)
        self.verify_ssl = http_config.get("verify_ssl", True)

        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self.authenticator = WorkOsAuthenticator(user_agent)
        self.authenticator.set_api_key(api_key)

        self.organizations = Organizations(self)
        self.directory_sync = DirectorySync(self)
        self.sso = Sso(self)
        self.mfa = Mfa(self)
        self.passwordless = Passwordless(self)
        self.admin_portal = AdminPortal(self)
        self.user_management = UserManagement(self)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> "WorkOs":
        return cls(settings.api_key, base_url=settings.base_url, config_loader=settings.config_loader, **kwargs)

    async def __aenter__(self):
        self.authenticator.setup_authentication()
        if self.session is None:
            connector = aiohttp.TCPConnector(
                limit=self.connection_pool_size,
                ttl_dns_cache=300,
                keepalive_timeout=60 if self.keep_alive else None,
                force_close=not self.keep_alive,
                ssl=bool(self.verify_ssl),
            )
            timeout = aiohttp.ClientTimeout(total=None, connect=self.connection_timeout, sock_read=self.read_timeout)
            self.session = aiohttp.ClientSession(connector=connector, timeout=timeout)
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[QueryParams] = None,
        json: Any = None,
        data: Optional[Dict[str, Any]] = None,
        access_token: Optional[str] = None,
        authenticated: bool = True,
    ) -> ApiResponse:
        if not self.session:
            raise RuntimeError("WorkOs client not initialized; use async context manager")

        headers = self.authenticator.get_headers(access_token=access_token, authenticated=authenticated)
        url = self.url_for(path)
        query: Optional[List[Tuple[str, Any]]] = None
        if params:
            query = list(params.items()) if isinstance(params, dict) else list(params)

        logger.debug("%s %s", method, path)
        try:
            async with self.session.request(
                method, url, params=query, json=json, data=data, headers=headers
            ) as response:
                raw = await response.read()
                text = raw.decode("utf-8", errors="replace")
                logger.debug("%s %s -> %s", method, path, response.status)
                return ApiResponse(status=response.status, text=text, headers=dict(response.headers))
        except asyncio.TimeoutError as exc:
            raise RequestError(f"{method} {path} timed out") from exc
        except aiohttp.ClientError as exc:
            raise RequestError(f"{method} {path} failed: {exc}") from exc

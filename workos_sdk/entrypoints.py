import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

from .client import WorkOs
from .config import DEFAULT_BASE_URL, ConfigLoader

T = TypeVar("T")


def run_sync(
    api_key: str,
    operation: Callable[[WorkOs], Awaitable[T]],
    base_url: Optional[str] = None,
    config_loader: Optional[ConfigLoader] = None,
    **client_kwargs: Any,
) -> T:
    """
    Synchronous helper to run one or more API calls.

    Intended for scripts and notebooks that don't want to manage asyncio
    directly: ``run_sync(key, lambda w: w.organizations.get_organization("org_123"))``.
    """

    async def _run():
        async with WorkOs(
            api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            config_loader=config_loader,
            **client_kwargs,
        ) as workos:
            return await operation(workos)

    return asyncio.run(_run())

import asyncio
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from workos_sdk import WorkOs

API_KEY = "sk_example_123456789"


@dataclass
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    headers: Dict[str, str]
    body: str = ""

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass
class MockApi:
    """Stands in for the WorkOS API: canned replies per (method, path), every request recorded."""

    routes: Dict[Tuple[str, str], Tuple[int, Any]] = field(default_factory=dict)
    requests: List[RecordedRequest] = field(default_factory=list)

    def mock(self, method: str, path: str, status: int = 200, body: Any = None):
        self.routes[(method, path)] = (status, body)

    @property
    def last_request(self) -> Optional[RecordedRequest]:
        return self.requests[-1] if self.requests else None

    async def _handle(self, request: web.Request) -> web.Response:
        raw = await request.read()
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.path,
                query=dict(request.query),
                headers=dict(request.headers),
                body=raw.decode("utf-8"),
            )
        )
        route = self.routes.get((request.method, request.path))
        if route is None:
            return web.json_response({"message": "Not Found"}, status=404)
        status, body = route
        if body is None:
            return web.Response(status=status)
        if isinstance(body, bytes):
            return web.Response(status=status, body=body, content_type="application/json")
        if isinstance(body, str):
            return web.Response(status=status, text=body)
        return web.json_response(body, status=status)

    def run(self, operation, **client_kwargs):
        """Run ``operation(workos)`` against a live local server and return its result."""

        async def _run():
            app = web.Application()
            app.router.add_route("*", "/{tail:.*}", self._handle)
            async with TestServer(app) as server:
                base_url = f"http://{server.host}:{server.port}"
                async with WorkOs(API_KEY, base_url=base_url, **client_kwargs) as workos:
                    return await operation(workos)

        return asyncio.run(_run())


@pytest.fixture
def api():
    return MockApi()


ORGANIZATION = {
    "id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
    "object": "organization",
    "name": "Foo Corp",
    "allow_profiles_outside_organization": False,
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "domains": [
        {
            "domain": "foo-corp.com",
            "id": "org_domain_01EHZNVPK2QXHMVWCEDQEKY69A",
            "object": "organization_domain",
        }
    ],
}

DIRECTORY_USER = {
    "id": "directory_user_01E1X56GH84T3FB41SD6PZGDBX",
    "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
    "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
    "idp_id": "12345",
    "emails": [
        {"primary": False, "type": "home", "value": "eric@example.com"},
        {"primary": True, "type": "work", "value": "eric@foo-corp.com"},
    ],
    "first_name": "Eric",
    "last_name": "Schneider",
    "username": "eric@foo-corp.com",
    "state": "active",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "custom_attributes": {"department": "Engineering"},
    "raw_attributes": {"idp_id": "1a2b3c4d5e"},
}

DIRECTORY_GROUP = {
    "id": "directory_group_01E1JJS84MFPPQ3G655FHTKX6Z",
    "idp_id": "12345",
    "directory_id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
    "organization_id": "org_01EZTR6WYX1A0DSE2CYMGXQ24Y",
    "name": "Developers",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "raw_attributes": {"id": "12345"},
}

DIRECTORY = {
    "id": "directory_01ECAZ4NV9QMV47GW873HDCX74",
    "domain": "foo-corp.com",
    "name": "Foo Corp",
    "organization_id": "org_01EHZNVPK3SFK441A1RGBFSHRT",
    "state": "active",
    "type": "gsuite directory",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}

CONNECTION = {
    "object": "connection",
    "id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
    "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
    "connection_type": "GoogleOAuth",
    "name": "Foo Corp",
    "state": "active",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "domains": [
        {
            "id": "conn_domain_01EHWNFTAFCF3CQAE5A9Q0P1YB",
            "object": "connection_domain",
            "domain": "foo-corp.com",
        }
    ],
}


def paginated(items, before=None, after=None):
    return {"data": list(items), "list_metadata": {"before": before, "after": after}}

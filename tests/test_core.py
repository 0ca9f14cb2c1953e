import asyncio
from datetime import timezone

import pytest

from conftest import ORGANIZATION, paginated
from workos_sdk import (
    AuthenticationError,
    PaginatedList,
    PaginationOrder,
    PaginationParams,
    RequestError,
    UnauthorizedError,
    fetch_all,
    iterate_all,
)
from workos_sdk.core import ApiResponse, known_or_unknown, parse_timestamp
from workos_sdk.core.types import ListMetadata, compact, encode_list
from workos_sdk.directory_sync import DirectoryState
from workos_sdk.endpoints import endpoint_path


def test_pagination_params_to_query():
    assert PaginationParams().to_query() == {"order": "desc"}
    assert PaginationParams(order=PaginationOrder.ASC, before="a", after="b", limit=10).to_query() == {
        "order": "asc",
        "before": "a",
        "after": "b",
        "limit": 10,
    }


@pytest.mark.parametrize(
    "value, microsecond",
    [
        ("2021-06-25T19:07:33.155Z", 155000),
        ("2021-06-25T19:07:33Z", 0),
        ("2021-06-25T19:07:33.1234567+00:00", 123456),
        ("2021-06-25T19:07:33.1+00:00", 100000),
    ],
)
def test_parse_timestamp(value, microsecond):
    parsed = parse_timestamp(value)

    assert (parsed.year, parsed.month, parsed.day, parsed.second) == (2021, 6, 25, 33)
    assert parsed.microsecond == microsecond
    assert parsed.utcoffset() == timezone.utc.utcoffset(None)


@pytest.mark.parametrize("value", ["2021-06-25T19:07:33", "yesterday", 1624648053])
def test_parse_timestamp_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_known_or_unknown():
    assert known_or_unknown(DirectoryState, "active") is DirectoryState.ACTIVE
    assert known_or_unknown(DirectoryState, DirectoryState.DELETING) is DirectoryState.DELETING
    assert known_or_unknown(DirectoryState, "archived") == "archived"


def test_compact_and_encode_list():
    assert compact({"a": 1, "b": None, "c": False}) == {"a": 1, "c": False}
    assert encode_list(["foo.com", "bar.com"]) == "foo.com,bar.com"


def test_endpoint_path_quotes_identifiers():
    assert endpoint_path("organizations", "detail", id="org_123") == "/organizations/org_123"
    assert endpoint_path("directory_users", "detail", id="a/b c") == "/directory_users/a%2Fb%20c"
    assert endpoint_path("auth_factors", "challenge", id="f_1") == "/auth/factors/f_1/challenge"


def test_api_response_classification():
    ApiResponse(200, '{"ok": true}').raise_for_unauthorized_or_status()

    with pytest.raises(UnauthorizedError):
        ApiResponse(401, '{"message": "Unauthorized"}').raise_for_unauthorized_or_status()

    with pytest.raises(RequestError) as excinfo:
        ApiResponse(500, "upstream exploded").raise_for_unauthorized_or_status()
    assert excinfo.value.status == 500
    assert excinfo.value.message == "upstream exploded"
    assert str(excinfo.value) == "500: upstream exploded"


def test_api_response_oauth_errors():
    with pytest.raises(UnauthorizedError):
        ApiResponse(400, '{"error": "invalid_client", "error_description": "Invalid client ID."}').raise_for_oauth_error()

    with pytest.raises(AuthenticationError) as excinfo:
        ApiResponse(400, '{"error": "invalid_grant", "error_description": "Expired."}').raise_for_oauth_error()
    assert excinfo.value.error == "invalid_grant"

    # a 400 without an OAuth error body is an ordinary request error
    with pytest.raises(RequestError):
        ApiResponse(400, '{"message": "Bad request"}').raise_for_oauth_error()


def test_api_response_invalid_json():
    with pytest.raises(RequestError):
        ApiResponse(200, "<html>").json()
    with pytest.raises(RequestError):
        ApiResponse(200, "[]").json_object()
    assert ApiResponse(202, "").json() is None


def test_api_response_parse_wraps_model_errors():
    assert ApiResponse(200, '{"before": "a"}').parse(lambda payload: payload["before"]) == "a"

    for text in ('{"id": "org_1"}', '{"created_at": 5, "updated_at": 5}'):
        with pytest.raises(RequestError) as excinfo:
            ApiResponse(200, text).parse(lambda payload: parse_timestamp(payload["created_at"]))
        assert excinfo.value.status == 200
        assert excinfo.value.body == text


class FakePages:
    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    async def list_page(self, pagination=None, **filters):
        self.calls.append((pagination, filters))
        cursor = pagination.after if pagination else None
        return self.pages[cursor]


def test_fetch_all_follows_after_cursor():
    fake = FakePages(
        {
            None: PaginatedList(data=[1, 2], metadata=ListMetadata(after="c1")),
            "c1": PaginatedList(data=[3], metadata=ListMetadata(before="c1", after="c2")),
            "c2": PaginatedList(data=[4], metadata=ListMetadata(before="c2")),
        }
    )

    items = asyncio.run(fetch_all(fake.list_page, PaginationParams(limit=2), organization_id="org_1"))

    assert items == [1, 2, 3, 4]
    assert [call[0].after for call in fake.calls] == [None, "c1", "c2"]
    assert all(call[0].limit == 2 for call in fake.calls)
    assert all(call[1] == {"organization_id": "org_1"} for call in fake.calls)


def test_iterate_all_fetches_pages_lazily():
    fake = FakePages(
        {
            None: PaginatedList(data=[1, 2], metadata=ListMetadata(after="c1")),
            "c1": PaginatedList(data=[3, 4], metadata=ListMetadata(after="c2")),
            "c2": PaginatedList(data=[5], metadata=ListMetadata()),
        }
    )

    async def first_three():
        seen = []
        async for item in iterate_all(fake.list_page, PaginationParams(order=PaginationOrder.ASC)):
            seen.append(item)
            if len(seen) == 3:
                break
        return seen

    assert asyncio.run(first_three()) == [1, 2, 3]
    assert [call[0].after for call in fake.calls] == [None, "c1"]
    assert all(call[0].order is PaginationOrder.ASC for call in fake.calls)


def test_iterate_all_does_not_mutate_caller_params():
    fake = FakePages(
        {
            "start": PaginatedList(data=["x"], metadata=ListMetadata(before="b", after="c9")),
            "c9": PaginatedList(data=[]),
        }
    )
    params = PaginationParams(after="start", before="b0")

    async def collect():
        return [item async for item in iterate_all(fake.list_page, params)]

    assert asyncio.run(collect()) == ["x"]
    assert (params.after, params.before) == ("start", "b0")
    assert fake.calls[1][0].before is None


def test_fetch_all_stops_on_repeated_cursor():
    fake = FakePages(
        {
            None: PaginatedList(data=["a"], metadata=ListMetadata(after="loop")),
            "loop": PaginatedList(data=["b"], metadata=ListMetadata(after="loop")),
        }
    )

    assert asyncio.run(fetch_all(fake.list_page)) == ["a", "b"]


def test_fetch_all_against_api(api):
    second = dict(ORGANIZATION, id="org_2")
    api.mock("GET", "/organizations", body=paginated([ORGANIZATION, second]))

    organizations = api.run(lambda w: fetch_all(w.organizations.list_organizations, domains=["foo-corp.com"]))

    assert [org.id for org in organizations] == [ORGANIZATION["id"], "org_2"]
    assert len(api.requests) == 1

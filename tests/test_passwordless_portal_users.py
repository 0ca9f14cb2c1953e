from urllib.parse import parse_qs

import pytest

from conftest import API_KEY
from workos_sdk import AuthenticationError, UnauthorizedError, UserNotFoundError
from workos_sdk.admin_portal import AdminPortalIntent

SESSION_ID = "passwordless_session_01EHDAK2BFGWCSZXP9HGZ3VK8C"
USER_ID = "user_0c2f3b4d5e6f7g8h9i0j1k2l3"
USER = {
    "object": "user",
    "id": USER_ID,
    "email": "marcelina.davis@example.com",
    "first_name": "Marcelina",
    "last_name": "Davis",
    "email_verified": True,
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
}


def test_create_passwordless_session(api):
    api.mock(
        "POST",
        "/passwordless/sessions",
        status=201,
        body={
            "object": "passwordless_session",
            "id": SESSION_ID,
            "email": "marcelina@foo-corp.com",
            "expires_at": "2020-08-13T05:50:00.000Z",
            "link": "https://auth.workos.com/passwordless/token/confirm",
        },
    )

    session = api.run(lambda w: w.passwordless.create_session("marcelina@foo-corp.com"))

    assert api.last_request.json() == {"type": "MagicLink", "email": "marcelina@foo-corp.com"}
    assert session.id == SESSION_ID
    assert session.expires_at.hour == 5


def test_send_passwordless_session(api):
    api.mock("POST", f"/passwordless/sessions/{SESSION_ID}/send", status=201, body={"success": True})

    api.run(lambda w: w.passwordless.send_session(SESSION_ID))

    assert api.last_request.json() == {"id": SESSION_ID}


def test_generate_portal_link(api):
    link = "https://setup.workos.com/portal/launch?secret=JteZqfJZqUcgWGaYCC6iI0gW0"
    api.mock("POST", "/portal/generate_link", status=201, body={"link": link})

    result = api.run(
        lambda w: w.admin_portal.generate_portal_link("org_01EHZNVPK3SFK441A1RGBFSHRT", AdminPortalIntent.SSO)
    )

    assert result == link
    assert api.last_request.json() == {"organization": "org_01EHZNVPK3SFK441A1RGBFSHRT", "intent": "sso"}


def test_generate_portal_link_for_directory_sync_with_return_url(api):
    api.mock("POST", "/portal/generate_link", status=201, body={"link": "https://setup.workos.com/x"})

    api.run(
        lambda w: w.admin_portal.generate_portal_link(
            "org_1", AdminPortalIntent.DIRECTORY_SYNC, return_url="https://app.example.com"
        )
    )

    assert api.last_request.json()["intent"] == "dsync"
    assert api.last_request.json()["return_url"] == "https://app.example.com"


def test_get_user(api):
    api.mock("GET", f"/user_management/users/{USER_ID}", body=USER)

    user = api.run(lambda w: w.user_management.get_user(USER_ID))

    assert user.email == "marcelina.davis@example.com"
    assert user.email_verified is True
    assert user.created_at == "2021-06-25T19:07:33.155Z"
    assert user.profile_picture_url is None


def test_get_user_not_found(api):
    body = '{"error": "not_found", "error_description": "No such user."}'
    api.mock("GET", f"/user_management/users/{USER_ID}", status=404, body=body)

    with pytest.raises(UserNotFoundError) as excinfo:
        api.run(lambda w: w.user_management.get_user(USER_ID))

    assert excinfo.value.error == "not_found"
    assert excinfo.value.error_description == body


def test_authenticate_with_code(api):
    api.mock(
        "POST",
        "/user_management/authenticate",
        body={"user": USER, "organization_id": "org_01H5JQDV7R7ATEYZDEG0W5PRYS"},
    )

    result = api.run(
        lambda w: w.user_management.authenticate_with_code(
            client_id="client_123456789",
            code="abc123",
            ip_address="192.0.2.1",
            user_agent="Mozilla/5.0",
        )
    )

    assert result.user.id == USER_ID
    assert result.organization_id == "org_01H5JQDV7R7ATEYZDEG0W5PRYS"
    assert parse_qs(api.last_request.body) == {
        "client_id": ["client_123456789"],
        "client_secret": [API_KEY],
        "grant_type": ["authorization_code"],
        "code": ["abc123"],
        "ip_address": ["192.0.2.1"],
        "user_agent": ["Mozilla/5.0"],
    }


def test_authenticate_with_code_errors(api):
    api.mock(
        "POST",
        "/user_management/authenticate",
        status=400,
        body={"error": "invalid_grant", "error_description": "The code 'abc123' has expired or is invalid."},
    )

    with pytest.raises(AuthenticationError):
        api.run(lambda w: w.user_management.authenticate_with_code(client_id="client_1", code="abc123"))

    api.mock(
        "POST",
        "/user_management/authenticate",
        status=400,
        body={"error": "invalid_client", "error_description": "Invalid client ID."},
    )

    with pytest.raises(UnauthorizedError):
        api.run(lambda w: w.user_management.authenticate_with_code(client_id="client_1", code="abc123"))

"""Tests for bearer token authentication on the booking routes."""

import jwt
import pytest

from ..factories import create_user


ROUTES = [
    ("GET", "/booking"),
    ("POST", "/booking"),
    ("PUT", "/booking/1"),
]


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", ROUTES)
async def test_missing_token(test_client, method, path):
    """Test requests without a token are unauthorized."""
    response = await test_client.request(method, path)

    assert response.status_code == 401
    data = response.json()
    assert data["status"] == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", ROUTES)
async def test_invalid_token(test_client, auth_headers, method, path):
    """Test a token that is not a valid JWT is unauthorized."""
    response = await test_client.request(method, path, headers=auth_headers("lorem"))

    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", ROUTES)
async def test_token_without_session(test_client, test_session, auth_headers, method, path):
    """Test a correctly signed token with no stored session is unauthorized."""
    from hotel_booking.core.dependencies import create_session_token

    user = await create_user(test_session)
    token = create_session_token(user.id)

    response = await test_client.request(method, path, headers=auth_headers(token))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_signed_with_other_secret(test_client, test_session, auth_headers):
    """Test a token signed with another secret is unauthorized."""
    user = await create_user(test_session)
    token = jwt.encode({"userId": user.id}, "another-secret", algorithm="HS256")

    response = await test_client.get("/booking", headers=auth_headers(token))

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_wrong_scheme(test_client):
    """Test a non Bearer scheme is unauthorized."""
    response = await test_client.get("/booking", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401
    assert "scheme" in response.json()["detail"]

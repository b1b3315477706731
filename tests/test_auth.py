"""Tests for bearer token verification."""

import pytest
from fastapi import HTTPException
from jose import jwt

from auth import get_current_user_id

SECRET = "test-secret"


def _token(claims: dict, secret: str = SECRET) -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


class TestGetCurrentUserId:
    def test_sub_claim(self) -> None:
        assert get_current_user_id({"sub": "user-1"}) == "user-1"

    def test_falls_back_to_id_claim(self) -> None:
        assert get_current_user_id({"id": 42}) == "42"

    def test_no_subject(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            get_current_user_id({"email": "a@example.com"})
        assert exc_info.value.status_code == 401


class TestBearerTokenOnRoutes:
    """Test the dependency chain through a protected route."""

    def test_missing_token(self, anon_client) -> None:
        response = anon_client.get("/api/properties")
        assert response.status_code == 401
        assert response.json() == {"detail": "Missing token"}

    def test_wrong_scheme(self, anon_client) -> None:
        response = anon_client.get("/api/properties", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_bad_signature(self, anon_client) -> None:
        token = _token({"sub": "user-1"}, secret="another-secret")
        response = anon_client.get("/api/properties", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403
        assert response.json() == {"detail": "Invalid token"}

    def test_valid_token_scopes_to_subject(self, anon_client, factory) -> None:
        factory.property(user_id="user-1", name="Mine")
        factory.property(user_id="user-2", name="Theirs")
        token = _token({"sub": "user-1"})

        response = anon_client.get("/api/properties", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Mine"]

    def test_unconfigured_secret(self, anon_client, monkeypatch) -> None:
        monkeypatch.delenv("JWT_SECRET")
        token = _token({"sub": "user-1"})
        response = anon_client.get("/api/properties", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 500

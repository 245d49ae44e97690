"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt
import pytest

from guide.config import AuthSettings
from guide.domain.service import JWTService
from guide.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestJWTService:
    """Tests for token round trips and rejection."""

    def test_verify_returns_created_payload(self, jwt_service):
        token = jwt_service.create_token("0b6c7c1e-2f52-4c4c-9b55-1c2b3d4e5f60", "reader")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == UUID("0b6c7c1e-2f52-4c4c-9b55-1c2b3d4e5f60")
        assert payload.login == "reader"

    def test_rejects_token_signed_with_other_secret(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="other-secret"))
        token = other.create_token("some-id", "reader")

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_rejects_expired_token(self, jwt_service):
        token = jwt.encode(
            {
                "sub": "some-id",
                "login": "reader",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_rejects_garbage(self, jwt_service):
        with pytest.raises(JWTError):
            jwt_service.verify_token("not-a-token")

    def test_rejects_token_without_login(self, jwt_service):
        token = jwt.encode(
            {
                "sub": str(uuid4()),
                "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_rejects_subject_that_is_not_a_user_id(self, jwt_service):
        token = jwt_service.create_token("alice", "alice")

        with pytest.raises(JWTError, match="Malformed token claims"):
            jwt_service.verify_token(token)

"""Unit tests for bearer token handling."""

from datetime import timedelta
from uuid import uuid4

from jose import jwt

from app.config import settings
from app.services.auth_service import create_access_token, decode_access_token


class TestDecodeAccessToken:
    """Tests for decode_access_token."""

    def test_returns_user_id(self):
        """A token signed with the shared secret yields its subject."""
        user_id = uuid4()
        token = create_access_token(data={"sub": str(user_id)})

        assert decode_access_token(token) == user_id

    def test_expired_token(self):
        """Expired tokens are rejected."""
        token = create_access_token(data={"sub": str(uuid4())}, expires_delta=timedelta(minutes=-1))

        assert decode_access_token(token) is None

    def test_wrong_secret(self):
        """Tokens signed with another secret are rejected."""
        token = jwt.encode({"sub": str(uuid4())}, "another-secret", algorithm=settings.jwt_algorithm)

        assert decode_access_token(token) is None

    def test_missing_subject(self):
        """A token without a subject names nobody."""
        token = create_access_token(data={"scope": "projects"})

        assert decode_access_token(token) is None

    def test_subject_is_not_a_user_id(self):
        """A subject that is not a UUID names nobody."""
        token = create_access_token(data={"sub": "alice"})

        assert decode_access_token(token) is None

    def test_malformed_token(self):
        """Garbage is rejected rather than raised."""
        assert decode_access_token("not-a-jwt") is None

# =============================================================================
# SUPPLIER MINIMAL API - SECURITY TESTS
# =============================================================================
# File: tests/test_security.py
# Description: Unit tests for password hashing, password rules and JWT handling
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from passlib.context import CryptContext

from core.config import settings
from core.exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    PasswordValidationError,
)
from core.security import (
    PasswordManager,
    JWTManager,
    PasswordValidator,
    TokenPayload,
)


class TestPasswordManager:
    """Test suite for PasswordManager."""

    def test_hash_password_argon2(self):
        """Test password hashing with Argon2."""
        pm = PasswordManager()

        hashed = pm.hash_password("TestPassword123!")

        assert hashed != "TestPassword123!"
        assert hashed.startswith("$argon2")

    def test_verify_password_correct(self):
        pm = PasswordManager()
        hashed = pm.hash_password("TestPassword123!")

        is_valid, needs_rehash = pm.verify_password("TestPassword123!", hashed)

        assert is_valid is True
        assert needs_rehash is False

    def test_verify_password_incorrect(self):
        pm = PasswordManager()
        hashed = pm.hash_password("TestPassword123!")

        is_valid, needs_rehash = pm.verify_password("WrongPassword456!", hashed)

        assert is_valid is False
        assert needs_rehash is False

    def test_same_password_different_hashes(self):
        """Same password produces different hashes (random salt)."""
        pm = PasswordManager()

        hash1 = pm.hash_password("TestPassword123!")
        hash2 = pm.hash_password("TestPassword123!")

        assert hash1 != hash2
        assert pm.verify_password("TestPassword123!", hash1)[0] is True
        assert pm.verify_password("TestPassword123!", hash2)[0] is True

    def test_legacy_bcrypt_hash_verifies_and_needs_rehash(self):
        """
        Test: Verify a password stored as bcrypt
        Expected: valid, flagged for upgrade to argon2
        """
        legacy = CryptContext(schemes=["bcrypt"], bcrypt__rounds=4).hash("TestPassword123!")

        is_valid, needs_rehash = PasswordManager().verify_password("TestPassword123!", legacy)

        assert is_valid is True
        assert needs_rehash is True

    def test_unknown_hash_format_is_rejected(self):
        assert PasswordManager().verify_password("anything", "plaintext") == (False, False)


class TestPasswordValidator:

    def test_strong_password_passes(self):
        is_valid, errors = PasswordValidator.validate("SecurePass123!")

        assert is_valid is True
        assert errors == []

    @pytest.mark.parametrize(
        "password, fragment",
        [
            ("Ab1!", "at least 6 characters"),
            ("securepass123!", "uppercase"),
            ("SECUREPASS123!", "lowercase"),
            ("SecurePass!!", "digit"),
            ("SecurePass123", "special character"),
        ],
    )
    def test_rule_violations_are_listed(self, password, fragment):
        is_valid, errors = PasswordValidator.validate(password)

        assert is_valid is False
        assert any(fragment in e for e in errors)

    def test_common_password_rejected(self):
        _, errors = PasswordValidator.validate("password123")

        assert "Password is too common" in errors

    def test_ensure_valid_raises_with_field_errors(self):
        with pytest.raises(PasswordValidationError) as exc_info:
            PasswordValidator.ensure_valid("short")

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["errors"]["password"]


class TestJWTManager:
    """Test suite for JWTManager."""

    def test_round_trip_carries_identity_and_claims(self):
        jm = JWTManager()

        token = jm.create_access_token(
            user_id="user-123",
            email="user@example.com",
            claims={"RemoveSupplier": [""]},
        )
        payload = jm.decode_token(token)

        assert payload.sub == "user-123"
        assert payload.email == "user@example.com"
        assert payload.has_claim("RemoveSupplier")
        assert payload.jti
        assert payload.exp > payload.iat

    def test_token_carries_issuer_and_audience(self):
        token = JWTManager().create_access_token(user_id="user-123")

        raw = jwt.get_unverified_claims(token)

        assert raw["iss"] == settings.jwt_issuer
        assert raw["aud"] == settings.jwt_audience
        assert raw["exp"] - raw["iat"] == settings.jwt_access_token_expire_minutes * 60

    def test_expired_token(self):
        jm = JWTManager()
        token = jm.create_access_token(user_id="user-123", expires_delta=timedelta(seconds=-10))

        with pytest.raises(TokenExpiredError):
            jm.decode_token(token)

    def test_wrong_audience_is_invalid(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "sub": "user-123",
                "iat": now,
                "exp": now + timedelta(minutes=5),
                "iss": settings.jwt_issuer,
                "aud": "https://elsewhere.example",
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(TokenInvalidError):
            JWTManager().decode_token(token)

    def test_wrong_signature_is_invalid(self):
        token = JWTManager().create_access_token(user_id="user-123")
        tampered = jwt.encode(
            jwt.get_unverified_claims(token),
            "another-secret-key-that-is-long-enough-000",
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(TokenInvalidError) as exc_info:
            JWTManager().decode_token(tampered)

        assert exc_info.value.error_code == "TOKEN_INVALID"

    def test_malformed_token_is_invalid(self):
        with pytest.raises(TokenInvalidError):
            JWTManager().decode_token("not-a-token")


class TestTokenPayload:

    def test_has_claim_with_value(self):
        payload = TokenPayload(
            sub="u",
            jti="j",
            iat=datetime.now(timezone.utc),
            exp=datetime.now(timezone.utc),
            claims={"Scope": ["read", "write"]},
        )

        assert payload.has_claim("Scope", "write")
        assert not payload.has_claim("Scope", "delete")
        assert not payload.has_claim("RemoveSupplier")

"""Unit tests for auth/tokens.py and auth/passwords.py."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from auth.models import TokenIdentity
from auth.passwords import hash_password, verify_password
from auth.tokens import ALGORITHM, TokenService
from core.models import Administrator, Role

SECRET = "k" * 40


def _administrator(role: Role = Role.ADM) -> Administrator:
    return Administrator(id=1, email="adm@teste.com", password="123456", role=role)


class TestTokenService:
    def test_claims_carry_email_and_role(self) -> None:
        token = TokenService(SECRET).issue(_administrator(Role.EDITOR))
        claims = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
        assert claims["email"] == "adm@teste.com"
        assert claims["role"] == "Editor"
        assert "exp" in claims

    def test_password_is_not_a_claim(self) -> None:
        claims = jwt.get_unverified_claims(TokenService(SECRET).issue(_administrator()))
        assert "123456" not in claims.values()

    def test_decode_round_trip(self) -> None:
        service = TokenService(SECRET)
        assert service.decode(service.issue(_administrator())) == TokenIdentity(email="adm@teste.com", role=Role.ADM)

    def test_expiry_is_configurable(self) -> None:
        before = datetime.now(timezone.utc)
        claims = jwt.get_unverified_claims(TokenService(SECRET, expire_seconds=60).issue(_administrator()))
        expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        assert before < expires <= before + timedelta(seconds=61)

    def test_expired_token_is_rejected(self) -> None:
        service = TokenService(SECRET, expire_seconds=-30)
        assert service.decode(service.issue(_administrator())) is None

    def test_wrong_secret_is_rejected(self) -> None:
        token = TokenService("x" * 40).issue(_administrator())
        assert TokenService(SECRET).decode(token) is None

    def test_garbage_is_rejected(self) -> None:
        assert TokenService(SECRET).decode("not-a-jwt") is None

    def test_unknown_role_is_rejected(self) -> None:
        token = jwt.encode({"email": "a@b.com", "role": "Root"}, SECRET, algorithm=ALGORITHM)
        assert TokenService(SECRET).decode(token) is None

    def test_missing_email_is_rejected(self) -> None:
        token = jwt.encode({"role": "Adm"}, SECRET, algorithm=ALGORITHM)
        assert TokenService(SECRET).decode(token) is None


class TestPasswords:
    def test_hash_verifies(self) -> None:
        hashed = hash_password("123456")
        assert hashed != "123456"
        assert verify_password("123456", hashed)
        assert not verify_password("654321", hashed)

    def test_non_bcrypt_value_is_a_mismatch(self) -> None:
        assert verify_password("123456", "123456") is False

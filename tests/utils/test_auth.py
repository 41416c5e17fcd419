import uuid
from datetime import timedelta

import pytest
from jose import jwt

from travel_story.utils.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenService,
    get_password_hash,
    verify_password,
)

SECRET = "unit-test-secret"


class TestPasswordHashing:
    def test_hash_verifies_and_is_not_plaintext(self):
        hashed = get_password_hash("correct horse", rounds=4)
        assert hashed != "correct horse"
        assert verify_password("correct horse", hashed)
        assert not verify_password("wrong horse", hashed)

    def test_each_hash_uses_a_fresh_salt(self):
        assert get_password_hash("same", rounds=4) != get_password_hash("same", rounds=4)

    def test_default_cost_factor_is_ten(self):
        assert get_password_hash("pw").startswith("$2b$10$")

    def test_malformed_hash_raises(self):
        with pytest.raises(ValueError):
            verify_password("pw", "not-a-bcrypt-hash")

    def test_password_longer_than_bcrypt_limit_never_matches(self):
        hashed = get_password_hash("a" * 72, rounds=4)
        assert not verify_password("a" * 73, hashed)


class TestTokenService:
    def test_issue_and_verify_round_trip(self):
        service = TokenService(SECRET)
        user_id = uuid.uuid4()
        assert service.verify(service.issue(user_id)) == user_id

    def test_default_lifetime_is_72_hours(self):
        token = TokenService(SECRET).issue(uuid.uuid4())
        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == 72 * 3600

    def test_expired_token_is_rejected(self):
        service = TokenService(SECRET)
        token = service.issue(uuid.uuid4(), expires_delta=timedelta(hours=-73))
        with pytest.raises(TokenExpiredError):
            service.verify(token)

    def test_token_signed_with_another_secret_is_rejected(self):
        token = TokenService("other-secret").issue(uuid.uuid4())
        with pytest.raises(InvalidTokenError) as exc_info:
            TokenService(SECRET).verify(token)
        assert not isinstance(exc_info.value, TokenExpiredError)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_rejected(self, token):
        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).verify(token)

    def test_subject_must_be_a_user_id(self):
        token = jwt.encode({"sub": "not-a-uuid"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).verify(token)

    def test_missing_subject_is_rejected(self):
        token = jwt.encode({"foo": "bar"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            TokenService(SECRET).verify(token)

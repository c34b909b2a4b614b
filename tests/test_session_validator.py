"""Tests for token signing and the SessionValidator"""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.orm import Session

from conftest import PASSWORD
from sihs_cms.api.deps import SessionValidator
from sihs_cms.config import AuthConfig
from sihs_cms.errors import InvalidToken, TokenExpired, Unauthenticated
from sihs_cms.utils.auth import Authenticator
from sihs_cms.utils.jwt_utils import TokenSigner


def test_registered_token_resolves_to_account(authenticator: Authenticator, validator: SessionValidator, db: Session):
    account, token = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)

    resolved = validator.validate(db, token)

    assert resolved.id == account.id
    assert resolved.admin_id == account.admin_id


def test_token_payload(signer: TokenSigner):
    token = signer.issue("adm_123")
    payload = signer.decode(token)

    assert payload["sub"] == "adm_123"
    assert payload["exp"] - payload["iat"] == 7 * 24 * 3600
    assert payload["jti"]


def test_missing_token(validator: SessionValidator, db: Session):
    with pytest.raises(Unauthenticated) as exc:
        validator.validate(db, None)
    assert type(exc.value) is Unauthenticated
    assert exc.value.message == "No token provided, access denied"


def test_garbage_token(validator: SessionValidator, db: Session):
    with pytest.raises(InvalidToken):
        validator.validate(db, "not-a-jwt")


def test_token_signed_with_another_secret(validator: SessionValidator, db: Session, authenticator: Authenticator):
    account, _ = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)
    forged = TokenSigner(AuthConfig(jwt_secret="someone-else")).issue(account.admin_id)

    with pytest.raises(InvalidToken):
        validator.validate(db, forged)


def test_expired_token(validator: SessionValidator, signer: TokenSigner, db: Session, authenticator: Authenticator):
    account, _ = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)
    stale = signer.issue(account.admin_id, now=datetime.now(timezone.utc) - timedelta(days=8))

    with pytest.raises(TokenExpired):
        validator.validate(db, stale)


def test_token_valid_until_expiry(validator: SessionValidator, signer: TokenSigner, db: Session, authenticator: Authenticator):
    account, _ = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)
    almost_stale = signer.issue(account.admin_id, now=datetime.now(timezone.utc) - timedelta(days=6, hours=23))

    assert validator.validate(db, almost_stale).id == account.id


def test_deactivated_account_token_rejected(validator: SessionValidator, db: Session, authenticator: Authenticator):
    account, token = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)
    account.is_active = False
    db.commit()

    with pytest.raises(Unauthenticated) as exc:
        validator.validate(db, token)
    assert type(exc.value) is Unauthenticated


def test_unknown_subject_rejected_like_deactivated(validator: SessionValidator, signer: TokenSigner, db: Session):
    with pytest.raises(Unauthenticated) as exc:
        validator.validate(db, signer.issue("adm_missing"))
    assert type(exc.value) is Unauthenticated
    assert exc.value.message == "Token is not valid"


def test_validator_does_not_mutate_account(validator: SessionValidator, db: Session, authenticator: Authenticator):
    account, token = authenticator.register(db, "Alice", "alice@x.com", PASSWORD, PASSWORD)
    before = (account.last_login, account.failed_login_attempts, account.updated_at)

    validator.validate(db, token)
    db.refresh(account)

    assert (account.last_login, account.failed_login_attempts, account.updated_at) == before

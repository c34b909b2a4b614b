"""Tests for the Authenticator service (login lockout, registration, password change)"""
from datetime import timedelta

import pytest
from sqlalchemy.orm import Session

from conftest import PASSWORD, FakeClock
from sihs_cms.errors import AccountLocked, DuplicateEmail, InvalidCredentials, ValidationError
from sihs_cms.models.admin_account import AdminAccount, DEFAULT_PERMISSIONS
from sihs_cms.utils.auth import Authenticator


def _register(authenticator: Authenticator, db: Session, email: str = "alice@x.com", **kwargs):
    return authenticator.register(db, "Alice", email, PASSWORD, PASSWORD, **kwargs)


def _fail(authenticator: Authenticator, db: Session, times: int, email: str = "alice@x.com"):
    for _ in range(times):
        with pytest.raises(InvalidCredentials):
            authenticator.login(db, email, "wrong-password")


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_register_hashes_password_and_normalizes_email(authenticator: Authenticator, db: Session):
    account, token = _register(authenticator, db, email="  Alice@X.com ")

    assert account.email == "alice@x.com"
    assert account.password_hash != PASSWORD
    assert account.password_hash.startswith("$2")
    assert account.role == "admin"
    assert account.permissions == DEFAULT_PERMISSIONS["admin"]
    assert account.failed_login_attempts == 0
    assert account.lock_until is None
    assert token


def test_register_downgrades_super_admin_request(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db, role="super_admin")
    assert account.role == "admin"
    assert "manage_admins" not in account.permissions


def test_register_moderator_gets_moderator_permissions(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db, role="moderator")
    assert account.role == "moderator"
    assert sorted(account.permissions) == sorted(DEFAULT_PERMISSIONS["moderator"])


def test_register_rejects_unknown_role(authenticator: Authenticator, db: Session):
    with pytest.raises(ValidationError):
        _register(authenticator, db, role="owner")


@pytest.mark.parametrize(
    "name,email,password,confirm",
    [
        ("", "a@x.com", PASSWORD, PASSWORD),
        ("Alice", "", PASSWORD, PASSWORD),
        ("Alice", "a@x.com", "", ""),
        ("Alice", "a@x.com", PASSWORD, None),
        ("Alice", "a@x.com", "short", "short"),
        ("Alice", "a@x.com", PASSWORD, "secret2"),
        ("Alice", "not-an-email", PASSWORD, PASSWORD),
    ],
)
def test_register_validation_errors(authenticator: Authenticator, db: Session, name, email, password, confirm):
    with pytest.raises(ValidationError):
        authenticator.register(db, name, email, password, confirm)
    assert db.query(AdminAccount).count() == 0


def test_register_duplicate_email_is_case_insensitive(authenticator: Authenticator, db: Session):
    _register(authenticator, db)
    with pytest.raises(DuplicateEmail):
        _register(authenticator, db, email="ALICE@x.com")


# ---------------------------------------------------------------------------
# Login and lockout
# ---------------------------------------------------------------------------

def test_login_success_updates_last_login(authenticator: Authenticator, db: Session, clock: FakeClock):
    _register(authenticator, db)

    account, token = authenticator.login(db, "ALICE@x.com", PASSWORD)

    assert account.last_login == clock.now
    assert token


def test_unknown_email_and_wrong_password_raise_the_same_error(authenticator: Authenticator, db: Session):
    _register(authenticator, db)

    with pytest.raises(InvalidCredentials) as missing:
        authenticator.login(db, "nonexistent@x.com", "anything")
    with pytest.raises(InvalidCredentials) as wrong:
        authenticator.login(db, "alice@x.com", "anything")

    assert missing.value.message == wrong.value.message
    assert missing.value.status_code == wrong.value.status_code == 401


def test_login_requires_email_and_password(authenticator: Authenticator, db: Session):
    with pytest.raises(ValidationError):
        authenticator.login(db, "", PASSWORD)
    with pytest.raises(ValidationError):
        authenticator.login(db, "alice@x.com", None)


def test_inactive_account_cannot_login(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)
    account.is_active = False
    db.commit()

    with pytest.raises(InvalidCredentials):
        authenticator.login(db, "alice@x.com", PASSWORD)


def test_failed_logins_increment_counter(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)
    _fail(authenticator, db, 3)

    db.refresh(account)
    assert account.failed_login_attempts == 3
    assert account.lock_until is None


def test_fifth_failure_locks_and_correct_password_is_then_refused(
    authenticator: Authenticator, db: Session, clock: FakeClock
):
    account, _ = _register(authenticator, db)
    _fail(authenticator, db, 5)

    db.refresh(account)
    assert account.failed_login_attempts == 5
    assert account.lock_until == clock.now + timedelta(minutes=15)

    with pytest.raises(AccountLocked) as exc:
        authenticator.login(db, "alice@x.com", PASSWORD)
    assert exc.value.remaining_minutes == 15
    assert exc.value.status_code == 429


def test_remaining_minutes_rounds_up(authenticator: Authenticator, db: Session, clock: FakeClock):
    _register(authenticator, db)
    _fail(authenticator, db, 5)

    clock.advance(minutes=10, seconds=30)
    with pytest.raises(AccountLocked) as exc:
        authenticator.login(db, "alice@x.com", PASSWORD)
    assert exc.value.remaining_minutes == 5


def test_lock_stays_until_expiry_then_login_succeeds(authenticator: Authenticator, db: Session, clock: FakeClock):
    account, _ = _register(authenticator, db)
    _fail(authenticator, db, 5)

    clock.advance(minutes=14, seconds=59)
    with pytest.raises(AccountLocked):
        authenticator.login(db, "alice@x.com", PASSWORD)

    clock.advance(seconds=2)
    authenticated, token = authenticator.login(db, "alice@x.com", PASSWORD)

    assert authenticated.id == account.id
    assert authenticated.failed_login_attempts == 0
    assert authenticated.lock_until is None
    assert token


def test_failure_after_lock_expiry_starts_a_new_window(authenticator: Authenticator, db: Session, clock: FakeClock):
    account, _ = _register(authenticator, db)
    _fail(authenticator, db, 5)
    clock.advance(minutes=16)

    _fail(authenticator, db, 1)

    db.refresh(account)
    assert account.failed_login_attempts == 1
    assert account.lock_until is None


def test_success_resets_counter(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)
    _fail(authenticator, db, 4)

    authenticator.login(db, "alice@x.com", PASSWORD)
    db.refresh(account)
    assert account.failed_login_attempts == 0

    # four more failures do not lock, because the count restarted
    _fail(authenticator, db, 4)
    db.refresh(account)
    assert account.lock_until is None
    authenticator.login(db, "alice@x.com", PASSWORD)


def test_lockout_threshold_and_duration_come_from_config(db: Session, signer, clock: FakeClock):
    from sihs_cms.config import AuthConfig

    strict = Authenticator(
        AuthConfig(jwt_secret="test-secret", bcrypt_rounds=4, max_failed_logins=2, lockout_minutes=60),
        signer,
        clock=clock,
    )
    _register(strict, db)
    _fail(strict, db, 2)

    with pytest.raises(AccountLocked) as exc:
        strict.login(db, "alice@x.com", PASSWORD)
    assert exc.value.remaining_minutes == 60


# ---------------------------------------------------------------------------
# Password change
# ---------------------------------------------------------------------------

def test_change_password(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)

    authenticator.change_password(db, account.admin_id, PASSWORD, "secret2", "secret2")

    with pytest.raises(InvalidCredentials):
        authenticator.login(db, "alice@x.com", PASSWORD)
    authenticated, _ = authenticator.login(db, "alice@x.com", "secret2")
    assert authenticated.id == account.id


def test_change_password_rejects_same_password(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)

    with pytest.raises(ValidationError):
        authenticator.change_password(db, account.admin_id, PASSWORD, PASSWORD, PASSWORD)


def test_change_password_wrong_current(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)

    with pytest.raises(InvalidCredentials):
        authenticator.change_password(db, account.admin_id, "not-it", "secret2", "secret2")


@pytest.mark.parametrize("new,confirm", [("short", "short"), ("secret2", "secret3"), ("secret2", None)])
def test_change_password_validation(authenticator: Authenticator, db: Session, new, confirm):
    account, _ = _register(authenticator, db)

    with pytest.raises(ValidationError):
        authenticator.change_password(db, account.admin_id, PASSWORD, new, confirm)
    authenticator.login(db, "alice@x.com", PASSWORD)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

def test_update_profile_only_touches_contact_fields(authenticator: Authenticator, db: Session):
    account, _ = _register(authenticator, db)
    password_hash = account.password_hash

    updated = authenticator.update_profile(db, account, name="Alice B", email="AliceB@x.com", phone="555")

    assert updated.name == "Alice B"
    assert updated.email == "aliceb@x.com"
    assert updated.phone == "555"
    assert updated.role == "admin"
    assert updated.password_hash == password_hash


def test_update_profile_duplicate_email(authenticator: Authenticator, db: Session):
    _register(authenticator, db, email="bob@x.com")
    account, _ = _register(authenticator, db)

    with pytest.raises(DuplicateEmail):
        authenticator.update_profile(db, account, email="BOB@x.com")

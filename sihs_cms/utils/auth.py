"""Authentication service: login with lockout, registration, password and profile changes"""
import math
import re
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sihs_cms.config import AuthConfig
from sihs_cms.errors import (
    AccountLocked,
    DuplicateEmail,
    InvalidCredentials,
    NotFound,
    ValidationError,
)
from sihs_cms.middleware.monitoring import record_lockout
from sihs_cms.models.admin_account import (
    PERMISSIONS,
    ROLES,
    SUPER_ADMIN,
    AdminAccount,
    default_permissions,
)
from sihs_cms.utils.clock import utcnow
from sihs_cms.utils.jwt_utils import TokenSigner
from sihs_cms.utils.logger import email_domain, logger
from sihs_cms.utils.passwords import hash_password, verify_password

_ADMIN_ID_PREFIX = "adm_"
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_BCRYPT_MAX_BYTES = 72


def generate_admin_id() -> str:
    return f"{_ADMIN_ID_PREFIX}{secrets.token_urlsafe(10)}"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_email(email: str) -> str:
    """Normalise an address and check its shape"""
    normalized = normalize_email(email)
    if not _EMAIL_RE.match(normalized):
        raise ValidationError("Please provide a valid email address")
    return normalized


def validate_role(role: str) -> str:
    if role not in ROLES:
        raise ValidationError(f"Invalid role '{role}'. Must be one of: {', '.join(ROLES)}")
    return role


def validate_permissions(permissions: Iterable[str]) -> list:
    perms = list(dict.fromkeys(permissions))
    unknown = [p for p in perms if p not in PERMISSIONS]
    if unknown:
        raise ValidationError(f"Invalid permissions: {', '.join(unknown)}")
    return perms


class Authenticator:
    """Verifies credentials, applies the lockout policy and issues session tokens.

    All state lives in the ``admin_accounts`` table; every public method takes
    the request's database session. ``clock`` returns naive UTC datetimes and
    is replaceable in tests.
    """

    def __init__(
        self,
        config: AuthConfig,
        signer: TokenSigner,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config
        self.signer = signer
        self.clock = clock or utcnow

    # ------------------------------------------------------------------
    # Token issuance
    # ------------------------------------------------------------------

    def issue_token(self, account: AdminAccount) -> str:
        return self.signer.issue(account.admin_id, now=self.clock().replace(tzinfo=timezone.utc))

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    def login(self, db: Session, email: Optional[str], password: Optional[str]) -> Tuple[AdminAccount, str]:
        """Authenticate an email/password pair.

        Raises:
            ValidationError: email or password missing.
            InvalidCredentials: unknown/inactive account or wrong password.
            AccountLocked: the account is inside its lockout window.
        """
        if not email or not password:
            raise ValidationError("Please provide email and password")

        account = db.query(AdminAccount).filter(
            AdminAccount.email == normalize_email(email),
            AdminAccount.is_active == True,
        ).first()
        if account is None:
            logger.warning(
                "Login failed",
                extra={"email_domain": email_domain(email), "reason": "invalid_credentials", "action": "login"},
            )
            raise InvalidCredentials()

        now = self.clock()
        if account.lock_until is not None:
            if account.lock_until > now:
                remaining = math.ceil((account.lock_until - now).total_seconds() / 60)
                logger.warning(
                    "Login rejected: account locked",
                    extra={"admin_id": account.admin_id, "reason": "locked", "action": "login"},
                )
                raise AccountLocked(remaining)
            # Lock elapsed; a new lockout window starts from zero
            account.lock_until = None
            account.failed_login_attempts = 0

        if not verify_password(password, account.password_hash):
            account.failed_login_attempts = (account.failed_login_attempts or 0) + 1
            if account.failed_login_attempts >= self.config.max_failed_logins:
                account.lock_until = now + timedelta(minutes=self.config.lockout_minutes)
                record_lockout()
                logger.warning(
                    f"Account locked for {self.config.lockout_minutes} minutes",
                    extra={"admin_id": account.admin_id, "reason": "lockout_applied", "action": "login"},
                )
            db.commit()
            logger.warning(
                "Login failed",
                extra={"admin_id": account.admin_id, "reason": "invalid_credentials", "action": "login"},
            )
            raise InvalidCredentials()

        account.failed_login_attempts = 0
        account.lock_until = None
        account.last_login = now
        db.commit()
        db.refresh(account)

        logger.info("Login successful", extra={"admin_id": account.admin_id, "action": "login"})
        return account, self.issue_token(account)

    # ------------------------------------------------------------------
    # Registration / account creation
    # ------------------------------------------------------------------

    def _validate_new_password(self, password: Optional[str], confirm_password: Optional[str]) -> None:
        if len(password) < self.config.password_min_length:
            raise ValidationError(
                f"Password must be at least {self.config.password_min_length} characters long"
            )
        if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
            raise ValidationError(f"Password must be at most {_BCRYPT_MAX_BYTES} bytes long")
        if confirm_password is not None and password != confirm_password:
            raise ValidationError("Passwords do not match")

    def _normalized_unique_email(self, db: Session, email: str, exclude_id: Optional[int] = None) -> str:
        normalized = validate_email(email)
        query = db.query(AdminAccount).filter(AdminAccount.email == normalized)
        if exclude_id is not None:
            query = query.filter(AdminAccount.id != exclude_id)
        if query.first():
            raise DuplicateEmail()
        return normalized

    def create_account(
        self,
        db: Session,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        role: str = "admin",
        permissions: Optional[Iterable[str]] = None,
        phone: Optional[str] = None,
        department: Optional[str] = None,
        confirm_password: Optional[str] = None,
    ) -> AdminAccount:
        """Validate and persist a new account with a hashed password.

        ``role`` is taken as given; callers decide which roles they allow.
        ``permissions`` defaults to the role's default set.
        """
        if not name or not name.strip() or not email or not password:
            raise ValidationError("Please provide name, email and password")
        self._validate_new_password(password, confirm_password)
        validate_role(role)
        perms = default_permissions(role) if permissions is None else validate_permissions(permissions)
        normalized = self._normalized_unique_email(db, email)

        account = AdminAccount(
            admin_id=generate_admin_id(),
            name=name.strip(),
            email=normalized,
            password_hash=hash_password(password, self.config.bcrypt_rounds),
            role=role,
            permissions=perms,
            phone=phone,
            department=department,
            is_active=True,
            failed_login_attempts=0,
        )
        db.add(account)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateEmail()
        db.refresh(account)

        logger.info(
            f"Created admin account: {account.admin_id}",
            extra={"admin_id": account.admin_id, "action": "create_account"},
        )
        return account

    def register(
        self,
        db: Session,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        confirm_password: Optional[str],
        role: Optional[str] = None,
        phone: Optional[str] = None,
        department: Optional[str] = None,
    ) -> Tuple[AdminAccount, str]:
        """Public self-service registration.

        A request for ``super_admin`` is silently downgraded to ``admin``;
        only a super admin may create super admins.
        """
        if not name or not email or not password or not confirm_password:
            raise ValidationError("Please provide name, email, password and confirmPassword")
        requested = role or "admin"
        if requested == SUPER_ADMIN:
            requested = "admin"

        account = self.create_account(
            db,
            name=name,
            email=email,
            password=password,
            role=requested,
            phone=phone,
            department=department,
            confirm_password=confirm_password,
        )
        return account, self.issue_token(account)

    # ------------------------------------------------------------------
    # Password / profile
    # ------------------------------------------------------------------

    def change_password(
        self,
        db: Session,
        admin_id: str,
        current_password: Optional[str],
        new_password: Optional[str],
        confirm_password: Optional[str],
    ) -> None:
        """Replace an account's password after verifying the current one.

        Raises:
            ValidationError: missing fields, too short, mismatch, or unchanged.
            InvalidCredentials: ``current_password`` is wrong.
        """
        if not current_password or not new_password or not confirm_password:
            raise ValidationError("Please provide current password, new password and confirmPassword")

        account = db.query(AdminAccount).filter(
            AdminAccount.admin_id == admin_id,
            AdminAccount.is_active == True,
        ).first()
        if account is None:
            raise NotFound("Admin not found")

        if not verify_password(current_password, account.password_hash):
            raise InvalidCredentials("Current password is incorrect")
        if new_password == current_password:
            raise ValidationError("New password must be different from the current password")
        self._validate_new_password(new_password, confirm_password)

        account.password_hash = hash_password(new_password, self.config.bcrypt_rounds)
        db.commit()

        logger.info("Password changed", extra={"admin_id": admin_id, "action": "change_password"})

    def update_profile(
        self,
        db: Session,
        account: AdminAccount,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        department: Optional[str] = None,
    ) -> AdminAccount:
        """Update contact fields only; role, permissions and password are untouched"""
        if name is not None:
            if not name.strip():
                raise ValidationError("Name cannot be empty")
            account.name = name.strip()
        if email is not None:
            account.email = self._normalized_unique_email(db, email, exclude_id=account.id)
        if phone is not None:
            account.phone = phone
        if department is not None:
            account.department = department

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateEmail("Email already exists")
        db.refresh(account)

        logger.info("Profile updated", extra={"admin_id": account.admin_id, "action": "update_profile"})
        return account

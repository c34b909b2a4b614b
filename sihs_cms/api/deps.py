"""API dependencies for authentication and authorization.

Every protected route depends on :func:`get_current_admin`, which runs the
bearer token through the :class:`SessionValidator` and attaches the resolved
account to ``request.state.admin``.

Authorization on top of that is a plain attribute check:
:func:`require_super_admin` gates on role, :func:`require_permission` on a
permission tag in the account's permission set.
"""
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from sihs_cms.database import get_db
from sihs_cms.errors import Forbidden, InvalidToken, TokenExpired, Unauthenticated
from sihs_cms.middleware.monitoring import record_auth_failure
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.utils.auth import Authenticator
from sihs_cms.utils.jwt_utils import TokenSigner
from sihs_cms.utils.logger import logger

_bearer_scheme = HTTPBearer(auto_error=False)


class SessionValidator:
    """Resolves a bearer token to an active :class:`AdminAccount`.

    Read-only: it verifies the token and looks the account up, nothing more.
    """

    def __init__(self, signer: TokenSigner):
        self.signer = signer

    def validate(self, db: Session, token: Optional[str]) -> AdminAccount:
        """Return the account the token belongs to.

        Raises:
            Unauthenticated: no token, or the account is missing or inactive.
            InvalidToken: bad signature or malformed token.
            TokenExpired: signature valid but expired.
        """
        if not token:
            raise Unauthenticated("No token provided, access denied")

        payload = self.signer.decode(token)

        account = db.query(AdminAccount).filter(AdminAccount.admin_id == payload["sub"]).first()
        if account is None or not account.is_active:
            # Deleted and deactivated accounts look the same to the caller
            raise Unauthenticated()
        return account


# ---------------------------------------------------------------------------
# Service accessors (wired onto app.state by create_app)
# ---------------------------------------------------------------------------

def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


def get_session_validator(request: Request) -> SessionValidator:
    return request.app.state.session_validator


# ---------------------------------------------------------------------------
# get_current_admin
# ---------------------------------------------------------------------------

def _failure_reason(exc: Unauthenticated) -> str:
    if isinstance(exc, TokenExpired):
        return "token_expired"
    if isinstance(exc, InvalidToken):
        return "invalid_token"
    return "unauthenticated"


def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    db: Session = Depends(get_db),
    validator: SessionValidator = Depends(get_session_validator),
) -> AdminAccount:
    """Require a valid ``Authorization: Bearer <token>`` for an active account"""
    try:
        account = validator.validate(db, credentials.credentials if credentials else None)
    except Unauthenticated as exc:
        reason = _failure_reason(exc)
        record_auth_failure(reason)
        logger.warning(
            "Rejected bearer token",
            extra={"reason": reason, "path": request.url.path, "method": request.method},
        )
        raise

    request.state.admin = account
    return account


# ---------------------------------------------------------------------------
# Authorization gates
# ---------------------------------------------------------------------------

def require_super_admin(admin: AdminAccount = Depends(get_current_admin)) -> AdminAccount:
    """Require the caller's role to be ``super_admin``"""
    if not admin.is_super_admin:
        raise Forbidden("Access denied. Super admin only.")
    return admin


def require_permission(permission: str) -> Callable:
    """Return a dependency that requires ``permission`` in the caller's permission set.

    Usage::

        @router.post("")
        def create(admin: AdminAccount = Depends(require_permission("manage_news"))):
            ...
    """

    def _permission_dep(admin: AdminAccount = Depends(get_current_admin)) -> AdminAccount:
        if not admin.has_permission(permission):
            raise Forbidden(f"Access denied. '{permission}' permission required.")
        return admin

    # Give FastAPI a unique name so it doesn't collapse distinct dependencies
    _permission_dep.__name__ = f"require_permission_{permission}"
    return _permission_dep

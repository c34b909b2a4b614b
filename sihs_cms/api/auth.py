"""Admin authentication endpoints: register, login, profile, password, logout"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from sihs_cms.api.deps import get_authenticator, get_current_admin
from sihs_cms.database import get_db
from sihs_cms.errors import AccountLocked, Forbidden, InvalidCredentials
from sihs_cms.middleware.monitoring import record_auth_failure
from sihs_cms.middleware.rate_limit import get_rate_limit, limiter
from sihs_cms.models.admin_account import AdminAccount
from sihs_cms.schemas.admin_account import AdminAccountResponse
from sihs_cms.schemas.auth import (
    AuthPayload,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
)
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.utils.auth import Authenticator

router = APIRouter(prefix="/api/admin/auth", tags=["authentication"])


def _auth_payload(account: AdminAccount, token: str) -> AuthPayload:
    return AuthPayload(admin=AdminAccountResponse.model_validate(account), token=token)


# ---------------------------------------------------------------------------
# POST /register
# ---------------------------------------------------------------------------

@router.post("/register", response_model=Envelope[AuthPayload], status_code=status.HTTP_201_CREATED)
@limiter.limit(get_rate_limit("register"))
def register(
    request: Request,
    body: RegisterRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Self-service admin registration.

    Requesting ``super_admin`` is silently downgraded to ``admin``. When
    ``ALLOW_PUBLIC_REGISTRATION`` is off, only the very first account may
    register this way.
    """
    if not request.app.state.settings.ALLOW_PUBLIC_REGISTRATION:
        if db.query(AdminAccount.id).first() is not None:
            raise Forbidden("Public registration is disabled")

    account, token = authenticator.register(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
        role=body.role,
        phone=body.phone,
        department=body.department,
    )
    return Envelope(message="Admin account created successfully", data=_auth_payload(account, token))


# ---------------------------------------------------------------------------
# POST /login
# ---------------------------------------------------------------------------

@router.post("/login", response_model=Envelope[AuthPayload])
@limiter.limit(get_rate_limit("login"))
def login(
    request: Request,
    body: LoginRequest,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Exchange email and password for a session token.

    An unknown email and a wrong password produce the same 401 response.
    Five consecutive failures lock the account for 15 minutes (429).
    """
    try:
        account, token = authenticator.login(db, body.email, body.password)
    except InvalidCredentials:
        record_auth_failure("invalid_credentials")
        raise
    except AccountLocked:
        record_auth_failure("locked")
        raise

    return Envelope(message="Login successful", data=_auth_payload(account, token))


# ---------------------------------------------------------------------------
# GET /me, PUT /profile
# ---------------------------------------------------------------------------

@router.get("/me", response_model=Envelope[AdminAccountResponse])
def me(admin: AdminAccount = Depends(get_current_admin)):
    """Current admin profile"""
    return Envelope(data=AdminAccountResponse.model_validate(admin))


@router.put("/profile", response_model=Envelope[AdminAccountResponse])
def update_profile(
    body: ProfileUpdate,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(get_current_admin),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Update name and contact fields of the current admin"""
    account = authenticator.update_profile(
        db,
        admin,
        name=body.name,
        email=body.email,
        phone=body.phone,
        department=body.department,
    )
    return Envelope(message="Profile updated successfully", data=AdminAccountResponse.model_validate(account))


# ---------------------------------------------------------------------------
# PUT /change-password
# ---------------------------------------------------------------------------

@router.put("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    db: Session = Depends(get_db),
    admin: AdminAccount = Depends(get_current_admin),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """Change the current admin's password. Existing tokens stay valid."""
    authenticator.change_password(
        db,
        admin.admin_id,
        current_password=body.current_password,
        new_password=body.new_password,
        confirm_password=body.confirm_password,
    )
    return MessageResponse(message="Password changed successfully")


# ---------------------------------------------------------------------------
# POST /logout
# ---------------------------------------------------------------------------

@router.post("/logout", response_model=MessageResponse)
def logout(_: AdminAccount = Depends(get_current_admin)):
    """Acknowledge logout. Tokens are not revoked server-side; the client discards its copy."""
    return MessageResponse(message="Logout successful")

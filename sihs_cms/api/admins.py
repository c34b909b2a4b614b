"""Admin account management endpoints (super admin only)"""
from typing import List

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sihs_cms.api.deps import get_authenticator, require_super_admin
from sihs_cms.database import get_db
from sihs_cms.errors import DuplicateEmail, NotFound, ValidationError
from sihs_cms.middleware.rate_limit import get_rate_limit, limiter
from sihs_cms.models.admin_account import SUPER_ADMIN, AdminAccount, default_permissions
from sihs_cms.schemas.admin_account import AdminAccountCreate, AdminAccountResponse, AdminAccountUpdate
from sihs_cms.schemas.common import Envelope, MessageResponse
from sihs_cms.utils.auth import (
    Authenticator,
    validate_email,
    validate_permissions,
    validate_role,
)
from sihs_cms.utils.logger import logger

router = APIRouter(prefix="/api/admin/admins", tags=["admins"])


def _get_account(db: Session, admin_id: str) -> AdminAccount:
    account = db.query(AdminAccount).filter(AdminAccount.admin_id == admin_id).first()
    if not account:
        raise NotFound("Admin not found")
    return account


@router.get("", response_model=Envelope[List[AdminAccountResponse]])
def list_admins(
    db: Session = Depends(get_db),
    _: AdminAccount = Depends(require_super_admin),
):
    """List active admin accounts"""
    accounts = (
        db.query(AdminAccount)
        .filter(AdminAccount.is_active == True)
        .order_by(AdminAccount.created_at.desc())
        .all()
    )
    return Envelope(data=[AdminAccountResponse.model_validate(a) for a in accounts])


@router.post("", response_model=Envelope[AdminAccountResponse], status_code=status.HTTP_201_CREATED)
@limiter.limit(get_rate_limit("admin_write"))
def create_admin(
    request: Request,
    body: AdminAccountCreate,
    db: Session = Depends(get_db),
    current: AdminAccount = Depends(require_super_admin),
    authenticator: Authenticator = Depends(get_authenticator),
):
    """
    Create an admin account with an explicit role.

    Unlike public registration, ``super_admin`` may be assigned here.
    """
    account = authenticator.create_account(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        permissions=body.permissions,
        phone=body.phone,
        department=body.department,
    )
    logger.info(
        f"Super admin {current.admin_id} created {account.admin_id}",
        extra={"admin_id": current.admin_id, "action": "create_admin"},
    )
    return Envelope(message="Admin created successfully", data=AdminAccountResponse.model_validate(account))


@router.put("/{admin_id}", response_model=Envelope[AdminAccountResponse])
@limiter.limit(get_rate_limit("admin_write"))
def update_admin(
    request: Request,
    admin_id: str,
    body: AdminAccountUpdate,
    db: Session = Depends(get_db),
    current: AdminAccount = Depends(require_super_admin),
):
    """Update name, email, role, permissions or active flag of an account"""
    account = _get_account(db, admin_id)

    # A super admin cannot lock themselves out through an update
    if account.id == current.id:
        if body.is_active is False:
            raise ValidationError("Cannot deactivate your own account")
        if body.role is not None and body.role != SUPER_ADMIN:
            raise ValidationError("Cannot change your own role")

    if body.name is not None:
        if not body.name.strip():
            raise ValidationError("Name cannot be empty")
        account.name = body.name.strip()
    if body.email is not None:
        email = validate_email(body.email)
        clash = db.query(AdminAccount).filter(
            AdminAccount.email == email,
            AdminAccount.id != account.id,
        ).first()
        if clash:
            raise DuplicateEmail("Email already exists")
        account.email = email
    if body.role is not None:
        account.role = validate_role(body.role)
    if body.permissions is not None:
        account.permissions = validate_permissions(body.permissions)
    elif body.role is not None:
        account.permissions = default_permissions(account.role)
    if body.phone is not None:
        account.phone = body.phone
    if body.department is not None:
        account.department = body.department
    if body.is_active is not None:
        account.is_active = body.is_active

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateEmail("Email already exists")
    db.refresh(account)

    logger.info(
        f"Super admin {current.admin_id} updated {admin_id}",
        extra={"admin_id": current.admin_id, "action": "update_admin"},
    )
    return Envelope(message="Admin updated successfully", data=AdminAccountResponse.model_validate(account))


@router.delete("/{admin_id}", response_model=MessageResponse)
@limiter.limit(get_rate_limit("admin_write"))
def deactivate_admin(
    request: Request,
    admin_id: str,
    db: Session = Depends(get_db),
    current: AdminAccount = Depends(require_super_admin),
):
    """Deactivate (soft-delete) an account. Its outstanding tokens stop working."""
    if admin_id == current.admin_id:
        raise ValidationError("Cannot delete your own account")

    account = _get_account(db, admin_id)
    account.is_active = False
    db.commit()

    logger.info(f"Deactivated admin account: {admin_id}", extra={"admin_id": current.admin_id, "action": "deactivate_admin"})
    return MessageResponse(message="Admin deleted successfully")

"""AdminAccount schemas"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from sihs_cms.schemas.common import CamelModel


class AdminAccountResponse(CamelModel):
    """Public view of an account. The password hash is never part of it."""

    admin_id: str
    name: str
    email: str
    role: str
    permissions: List[str]
    phone: Optional[str] = None
    department: Optional[str] = None
    is_active: bool
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class AdminAccountCreate(CamelModel):
    """Super-admin account creation; any role may be assigned"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: str = "admin"
    permissions: Optional[List[str]] = Field(None, description="Defaults to the role's permission set")
    phone: Optional[str] = None
    department: Optional[str] = None


class AdminAccountUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    permissions: Optional[List[str]] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    is_active: Optional[bool] = None

"""AdminAccount model: named administrative identities with role, permissions and lockout state"""
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from sihs_cms.database import Base

SUPER_ADMIN = "super_admin"
ROLES = ("super_admin", "admin", "moderator")

PERMISSIONS = (
    "manage_departments",
    "manage_faculty",
    "manage_news",
    "manage_downloads",
    "manage_notifications",
    "manage_research",
    "manage_settings",
    "manage_admins",
)

DEFAULT_PERMISSIONS = {
    "super_admin": list(PERMISSIONS),
    "admin": [
        "manage_departments",
        "manage_faculty",
        "manage_news",
        "manage_downloads",
        "manage_notifications",
        "manage_research",
    ],
    "moderator": ["manage_news", "manage_notifications", "manage_downloads"],
}


def default_permissions(role: str) -> list:
    """Permission set a freshly created account of ``role`` receives"""
    return list(DEFAULT_PERMISSIONS.get(role, DEFAULT_PERMISSIONS["moderator"]))


class AdminAccount(Base):
    """An administrative identity.

    ``password_hash`` only ever holds a bcrypt hash. Accounts are never deleted;
    clearing ``is_active`` is the removal. ``failed_login_attempts`` and
    ``lock_until`` drive the login lockout.
    """

    __tablename__ = "admin_accounts"

    id = Column(Integer, primary_key=True)
    admin_id = Column(String(50), unique=True, nullable=False, index=True)   # "adm_xxx"
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)     # always lower-case
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="admin")               # super_admin|admin|moderator
    permissions = Column(JSON, nullable=False, default=list)
    phone = Column(String(50), nullable=True)
    department = Column(String(255), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    last_login = Column(DateTime, nullable=True)
    failed_login_attempts = Column(Integer, default=0, nullable=False)
    lock_until = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def is_super_admin(self) -> bool:
        return self.role == SUPER_ADMIN

    def has_permission(self, permission: str) -> bool:
        return permission in (self.permissions or [])

"""
Create the initial super admin if it does not exist yet.

Usage:
    BOOTSTRAP_ADMIN_PASSWORD=ChangeMeNow! python -m sihs_cms.seed_admin
    python -m sihs_cms.seed_admin --email admin@sihs.edu --name "Super Admin" --password ChangeMeNow!
"""
import argparse
import sys
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from sihs_cms.config import Settings, settings as default_settings
from sihs_cms.database import Base, SessionLocal, engine
from sihs_cms.errors import AppError
from sihs_cms.models.admin_account import SUPER_ADMIN, AdminAccount
from sihs_cms.utils.auth import Authenticator, normalize_email
from sihs_cms.utils.jwt_utils import TokenSigner
from sihs_cms.utils.logger import logger


def seed_super_admin(db: Session, settings: Settings, name: str, email: str, password: str) -> Optional[AdminAccount]:
    """Create a super admin with ``email`` unless one already exists. Returns the new account or None."""
    if db.query(AdminAccount).filter(AdminAccount.email == normalize_email(email)).first():
        logger.info("Super admin already exists", extra={"action": "seed_admin"})
        return None

    auth_config = settings.auth_config()
    authenticator = Authenticator(auth_config, TokenSigner(auth_config))
    return authenticator.create_account(db, name=name, email=email, password=password, role=SUPER_ADMIN)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the initial SIHS super admin")
    parser.add_argument("--name", default=default_settings.BOOTSTRAP_ADMIN_NAME)
    parser.add_argument("--email", default=default_settings.BOOTSTRAP_ADMIN_EMAIL)
    parser.add_argument("--password", default=default_settings.BOOTSTRAP_ADMIN_PASSWORD)
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first (dev only)")
    args = parser.parse_args(argv)

    if not args.password:
        parser.error("a password is required (--password or BOOTSTRAP_ADMIN_PASSWORD)")

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        account = seed_super_admin(db, default_settings, args.name, args.email, args.password)
    except AppError as exc:
        print(f"Could not create super admin: {exc.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    if account:
        print(f"Created super admin: {account.email} ({account.admin_id})")
    else:
        print(f"Super admin already exists: {normalize_email(args.email)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

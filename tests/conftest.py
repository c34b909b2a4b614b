"""Pytest configuration and fixtures"""
import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["METRICS_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

import sihs_cms.models  # noqa: F401
from sihs_cms.config import AuthConfig
from sihs_cms.database import Base, get_db
from sihs_cms.main import app
from sihs_cms.api.deps import SessionValidator
from sihs_cms.utils.auth import Authenticator
from sihs_cms.utils.jwt_utils import TokenSigner

TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "secret1"


class FakeClock:
    """Settable clock returning naive UTC datetimes"""

    def __init__(self):
        self.now = datetime.now(timezone.utc).replace(tzinfo=None)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database session override"""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig(jwt_secret="test-secret", bcrypt_rounds=4)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def signer(auth_config: AuthConfig) -> TokenSigner:
    return TokenSigner(auth_config)


@pytest.fixture
def authenticator(auth_config: AuthConfig, signer: TokenSigner, clock: FakeClock) -> Authenticator:
    return Authenticator(auth_config, signer, clock=clock)


@pytest.fixture
def validator(signer: TokenSigner) -> SessionValidator:
    return SessionValidator(signer)


def make_account(db: Session, email: str, role: str, name: str = "Test Admin", password: str = PASSWORD):
    """Create an account through the application's authenticator"""
    return app.state.authenticator.create_account(db, name=name, email=email, password=password, role=role)


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def login_headers(client: TestClient, email: str, password: str = PASSWORD) -> dict:
    response = client.post("/api/admin/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return bearer(response.json()["data"]["token"])


@pytest.fixture
def super_admin(db: Session):
    return make_account(db, "root@sihs.edu", "super_admin", name="Root")


@pytest.fixture
def super_admin_headers(client: TestClient, super_admin) -> dict:
    return login_headers(client, super_admin.email)


@pytest.fixture
def admin_headers(client: TestClient, db: Session) -> dict:
    account = make_account(db, "editor@sihs.edu", "admin", name="Editor")
    return login_headers(client, account.email)


@pytest.fixture
def moderator_headers(client: TestClient, db: Session) -> dict:
    account = make_account(db, "mod@sihs.edu", "moderator", name="Moderator")
    return login_headers(client, account.email)


@pytest.fixture
def alice_data() -> dict:
    return {
        "name": "Alice",
        "email": "alice@x.com",
        "password": PASSWORD,
        "confirmPassword": PASSWORD,
    }

"""
Pytest configuration - shared fixtures
"""
import os
import sys
from typing import Generator

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

# Repository root (web_modules) and backend directory (app)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core import security
from app.core.rate_limit import limiter
from app.database import Base, get_db
from app.main import app
from app.models.category import Category
from app.models.product import Product
from app.models.site_settings import SiteSettings
from app.models.user import User

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """In-memory SQLite database shared by every thread of a test"""
    engine = create_engine(
        "sqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def db_session(test_db):
    """Alias for test_db for clarity"""
    return test_db


@pytest.fixture
def client(test_db) -> Generator[TestClient, None, None]:
    """API client bound to the test database"""
    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def admin_user(test_db) -> User:
    user = User(
        email=ADMIN_EMAIL,
        hashed_password=security.get_password_hash(ADMIN_PASSWORD),
        is_active=True,
        is_superuser=True,
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def admin_credentials(admin_user) -> tuple:
    return ADMIN_EMAIL, ADMIN_PASSWORD


@pytest.fixture
def auth_headers(admin_user) -> dict:
    token = security.create_access_token(admin_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def populated_db(test_db):
    """Database with two categories, three products and a settings record"""
    session = test_db

    dresses = Category(name="Dresses", image_url="https://i.ibb.co/dresses.jpg", display_order=0)
    bags = Category(name="Bags", image_url="https://i.ibb.co/bags.jpg", display_order=1)
    session.add_all([dresses, bags])
    session.flush()

    session.add_all([
        Product(
            category_id=dresses.id,
            name="Silk Summer Dress",
            price=4990,
            images=["https://i.ibb.co/a.jpg", "https://i.ibb.co/b.jpg", "https://i.ibb.co/c.jpg"],
            description="Light silk dress",
            specifications={"Size": "S-L", "Material": "Silk"},
        ),
        Product(
            category_id=dresses.id,
            name="Evening Dress",
            price=12500,
            images=["https://i.ibb.co/d.jpg"],
            description="Long evening dress",
            specifications={},
        ),
        Product(
            category_id=bags.id,
            name="Leather Tote",
            price=7200.5,
            images=["https://i.ibb.co/e.jpg"],
            description="Everyday tote",
            specifications={"Color": "Brown"},
        ),
    ])
    session.add(SiteSettings(
        site_name="Boutique",
        whatsapp_number="79001234567",
        privacy_policy="We keep your data safe.",
        imgbb_api_key="imgbb-secret",
    ))
    session.commit()
    return session

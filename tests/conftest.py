"""
Shared fixtures for EasyShop tests.

Each test gets its own in-memory SQLite database. The application's
get_session dependency is overridden to use it, and a small catalog
plus three accounts (two customers and one admin) are seeded.
"""
import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlmodel import Session, SQLModel

from easyshop.core.config import get_settings
from easyshop.database import build_engine, get_session
from easyshop.main import app
from easyshop.models.category import Category
from easyshop.models.product import Product
from easyshop.models.user import User


ALICE_ID = 1
BOB_ID = 2
ADMIN_ID = 3

ELECTRONICS_ID = 1
FASHION_ID = 2


def make_token(username: str, expires_in: timedelta = timedelta(minutes=30)) -> str:
    """Sign a token the way the identity provider would."""
    settings = get_settings()
    claims = {
        "sub": username,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def auth_headers(username: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(username)}"}


def seed_accounts(session: Session) -> None:
    session.add_all(
        [
            User(id=ALICE_ID, username="alice", role="user"),
            User(id=BOB_ID, username="bob", role="user"),
            User(id=ADMIN_ID, username="admin", role="admin"),
        ]
    )
    session.commit()


def seed_catalog(session: Session) -> None:
    session.add_all(
        [
            Category(id=ELECTRONICS_ID, name="Electronics", description="Gadgets"),
            Category(id=FASHION_ID, name="Fashion", description="Clothes"),
        ]
    )
    session.commit()
    session.add_all(
        [
            Product(id=1, name="Headphones", price=Decimal("49.99"),
                    category_id=ELECTRONICS_ID, color="Black", stock=10),
            Product(id=2, name="Smartphone", price=Decimal("499.99"),
                    category_id=ELECTRONICS_ID, color="Black", stock=5, featured=True),
            Product(id=3, name="Laptop", price=Decimal("899.00"),
                    category_id=ELECTRONICS_ID, color="Silver", stock=3),
            Product(id=4, name="T-Shirt", price=Decimal("9.99"),
                    category_id=FASHION_ID, color="Red", stock=50),
            Product(id=5, name="Gift Card", price=Decimal("25.00"),
                    category_id=FASHION_ID, color="", stock=100),
            Product(id=6, name="Sticker", price=Decimal("0.50"),
                    category_id=FASHION_ID, color=None, stock=500),
            Product(id=7, name="Scarf", price=Decimal("15.00"),
                    category_id=FASHION_ID, color="black", stock=20),
        ]
    )
    session.commit()


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seed(session):
    """Seed accounts and catalog; returns the well-known ids."""
    seed_accounts(session)
    seed_catalog(session)
    return SimpleNamespace(
        alice=ALICE_ID,
        bob=BOB_ID,
        admin=ADMIN_ID,
        electronics=ELECTRONICS_ID,
        fashion=FASHION_ID,
        product_count=7,
    )


@pytest.fixture
def test_client(engine, seed):
    def override_get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice_headers():
    return auth_headers("alice")


@pytest.fixture
def bob_headers():
    return auth_headers("bob")


@pytest.fixture
def admin_headers():
    return auth_headers("admin")


@pytest.fixture
def make_headers():
    """Factory for Authorization headers of arbitrary usernames."""
    return auth_headers

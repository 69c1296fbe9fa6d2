"""Pytest fixtures for ordercore tests.

Provides reusable test fixtures for:
- Database session on an in-memory SQLite database
- Seeded products and orders
- Test client with the database and settings dependencies overridden

Usage:
    def test_create_order(client):
        response = client.post("/api/v1/orders")
        assert response.status_code == 201
"""

import os

# Set environment variables BEFORE any ordercore imports so settings pick them up
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_JSON"] = "false"
os.environ.pop("SEED_BUYER_ORG_ID", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Generator

from ordercore.config import Settings, get_settings
from ordercore.database import get_db
from ordercore.models import Base, Order, Product
from ordercore.orders.status import OrderStatus


# One shared connection so every session sees the same in-memory database
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def product(db_session: Session) -> Product:
    """Create the catalog product "prod-1"."""
    product = Product(id="prod-1", name="Steel Bolt M8")
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture(scope="function")
def draft_order(db_session: Session) -> Order:
    """Create an order in DRAFT status."""
    order = Order(
        status=OrderStatus.DRAFT.value,
        buyer_organization_id="org-test"
    )
    db_session.add(order)
    db_session.commit()
    db_session.refresh(order)
    return order


@pytest.fixture(scope="function")
def confirmed_order(db_session: Session) -> Order:
    """Create an order that has left DRAFT."""
    order = Order(
        status=OrderStatus.CONFIRMED.value,
        buyer_organization_id="org-test"
    )
    db_session.add(order)
    db_session.commit()
    db_session.refresh(order)
    return order


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Settings with no configured seed buyer."""
    return Settings(SEED_BUYER_ORG_ID=None)


@pytest.fixture(scope="function")
def client(db_session: Session, test_settings: Settings):
    """Create a test client bound to the test database.

    Tests may mutate `test_settings` via `app.dependency_overrides` to
    exercise configuration fallbacks.
    """
    from ordercore.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield TestClient(app)

    app.dependency_overrides.clear()

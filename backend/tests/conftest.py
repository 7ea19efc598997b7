"""
Shared fixtures.

Settings are read at import time, so the test environment is pinned here
before anything from `app` is imported.
"""
import base64
import json
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("SESSION_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

from app.core.config import settings
from app.core.db import Base, SessionLocal, engine
from app.main import app


@pytest.fixture()
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def session_cookie(user: dict) -> str:
    """Build the signed cookie Starlette's SessionMiddleware expects."""
    data = base64.b64encode(json.dumps({"user": user}).encode("utf-8"))
    return TimestampSigner(settings.SESSION_SECRET).sign(data).decode("utf-8")


@pytest.fixture()
def client(db):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def auth_headers(user_id: int) -> dict:
    cookie = session_cookie({"user_id": user_id, "role": "user", "status": "active"})
    return {"Cookie": f"{settings.SESSION_COOKIE}={cookie}"}


@pytest.fixture()
def marketplace(db):
    """Two users trading with each other, with images on some listings."""
    from datetime import datetime

    from app.models import Listing, ListingImage, Order, OrderItem, User

    db.add_all([
        User(user_id=1, username="alice", email="alice@example.com"),
        User(user_id=2, username="bob", email="bob@example.com"),
        User(user_id=3, username="carol", email="carol@example.com"),
    ])
    db.flush()
    db.add_all([
        Listing(listing_id=10, user_id=2, title="Vintage Denim Jacket", price=45),
        Listing(listing_id=11, user_id=2, title="Retro Film Camera", price=89.9),
        Listing(listing_id=12, user_id=1, title="Wool Scarf", price=12.5),
    ])
    db.flush()
    db.add_all([
        ListingImage(listing_id=10, image_url="uploads/denim-back.jpg", is_main=False),
        ListingImage(listing_id=10, image_url="uploads/denim-front.jpg", is_main=True),
        ListingImage(listing_id=11, image_url="/uploads/camera.jpg", is_main=True),
    ])
    db.add_all([
        Order(order_id=101, user_id=1, status="completed", created_at=datetime(2025, 1, 2, 9, 0)),
        Order(order_id=102, user_id=1, status="shipped", created_at=datetime(2025, 1, 5, 14, 30)),
        Order(order_id=103, user_id=3, status="pending", created_at=datetime(2025, 1, 6, 8, 15)),
    ])
    db.flush()
    db.add_all([
        OrderItem(order_id=101, listing_id=12, quantity=1, price=12.5),
        OrderItem(order_id=102, listing_id=10, quantity=1, price=45),
        OrderItem(order_id=102, listing_id=11, quantity=2, price=89.9),
        OrderItem(order_id=103, listing_id=11, quantity=1, price=89.9),
    ])
    db.commit()
    return db

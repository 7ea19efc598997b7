from datetime import date, datetime, timedelta, timezone
from sqlalchemy.orm import Session

from app.core.db import Base, engine, SessionLocal
from app.models.user import User
from app.models.listing import Listing, ListingImage
from app.models.order import Order, OrderItem
from app.models.voucher import Voucher


def reset_db(db: Session):
    # Drops & recreates all tables (local demo only)
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_users(db: Session):
    db.add_all([
        User(user_id=1, username="alice", email="alice@vintique.local"),
        User(user_id=2, username="bob", email="bob@vintique.local"),
        User(user_id=3, username="staff", email="staff@vintique.local", role="staff"),
    ])


def seed_listings(db: Session):
    db.add_all([
        Listing(listing_id=1, user_id=2, title="Vintage Denim Jacket", price=45.00),
        Listing(listing_id=2, user_id=2, title="Retro Film Camera", price=89.90),
        Listing(listing_id=3, user_id=1, title="Wool Scarf", price=12.50),
        Listing(listing_id=4, user_id=1, title="Leather Satchel", price=60.00),
    ])
    db.add_all([
        ListingImage(listing_id=1, image_url="uploads/denim-front.jpg", is_main=True),
        ListingImage(listing_id=1, image_url="uploads/denim-back.jpg", is_main=False),
        ListingImage(listing_id=2, image_url="/uploads/camera.jpg", is_main=True),
        ListingImage(listing_id=3, image_url="uploads/scarf.jpg", is_main=True),
    ])


def seed_orders(db: Session):
    now = datetime.now(timezone.utc)
    db.add_all([
        # alice buys from bob
        Order(order_id=101, user_id=1, status="completed", total_amount=45.00, created_at=now - timedelta(days=9)),
        Order(order_id=102, user_id=1, status="shipped", total_amount=179.80, created_at=now - timedelta(days=2)),
        # bob buys from alice
        Order(order_id=103, user_id=2, status="pending", total_amount=12.50, created_at=now - timedelta(days=1)),
    ])
    db.add_all([
        OrderItem(order_id=101, listing_id=1, quantity=1, price=45.00),
        OrderItem(order_id=102, listing_id=2, quantity=2, price=89.90),
        OrderItem(order_id=103, listing_id=3, quantity=1, price=12.50),
    ])


def seed_vouchers(db: Session):
    today = date.today()
    db.add_all([
        Voucher(code="VINTIQUE10", discount_type="percentage", discount_value=10, expiry_date=today + timedelta(days=30)),
        Voucher(code="GREEN5", discount_type="fixed", discount_value=5, expiry_date=today + timedelta(days=7)),
        Voucher(code="THRIFT12", discount_type="fixed", discount_value=12.5, expiry_date=today + timedelta(days=14)),
        Voucher(code="OLDDEAL", discount_type="percentage", discount_value=20, expiry_date=today - timedelta(days=1)),
        Voucher(code="PAUSED", discount_type="fixed", discount_value=3, expiry_date=today + timedelta(days=5), status="inactive"),
    ])


def main():
    db = SessionLocal()
    try:
        reset_db(db)
        seed_users(db)
        db.flush()
        seed_listings(db)
        db.flush()
        seed_orders(db)
        seed_vouchers(db)
        db.commit()

        print("Seed complete.")
        print("Log in as user 1 (alice) or 2 (bob) and try:")
        print("- hello")
        print("- track my order")
        print("- my sales")
        print("- any vouchers?")
        print("- give me an eco tip")
    finally:
        db.close()


if __name__ == "__main__":
    main()

from datetime import date

from sqlalchemy import and_
from sqlalchemy.orm import Session

from app.models.listing import Listing, ListingImage
from app.models.order import Order, OrderItem
from app.models.user import User
from app.models.voucher import Voucher

# -------------------------
# Order helpers (buyer side)
# -------------------------

def get_latest_order(db: Session, user_id: int) -> dict:
    order = (
        db.query(Order)
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.order_id.desc())
        .first()
    )
    if not order:
        return {"found": False}

    rows = (
        db.query(OrderItem.quantity, OrderItem.price, Listing.title, ListingImage.image_url)
        .join(Listing, OrderItem.listing_id == Listing.listing_id)
        .outerjoin(
            ListingImage,
            and_(
                ListingImage.listing_id == Listing.listing_id,
                ListingImage.is_main == True,  # noqa: E712
            ),
        )
        .filter(OrderItem.order_id == order.order_id)
        .order_by(OrderItem.order_item_id.asc())
        .all()
    )

    return {
        "found": True,
        "order_id": order.order_id,
        "status": order.status,
        "created_at": order.created_at,
        "items": [
            {
                "title": r.title,
                "quantity": r.quantity,
                "price": r.price,
                "image_url": r.image_url,
            }
            for r in rows
        ],
    }


# -------------------------
# Sales helpers (seller side)
# -------------------------

def list_pending_sales(db: Session, seller_id: int) -> list[dict]:
    rows = (
        db.query(
            Order.order_id,
            Order.status,
            Order.created_at,
            OrderItem.quantity,
            OrderItem.price,
            Listing.title,
            User.email.label("buyer_email"),
        )
        .join(OrderItem, OrderItem.order_id == Order.order_id)
        .join(Listing, OrderItem.listing_id == Listing.listing_id)
        .join(User, Order.user_id == User.user_id)
        .filter(Listing.user_id == seller_id)
        .filter(Order.status != "completed")
        .order_by(Order.created_at.desc(), Order.order_id.desc(), OrderItem.order_item_id.asc())
        .all()
    )
    return [
        {
            "order_id": r.order_id,
            "status": r.status,
            "created_at": r.created_at,
            "title": r.title,
            "buyer_email": r.buyer_email,
            "quantity": r.quantity,
            "price": r.price,
        }
        for r in rows
    ]


# -------------------------
# Vouchers
# -------------------------

def list_active_vouchers(db: Session, today: date | None = None, limit: int = 5) -> list[dict]:
    today = today or date.today()
    vouchers = (
        db.query(Voucher)
        .filter(Voucher.status == "active")
        .filter(Voucher.expiry_date >= today)
        .order_by(Voucher.expiry_date.asc(), Voucher.voucher_id.asc())
        .limit(limit)
        .all()
    )
    return [
        {
            "code": v.code,
            "discount_type": v.discount_type,
            "discount_value": v.discount_value,
            "expiry_date": v.expiry_date,
        }
        for v in vouchers
    ]

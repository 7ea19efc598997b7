import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.agents.router import AgentReply, ORDER_TRACKING
from app.services.formatting import format_date, format_money, normalize_image_url
from app.services.tools import get_latest_order

logger = logging.getLogger(__name__)

NO_ORDERS_REPLY = "You have no recent orders."
ERROR_REPLY = "Sorry, I couldn't fetch your order details due to a system error."


def _format_item_line(item: dict) -> str:
    return f"{item['title']} (x{item['quantity']}) - {format_money(item['price'])}"


def format_order(order: dict) -> str:
    lines = [
        f"Order #{order['order_id']} is currently: {order['status']}",
        f"Order date: {format_date(order['created_at'])}",
        "Items:",
    ]
    lines.extend(_format_item_line(i) for i in order["items"])
    return "\n".join(lines)


def handle(db: Session, user_id: int) -> AgentReply:
    try:
        order = get_latest_order(db, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(
            "Order lookup failed",
            extra={"intent": ORDER_TRACKING, "user_id": user_id, "error_type": type(e).__name__},
        )
        return AgentReply(ERROR_REPLY)

    if not order["found"]:
        return AgentReply(NO_ORDERS_REPLY)

    items = order["items"]
    image = normalize_image_url(items[0]["image_url"]) if items else None
    return AgentReply(format_order(order), image)

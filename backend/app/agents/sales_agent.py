import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.agents.router import AgentReply, SALES_SUMMARY
from app.services.formatting import format_money
from app.services.tools import list_pending_sales

logger = logging.getLogger(__name__)

ALL_DONE_REPLY = "Great job! All of your sales are completed. There are no pending orders for your listings."
ERROR_REPLY = "Sorry, I couldn't fetch your sales details due to a system error."


def format_sales_summary(sales: list[dict]) -> str:
    """Count of open sales plus the details of the newest one."""
    pending = len({s["order_id"] for s in sales})
    latest = sales[0]
    noun = "sale" if pending == 1 else "sales"
    return "\n".join([
        f"You have {pending} uncompleted {noun}.",
        "Most recent:",
        f"Order #{latest['order_id']} - {latest['title']}",
        f"Buyer: {latest['buyer_email']}",
        f"Quantity: {latest['quantity']}",
        f"Price: {format_money(latest['price'])}",
        f"Status: {latest['status']}",
    ])


def handle(db: Session, user_id: int) -> AgentReply:
    try:
        sales = list_pending_sales(db, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(
            "Sales lookup failed",
            extra={"intent": SALES_SUMMARY, "user_id": user_id, "error_type": type(e).__name__},
        )
        return AgentReply(ERROR_REPLY)

    if not sales:
        return AgentReply(ALL_DONE_REPLY)
    return AgentReply(format_sales_summary(sales))

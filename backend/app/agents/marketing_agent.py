import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.agents.router import AgentReply, VOUCHERS
from app.core.config import settings
from app.services.formatting import format_date, format_discount
from app.services.tools import list_active_vouchers

logger = logging.getLogger(__name__)

NO_VOUCHERS_REPLY = "There are no vouchers available right now."
ERROR_REPLY = "Sorry, I couldn't fetch vouchers due to a system error."


def format_voucher(v: dict) -> str:
    discount = format_discount(v["discount_type"], v["discount_value"])
    return f"{v['code']}: {discount} off (expires {format_date(v['expiry_date'])})"


def format_vouchers(vouchers: list[dict]) -> str:
    lines = ["Available vouchers:"]
    lines.extend(format_voucher(v) for v in vouchers)
    return "\n".join(lines)


def handle(db: Session, user_id: int, today: date | None = None) -> AgentReply:
    try:
        vouchers = list_active_vouchers(db, today=today, limit=settings.VOUCHER_LIMIT)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(
            "Voucher lookup failed",
            extra={"intent": VOUCHERS, "user_id": user_id, "error_type": type(e).__name__},
        )
        return AgentReply(ERROR_REPLY)

    if not vouchers:
        return AgentReply(NO_VOUCHERS_REPLY)
    return AgentReply(format_vouchers(vouchers))

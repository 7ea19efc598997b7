from app.models.user import User
from app.models.listing import Listing, ListingImage
from app.models.order import Order, OrderItem
from app.models.voucher import Voucher, UserVoucher
from app.models.message import ChatbotMessage

__all__ = [
    "User",
    "Listing",
    "ListingImage",
    "Order",
    "OrderItem",
    "Voucher",
    "UserVoucher",
    "ChatbotMessage",
]

from typing import NamedTuple


class Promotion(NamedTuple):
    title: str
    details: str


GREEN_TIPS = (
    "Use reusable bags when shopping to reduce plastic waste!",
    "Choose secondhand items to help the environment and save money.",
    "Ship multiple items together to minimize packaging.",
    "Donate or resell items you no longer need instead of throwing them away.",
    "Opt for eco-friendly packaging when selling your products.",
)

ACTIVE_PROMOS = (
    Promotion("10% Off First Purchase!", "Use code VINTIQUE10 at checkout."),
    Promotion("Free Shipping Weekend", "Enjoy free shipping on all orders over $30 this weekend only!"),
)

NO_PROMOS_REPLY = "No active promotions at the moment."

GREETING_REPLY = (
    "Hello! How can I assist you today? If you're looking for sustainable products "
    "or have any questions about eco-friendly practices, feel free to ask!"
)

HELP_REPLY = (
    "I can help you with:\n"
    "- Tracking your orders\n"
    "- Checking your pending sales\n"
    "- Creating or managing listings\n"
    "- Available vouchers\n"
    "- Eco-friendly shopping tips\n"
    "- Current promotions\n"
    "- Refunds and returns\n"
    "Just ask me anything!"
)

SELLING_HELP_REPLY = (
    "To sell an item:\n"
    "1. Go to 'Post Product' in your dashboard.\n"
    "2. Fill in the details and upload clear photos.\n"
    "3. Set your price and submit.\n"
    "Your listing will be live for buyers to see!"
)

REFUND_REPLY = (
    "Our return policy: You can request a return or refund within 7 days of receiving "
    "your item if it is not as described. Please contact support with your order details."
)

MAIN_MENU = (
    "Sell an Item",
    "Track Order",
    "My Vouchers",
    "Get Eco Tip",
    "See Promotions",
    "Return/Refund Info",
)

SHORT_MENU = (
    "Help",
    "Sell an Item",
    "Track Order",
)

SELLING_MENU = (
    "Help",
    "Track Order",
    "Get Eco Tip",
)

"""Rule-based intent router for the Vintique chatbot.

Rules are evaluated top to bottom and the first match wins, so the order of
INTENT_RULES is the priority table:

    1. greeting        hi, hello, hey, greetings
    2. help            help, what can you do, can you help, assist
    3. selling_help    sell, post item, upload
    4. green_tips      eco, green, sustainability
    5. vouchers        voucher(s), coupon(s)
    6. promo           promo(s), promotion(s), discount(s), deal(s)
    7. refund_return   refund, return
    8. order_tracking  order(s), track, status, purchase, my order(s)
    9. sales_summary   my sales, pending sales, open sales, uncompleted sales,
                       sales not completed, latest sale

Nothing matched -> "default" with no reply (the LLM fallback answers).
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Callable

from app.agents import content

GREETING = "greeting"
HELP = "help"
SELLING_HELP = "selling_help"
GREEN_TIPS = "green_tips"
VOUCHERS = "vouchers"
PROMO = "promo"
REFUND_RETURN = "refund_return"
ORDER_TRACKING = "order_tracking"
SALES_SUMMARY = "sales_summary"
DEFAULT = "default"

INTENTS = (
    GREETING, HELP, SELLING_HELP, GREEN_TIPS, VOUCHERS, PROMO,
    REFUND_RETURN, ORDER_TRACKING, SALES_SUMMARY, DEFAULT,
)

# Intents whose reply must be built from the database
DATA_INTENTS = {ORDER_TRACKING, SALES_SUMMARY, VOUCHERS}


@dataclass(frozen=True)
class ClassificationResult:
    intent: str
    reply: str | None = None
    quick_replies: tuple[str, ...] | None = None


@dataclass(frozen=True)
class AgentReply:
    """What a data-backed or fallback agent hands back to the graph."""
    reply: str
    image: str | None = None


@dataclass(frozen=True)
class IntentRule:
    intent: str
    pattern: re.Pattern
    build: Callable[[random.Random], ClassificationResult]


def random_green_tip(rng: random.Random) -> str:
    return rng.choice(content.GREEN_TIPS)


def active_promos(promos=content.ACTIVE_PROMOS) -> str:
    if not promos:
        return content.NO_PROMOS_REPLY
    return "\n".join(f"{p.title}: {p.details}" for p in promos)


def _static(intent: str, reply: str, quick_replies: tuple[str, ...]):
    return lambda rng: ClassificationResult(intent, reply, quick_replies)


def _data(intent: str):
    return lambda rng: ClassificationResult(intent)


def _kw(*words: str) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(words) + r")\b")


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        GREETING,
        _kw("hi", "hello", "hey", "greetings"),
        _static(GREETING, content.GREETING_REPLY, content.MAIN_MENU),
    ),
    IntentRule(
        HELP,
        _kw("help", "what can you do", "can you help", "assist"),
        _static(HELP, content.HELP_REPLY, content.MAIN_MENU),
    ),
    IntentRule(
        SELLING_HELP,
        _kw("sell", "post item", "upload"),
        _static(SELLING_HELP, content.SELLING_HELP_REPLY, content.SELLING_MENU),
    ),
    IntentRule(
        GREEN_TIPS,
        _kw("eco", "green", "sustainability"),
        lambda rng: ClassificationResult(GREEN_TIPS, random_green_tip(rng), content.SHORT_MENU),
    ),
    IntentRule(
        VOUCHERS,
        _kw("vouchers?", "coupons?"),
        _data(VOUCHERS),
    ),
    IntentRule(
        PROMO,
        _kw("promos?", "promotions?", "discounts?", "deals?"),
        lambda rng: ClassificationResult(PROMO, active_promos(), content.SHORT_MENU),
    ),
    IntentRule(
        REFUND_RETURN,
        _kw("refund", "return"),
        _static(REFUND_RETURN, content.REFUND_REPLY, content.SHORT_MENU),
    ),
    IntentRule(
        ORDER_TRACKING,
        _kw("order", "orders", "track", "status", "purchase", "my orders", "my order"),
        _data(ORDER_TRACKING),
    ),
    IntentRule(
        SALES_SUMMARY,
        _kw(
            "my sales", "pending sales", "open sales", "uncompleted sales",
            "sales not completed", "latest sale",
        ),
        _data(SALES_SUMMARY),
    ),
)


def classify(message: str, rng: random.Random | None = None) -> ClassificationResult:
    text = (message or "").lower()
    rng = rng or random.Random()
    for rule in INTENT_RULES:
        if rule.pattern.search(text):
            return rule.build(rng)
    return ClassificationResult(DEFAULT)

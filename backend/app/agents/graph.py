import random
from typing import TypedDict

from langgraph.graph import StateGraph, END
from sqlalchemy.orm import Session

from app.agents.router import classify, DEFAULT, ORDER_TRACKING, SALES_SUMMARY, VOUCHERS
from app.agents.fallback_agent import handle as fallback_handle
from app.agents.marketing_agent import handle as vouchers_handle
from app.agents.orders_agent import handle as orders_handle
from app.agents.sales_agent import handle as sales_handle


class ChatState(TypedDict, total=False):
    message: str
    user_id: int
    db: Session
    intent: str
    reply: str
    quick_replies: list[str] | None
    image: str | None


def _next_node(state: ChatState) -> str:
    intent = state["intent"]
    if intent == ORDER_TRACKING:
        return "orders"
    if intent == SALES_SUMMARY:
        return "sales"
    if intent == VOUCHERS:
        return "vouchers"
    if intent == DEFAULT:
        return "fallback"
    return "static"


def build_graph(rng: random.Random | None = None):
    rng = rng or random.Random()

    def router_node(state: ChatState):
        result = classify(state["message"], rng)
        # static intents are fully answered here and go straight to END
        return {
            "intent": result.intent,
            "reply": result.reply,
            "quick_replies": list(result.quick_replies) if result.quick_replies else None,
        }

    def orders_node(state: ChatState):
        out = orders_handle(state["db"], state["user_id"])
        return {"reply": out.reply, "image": out.image}

    def sales_node(state: ChatState):
        out = sales_handle(state["db"], state["user_id"])
        return {"reply": out.reply, "image": out.image}

    def vouchers_node(state: ChatState):
        out = vouchers_handle(state["db"], state["user_id"])
        return {"reply": out.reply, "image": out.image}

    def fallback_node(state: ChatState):
        out = fallback_handle(state["message"])
        return {"reply": out.reply, "image": out.image}

    g = StateGraph(ChatState)
    g.add_node("router", router_node)
    g.add_node("orders", orders_node)
    g.add_node("sales", sales_node)
    g.add_node("vouchers", vouchers_node)
    g.add_node("fallback", fallback_node)

    g.set_entry_point("router")
    g.add_conditional_edges(
        "router",
        _next_node,
        {
            "static": END,
            "orders": "orders",
            "sales": "sales",
            "vouchers": "vouchers",
            "fallback": "fallback",
        },
    )

    for name in ("orders", "sales", "vouchers", "fallback"):
        g.add_edge(name, END)

    return g.compile()

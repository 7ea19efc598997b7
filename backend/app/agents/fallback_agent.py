import logging

from openai import OpenAIError

from app.agents.router import AgentReply, DEFAULT
from app.core.config import settings
from app.services.llm import get_client

logger = logging.getLogger(__name__)

SYSTEM = (
    "You are a friendly chatbot assistant for a sustainable e-commerce platform. "
    "Be concise and helpful. If asked about green tips, highlight sustainability."
)

UNAVAILABLE_REPLY = "Sorry, I'm unable to respond at the moment."


def handle(message: str) -> AgentReply:
    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY not set, skipping completion", extra={"intent": DEFAULT})
        return AgentReply(UNAVAILABLE_REPLY)

    client = get_client()
    try:
        resp = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SYSTEM},
                {"role": "user", "content": message},
            ],
            max_tokens=settings.OPENAI_MAX_TOKENS,
            temperature=settings.OPENAI_TEMPERATURE,
        )
    except OpenAIError as e:
        logger.exception(
            "Completion request failed",
            extra={"intent": DEFAULT, "error_type": type(e).__name__},
        )
        return AgentReply(UNAVAILABLE_REPLY)

    # content-filtered completions can come back with no choices
    text = (resp.choices[0].message.content or "").strip() if resp.choices else ""
    if not text:
        logger.warning("Completion returned no text", extra={"intent": DEFAULT})
        return AgentReply(UNAVAILABLE_REPLY)
    return AgentReply(text)

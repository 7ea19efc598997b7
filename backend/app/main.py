import logging

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import settings
from app.core.db import Base, engine, get_db
from app.core.logging import setup_logging, RequestLoggingMiddleware
from app.core.session import NotAuthenticated, get_current_user_id
from app.schemas.chat import ChatRequest, ChatResponse, HistoryItem
from app.agents.graph import build_graph

# Import models so Base.metadata knows them
import app.models  # noqa
from app.services.chat_store import add_message, load_history

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Vintique Chatbot Backend")

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    session_cookie=settings.SESSION_COOKIE,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=600,
)


@app.exception_handler(NotAuthenticated)
def not_authenticated_handler(request: Request, exc: NotAuthenticated):
    return JSONResponse(status_code=401, content={"error": "Not logged in"})


@app.exception_handler(Exception)
def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Chatbot error",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Create tables (the shared marketplace schema is normally managed elsewhere)
Base.metadata.create_all(bind=engine)

graph = build_graph()

@app.get("/")
def health():
    return {"status": "ok"}

@app.post("/chat/send", response_model=ChatResponse, response_model_exclude_none=True)
def send(
    req: ChatRequest,
    request: Request,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    # 1) Persist the user's message before any routing
    add_message(db, user_id, req.message, is_from_user=True)

    # 2) Run graph (router -> responder); it only computes the reply
    out = graph.invoke({"message": req.message, "user_id": user_id, "db": db})
    request.state.intent = out["intent"]

    # 3) Persist the bot reply with the resolved intent
    add_message(db, user_id, out["reply"], is_from_user=False, intent=out["intent"])

    return ChatResponse(
        reply=out["reply"],
        quick_replies=out.get("quick_replies"),
        image=out.get("image"),
    )


@app.get("/chat/history", response_model=list[HistoryItem])
def history(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    rows = load_history(db, user_id, limit=settings.HISTORY_LIMIT)
    return [HistoryItem(message=r.message, is_from_user=r.is_from_user) for r in rows]

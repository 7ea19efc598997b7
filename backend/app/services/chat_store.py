from sqlalchemy.orm import Session

from app.models.message import ChatbotMessage

def add_message(db: Session, user_id: int, text: str, is_from_user: bool, intent: str | None = None) -> ChatbotMessage:
    msg = ChatbotMessage(
        user_id=user_id,
        message=text,
        is_from_user=is_from_user,
        intent=intent,
    )
    db.add(msg)
    db.commit()
    return msg

def load_history(db: Session, user_id: int, limit: int = 10) -> list[ChatbotMessage]:
    # newest N by id, then flipped back to chronological order
    rows = (
        db.query(ChatbotMessage)
        .filter_by(user_id=user_id)
        .order_by(ChatbotMessage.id.desc())
        .limit(limit)
        .all()
    )
    rows.reverse()
    return rows

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone
from app.core.db import Base

class ChatbotMessage(Base):
    __tablename__ = "ChatbotMessages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column("userId", Integer, index=True)
    message: Mapped[str] = mapped_column(Text)
    is_from_user: Mapped[bool] = mapped_column("isFromUser", Boolean)
    intent: Mapped[str | None] = mapped_column(String(30), nullable=True)  # outbound only
    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )

from pydantic import BaseModel, ConfigDict, Field

class ChatRequest(BaseModel):
    message: str = Field(min_length=1, max_length=2000)


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    quick_replies: list[str] | None = Field(default=None, alias="quickReplies")
    image: str | None = None


class HistoryItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    is_from_user: bool = Field(alias="isFromUser")

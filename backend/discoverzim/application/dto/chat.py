"""Chat records."""

from datetime import datetime
from typing import Optional

from discoverzim.application.dto.base import Record

DEFAULT_CONVERSATION_TITLE = "New Conversation"


class ChatConversation(Record):
    id: str
    title: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ChatMessage(Record):
    """A single message; role is a free-form tag such as "user" or "assistant"."""

    id: str
    conversation_id: Optional[str] = None
    role: str
    content: str
    created_at: Optional[datetime] = None

"""
Chat Repository.

Conversations (`chat_conversations`) own an ordered list of messages
(`chat_messages`). Messages are only ever appended by this layer.
"""

from typing import Optional
from supabase import AsyncClient

from discoverzim.application.dto.chat import (
    DEFAULT_CONVERSATION_TITLE,
    ChatConversation,
    ChatMessage,
)
from discoverzim.infrastructure.persistence.table_accessor import TableAccessor, eq


class ChatRepository:
    def __init__(self, client: AsyncClient):
        self._conversations = TableAccessor(client, "chat_conversations", ChatConversation)
        self._messages = TableAccessor(client, "chat_messages", ChatMessage)

    async def get_user_conversations(self, user_id: str) -> list[ChatConversation]:
        """Most recently updated first."""
        result = await self._conversations.select_many(
            eq("user_id", user_id),
            order_by="updated_at",
            descending=True,
            action=f"fetching conversations for user id {user_id}",
        )
        return result.unwrap_or([])

    async def get_conversation(self, conversation_id: str) -> Optional[ChatConversation]:
        result = await self._conversations.select_one(
            eq("id", conversation_id),
            action=f"fetching conversation with id {conversation_id}",
        )
        return result.unwrap_or(None)

    async def create_conversation(
        self, user_id: str, title: Optional[str] = None
    ) -> Optional[ChatConversation]:
        result = await self._conversations.insert_one(
            {"user_id": user_id, "title": title or DEFAULT_CONVERSATION_TITLE},
            action="creating conversation",
        )
        return result.unwrap_or(None)

    async def get_messages(self, conversation_id: str) -> list[ChatMessage]:
        """Oldest first, the order they are displayed in."""
        result = await self._messages.select_many(
            eq("conversation_id", conversation_id),
            order_by="created_at",
            action=f"fetching messages for conversation id {conversation_id}",
        )
        return result.unwrap_or([])

    async def send_message(
        self, conversation_id: str, role: str, content: str
    ) -> Optional[ChatMessage]:
        result = await self._messages.insert_one(
            {"conversation_id": conversation_id, "role": role, "content": content},
            action="sending message",
        )
        return result.unwrap_or(None)

"""
SendChatMessage Command - One exchange with the travel assistant.

Handler:
1. Load the conversation, or create it when none is given
2. Verify the user owns it
3. Append the user message
4. Ask the assistant with the whole history
5. Append the assistant reply (a fixed apology when the assistant fails)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from discoverzim.application.common.interfaces import Command, CommandHandler
from discoverzim.application.dto.chat import ChatConversation, ChatMessage
from discoverzim.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.domain.ports.assistant_gateway import AssistantGateway
from discoverzim.infrastructure.persistence.chat_repository import ChatRepository

logger = logging.getLogger(__name__)

ASSISTANT_GREETING = (
    "Hello! I'm Kombirai, your Zimbabwe travel assistant. "
    "How can I help plan your journey today?"
)
ASSISTANT_FALLBACK = (
    "I'm sorry, I'm currently experiencing connectivity issues. "
    "Please try again later."
)


@dataclass
class ChatReply:
    conversation: ChatConversation
    user_message: ChatMessage
    assistant_message: ChatMessage


@dataclass(frozen=True)
class SendChatMessageCommand(Command[ChatReply]):
    user_id: str
    content: str
    conversation_id: Optional[str] = None


class SendChatMessageHandler(CommandHandler[ChatReply]):
    def __init__(self, chat: ChatRepository, assistant: AssistantGateway):
        self.chat = chat
        self.assistant = assistant

    async def _conversation(self, command: SendChatMessageCommand) -> ChatConversation:
        if not command.conversation_id:
            conversation = await self.chat.create_conversation(command.user_id)
            if conversation is None:
                raise EntityNotFoundError("Could not start a conversation.")
            return conversation

        conversation = await self.chat.get_conversation(command.conversation_id)
        if conversation is None:
            raise EntityNotFoundError("Conversation not found.")
        if conversation.user_id != command.user_id:
            raise AccessDeniedError("Access denied to this conversation.")
        return conversation

    async def execute(self, command: SendChatMessageCommand) -> ChatReply:
        content = command.content.strip()
        if not content:
            raise DomainValidationError("Message content cannot be empty.")

        conversation = await self._conversation(command)
        user_message = await self.chat.send_message(conversation.id, "user", content)
        if user_message is None:
            raise EntityNotFoundError("Message could not be saved.")

        history = await self.chat.get_messages(conversation.id)
        if not any(message.id == user_message.id for message in history):
            history.append(user_message)

        reply = await self.assistant.ask_assistant(
            [{"role": message.role, "content": message.content} for message in history]
        )
        if reply is None:
            logger.warning(f"Assistant unavailable for conversation {conversation.id}")
            reply = ASSISTANT_FALLBACK

        assistant_message = await self.chat.send_message(conversation.id, "assistant", reply)
        if assistant_message is None:
            raise EntityNotFoundError("Reply could not be saved.")

        return ChatReply(
            conversation=conversation,
            user_message=user_message,
            assistant_message=assistant_message,
        )

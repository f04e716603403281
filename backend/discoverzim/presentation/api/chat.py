"""
Chat API Router - Conversations with the travel assistant.

Endpoints:
- GET /chat/conversations                    the user's conversations
- POST /chat/conversations                   start one (returns the greeting)
- GET /chat/conversations/{conversation_id}  conversation with its messages
- POST /chat/messages                        send a message, get the reply
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from discoverzim.application.commands.chat import (
    ASSISTANT_GREETING,
    SendChatMessageCommand,
    SendChatMessageHandler,
)
from discoverzim.application.dto.chat import ChatConversation, ChatMessage
from discoverzim.domain.entities.session import SessionState
from discoverzim.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.infrastructure.persistence import ChatRepository
from discoverzim.presentation.dependencies.auth import require_session

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(BaseModel):
    title: Optional[str] = None


class CreateConversationResponse(BaseModel):
    conversation: ChatConversation
    greeting: str


class ConversationResponse(BaseModel):
    conversation: ChatConversation
    messages: list[ChatMessage]


class SendMessageRequest(BaseModel):
    content: str
    conversation_id: Optional[str] = None


class SendMessageResponse(BaseModel):
    conversation_id: str
    user_message: ChatMessage
    assistant_message: ChatMessage


# ==================== ROUTER ====================

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/conversations", response_model=list[ChatConversation])
@inject
async def list_conversations(
    repository: FromDishka[ChatRepository],
    session: SessionState = Depends(require_session),
):
    return await repository.get_user_conversations(session.user.id)


@router.post(
    "/conversations",
    response_model=CreateConversationResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    repository: FromDishka[ChatRepository],
    session: SessionState = Depends(require_session),
):
    conversation = await repository.create_conversation(session.user.id, request.title)
    if conversation is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to create conversation",
        )
    return CreateConversationResponse(conversation=conversation, greeting=ASSISTANT_GREETING)


@router.get("/conversations/{conversation_id}", response_model=ConversationResponse)
@inject
async def get_conversation(
    conversation_id: str,
    repository: FromDishka[ChatRepository],
    session: SessionState = Depends(require_session),
):
    conversation = await repository.get_conversation(conversation_id)
    if conversation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Conversation not found"
        )
    if conversation.user_id != session.user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied to this conversation",
        )
    messages = await repository.get_messages(conversation_id)
    return ConversationResponse(conversation=conversation, messages=messages)


@router.post("/messages", response_model=SendMessageResponse)
@inject
async def send_message(
    request: SendMessageRequest,
    handler: FromDishka[SendChatMessageHandler],
    session: SessionState = Depends(require_session),
):
    """Append the user's message and the assistant's reply to a conversation."""
    try:
        reply = await handler.execute(
            SendChatMessageCommand(
                user_id=session.user.id,
                content=request.content,
                conversation_id=request.conversation_id,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message
        ) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    return SendMessageResponse(
        conversation_id=reply.conversation.id,
        user_message=reply.user_message,
        assistant_message=reply.assistant_message,
    )

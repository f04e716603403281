from discoverzim.application.commands.chat.send_chat_message import (
    ASSISTANT_FALLBACK,
    ASSISTANT_GREETING,
    ChatReply,
    SendChatMessageCommand,
    SendChatMessageHandler,
)

__all__ = [
    "ASSISTANT_FALLBACK",
    "ASSISTANT_GREETING",
    "ChatReply",
    "SendChatMessageCommand",
    "SendChatMessageHandler",
]

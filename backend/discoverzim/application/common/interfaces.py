"""
Base interfaces for the application workflows.

Usage:
    @dataclass(frozen=True)
    class SendChatMessageCommand(Command[ChatReply]):
        user_id: str
        content: str

    class SendChatMessageHandler(CommandHandler[ChatReply]):
        def __init__(self, chat: ChatRepository, assistant: AssistantGateway):
            self.chat = chat
            self.assistant = assistant

        async def execute(self, command: SendChatMessageCommand) -> ChatReply:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

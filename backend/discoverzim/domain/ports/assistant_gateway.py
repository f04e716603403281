"""
AssistantGateway Port - Produces an assistant reply for a chat history.
Implementation: discoverzim/infrastructure/functions/edge_functions.py
"""

from abc import ABC, abstractmethod
from typing import Optional


class AssistantGateway(ABC):
    @abstractmethod
    async def ask_assistant(self, messages: list[dict[str, str]]) -> Optional[str]:
        """Return the reply text, or None when the assistant is unavailable."""
        ...

"""
MailGateway Port - Sends transactional email about bookings.
Implementation: discoverzim/infrastructure/functions/edge_functions.py
"""

from abc import ABC, abstractmethod
from typing import Any


class MailGateway(ABC):
    @abstractmethod
    async def send_booking_confirmation(self, booking: dict[str, Any]) -> bool: ...

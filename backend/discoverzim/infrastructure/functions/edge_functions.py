"""
Edge Function Gateway - Calls the hosted functions next to the data store.

Functions:
- chat-assistant: {"messages": [{role, content}, ...]} -> {"message": str}
- send-email:     {"templateType": ..., "bookingData": {...}} -> anything

Neither call is allowed to break the workflow that triggered it: failures
are logged and reported as None / False.
"""

import json
import logging
from typing import Any, Optional
from supabase import AsyncClient

from discoverzim.domain.ports.assistant_gateway import AssistantGateway
from discoverzim.domain.ports.mail_gateway import MailGateway

logger = logging.getLogger(__name__)

BOOKING_CONFIRMATION_TEMPLATE = "bookingConfirmation"


class EdgeFunctionGateway(AssistantGateway, MailGateway):
    def __init__(
        self,
        client: AsyncClient,
        assistant_function: str = "chat-assistant",
        email_function: str = "send-email",
    ):
        self._client = client
        self.assistant_function = assistant_function
        self.email_function = email_function

    async def _invoke(self, name: str, body: dict[str, Any]) -> Any:
        response = await self._client.functions.invoke(
            name, invoke_options={"body": body, "responseType": "json"}
        )
        # Older clients hand back raw bytes regardless of responseType
        if isinstance(response, (bytes, bytearray)):
            return json.loads(response) if response else None
        return response

    async def ask_assistant(self, messages: list[dict[str, str]]) -> Optional[str]:
        try:
            data = await self._invoke(self.assistant_function, {"messages": messages})
        except Exception as e:
            logger.error(f"Error calling {self.assistant_function}: {e}")
            return None
        if not isinstance(data, dict) or not data.get("message"):
            logger.warning(f"{self.assistant_function} returned no message")
            return None
        return data["message"]

    async def send_booking_confirmation(self, booking: dict[str, Any]) -> bool:
        try:
            await self._invoke(
                self.email_function,
                {
                    "templateType": BOOKING_CONFIRMATION_TEMPLATE,
                    "bookingData": booking,
                },
            )
        except Exception as e:
            logger.error(f"Error sending confirmation email: {e}")
            return False
        logger.info(f"Confirmation email requested for booking {booking.get('id')}")
        return True

"""Message bus: formats integration messages for the bus transport."""

import logging

from .ports import BusPort

logger = logging.getLogger(__name__)


class MessageBus:
    """Turns domain facts into bus messages and hands them to a BusPort."""

    def __init__(self, bus: BusPort):
        """Initialize the message bus.

        Args:
            bus: BusPort implementation that delivers the formatted text.
        """
        self.bus = bus

    async def send_email_changed_message(self, user_id: int, new_email: str) -> None:
        """Announce that a user's email changed."""
        message = self.format_email_changed_message(user_id, new_email)
        await self.bus.send(message)
        logger.debug(
            f"Sent email changed message for user {user_id}",
            extra={"user_id": user_id},
        )

    @staticmethod
    def format_email_changed_message(user_id: int, new_email: str) -> str:
        return (
            "Type: USER EMAIL CHANGED; "
            f"Id: {user_id}; "
            f"NewEmail: {new_email}"
        )

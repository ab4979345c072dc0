"""BusPort spy for testing.

A hand-written spy: it records what was sent and offers fluent
assertions, so tests read as a description of the outgoing messages.
"""

from staffsync.core.message_bus import MessageBus
from staffsync.core.ports import BusPort


class BusSpy(BusPort):
    """Captures every message sent through the bus."""

    def __init__(self):
        """Initialize with no sent messages."""
        self.sent_messages: list[str] = []
        self.should_fail: bool = False
        self.fail_message: str = "Bus unavailable"

    async def send(self, message: str) -> None:
        if self.should_fail:
            raise RuntimeError(self.fail_message)
        self.sent_messages.append(message)

    def should_send_number_of_messages(self, number: int) -> "BusSpy":
        assert len(self.sent_messages) == number, (
            f"Expected {number} messages, got {len(self.sent_messages)}: "
            f"{self.sent_messages}"
        )
        return self

    def with_email_changed_message(self, user_id: int, new_email: str) -> "BusSpy":
        message = MessageBus.format_email_changed_message(user_id, new_email)
        assert message in self.sent_messages, (
            f"No message {message!r} in {self.sent_messages}"
        )
        return self

    def set_should_fail(self, should_fail: bool, message: str = "Bus unavailable") -> None:
        """Configure the spy to fail on the next send."""
        self.should_fail = should_fail
        self.fail_message = message

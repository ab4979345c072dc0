"""Event dispatcher: routes recorded domain events to their handlers.

Each event kind has exactly one handler:

- EMAIL_CHANGED -> MessageBus.send_email_changed_message
- USER_TYPE_CHANGED -> DomainLoggerPort.user_type_has_changed

Events are handled one at a time, in the order they were recorded.
Events whose kind has no entry in the table are skipped.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from .message_bus import MessageBus
from .models import DomainEvent, EmailChangedEvent, EventKind, UserTypeChangedEvent
from .ports import DomainLoggerPort

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Awaitable[None]]


class EventDispatcher:
    """Dispatches domain events to the message bus or the domain logger."""

    def __init__(self, message_bus: MessageBus, domain_logger: DomainLoggerPort):
        """Initialize the dispatcher.

        Args:
            message_bus: Receives EmailChangedEvent notifications.
            domain_logger: Receives UserTypeChangedEvent records.
        """
        self.message_bus = message_bus
        self.domain_logger = domain_logger
        self._handlers: dict[EventKind, EventHandler] = {
            EventKind.EMAIL_CHANGED: self._on_email_changed,
            EventKind.USER_TYPE_CHANGED: self._on_user_type_changed,
        }

    async def dispatch(self, events: Iterable[DomainEvent]) -> None:
        """Dispatch every event in emission order."""
        for event in events:
            await self._dispatch_one(event)

    async def _dispatch_one(self, event: DomainEvent) -> None:
        handler = self._handlers.get(getattr(event, "kind", None))  # type: ignore[arg-type]
        if handler is None:
            logger.debug(f"No handler for event {event!r}, skipping")
            return
        await handler(event)

    async def _on_email_changed(self, event: EmailChangedEvent) -> None:
        await self.message_bus.send_email_changed_message(
            event.user_id, event.new_email
        )

    async def _on_user_type_changed(self, event: UserTypeChangedEvent) -> None:
        self.domain_logger.user_type_has_changed(
            event.user_id, event.old_type, event.new_type
        )

"""Stdout bus adapter.

Implements BusPort by printing each message to the terminal.
"""

import asyncio
import logging

from staffsync.core.ports import BusPort

logger = logging.getLogger(__name__)


class StdoutBus(BusPort):
    """Prints bus messages to stdout."""

    def __init__(self, prefix: str = "[bus]"):
        """Initialize stdout bus adapter.

        Args:
            prefix: Text printed before every message. Empty for none.
        """
        self.prefix = prefix

    async def send(self, message: str) -> None:
        """Print a message to stdout."""
        line = f"{self.prefix} {message}" if self.prefix else message
        await asyncio.to_thread(print, line)

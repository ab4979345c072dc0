"""Domain logger: writes domain-significant facts to the application log."""

import logging

from .models import UserType
from .ports import DomainLoggerPort


class DomainLogger(DomainLoggerPort):
    """DomainLoggerPort backed by a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None):
        """Initialize the domain logger.

        Args:
            logger: Logger to write to. Defaults to this module's logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    def user_type_has_changed(
        self, user_id: int, old_type: UserType, new_type: UserType
    ) -> None:
        self.logger.info(
            f"User {user_id} changed type from {old_type.name} to {new_type.name}",
            extra={
                "user_id": user_id,
                "old_type": old_type.name,
                "new_type": new_type.name,
            },
        )

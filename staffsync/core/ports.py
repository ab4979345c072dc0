"""Port interfaces for the staffsync email-change workflow.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - DatabasePort: Load and persist raw user and company rows
   - BusPort: Transport for outgoing integration messages
   - DomainLoggerPort: Record domain-significant facts for operators

2. **Driving Ports** (adapters/external systems call into core)
   - UserManagementPort: Entry point for email changes
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import Company, User, UserType


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class DatabasePort(ABC):
    """Port for reading and writing user and company rows.

    Rows are returned raw, in the field order the factories expect:

    - user: (user_id, email, type_code, is_email_confirmed)
    - company: (domain_name, number_of_employees)

    The store offers no locking or optimistic concurrency; two callers
    editing the same user or company can overwrite each other.
    """

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> tuple[Any, ...]:
        """Retrieve the raw row for a user.

        Args:
            user_id: Identifier of the user.

        Returns:
            Tuple of (user_id, email, type_code, is_email_confirmed).

        Raises:
            LookupError: If no user has this identifier.
            Exception: If the database is unavailable.
        """

    @abstractmethod
    async def save_user(self, user: User) -> None:
        """Insert or update a user.

        A user_id of 0 means the user has never been stored: the row is
        inserted and the new identifier is written back to user.user_id.
        Any other user_id updates the existing row.

        Raises:
            Exception: If the database is unavailable.
        """

    @abstractmethod
    async def get_company(self) -> tuple[Any, ...]:
        """Retrieve the raw row for the company.

        Returns:
            Tuple of (domain_name, number_of_employees).

        Raises:
            LookupError: If no company has been stored.
            Exception: If the database is unavailable.
        """

    @abstractmethod
    async def save_company(self, company: Company) -> None:
        """Persist the company as the only stored company.

        Updates the row with the same domain name, or replaces the stored
        company when the domain name differs.

        Raises:
            Exception: If the database is unavailable.
        """


class BusPort(ABC):
    """Port for the message transport behind the message bus.

    Adapters deliver the already formatted text to an external system
    (stdout, an HTTP endpoint, a broker, etc.).
    """

    @abstractmethod
    async def send(self, message: str) -> None:
        """Deliver a single message.

        Args:
            message: Fully formatted message text.

        Raises:
            Exception: If the transport is unavailable.
        """


class DomainLoggerPort(ABC):
    """Port for recording domain-significant facts.

    Synchronous: implementations write to a log, they do not perform I/O
    the caller has to wait for.
    """

    @abstractmethod
    def user_type_has_changed(
        self, user_id: int, old_type: UserType, new_type: UserType
    ) -> None:
        """Record that a user's classification changed.

        Args:
            user_id: Identifier of the user.
            old_type: Classification before the change.
            new_type: Classification after the change.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class UserManagementPort(ABC):
    """Port for changing a user's email.

    Driving port: the CLI invokes these methods. The implementation
    lives in the core (user_controller.py).
    """

    @abstractmethod
    async def change_email(self, user_id: int, new_email: str) -> str:
        """Change a user's email address.

        High-level flow:
        1. Load the user
        2. Reject if the email is already confirmed
        3. Load the company and apply the change
        4. Persist company, then user
        5. Dispatch the recorded domain events

        Args:
            user_id: Identifier of the user.
            new_email: The new email address.

        Returns:
            "OK" on success, or the rejection reason.

        Raises:
            ContractViolationError: On a broken precondition (malformed
                email, employee count going negative).
            LookupError: If the user or company does not exist.
        """

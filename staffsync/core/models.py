"""Domain models for the staffsync email-change workflow.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .precondition import requires


class UserType(Enum):
    """Classification of a user relative to the company.

    The integer value is the type code stored in the user row.
    """

    CUSTOMER = 1
    EMPLOYEE = 2


class EventKind(Enum):
    """Tag identifying each domain event variant."""

    EMAIL_CHANGED = "email_changed"
    USER_TYPE_CHANGED = "user_type_changed"


@dataclass(frozen=True)
class EmailChangedEvent:
    """A user's email address was changed."""

    user_id: int
    new_email: str

    @property
    def kind(self) -> EventKind:
        return EventKind.EMAIL_CHANGED


@dataclass(frozen=True)
class UserTypeChangedEvent:
    """A user's classification flipped as a side effect of an email change."""

    user_id: int
    old_type: UserType
    new_type: UserType

    @property
    def kind(self) -> EventKind:
        return EventKind.USER_TYPE_CHANGED


DomainEvent: TypeAlias = EmailChangedEvent | UserTypeChangedEvent

CANNOT_CHANGE_CONFIRMED_EMAIL = "Can't change email after it's confirmed"


class Company:
    """The company whose domain decides who counts as an employee.

    The domain name is fixed at creation. The employee count never goes
    negative; adjustments that would break this fail before mutating.
    """

    def __init__(self, domain_name: str, number_of_employees: int):
        requires(
            number_of_employees >= 0,
            f"number_of_employees must be non-negative, got {number_of_employees}",
        )
        self._domain_name = domain_name
        self._number_of_employees = number_of_employees

    @property
    def domain_name(self) -> str:
        return self._domain_name

    @property
    def number_of_employees(self) -> int:
        return self._number_of_employees

    def change_number_of_employees(self, delta: int) -> None:
        """Adjust the employee count by delta."""
        requires(
            self._number_of_employees + delta >= 0,
            f"Employee count cannot go below zero "
            f"(current {self._number_of_employees}, delta {delta})",
        )
        self._number_of_employees += delta

    def is_email_corporate(self, email: str) -> bool:
        """Does the email's domain part match the company domain exactly?

        Raises:
            ContractViolationError: If the email does not contain exactly one '@'.
        """
        requires(email.count("@") == 1, f"Malformed email address: {email!r}")
        email_domain = email.split("@")[1]
        return email_domain == self._domain_name

    def __repr__(self) -> str:
        return (
            f"Company(domain_name={self._domain_name!r}, "
            f"number_of_employees={self._number_of_employees})"
        )


class User:
    """A user whose email and classification are managed by staffsync.

    Email and type change only through change_email(). The confirmed flag
    is fixed at creation. user_id is 0 until the store assigns one.

    Domain events produced by change_email() accumulate in domain_events
    in emission order until the caller drains them with pull_domain_events().
    """

    def __init__(
        self,
        user_id: int,
        email: str,
        type: UserType,  # noqa: A002
        is_email_confirmed: bool,
    ):
        self.user_id = user_id
        self._email = email
        self._type = type
        self._is_email_confirmed = is_email_confirmed
        self.domain_events: list[DomainEvent] = []

    @property
    def email(self) -> str:
        return self._email

    @property
    def type(self) -> UserType:
        return self._type

    @property
    def is_email_confirmed(self) -> bool:
        return self._is_email_confirmed

    def can_change_email(self) -> str | None:
        """Return the rejection reason, or None if the email may change."""
        if self._is_email_confirmed:
            return CANNOT_CHANGE_CONFIRMED_EMAIL
        return None

    def change_email(self, new_email: str, company: Company) -> None:
        """Change the email and reclassify the user against the company.

        The caller must have checked can_change_email() first.

        Events are recorded in a fixed order: UserTypeChangedEvent (only if
        the classification flips), then EmailChangedEvent.

        Raises:
            ContractViolationError: If the email may not be changed, the new
                email is malformed, or the employee count would go negative.
        """
        requires(self.can_change_email() is None, CANNOT_CHANGE_CONFIRMED_EMAIL)

        if self._email == new_email:
            return

        new_type = (
            UserType.EMPLOYEE
            if company.is_email_corporate(new_email)
            else UserType.CUSTOMER
        )

        if self._type != new_type:
            delta = 1 if new_type == UserType.EMPLOYEE else -1
            company.change_number_of_employees(delta)
            self._add_domain_event(
                UserTypeChangedEvent(self.user_id, self._type, new_type)
            )

        self._email = new_email
        self._type = new_type
        self._add_domain_event(EmailChangedEvent(self.user_id, new_email))

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return and clear the recorded domain events."""
        events = list(self.domain_events)
        self.domain_events.clear()
        return events

    def _add_domain_event(self, event: DomainEvent) -> None:
        self.domain_events.append(event)

    def __repr__(self) -> str:
        return (
            f"User(user_id={self.user_id}, email={self._email!r}, "
            f"type={self._type.name}, is_email_confirmed={self._is_email_confirmed})"
        )

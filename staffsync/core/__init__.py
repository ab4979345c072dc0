"""Core domain logic for the staffsync email-change workflow.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    Company,
    DomainEvent,
    EmailChangedEvent,
    EventKind,
    User,
    UserType,
    UserTypeChangedEvent,
)
from .precondition import ContractViolationError

__all__ = [
    "Company",
    "ContractViolationError",
    "DomainEvent",
    "EmailChangedEvent",
    "EventKind",
    "User",
    "UserType",
    "UserTypeChangedEvent",
]

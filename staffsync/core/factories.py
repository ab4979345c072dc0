"""Rebuild domain entities from raw store rows.

Row layouts are the only contract between the core and storage:

- user: (user_id, email, type_code, is_email_confirmed)
- company: (domain_name, number_of_employees)
"""

from collections.abc import Sequence
from typing import Any

from .models import Company, User, UserType
from .precondition import requires


class UserFactory:
    """Builds User entities from raw user rows."""

    @staticmethod
    def create(data: Sequence[Any]) -> User:
        requires(len(data) >= 4, f"User row needs 4 fields, got {len(data)}")

        user_id = int(data[0])
        email = str(data[1])
        user_type = UserType(int(data[2]))
        is_email_confirmed = bool(data[3])

        return User(user_id, email, user_type, is_email_confirmed)


class CompanyFactory:
    """Builds Company entities from raw company rows."""

    @staticmethod
    def create(data: Sequence[Any]) -> Company:
        requires(len(data) >= 2, f"Company row needs 2 fields, got {len(data)}")

        domain_name = str(data[0])
        number_of_employees = int(data[1])

        return Company(domain_name, number_of_employees)


__all__ = ["CompanyFactory", "UserFactory"]

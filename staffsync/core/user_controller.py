"""User controller: implements UserManagementPort for email changes.

This is the core service that orchestrates a single email change:
load the user, check the business rule, load the company, apply the
change, persist both entities and dispatch the resulting domain events.
It also offers the small seeding and read-back operations the CLI uses.
"""

import logging

from .event_dispatcher import EventDispatcher
from .factories import CompanyFactory, UserFactory
from .message_bus import MessageBus
from .models import Company, User, UserType
from .ports import DatabasePort, DomainLoggerPort, UserManagementPort

logger = logging.getLogger(__name__)

OK = "OK"


class UserController(UserManagementPort):
    """Core implementation of UserManagementPort.

    Persistence of the company and the user is not wrapped in a
    transaction, and no lock guards the read-modify-write of either row.
    """

    def __init__(
        self,
        database: DatabasePort,
        message_bus: MessageBus,
        domain_logger: DomainLoggerPort,
    ):
        """Initialize the user controller.

        Args:
            database: DatabasePort implementation for persistence.
            message_bus: MessageBus for outgoing email changed messages.
            domain_logger: DomainLoggerPort for user type changes.
        """
        self.database = database
        self.event_dispatcher = EventDispatcher(message_bus, domain_logger)

    async def change_email(self, user_id: int, new_email: str) -> str:
        """Change a user's email address.

        Returns:
            "OK" on success, or the rejection reason when the email is
            already confirmed. A rejection leaves storage untouched and
            dispatches nothing.

        Raises:
            ContractViolationError: If the new email is malformed or the
                employee count would go negative.
            LookupError: If the user or company does not exist.
        """
        user_data = await self.database.get_user_by_id(user_id)
        user = UserFactory.create(user_data)

        error = user.can_change_email()
        if error is not None:
            logger.info(
                f"Email change rejected for user {user_id}: {error}",
                extra={"user_id": user_id},
            )
            return error

        company_data = await self.database.get_company()
        company = CompanyFactory.create(company_data)

        user.change_email(new_email, company)

        await self.database.save_company(company)
        await self.database.save_user(user)

        events = user.pull_domain_events()
        await self.event_dispatcher.dispatch(events)

        logger.info(
            f"Email change processed for user {user_id}",
            extra={
                "user_id": user_id,
                "user_type": user.type.name,
                "events_dispatched": len(events),
            },
        )
        return OK

    async def create_user(
        self,
        email: str,
        user_type: UserType,
        is_email_confirmed: bool = False,
    ) -> User:
        """Store a new user and return it with its assigned identifier."""
        user = User(0, email, user_type, is_email_confirmed)
        await self.database.save_user(user)
        logger.info(f"User {user.user_id} created", extra={"user_id": user.user_id})
        return user

    async def create_company(self, domain_name: str, number_of_employees: int) -> Company:
        """Store the company record and return it."""
        company = Company(domain_name, number_of_employees)
        await self.database.save_company(company)
        logger.info(
            f"Company {domain_name} saved",
            extra={"domain_name": domain_name, "number_of_employees": number_of_employees},
        )
        return company

    async def get_user(self, user_id: int) -> User:
        """Load a user from storage."""
        return UserFactory.create(await self.database.get_user_by_id(user_id))

    async def get_company(self) -> Company:
        """Load the company from storage."""
        return CompanyFactory.create(await self.database.get_company())

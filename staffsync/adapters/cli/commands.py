"""CLI command implementations for staffsync.

Maps CLI commands (change_email, create_user, create_company, show_user,
show_company) to UserController operations and turns their outcomes into
JSON-ready dictionaries.
"""

import logging
from typing import Any

from staffsync.core.models import Company, User, UserType
from staffsync.core.precondition import ContractViolationError
from staffsync.core.user_controller import OK, UserController

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to the UserController."""

    def __init__(self, controller: UserController):
        """Initialize the CLI command handler.

        Args:
            controller: UserController that executes the commands.
        """
        self.controller = controller

    async def change_email(self, user_id: int, new_email: str) -> dict[str, Any]:
        """Change a user's email via CLI.

        A business rejection is reported with status "rejected". Missing
        rows and broken preconditions are reported with status "error".
        """
        try:
            result = await self.controller.change_email(user_id, new_email)
        except (LookupError, ContractViolationError) as e:
            logger.error(f"Failed to change email for user {user_id}: {e}")
            return {
                "status": "error",
                "operation": "change_email",
                "user_id": user_id,
                "message": str(e),
            }

        return {
            "status": "success" if result == OK else "rejected",
            "operation": "change_email",
            "user_id": user_id,
            "message": result,
        }

    async def create_user(
        self, email: str, user_type: str = "customer", confirmed: bool = False
    ) -> dict[str, Any]:
        """Create a user via CLI."""
        try:
            parsed_type = UserType[user_type.upper()]
        except KeyError:
            return {
                "status": "error",
                "operation": "create_user",
                "message": f"Unknown user type: {user_type}. Use customer or employee.",
            }

        user = await self.controller.create_user(email, parsed_type, confirmed)
        return {
            "status": "success",
            "operation": "create_user",
            "user": self._user_to_dict(user),
        }

    async def create_company(
        self, domain_name: str, number_of_employees: int = 0
    ) -> dict[str, Any]:
        """Create or overwrite the company via CLI."""
        try:
            company = await self.controller.create_company(domain_name, number_of_employees)
        except ContractViolationError as e:
            return {
                "status": "error",
                "operation": "create_company",
                "message": str(e),
            }
        return {
            "status": "success",
            "operation": "create_company",
            "company": self._company_to_dict(company),
        }

    async def show_user(self, user_id: int) -> dict[str, Any]:
        """Show a stored user."""
        try:
            user = await self.controller.get_user(user_id)
        except LookupError as e:
            return {"status": "error", "operation": "show_user", "message": str(e)}
        return {"status": "success", "operation": "show_user", "user": self._user_to_dict(user)}

    async def show_company(self) -> dict[str, Any]:
        """Show the stored company."""
        try:
            company = await self.controller.get_company()
        except LookupError as e:
            return {"status": "error", "operation": "show_company", "message": str(e)}
        return {
            "status": "success",
            "operation": "show_company",
            "company": self._company_to_dict(company),
        }

    @staticmethod
    def _user_to_dict(user: User) -> dict[str, Any]:
        return {
            "user_id": user.user_id,
            "email": user.email,
            "type": user.type.name.lower(),
            "is_email_confirmed": user.is_email_confirmed,
        }

    @staticmethod
    def _company_to_dict(company: Company) -> dict[str, Any]:
        return {
            "domain_name": company.domain_name,
            "number_of_employees": company.number_of_employees,
        }

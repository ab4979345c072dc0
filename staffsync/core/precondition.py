"""Precondition checks for the core domain.

Violations are programming errors on the caller's side, not business
outcomes, so they are raised rather than returned.
"""


class ContractViolationError(Exception):
    """A caller broke a precondition of a core operation."""


def requires(condition: bool, message: str = "Precondition failed") -> None:
    """Raise ContractViolationError when condition is False."""
    if not condition:
        raise ContractViolationError(message)


__all__ = ["ContractViolationError", "requires"]

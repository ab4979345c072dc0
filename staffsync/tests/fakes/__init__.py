"""Fake/spy implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeDatabasePort: In-memory user and company rows
- BusSpy: Captured bus messages with fluent assertions
- FakeDomainLoggerPort: Captured user type changes
"""

from .bus import BusSpy
from .database import FakeDatabasePort
from .domain_logger import FakeDomainLoggerPort

__all__ = [
    "BusSpy",
    "FakeDatabasePort",
    "FakeDomainLoggerPort",
]

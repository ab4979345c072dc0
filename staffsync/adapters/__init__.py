"""External adapters for staffsync.

This package contains all external dependencies (SQLite, PostgreSQL,
HTTP clients, the terminal) and provides implementations of the core
port interfaces.

Adapter Organization:

- store/: Adapters for user and company persistence (SQLite, PostgreSQL)
- bus/: Adapters for delivering bus messages (stdout, HTTP)
- cli/: Command-line interface commands
"""

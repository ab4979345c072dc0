"""Database adapters for user and company persistence.

Implementations support multiple backends:
- SQLite (zero-config, single-file)
- PostgreSQL (shared, networked)
"""

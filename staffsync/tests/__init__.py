"""Test suite for staffsync.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes, spies and mocks for ports

2. adapters/: Integration tests for adapter implementations
   - Real SQLite files, mocked asyncpg pools and HTTP transports
   - End-to-end email change against the SQLite adapter

3. fakes/: Port implementations for testing
   - In-memory DatabasePort, BusSpy, DomainLoggerPort
   - Used by core unit tests
"""

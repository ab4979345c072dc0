"""Bus adapters that deliver integration messages.

Implementations support multiple transports:
- Stdout (terminal output)
- HTTP (POST to a webhook endpoint)
"""

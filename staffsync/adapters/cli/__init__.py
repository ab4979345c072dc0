"""Command-line interface adapters.

Maps interactive CLI commands onto the user controller.
"""

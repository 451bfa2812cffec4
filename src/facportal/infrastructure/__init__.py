"""Infrastructure layer — SQLite record store.

This layer depends on stdlib and SQLAlchemy.
It must never import from services, commands, or output.
"""

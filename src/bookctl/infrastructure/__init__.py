"""Infrastructure layer: SQLite database and the Store repository.

This layer depends on stdlib and SQLAlchemy only.
It must never import from services, commands, or output.
"""

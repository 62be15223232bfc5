"""Database handle and session management."""

from bloglist.db.database import Database

__all__ = ["Database"]

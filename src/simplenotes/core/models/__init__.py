"""
Database models for SimpleNotes.

Only the persistence adapter in ``core.stores.sqlalchemy_store`` touches
these; the rest of the app works with the ``Note`` schema.
"""

from .base import BaseModel
from .note import NoteRecord

__all__ = [
    "BaseModel",
    "NoteRecord",
]

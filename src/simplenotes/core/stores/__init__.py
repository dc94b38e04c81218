"""Persistence adapters for notes."""

from .interfaces import INoteStore, validate_note_data
from .memory_store import InMemoryNoteStore
from .sqlalchemy_store import SQLAlchemyNoteStore

__all__ = [
    "INoteStore",
    "InMemoryNoteStore",
    "SQLAlchemyNoteStore",
    "validate_note_data",
]

"""Dependency providers for the API routers.

Tests swap the store through ``app.dependency_overrides[get_note_store]``.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.repositories import NoteRepository
from ..core.stores import INoteStore, SQLAlchemyNoteStore
from ..database import get_db_session


def get_note_store(session: AsyncSession = Depends(get_db_session)) -> INoteStore:
    """Get the note store for this request."""
    return SQLAlchemyNoteStore(session)


def get_note_repository(store: INoteStore = Depends(get_note_store)) -> NoteRepository:
    """Get the note repository for this request."""
    return NoteRepository(store)

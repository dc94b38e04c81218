"""Note repository: the only thing the API layer talks to."""

import logging
from typing import List, Optional

from ..schemas.notes import Note, NoteCreate
from ..stores.interfaces import INoteStore

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for notes, independent of the concrete store."""

    def __init__(self, store: INoteStore):
        self.store = store

    async def create(self, request: NoteCreate) -> Note:
        """Create new note."""
        note = await self.store.save(request.model_dump())
        logger.info(f"Created note {note.id}")
        return note

    async def list_all(self) -> List[Note]:
        """Get all notes."""
        return await self.store.find_all()

    async def find_by_id(self, note_id: str) -> Optional[Note]:
        """Get note by ID."""
        return await self.store.find_by_id(note_id)

    async def delete_by_id(self, note_id: str) -> None:
        """Delete note, absent notes are fine."""
        if await self.store.delete_by_id(note_id):
            logger.info(f"Deleted note {note_id}")
        else:
            logger.debug(f"Note {note_id} already absent, nothing to delete")

    async def delete_all(self) -> int:
        """Clear every note. Test support only."""
        count = await self.store.delete_all()
        logger.warning(f"Deleted all notes ({count})")
        return count

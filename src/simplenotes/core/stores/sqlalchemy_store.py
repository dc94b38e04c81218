"""SQLAlchemy-backed note store."""

import logging
from typing import Any, List, Mapping, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..identifiers import parse_note_id
from ..models.note import NoteRecord
from ..schemas.notes import Note
from .interfaces import INoteStore, validate_note_data

logger = logging.getLogger(__name__)


class SQLAlchemyNoteStore(INoteStore):
    """Note store over one async session, commits after each write."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, note_data: Mapping[str, Any]) -> Note:
        record = NoteRecord(**validate_note_data(note_data))
        self.session.add(record)
        try:
            await self.session.commit()
        except Exception:
            logger.error("Failed to save note", exc_info=True)
            await self.session.rollback()
            raise
        await self.session.refresh(record)
        return self._to_entity(record)

    async def find_all(self) -> List[Note]:
        stmt = select(NoteRecord).order_by(NoteRecord.created_at, NoteRecord.id)
        result = await self.session.execute(stmt)
        return [self._to_entity(record) for record in result.scalars().all()]

    async def find_by_id(self, note_id: str) -> Optional[Note]:
        stmt = select(NoteRecord).where(NoteRecord.id == parse_note_id(note_id))
        result = await self.session.execute(stmt)
        record = result.scalar_one_or_none()
        return self._to_entity(record) if record else None

    async def delete_by_id(self, note_id: str) -> bool:
        stmt = delete(NoteRecord).where(NoteRecord.id == parse_note_id(note_id))
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except Exception:
            logger.error(f"Failed to delete note {note_id}", exc_info=True)
            await self.session.rollback()
            raise
        return result.rowcount > 0

    async def delete_all(self) -> int:
        try:
            result = await self.session.execute(delete(NoteRecord))
            await self.session.commit()
        except Exception:
            logger.error("Failed to delete all notes", exc_info=True)
            await self.session.rollback()
            raise
        return result.rowcount

    @staticmethod
    def _to_entity(record: NoteRecord) -> Note:
        return Note.model_validate(record)

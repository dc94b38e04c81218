# Note record as stored in the notes table
from sqlalchemy import Boolean, CheckConstraint, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class NoteRecord(BaseModel):
    """Stored form of a note."""

    __tablename__ = "notes"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    important: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (
        CheckConstraint("length(content) > 0", name="ck_notes_content_not_empty"),
        # listing order
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.content if len(self.content) <= 30 else (self.content[:30] + "...")
        return f"<NoteRecord(id={self.id}, content='{truncated}', important={self.important})>"

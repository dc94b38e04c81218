"""
Persistence adapter interface for notes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ValidationError
from ..schemas.notes import Note


def validate_note_data(note_data: Mapping[str, Any]) -> Dict[str, Any]:
    """Check field constraints before anything is written.

    Returns the document fields to store: ``content`` and ``important``.
    """
    content = note_data.get("content")
    if content is None:
        raise ValidationError("content is required", field="content")
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("content must be a non-empty string", field="content")

    important = note_data.get("important")
    if important is None:
        important = False
    if not isinstance(important, bool):
        raise ValidationError("important must be a boolean", field="important")

    return {"content": content, "important": important}


class INoteStore(ABC):
    """Stores and retrieves notes keyed by identifier."""

    @abstractmethod
    async def save(self, note_data: Mapping[str, Any]) -> Note:
        """Persist a new note and return it with its assigned id."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Note]:
        """Get every stored note."""
        pass

    @abstractmethod
    async def find_by_id(self, note_id: str) -> Optional[Note]:
        """Get note by id, None if absent. Malformed ids raise."""
        pass

    @abstractmethod
    async def delete_by_id(self, note_id: str) -> bool:
        """Remove note if present. Returns whether something was removed."""
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Clear the collection. Returns number of removed notes."""
        pass

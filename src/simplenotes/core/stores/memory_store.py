"""In-memory note store, mostly for tests."""

from typing import Any, Dict, List, Mapping, Optional

from ..identifiers import new_note_id, parse_note_id
from ..schemas.notes import Note
from .interfaces import INoteStore, validate_note_data


class InMemoryNoteStore(INoteStore):
    """Keeps note documents in a dict, in insertion order."""

    def __init__(self):
        self._documents: Dict[str, Dict[str, Any]] = {}

    async def save(self, note_data: Mapping[str, Any]) -> Note:
        fields = validate_note_data(note_data)
        document = {"_id": new_note_id(), **fields}
        self._documents[document["_id"]] = document
        return self._to_entity(document)

    async def find_all(self) -> List[Note]:
        return [self._to_entity(doc) for doc in self._documents.values()]

    async def find_by_id(self, note_id: str) -> Optional[Note]:
        document = self._documents.get(parse_note_id(note_id))
        return self._to_entity(document) if document else None

    async def delete_by_id(self, note_id: str) -> bool:
        return self._documents.pop(parse_note_id(note_id), None) is not None

    async def delete_all(self) -> int:
        count = len(self._documents)
        self._documents.clear()
        return count

    @staticmethod
    def _to_entity(document: Mapping[str, Any]) -> Note:
        return Note(
            id=document["_id"],
            content=document["content"],
            important=document["important"],
        )

"""Test helpers for reading and preparing note state."""

from typing import Any, Dict, List

from simplenotes.core.repositories import NoteRepository
from simplenotes.core.schemas.notes import NoteCreate

INITIAL_NOTES = [
    {"content": "HTML is easy", "important": False},
    {"content": "Browser can execute only JavaScript", "important": True},
]


async def seed_notes(repository: NoteRepository) -> None:
    """Clear the collection and insert INITIAL_NOTES one at a time, in order."""
    await repository.delete_all()
    for note in INITIAL_NOTES:
        await repository.create(NoteCreate(**note))


async def notes_in_db(repository: NoteRepository) -> List[Dict[str, Any]]:
    """Stored notes in the same shape the API returns."""
    notes = await repository.list_all()
    return [note.model_dump(mode="json") for note in notes]


async def non_existing_id(repository: NoteRepository) -> str:
    """Id with a valid shape that no stored note has."""
    note = await repository.create(NoteCreate(content="willremovethissoon"))
    await repository.delete_by_id(note.id)
    return note.id

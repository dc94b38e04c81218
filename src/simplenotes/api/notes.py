"""Notes API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..core.exceptions import NotFoundError
from ..core.repositories import NoteRepository
from ..core.schemas.notes import Note, NoteCreate
from .deps import get_note_repository

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[Note])
async def list_notes(repository: NoteRepository = Depends(get_note_repository)):
    """List all notes."""
    return await repository.list_all()


@router.post("", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    repository: NoteRepository = Depends(get_note_repository),
):
    """Create a new note."""
    return await repository.create(request)


@router.get("/{note_id}", response_model=Note)
async def get_note(note_id: str, repository: NoteRepository = Depends(get_note_repository)):
    """Get a specific note."""
    note = await repository.find_by_id(note_id)
    if note is None:
        raise NotFoundError("note", note_id)
    return note


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, repository: NoteRepository = Depends(get_note_repository)):
    """Delete a note. Deleting an absent note still succeeds."""
    await repository.delete_by_id(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

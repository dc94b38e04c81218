"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .common import ErrorResponse, HealthCheckResponse
from .notes import Note, NoteCreate

__all__ = [
    # Note schemas
    "Note",
    "NoteCreate",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]

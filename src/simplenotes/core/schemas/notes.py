"""
Note schemas.

``NoteCreate`` is the request body for creating a note, ``Note`` is the
entity every layer passes around and the exact JSON shape the API returns.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Note creation request schema."""

    content: str = Field(min_length=1, description="Note text")
    important: bool = Field(default=False, description="Whether the note is flagged important")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        """Reject blank content."""
        if len(v.strip()) == 0:
            raise ValueError("Content cannot be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "async/await simplifies making async calls",
                "important": True,
            }
        }
    )


class Note(BaseModel):
    """Note entity / response schema."""

    id: str = Field(description="Store-assigned identifier (24 hex chars)")
    content: str = Field(description="Note text")
    important: bool = Field(default=False, description="Whether the note is flagged important")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "5a3d5da59070081a82a3445b",
                "content": "HTML is easy",
                "important": False,
            }
        },
    )

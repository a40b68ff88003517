"""
Noteful Backend: Note Request/Response Schemas
===============================================

What:  Pydantic models defining the /api/notes contract.
How:   FastAPI validates request bodies against NoteCreate/NoteUpdate and
       serializes NoteResponse. `name` and `content` are SanitizedText, so
       they are HTML-escaped whenever a note leaves the API.

Required-field order:
    POST bodies are checked name → content → folder_id; the first missing
    field is the one named in the 400 response.
"""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field

from noteful.schemas.common import RequestBody, SanitizedText


class NoteResponse(BaseModel):
    """
    What:  Serialized note.
    Who:   Returned by GET /api/notes (as array items), GET /api/notes/{id}
           and POST /api/notes.
    """
    id: int = Field(description="Note identifier")
    name: SanitizedText = Field(description="Note title (HTML-escaped)")
    modified: datetime = Field(description="Last modification timestamp")
    content: SanitizedText = Field(description="Note body (HTML-escaped)")
    folder_id: int = Field(description="Identifier of the owning folder")

    model_config = {"from_attributes": True}


class NoteCreate(RequestBody):
    """Body of POST /api/notes."""
    name: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id")

    required_fields: ClassVar[Tuple[str, ...]] = ("name", "content", "folder_id")


class NoteUpdate(RequestBody):
    """
    Body of PATCH /api/notes/{id}.

    Null and unknown keys are ignored; `modified` is only written when the
    client sends it.
    """
    name: Optional[str] = Field(default=None)
    content: Optional[str] = Field(default=None)
    folder_id: Optional[int] = Field(default=None)
    modified: Optional[datetime] = Field(default=None)

    empty_message: ClassVar[str] = (
        "Request body must contain either 'name', 'content' or 'folder_id'"
    )

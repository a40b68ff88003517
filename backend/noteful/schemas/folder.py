"""
Noteful Backend: Folder Request/Response Schemas
=================================================

What:  Pydantic models for the /api/folders contract.
How:   FastAPI validates request bodies against FolderCreate/FolderUpdate and
       serializes FolderResponse (escaping `name` on output).
"""

from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field

from noteful.schemas.common import RequestBody, SanitizedText


class FolderResponse(BaseModel):
    """
    What:  Serialized folder.
    Who:   Returned by GET /api/folders, GET /api/folders/{id}, POST /api/folders.
    """
    id: int = Field(description="Folder identifier")
    name: SanitizedText = Field(description="Folder name (HTML-escaped)")

    model_config = {"from_attributes": True}


class FolderCreate(RequestBody):
    """Body of POST /api/folders. `name` is mandatory."""
    name: Optional[str] = Field(default=None, description="Folder name")

    required_fields: ClassVar[Tuple[str, ...]] = ("name",)


class FolderUpdate(RequestBody):
    """Body of PATCH /api/folders/{id}. Only supplied fields change."""
    name: Optional[str] = Field(default=None, description="New folder name")

    empty_message: ClassVar[str] = "Request body must contain 'name'"

"""
Noteful Backend: Note Route Handlers
=====================================

What:  CRUD endpoints under /api/notes.
How:   `create_router(database)` builds the router around an explicitly
       passed Database; handlers validate the body, call NoteService, and
       return NoteResponse models whose free-text fields are HTML-escaped.
Who:   Mounted by create_app() in main.py.

Request Flow (POST /api/notes):
    1. Body parsed into NoteCreate (all fields optional at schema level)
    2. First missing field in name → content → folder_id order → 400
    3. INSERT ... RETURNING via NoteService
    4. 201 Created, Location: /api/notes/{id}, serialized note

Every /{note_id} route depends on `resolve_note`, so a missing note is
answered with 404 before any body handling or mutation.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import MAX_ROW_ID, Database
from noteful.exceptions import NotFoundError, ValidationError
from noteful.models.note import Note
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)


def create_router(database: Database) -> APIRouter:
    """
    Build the /api/notes router.

    Args:
        database: Database whose `session` dependency every handler uses
    """
    router = APIRouter(prefix="/api/notes", tags=["Notes"])

    async def resolve_note(
        note_id: int,
        db: AsyncSession = Depends(database.session),
    ) -> Note:
        if not 1 <= note_id <= MAX_ROW_ID:
            logger.debug("Note id %s is outside the key range", note_id)
            raise NotFoundError(resource="Note", resource_id=note_id)
        note = await note_service.get_note(db, note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    @router.get(
        "",
        response_model=List[NoteResponse],
        summary="List all notes",
    )
    async def list_notes(
        db: AsyncSession = Depends(database.session),
    ) -> List[Note]:
        return await note_service.list_notes(db)

    @router.post(
        "",
        status_code=201,
        response_model=NoteResponse,
        responses={
            201: {"description": "Note created", "model": NoteResponse},
            400: {"description": "Missing required field", "model": ErrorResponse},
        },
        summary="Create a note",
    )
    async def create_note(
        request: Request,
        response: Response,
        payload: Optional[NoteCreate] = None,
        db: AsyncSession = Depends(database.session),
    ) -> Note:
        payload = payload or NoteCreate()
        missing = payload.first_missing_field()
        if missing:
            raise ValidationError.missing_field(missing)

        note = await note_service.insert_note(db, payload.provided_fields())

        response.headers["Location"] = str(
            request.app.url_path_for("get_note", note_id=str(note.id))
        )
        return note

    @router.get(
        "/{note_id}",
        response_model=NoteResponse,
        responses={404: {"description": "Note not found", "model": ErrorResponse}},
        summary="Get a single note by id",
    )
    async def get_note(note: Note = Depends(resolve_note)) -> Note:
        return note

    @router.patch(
        "/{note_id}",
        status_code=204,
        response_class=Response,
        responses={
            400: {"description": "Nothing to update", "model": ErrorResponse},
            404: {"description": "Note not found", "model": ErrorResponse},
        },
        summary="Update some fields of a note",
    )
    async def update_note(
        payload: Optional[NoteUpdate] = None,
        note: Note = Depends(resolve_note),
        db: AsyncSession = Depends(database.session),
    ) -> Response:
        fields = (payload or NoteUpdate()).provided_fields()
        if not fields:
            raise ValidationError(message=NoteUpdate.empty_message)

        # A zero count means the note vanished after resolve_note ran
        if await note_service.update_note(db, note.id, fields) == 0:
            raise NotFoundError(resource="Note", resource_id=note.id)
        return Response(status_code=204)

    @router.delete(
        "/{note_id}",
        status_code=204,
        response_class=Response,
        responses={404: {"description": "Note not found", "model": ErrorResponse}},
        summary="Delete a note",
    )
    async def delete_note(
        note: Note = Depends(resolve_note),
        db: AsyncSession = Depends(database.session),
    ) -> Response:
        if await note_service.delete_note(db, note.id) == 0:
            raise NotFoundError(resource="Note", resource_id=note.id)
        return Response(status_code=204)

    return router

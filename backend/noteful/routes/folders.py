"""
Noteful Backend: Folder Route Handlers
=======================================

What:  CRUD endpoints under /api/folders.
How:   `create_router(database)` builds the router; every handler receives a
       session from `database.session` and delegates to FolderService.

Endpoints:
    GET    /api/folders               → 200, list of folders
    POST   /api/folders               → 201 + Location, created folder
    GET    /api/folders/{folder_id}   → 200 | 404
    PATCH  /api/folders/{folder_id}   → 204 | 400 | 404
    DELETE /api/folders/{folder_id}   → 204 | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import MAX_ROW_ID, Database
from noteful.exceptions import NotFoundError, ValidationError
from noteful.models.folder import Folder
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

NOT_FOUND = {404: {"description": "Folder not found", "model": ErrorResponse}}


def create_router(database: Database) -> APIRouter:
    router = APIRouter(prefix="/api/folders", tags=["Folders"])

    async def resolve_folder(
        folder_id: int,
        db: AsyncSession = Depends(database.session),
    ) -> Folder:
        """Shared precondition of every /{folder_id} route."""
        if not 1 <= folder_id <= MAX_ROW_ID:
            logger.debug("Folder id %s is outside the key range", folder_id)
            raise NotFoundError(resource="Folder", resource_id=folder_id)
        folder = await folder_service.get_folder(db, folder_id)
        if folder is None:
            raise NotFoundError(resource="Folder", resource_id=folder_id)
        return folder

    @router.get("", response_model=List[FolderResponse], summary="List folders")
    async def list_folders(
        db: AsyncSession = Depends(database.session),
    ) -> List[Folder]:
        return await folder_service.list_folders(db)

    @router.post(
        "",
        status_code=201,
        response_model=FolderResponse,
        responses={400: {"description": "Missing name", "model": ErrorResponse}},
        summary="Create a folder",
    )
    async def create_folder(
        request: Request,
        response: Response,
        payload: Optional[FolderCreate] = None,
        db: AsyncSession = Depends(database.session),
    ) -> Folder:
        payload = payload or FolderCreate()
        missing = payload.first_missing_field()
        if missing:
            raise ValidationError.missing_field(missing)

        folder = await folder_service.insert_folder(db, payload.provided_fields())
        response.headers["Location"] = str(
            request.app.url_path_for("get_folder", folder_id=str(folder.id))
        )
        return folder

    @router.get(
        "/{folder_id}",
        response_model=FolderResponse,
        responses=NOT_FOUND,
        summary="Get a folder by id",
    )
    async def get_folder(folder: Folder = Depends(resolve_folder)) -> Folder:
        return folder

    @router.patch(
        "/{folder_id}",
        status_code=204,
        response_class=Response,
        responses=NOT_FOUND,
        summary="Rename a folder",
    )
    async def update_folder(
        payload: Optional[FolderUpdate] = None,
        folder: Folder = Depends(resolve_folder),
        db: AsyncSession = Depends(database.session),
    ) -> Response:
        fields = (payload or FolderUpdate()).provided_fields()
        if not fields:
            raise ValidationError(message=FolderUpdate.empty_message)

        if await folder_service.update_folder(db, folder.id, fields) == 0:
            # Deleted between the existence check and the update
            raise NotFoundError(resource="Folder", resource_id=folder.id)
        return Response(status_code=204)

    @router.delete(
        "/{folder_id}",
        status_code=204,
        response_class=Response,
        responses=NOT_FOUND,
        summary="Delete a folder and, through the store, its notes",
    )
    async def delete_folder(
        folder: Folder = Depends(resolve_folder),
        db: AsyncSession = Depends(database.session),
    ) -> Response:
        if await folder_service.delete_folder(db, folder.id) == 0:
            raise NotFoundError(resource="Folder", resource_id=folder.id)
        return Response(status_code=204)

    return router

"""
Noteful Backend: Folder Service (Store Access)
===============================================

What:  Thin adapter issuing one SQL statement per operation on `folders`.
Who:   Called by the folder route handlers.

Contract:
    list_folders   → all rows ordered by id ([] when empty)
    get_folder     → Folder or None (absence is not an error)
    insert_folder  → persisted Folder via INSERT ... RETURNING
    update_folder  → affected row count (0 or 1)
    delete_folder  → affected row count (0 or 1)

Store errors (constraint violations, lost connections) are not caught here;
they propagate to the request's session dependency, which rolls back, and
then to the global SQLAlchemyError handler.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.folder import Folder

logger = logging.getLogger(__name__)


class FolderService:
    """Stateless store access for folders; the session is passed to every call."""

    async def list_folders(self, db: AsyncSession) -> List[Folder]:
        result = await db.execute(select(Folder).order_by(Folder.id))
        return list(result.scalars().all())

    async def get_folder(self, db: AsyncSession, folder_id: int) -> Optional[Folder]:
        result = await db.execute(select(Folder).where(Folder.id == folder_id))
        return result.scalar_one_or_none()

    async def insert_folder(self, db: AsyncSession, fields: Dict[str, Any]) -> Folder:
        """
        Insert a folder and return the stored row.

        Args:
            db:     Async database session
            fields: Column values; `name` must be present and non-null

        Raises:
            sqlalchemy.exc.IntegrityError: NOT NULL violation on `name`
        """
        result = await db.execute(insert(Folder).values(**fields).returning(Folder))
        folder = result.scalar_one()
        logger.info("Folder created: %s", folder.id)
        return folder

    async def update_folder(
        self, db: AsyncSession, folder_id: int, fields: Dict[str, Any]
    ) -> int:
        result = await db.execute(
            update(Folder).where(Folder.id == folder_id).values(**fields)
        )
        logger.info("Folder %s updated (%d row(s))", folder_id, result.rowcount)
        return result.rowcount

    async def delete_folder(self, db: AsyncSession, folder_id: int) -> int:
        result = await db.execute(delete(Folder).where(Folder.id == folder_id))
        logger.info("Folder %s deleted (%d row(s))", folder_id, result.rowcount)
        return result.rowcount


# Stateless; one shared instance
folder_service = FolderService()

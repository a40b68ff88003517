"""
Noteful Backend: Note Service (Store Access)
=============================================

What:  Issues exactly one SQL statement per operation on the `notes` table.
Why:   Keeps SQL out of the route handlers; routes own HTTP semantics
       (404/400, status codes, headers), this module owns the queries.
Who:   Called by the note route handlers.

Query plans:
    list_notes   SELECT * FROM notes ORDER BY id
    get_note     SELECT * FROM notes WHERE id = :id          (primary key)
    insert_note  INSERT INTO notes (...) VALUES (...) RETURNING *
    update_note  UPDATE notes SET ... WHERE id = :id         → rowcount
    delete_note  DELETE FROM notes WHERE id = :id            → rowcount

A `folder_id` that references no folder is rejected by the store's foreign
key and surfaces as sqlalchemy.exc.IntegrityError.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.models.note import Note

logger = logging.getLogger(__name__)


class NoteService:
    """
    Store access for notes.

    Stateless: every method receives the request's AsyncSession, so commit
    and rollback stay with the session dependency.
    """

    async def list_notes(self, db: AsyncSession) -> List[Note]:
        """Return every note in insertion order; an empty list when there are none."""
        result = await db.execute(select(Note).order_by(Note.id))
        return list(result.scalars().all())

    async def get_note(self, db: AsyncSession, note_id: int) -> Optional[Note]:
        """Return the note with `note_id`, or None when it does not exist."""
        result = await db.execute(select(Note).where(Note.id == note_id))
        return result.scalar_one_or_none()

    async def insert_note(self, db: AsyncSession, fields: Dict[str, Any]) -> Note:
        """
        Insert a note and return the persisted row (id and `modified` included).

        Args:
            db:     Async database session
            fields: `name`, `content` and `folder_id`

        Raises:
            sqlalchemy.exc.IntegrityError: missing column or dangling folder_id
        """
        result = await db.execute(insert(Note).values(**fields).returning(Note))
        note = result.scalar_one()
        logger.info("Note created: %s (folder %s)", note.id, note.folder_id)
        return note

    async def update_note(
        self, db: AsyncSession, note_id: int, fields: Dict[str, Any]
    ) -> int:
        """
        Overwrite only the supplied columns of one note.

        Returns:
            Number of rows changed; 0 when the id does not exist.
        """
        result = await db.execute(
            update(Note).where(Note.id == note_id).values(**fields)
        )
        logger.info(
            "Note %s updated: fields=%s (%d row(s))",
            note_id, sorted(fields), result.rowcount,
        )
        return result.rowcount

    async def delete_note(self, db: AsyncSession, note_id: int) -> int:
        """Delete one note; returns the number of rows removed (0 or 1)."""
        result = await db.execute(delete(Note).where(Note.id == note_id))
        logger.info("Note %s deleted (%d row(s))", note_id, result.rowcount)
        return result.rowcount


# Stateless; one shared instance
note_service = NoteService()

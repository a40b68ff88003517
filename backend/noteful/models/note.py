"""
Noteful Backend: Note SQLAlchemy Model
=======================================

What:  ORM model representing the `notes` table.
How:   Inherits from the shared DeclarativeBase; `Base.metadata` carries the
       table definition for schema creation.
Who:   Used by NoteService for every CRUD statement.

Table Design:
    - id: integer identity, assigned by the store
    - name / content: free text, both NOT NULL
    - modified: UTC timestamp with time zone, defaulted on insert
    - folder_id: foreign key to folders.id; deleting a folder removes its
      notes (ON DELETE CASCADE), enforced by the store
"""

from datetime import datetime, timezone

from sqlalchemy import TIMESTAMP, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Note(Base):
    """
    A text record belonging to exactly one folder.

    Query Patterns:
        - List all notes: SELECT ... ORDER BY id
        - Get single note: SELECT ... WHERE id = :id (primary key lookup)
        - Notes of a folder: covered by idx_notes_folder_id for the cascade
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    # Stored in UTC; the Python-side default also covers Core INSERTs
    modified: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )

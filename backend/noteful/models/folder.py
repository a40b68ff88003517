"""
Noteful Backend: Folder SQLAlchemy Model
=========================================

What:  ORM model representing the `folders` table.
Who:   Queried by FolderService; referenced by Note.folder_id.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named grouping entity that notes reference by id."""

    __tablename__ = "folders"

    # Identity column; the store assigns increasing ids on insert
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name={self.name!r})>"

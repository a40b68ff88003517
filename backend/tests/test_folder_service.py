"""
Noteful Backend: Folder Service Unit Tests
===========================================

What:  Tests for FolderService with a mocked AsyncSession.
"""

from unittest.mock import MagicMock

import pytest

from noteful.services.folder_service import FolderService


class TestFolderService:

    def setup_method(self):
        self.service = FolderService()

    @pytest.mark.asyncio
    async def test_list_folders_empty(self, mock_db_session):
        mock_db_session.execute.return_value.scalars.return_value.all.return_value = []

        assert await self.service.list_folders(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_get_folder_not_found_returns_none(self, mock_db_session):
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = None

        assert await self.service.get_folder(mock_db_session, 123456789) is None

    @pytest.mark.asyncio
    async def test_insert_folder_returns_row(self, mock_db_session):
        folder = MagicMock(id=4)
        folder.name = "Valid Folder"
        mock_db_session.execute.return_value.scalar_one.return_value = folder

        result = await self.service.insert_folder(mock_db_session, {"name": "Valid Folder"})

        assert result is folder
        statement = mock_db_session.execute.await_args.args[0]
        assert "RETURNING" in str(statement).upper()

    @pytest.mark.asyncio
    async def test_update_and_delete_return_rowcount(self, mock_db_session):
        mock_db_session.execute.return_value.rowcount = 1

        assert await self.service.update_folder(mock_db_session, 2, {"name": "New"}) == 1
        assert await self.service.delete_folder(mock_db_session, 2) == 1
        assert mock_db_session.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, mock_db_session):
        """Store faults are not caught or wrapped here."""
        from sqlalchemy.exc import OperationalError

        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(OperationalError):
            await self.service.list_folders(mock_db_session)

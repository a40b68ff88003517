"""
Noteful Backend: Test Data
===========================

What:  Row fixtures shared by the endpoint tests, plus a helper that writes
       them straight into a Database (bypassing the API).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import insert

from noteful.database import Database
from noteful.models import Folder, Note


def make_folders_array() -> List[Dict[str, Any]]:
    return [
        {"id": 1, "name": "Important"},
        {"id": 2, "name": "Super"},
        {"id": 3, "name": "Spangley"},
    ]


def make_notes_array() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "name": "Dogs",
            "content": "Corporis accusamus placeat quas non voluptas.",
            "modified": datetime(2019, 1, 3, tzinfo=timezone.utc),
            "folder_id": 1,
        },
        {
            "id": 2,
            "name": "Cats",
            "content": "Eos laudantium quia ab blanditiis temporibus necessitatibus.",
            "modified": datetime(2018, 8, 15, tzinfo=timezone.utc),
            "folder_id": 2,
        },
        {
            "id": 3,
            "name": "Pigs",
            "content": "Occaecati dignissimos quam qui facere deserunt quia.",
            "modified": datetime(2018, 3, 1, tzinfo=timezone.utc),
            "folder_id": 3,
        },
        {
            "id": 4,
            "name": "Birds",
            "content": "Eum culpa odit.",
            "modified": datetime(2019, 1, 4, tzinfo=timezone.utc),
            "folder_id": 1,
        },
    ]


def make_malicious_note() -> Dict[str, Any]:
    return {
        "id": 911,
        "name": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
        "modified": datetime(2019, 1, 5, tzinfo=timezone.utc),
        "folder_id": 1,
    }


async def seed(database: Database, folders=(), notes=()) -> None:
    """Insert fixture rows directly, bypassing the API."""
    async with database.session_factory() as session:
        if folders:
            await session.execute(insert(Folder), list(folders))
        if notes:
            await session.execute(insert(Note), list(notes))
        await session.commit()


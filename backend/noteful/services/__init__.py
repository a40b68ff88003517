# Services package init
"""
Noteful Backend: Services Layer
================================

What:  Store access sitting between routes (HTTP) and the database.
How:   Each method takes the request's AsyncSession and issues one statement.

Service Inventory:
    - FolderService: list/get/insert/update/delete on `folders`
    - NoteService:   list/get/insert/update/delete on `notes`
"""

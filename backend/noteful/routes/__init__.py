# Routes package init
"""
Noteful Backend: API Routes Package
====================================

Route Inventory:
    - folders.py: GET/POST /api/folders, GET/PATCH/DELETE /api/folders/{id}
    - notes.py:   GET/POST /api/notes,   GET/PATCH/DELETE /api/notes/{id}
    - health.py:  GET /health

Each module exposes `create_router(database)`; the Database is passed in by
create_app() so handlers never look up a connection from global state.
Routes stay thin: extract the body, call a service, shape the response.
"""

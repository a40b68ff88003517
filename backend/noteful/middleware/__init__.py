# Middleware package init
"""
Noteful Backend: Middleware Package
====================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    The request id is set first so the access log line and any error
    logged by the exception handlers carry the same id.
"""

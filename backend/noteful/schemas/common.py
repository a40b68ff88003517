"""
Noteful Backend: Shared Schema Building Blocks
===============================================

What:  Output sanitization type, request-body base class, and the error /
       health response models shared by every route module.

Output Sanitization:
    Free-text fields are declared as `SanitizedText`. Validation keeps the raw
    value; HTML escaping runs as a serialization step, so every response
    model that uses the type escapes `<`, `>`, `&` and quotes the same way.
    Every tag is escaped; there is no whitelist of harmless markup such as
    `<strong>`, so such tags come back as literal text.

        >>> sanitize_text('<script>alert("x")</script>')
        '&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;'
"""

import html
from typing import Annotated, Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, Field, PlainSerializer


def sanitize_text(value: str) -> str:
    """HTML-escape a free-text value for safe embedding in markup."""
    return html.escape(value, quote=True)


SanitizedText = Annotated[str, PlainSerializer(sanitize_text, return_type=str)]


class RequestBody(BaseModel):
    """
    Base for create/update bodies.

    Every field is optional at the schema level so that absent and null
    values reach the route handler, which reports them as 400 with the
    field name instead of FastAPI's generic 422.

    Subclasses list their mandatory fields in `required_fields`, in the
    order they are checked.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def first_missing_field(self) -> Optional[str]:
        """Return the first required field that is absent or null."""
        for field in self.required_fields:
            if getattr(self, field) is None:
                return field
        return None

    def provided_fields(self) -> Dict[str, Any]:
        """Fields carrying a non-null value, ready for an INSERT/UPDATE."""
        return self.model_dump(exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {"error": {"message": "Folder doesn't exist"}}
    """
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

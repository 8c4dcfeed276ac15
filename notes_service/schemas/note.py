"""
Notes Service — Pydantic Response Schemas
===========================================

What:  Pydantic models defining the JSON parts of the API contract.
Why:   Automatic serialization and OpenAPI documentation.
How:   FastAPI uses these as response models; the /docs page is generated
       from them.

Most note endpoints speak plain text, so only the list, health, and
route-table responses are modelled here. Errors are plain text with the
request ID in the X-Request-ID header.
"""

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteItem(BaseModel):
    """
    What:  One stored note.
    Who:   Returned by GET /notes as array items.
    """
    name: str = Field(description="Note name (filename without .txt)")
    text: str = Field(description="Full note content")


class RouteInfo(BaseModel):
    """
    What:  One row of the route table.
    Who:   Returned by GET /routes.
    Why:   Any documentation renderer can consume the table as plain data.
    """
    method: str = Field(description="HTTP method")
    path: str = Field(description="Path template, e.g. /notes/{name}")
    summary: str = Field(default="", description="One-line description")


# ══════════════════════════════════════════════════════════════════════════
# Health Models
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and storage status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Storage directory: writable, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")

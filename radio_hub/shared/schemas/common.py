"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, frozen)
- Generic Responses: MessageResponse, ErrorResponse, HealthResponse
- ViewState: Presentation state passed explicitly through dashboard routes

Usage:
======
    from radio_hub.shared.schemas.common import BaseSchema, ViewState

    class WorkflowStats(BaseSchema):
        draft: int
        in_review: int
"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - alias_generator: camelCase keys on the wire, matching the content API
    - populate_by_name: Allow field population by name or alias
    - frozen: View models are values, never patched after construction
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str
    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "User with id 'u1' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "radio-content-hub"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ═══════════════════════════════════════════════════════════════════════════════
# VIEW STATE
# ═══════════════════════════════════════════════════════════════════════════════


class ViewState(BaseSchema):
    """
    Presentation state owned by whoever renders a dashboard.

    Passed in with the request and echoed back in the response. Aggregation
    never reads it.
    """

    theme: Literal["light", "dark", "system"] = "system"
    is_expanded: bool = False
    selected_ids: tuple[str, ...] = ()

    @field_validator("selected_ids", mode="after")
    @classmethod
    def _dedupe(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(sorted(set(value)))

"""
View state dependency.

Reads the caller's presentation state from query parameters so dashboard
routes can echo it back untouched.
"""
from typing import Literal, Optional

from fastapi import Query

from ...shared.schemas.common import ViewState


async def get_view_state(
    theme: Optional[Literal["light", "dark", "system"]] = Query(
        None, description="Colour theme the client is rendering with"
    ),
    expanded: bool = Query(False, description="Whether the dashboard is expanded"),
    selected: Optional[list[str]] = Query(None, description="Selected item ids"),
) -> Optional[ViewState]:
    """View state dependency; None when the client sent no view parameters."""
    if theme is None and not expanded and not selected:
        return None
    return ViewState(
        theme=theme or "system",
        is_expanded=expanded,
        selected_ids=tuple(selected or ()),
    )

"""
API Handlers

Route handlers for the Radio Content Hub API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All aggregation is delegated to the service layer.
"""

from radio_hub.api.handlers import (
    content_handler,
    dashboard_handler,
    health_handler,
)

__all__ = [
    "content_handler",
    "dashboard_handler",
    "health_handler",
]

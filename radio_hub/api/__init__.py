"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers, request context

Usage:
======
    # Run the API
    uvicorn radio_hub.api.main:app --reload

    # Import the app
    from radio_hub.api.main import app, create_application
"""

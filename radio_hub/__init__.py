"""
Radio Content Hub

Role-scoped dashboards over a radio station's projects, episodes and scripts.

Package Structure:
==================
    radio_hub/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, adapters, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn radio_hub.api.main:app --reload
"""

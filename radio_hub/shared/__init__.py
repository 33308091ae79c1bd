"""
Shared Module

Everything below the HTTP layer:
- Models: Frozen pydantic records mirroring the content API
- Services: Snapshot loading, aggregation, dashboard queries
- Schemas: Pydantic view models returned by the API
- Core: Logging, exceptions
- Adapters: Content API and Redis clients

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── models/         ← Content records and enums
    ├── services/       ← Business logic
    ├── schemas/        ← View models
    ├── adapters/       ← External services
    └── utils/          ← Constants

Usage:
======
    from radio_hub.shared.models import ContentSnapshot, Script
    from radio_hub.shared.services import DashboardService
    from radio_hub.shared.core import logger, RadioHubException
"""

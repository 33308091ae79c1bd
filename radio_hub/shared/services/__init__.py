"""
Business Logic Services

Services hold the dashboard logic and coordinate the external adapters.

Service Pattern:
================
    Handler → DashboardService → SnapshotService → ContentApiAdapter
                     │                  ↘ RedisAdapter (cache)
                     ▼
             aggregation_service (pure functions)

Services should:
- Keep aggregation free of I/O
- Translate missing users/projects into domain exceptions
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- DashboardService: Role dashboards, organizer, snapshot refresh
- SnapshotService: Snapshot loading, validation and caching

Usage:
======
    from radio_hub.shared.services import DashboardService, SnapshotService

    service = DashboardService(SnapshotService(ContentApiAdapter(), RedisAdapter()))
    dashboard = await service.dashboard_for_user("user_42")
"""

from radio_hub.shared.services.dashboard_service import DashboardService
from radio_hub.shared.services.snapshot_service import SnapshotService, build_snapshot

__all__ = [
    "DashboardService",
    "SnapshotService",
    "build_snapshot",
]

"""
Adapters Package

External service integrations.

Contents:
=========
- content_api_adapter: httpx client for the content REST API
- redis_adapter: Redis snapshot cache

Usage:
======
    from radio_hub.shared.adapters.content_api_adapter import ContentApiAdapter
    from radio_hub.shared.adapters.redis_adapter import RedisAdapter
"""

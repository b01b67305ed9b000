"""
API Routers Module

This module contains all FastAPI routers for the application.
Each router handles a specific area of the API.

Available routers:
- brands: Brand and per-brand resource endpoints
- resources: Cross-brand resource listing and dashboard counters
- settings: Operator profile and theme
- system: Notifications and health
"""

__all__ = ["brands", "resources", "settings", "system"]

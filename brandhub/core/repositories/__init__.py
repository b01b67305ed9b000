"""
Repository Pattern Implementation

High-level code (services) depends on these snapshot repositories; the
SQLAlchemy key/value table underneath can be swapped without touching them.
"""

from .kv_repo import KeyValueRepository
from .base import BaseSnapshotRepository
from .brand_repo import BrandSnapshotRepository
from .settings_repo import ProfileRepository, ThemeRepository

__all__ = [
    "KeyValueRepository",
    "BaseSnapshotRepository",
    "BrandSnapshotRepository",
    "ProfileRepository",
    "ThemeRepository"
]

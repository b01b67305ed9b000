"""
Services Package

Use cases the presentation layer calls: the brand Domain Store with its
Mutation API, and the operator settings store.
"""

from .brand_service import BrandService, DashboardStats, ResourceEntry
from .settings_service import SettingsService

__all__ = [
    'BrandService',
    'DashboardStats',
    'ResourceEntry',
    'SettingsService',
]

"""
FastAPI Dependencies

Hands the container-owned singletons to endpoints.

Usage in endpoints:
    @router.get("/brands")
    async def list_brands(
        service: BrandService = Depends(get_brand_service)
    ):
        return service.list_brands()

Tests swap any of these with app.dependency_overrides.
"""

from ..core.container import container
from ..core.notifier import Notifier
from ..core.services.brand_service import BrandService
from ..core.services.settings_service import SettingsService


def get_brand_service() -> BrandService:
    """
    Dependency để lấy the process-wide BrandService (Domain Store)

    Returns:
        BrandService singleton
    """
    return container.brand_service()


def get_settings_service() -> SettingsService:
    """
    Dependency để lấy SettingsService

    Returns:
        SettingsService singleton
    """
    return container.settings_service()


def get_notifier() -> Notifier:
    return container.notifier()

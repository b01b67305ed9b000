"""
Resources Router
Implements: Single Responsibility Principle (SRP)

Read-only views across all brands:
- Flattened resource listing with optional kind filter
- Dashboard counters
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional
from pydantic import BaseModel

from ...core.services.brand_service import BrandService, ResourceEntry
from ...core.domain.exceptions import InvalidResourceError
from ...schemas import ResourceData
from ..dependencies import get_brand_service

router = APIRouter(tags=["resources"])


# ========== Schemas ==========
class ResourceEntryResponse(BaseModel):
    id: str
    brand_id: str
    brand_name: str
    kind: str
    details: ResourceData

    @staticmethod
    def from_entry(entry: ResourceEntry) -> "ResourceEntryResponse":
        return ResourceEntryResponse(
            id=f"{entry.brand_id}-{entry.kind}",
            brand_id=entry.brand_id,
            brand_name=entry.brand_name,
            kind=entry.kind,
            details=ResourceData.model_validate(entry.resource.to_dict())
        )


class DashboardStatsResponse(BaseModel):
    total_brands: int
    total_domains: int
    total_resources: int


# ========== Endpoints ==========
@router.get("/resources", response_model=List[ResourceEntryResponse])
async def list_resources(
    kind: Optional[str] = None,
    service: BrandService = Depends(get_brand_service)
):
    """
    List resources of every brand

    Args:
        kind: Only this resource kind ("hosting", "dns", ...); all when omitted
    """
    try:
        entries = service.list_resources(kind)
    except InvalidResourceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [ResourceEntryResponse.from_entry(e) for e in entries]


@router.get("/dashboard/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(service: BrandService = Depends(get_brand_service)):
    """Counters shown on the overview page"""
    stats = service.dashboard_stats()
    return DashboardStatsResponse(
        total_brands=stats.total_brands,
        total_domains=stats.total_domains,
        total_resources=stats.total_resources
    )

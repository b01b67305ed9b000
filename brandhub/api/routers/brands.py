"""
Brands Router
Implements: Single Responsibility Principle (SRP)

This router handles brand and resource endpoints:
- Brand CRUD (no brand deletion, the console never offered it)
- Resource add/edit/delete per brand
"""
from fastapi import APIRouter, Depends, HTTPException
from typing import List, Optional, Literal
from pydantic import BaseModel, Field

from ...core.services.brand_service import BrandService
from ...core.domain.brand import Brand
from ...core.domain.exceptions import (
    BrandNotFoundError,
    ResourceNotFoundError,
    DuplicateBrandIdError,
    InvalidBrandError,
    InvalidResourceError,
)
from ...schemas import BrandRecord, ResourceData
from ..dependencies import get_brand_service

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/brands", tags=["brands"])

StatusLiteral = Literal["active", "warning", "inactive"]


# ========== Schemas ==========
class BrandCreate(BaseModel):
    """Schema for creating a new brand"""
    name: str = Field(..., min_length=1)
    color: str = "#6366f1"
    logo: str = ""
    industry: str = "Technology"
    description: str = ""
    website: str = ""
    status: StatusLiteral = "active"


class BrandUpdate(BaseModel):
    """Schema for updating a brand, only fields sent are changed"""
    name: Optional[str] = Field(default=None, min_length=1)
    color: Optional[str] = None
    logo: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    status: Optional[StatusLiteral] = None


class BrandResponse(BrandRecord):
    """Schema for brand response"""
    logo_is_image: bool = False

    @staticmethod
    def from_domain(brand: Brand) -> "BrandResponse":
        data = brand.to_dict()
        data["logo_is_image"] = brand.logo_is_image()
        return BrandResponse.model_validate(data)


def _not_found(e: Exception) -> HTTPException:
    return HTTPException(status_code=404, detail=str(e))


# ========== Endpoints ==========
@router.get("/", response_model=List[BrandResponse])
async def list_brands(service: BrandService = Depends(get_brand_service)):
    """List all brands in display order"""
    return [BrandResponse.from_domain(b) for b in service.list_brands()]


@router.post("/", response_model=BrandResponse)
async def create_brand(
    data: BrandCreate,
    service: BrandService = Depends(get_brand_service)
):
    """
    Create a new brand

    Raises:
        HTTPException 409: If the derived id already exists
        HTTPException 400: If validation fails
    """
    try:
        brand = service.create_brand(**data.model_dump())
        return BrandResponse.from_domain(brand)
    except DuplicateBrandIdError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidBrandError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(
    brand_id: str,
    service: BrandService = Depends(get_brand_service)
):
    """
    Get brand by ID

    Raises:
        HTTPException 404: If brand not found
    """
    try:
        return BrandResponse.from_domain(service.get_brand(brand_id))
    except BrandNotFoundError as e:
        raise _not_found(e)


@router.patch("/{brand_id}", response_model=BrandResponse)
async def update_brand(
    brand_id: str,
    data: BrandUpdate,
    service: BrandService = Depends(get_brand_service)
):
    """
    Update brand fields (id never changes)

    Raises:
        HTTPException 404: If brand not found
        HTTPException 400: If validation fails
    """
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    try:
        brand = service.update_brand(brand_id, **changes)
        return BrandResponse.from_domain(brand)
    except BrandNotFoundError as e:
        raise _not_found(e)
    except InvalidBrandError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{brand_id}/resources/{kind}", response_model=BrandResponse)
async def set_resource(
    brand_id: str,
    kind: str,
    data: ResourceData,
    edit: bool = False,
    service: BrandService = Depends(get_brand_service)
):
    """
    Add or replace the brand's resource of this kind

    Args:
        edit: True when the operator is editing an existing entry
            (changes the notification text only)

    Raises:
        HTTPException 404: If brand not found
        HTTPException 400: If the data does not fit the kind
    """
    try:
        brand = service.set_resource(brand_id, kind, data.to_wire(), is_edit=edit)
        return BrandResponse.from_domain(brand)
    except BrandNotFoundError as e:
        raise _not_found(e)
    except InvalidResourceError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{brand_id}/resources/{kind}", response_model=BrandResponse)
async def delete_resource(
    brand_id: str,
    kind: str,
    service: BrandService = Depends(get_brand_service)
):
    """
    Delete the brand's resource of this kind

    Raises:
        HTTPException 404: If brand or resource not found
    """
    try:
        brand = service.delete_resource(brand_id, kind)
        return BrandResponse.from_domain(brand)
    except (BrandNotFoundError, ResourceNotFoundError) as e:
        raise _not_found(e)
    except InvalidResourceError as e:
        raise HTTPException(status_code=400, detail=str(e))

"""
Settings Router
Implements: Single Responsibility Principle (SRP)

Operator profile and theme preference.
"""
from fastapi import APIRouter, Depends
from typing import Literal, Optional
from pydantic import BaseModel, Field

from ...core.services.settings_service import SettingsService
from ...schemas import ProfileRecord
from ..dependencies import get_settings_service

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


# ========== Schemas ==========
class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = Field(default=None, min_length=1)


class AvatarUpdate(BaseModel):
    avatar: str


class ThemeSchema(BaseModel):
    theme: Literal["dark", "light"]


# ========== Endpoints ==========
@router.get("/profile", response_model=ProfileRecord)
async def get_profile(service: SettingsService = Depends(get_settings_service)):
    return ProfileRecord.from_domain(service.get_profile())


@router.patch("/profile", response_model=ProfileRecord)
async def update_profile(
    data: ProfileUpdate,
    service: SettingsService = Depends(get_settings_service)
):
    """Update name, email and/or role"""
    profile = service.update_profile(**data.model_dump(exclude_none=True))
    return ProfileRecord.from_domain(profile)


@router.put("/profile/avatar", response_model=ProfileRecord)
async def update_avatar(
    data: AvatarUpdate,
    service: SettingsService = Depends(get_settings_service)
):
    profile = service.update_avatar(data.avatar)
    return ProfileRecord.from_domain(profile)


@router.get("/theme", response_model=ThemeSchema)
async def get_theme(service: SettingsService = Depends(get_settings_service)):
    return ThemeSchema(theme=service.get_theme().value)


@router.put("/theme", response_model=ThemeSchema)
async def set_theme(
    data: ThemeSchema,
    service: SettingsService = Depends(get_settings_service)
):
    return ThemeSchema(theme=service.set_theme(data.theme).value)


@router.post("/theme/toggle", response_model=ThemeSchema)
async def toggle_theme(service: SettingsService = Depends(get_settings_service)):
    theme = service.toggle_theme()
    logger.info(f"[SETTINGS] Theme switched to {theme.value}")
    return ThemeSchema(theme=theme.value)

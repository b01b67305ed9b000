"""
System Router
Implements: Single Responsibility Principle (SRP)

This router handles system endpoints:
- Current status notification (polled by the UI)
- Health check
"""
from fastapi import APIRouter, Depends
from typing import Optional
from pydantic import BaseModel

from ...core.notifier import Notifier
from ...core.services.brand_service import BrandService
from ..dependencies import get_brand_service, get_notifier

router = APIRouter(prefix="/system", tags=["system"])


class NotificationResponse(BaseModel):
    message: str
    level: str
    expires_in: float


@router.get("/notification", response_model=Optional[NotificationResponse])
async def current_notification(notifier: Notifier = Depends(get_notifier)):
    """
    Currently visible notification

    Returns:
        The message with its level and remaining seconds, or null once expired
    """
    notification = notifier.current()
    if notification is None:
        return None
    return NotificationResponse(
        message=notification.message,
        level=notification.level.value,
        expires_in=notifier.time_left()
    )


@router.get("/health")
async def health(service: BrandService = Depends(get_brand_service)):
    return {"ok": True, "brands": len(service.list_brands())}

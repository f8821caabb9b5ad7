"""JSON endpoints."""

from fastapi import APIRouter, Depends

from ...services.tracker import TrackerService
from ..deps import get_current_user, get_service

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/profile")
async def get_profile(
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Current user's profile."""
    profile = await service.get_profile(user_id)
    return profile.to_dict()


@router.get("/entries")
async def list_entries(
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Dashboard data: profile summary and entries in the user's units."""
    dashboard = await service.dashboard(user_id)
    return dashboard.to_dict()


@router.get("/entries/{entry_id}")
async def get_entry(
    entry_id: int,
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """A single entry in canonical units."""
    entry = await service.get_entry(user_id, entry_id)
    return {"id": entry.id, **entry.to_dict()}

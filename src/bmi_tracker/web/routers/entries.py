"""BMI entry form posts."""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import RedirectResponse

from ...forms import parse_date, parse_height, parse_weight
from ...services.tracker import TrackerService
from ..deps import get_current_user, get_service

router = APIRouter(prefix="/entries", tags=["entries"])


class EntryForm:
    """Date, height and weight fields shared by the add and edit forms."""

    def __init__(
        self,
        date: str | None = Form(None),
        height: str | None = Form(None),
        height_feet: str | None = Form(None),
        height_inches: str | None = Form(None),
        weight: str | None = Form(None),
        weight_stones: str | None = Form(None),
        weight_pounds: str | None = Form(None),
    ):
        self.date = date
        self.height = height
        self.height_feet = height_feet
        self.height_inches = height_inches
        self.weight = weight
        self.weight_stones = weight_stones
        self.weight_pounds = weight_pounds

    async def to_metric(self, service: TrackerService, user_id: str):
        """Validate the fields in the user's system and convert to cm/kg."""
        profile = await service.get_profile(user_id)
        system = profile.measurement_system
        recorded_at = parse_date(self.date)
        height_cm = parse_height(
            system,
            height=self.height,
            feet=self.height_feet,
            inches=self.height_inches,
        )
        weight_kg = parse_weight(
            system,
            weight=self.weight,
            stones=self.weight_stones,
            pounds=self.weight_pounds,
        )
        return recorded_at, height_cm, weight_kg


@router.post("")
async def add_entry(
    form: EntryForm = Depends(),
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Record a new entry."""
    recorded_at, height_cm, weight_kg = await form.to_metric(service, user_id)
    await service.add_entry(user_id, recorded_at, height_cm, weight_kg)
    return RedirectResponse(url="/dashboard", status_code=302)


@router.post("/{entry_id}")
async def update_entry(
    entry_id: int,
    form: EntryForm = Depends(),
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Edit an existing entry."""
    recorded_at, height_cm, weight_kg = await form.to_metric(service, user_id)
    await service.update_entry(user_id, entry_id, recorded_at, height_cm, weight_kg)
    return RedirectResponse(url="/dashboard", status_code=302)


@router.post("/{entry_id}/delete")
async def delete_entry(
    entry_id: int,
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Remove an entry."""
    await service.delete_entry(user_id, entry_id)
    return RedirectResponse(url="/dashboard", status_code=302)

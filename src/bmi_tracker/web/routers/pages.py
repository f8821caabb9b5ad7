"""HTML pages: onboarding and dashboard."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...forms import parse_date_of_birth, parse_height
from ...models.measurements import MeasurementSystem
from ...models.user_profile import Sex
from ...services.tracker import TrackerService
from ...units import (
    height_from_metric,
    height_placeholder,
    unit_labels,
    weight_placeholder,
)
from ..deps import get_current_user, get_service, get_templates

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def root(
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Send new users to onboarding, everyone else to the dashboard."""
    profile = await service.get_profile(user_id)
    target = "/dashboard" if profile.onboarding_completed else "/onboarding"
    return RedirectResponse(url=target, status_code=302)


@router.get("/onboarding", response_class=HTMLResponse)
async def onboarding_page(
    request: Request,
    system: str = "metric",
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Profile setup form."""
    templates = get_templates(request)
    profile = await service.get_profile(user_id)
    selected = MeasurementSystem.parse(system)

    return templates.TemplateResponse(
        request,
        "onboarding.html",
        {
            "profile": profile,
            "system": selected,
            "systems": list(MeasurementSystem),
            "sexes": list(Sex),
            "labels": unit_labels(selected),
            "height_placeholder": height_placeholder(selected),
        },
    )


@router.post("/onboarding")
async def complete_onboarding(
    name: str = Form(""),
    system: str = Form("metric"),
    height: str | None = Form(None),
    height_feet: str | None = Form(None),
    height_inches: str | None = Form(None),
    date_of_birth: str | None = Form(None),
    sex: str | None = Form(None),
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Save the onboarding answers."""
    selected = MeasurementSystem.parse(system)
    height_cm = parse_height(selected, height=height, feet=height_feet, inches=height_inches)

    await service.complete_onboarding(
        user_id,
        name=name,
        system=selected,
        height_cm=height_cm,
        date_of_birth=parse_date_of_birth(date_of_birth),
        sex=Sex.parse(sex),
    )
    return RedirectResponse(url="/dashboard", status_code=302)


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    user_id: str = Depends(get_current_user),
    service: TrackerService = Depends(get_service),
):
    """Profile summary and entry table."""
    profile = await service.get_profile(user_id)
    if not profile.onboarding_completed:
        return RedirectResponse(url="/onboarding", status_code=302)

    templates = get_templates(request)
    dashboard = await service.dashboard(user_id)
    system = dashboard.system

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "dashboard": dashboard,
            "labels": unit_labels(system),
            "default_height": height_from_metric(profile.height_cm, system),
            "weight_placeholder": weight_placeholder(system),
        },
    )

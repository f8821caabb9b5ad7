"""Request-scoped helpers shared by the routers."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..services.tracker import TrackerService

USER_HEADER = "x-user-id"
DEFAULT_USER = "local"


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_service(request: Request) -> TrackerService:
    """Service bound to the app's database."""
    return TrackerService(request.app.state.db_path)


def get_current_user(request: Request) -> str:
    """User id set by the authenticating proxy in front of the app."""
    return request.headers.get(USER_HEADER, "").strip() or DEFAULT_USER

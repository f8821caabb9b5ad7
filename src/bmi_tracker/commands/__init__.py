"""CLI commands for bmi-tracker."""

from .calc import calc
from .entries import entries
from .export import export
from .init import init
from .onboard import onboard
from .profile import profile
from .serve import serve

__all__ = [
    "calc",
    "entries",
    "export",
    "init",
    "onboard",
    "profile",
    "serve",
]

"""Onboarding answers collected through an interactive questionnaire."""

from dataclasses import dataclass
from datetime import date

import questionary
from questionary import Style

from ..forms import FormError, parse_date_of_birth, parse_height
from ..models.measurements import MeasurementSystem
from ..models.user_profile import Sex
from ..units import height_placeholder

custom_style = Style(
    [
        ("qmark", "fg:#2e7d32 bold"),
        ("question", "bold"),
        ("answer", "fg:#1565c0 bold"),
        ("pointer", "fg:#2e7d32 bold"),
        ("highlighted", "fg:#2e7d32 bold"),
        ("selected", "fg:#1565c0"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@dataclass
class OnboardingAnswers:
    """Validated onboarding answers, height already in centimetres."""

    name: str
    system: MeasurementSystem
    height_cm: float
    date_of_birth: date | None
    sex: Sex


def _validator(parse):
    """Adapt a forms parser to questionary's validate callback."""

    def validate(text: str):
        try:
            parse(text)
        except FormError as e:
            return str(e)
        return True

    return validate


class ManualInputClient:
    """Interactive questionnaire for setting up a profile."""

    async def collect_onboarding(self) -> OnboardingAnswers:
        """Ask for name, measurement system, height, date of birth and sex."""
        print("\n=== Welcome to BMI Tracker! ===\n")

        name = await questionary.text(
            "What's your name?",
            validate=lambda text: bool(text.strip()) or "Name is required",
            style=custom_style,
        ).ask_async()

        system = await questionary.select(
            "Which system of measurement do you use?",
            choices=[
                questionary.Choice("Metric (kg/cm)", MeasurementSystem.METRIC),
                questionary.Choice("US (lbs/ft)", MeasurementSystem.US),
                questionary.Choice("UK (st/ft)", MeasurementSystem.UK),
            ],
            style=custom_style,
        ).ask_async()

        placeholder = height_placeholder(system)
        if system.uses_feet_inches:
            feet = await questionary.text(
                "Height - feet:",
                default=placeholder["feet"],
                validate=_validator(lambda v: parse_height(system, feet=v, inches="0")),
                style=custom_style,
            ).ask_async()
            inches = await questionary.text(
                "Height - inches:",
                default=placeholder["inches"],
                validate=_validator(lambda v: parse_height(system, feet="1", inches=v)),
                style=custom_style,
            ).ask_async()
            height_cm = parse_height(system, feet=feet, inches=inches)
        else:
            height = await questionary.text(
                "Height (cm):",
                default=placeholder["cm"],
                validate=_validator(lambda v: parse_height(system, height=v)),
                style=custom_style,
            ).ask_async()
            height_cm = parse_height(system, height=height)

        dob = await questionary.text(
            "Date of birth (YYYY-MM-DD, optional):",
            validate=_validator(parse_date_of_birth),
            style=custom_style,
        ).ask_async()

        sex = await questionary.select(
            "Sex (optional):",
            choices=[
                questionary.Choice("Prefer not to say", Sex.NOT_SPECIFIED),
                questionary.Choice("Male", Sex.MALE),
                questionary.Choice("Female", Sex.FEMALE),
            ],
            style=custom_style,
        ).ask_async()

        return OnboardingAnswers(
            name=name.strip(),
            system=system,
            height_cm=height_cm,
            date_of_birth=parse_date_of_birth(dob),
            sex=sex,
        )

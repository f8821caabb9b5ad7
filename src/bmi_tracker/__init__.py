"""bmi-tracker: personal height, weight and BMI tracking."""

__version__ = "0.1.0"

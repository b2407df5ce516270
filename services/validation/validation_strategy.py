# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Per-type rules for a single field value.

Each strategy checks one primitive field type (text, number, choice,
date, time) and knows how to normalize an accepted value before it is
stored in the profile draft.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from numbers import Number
from typing import Any, Optional

from app.config import Config
from models.step_schema import ActiveField, FieldSpec


class ValidationStrategy(ABC):
    """
    Abstract base class for field validation strategies.

    Strategies only see non-blank values; required-ness is checked by the
    step validator before a strategy is consulted.
    """

    @abstractmethod
    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        """
        Validate a non-blank value.

        Args:
            spec: Field descriptor
            value: Submitted value
            active: Resolved state of the field (effective options)

        Returns:
            Error message, or None if the value is acceptable
        """
        pass

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        """
        Convert an accepted value to the form stored in the draft.

        Must be idempotent: normalizing a normalized value returns it
        unchanged.
        """
        return value

    def is_valid(self, spec: FieldSpec, value: Any, active: ActiveField) -> bool:
        """Check if a value passes this strategy."""
        return self.validate(spec, value, active) is None


class TextFieldValidator(ValidationStrategy):
    """Free text with optional length limits and optional fixed option list."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        if not isinstance(value, str):
            return f"{spec.display_name} must be text"

        text = value.strip()
        if active.options and text not in active.options:
            return f"Please select a valid {spec.display_name.lower()}"
        if spec.min_length is not None and len(text) < spec.min_length:
            return f"{spec.display_name} should be at least {spec.min_length} characters"
        if spec.max_length is not None and len(text) > spec.max_length:
            return f"{spec.display_name} should not exceed {spec.max_length} characters"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class NumberFieldValidator(ValidationStrategy):
    """Numeric value (number or numeric text) within an inclusive range."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        number = self._parse(value)
        if number is None:
            return f"{spec.display_name} must be a number"

        low, high = spec.min_value, spec.max_value
        below = low is not None and number < low
        above = high is not None and number > high
        if below or above:
            unit = f" {spec.unit}" if spec.unit else ""
            if low is not None and high is not None:
                return (
                    f"{spec.display_name} must be between "
                    f"{_format_number(low)}-{_format_number(high)}{unit}"
                )
            if below:
                return f"{spec.display_name} must be at least {_format_number(low)}{unit}"
            return f"{spec.display_name} cannot exceed {_format_number(high)}{unit}"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        number = self._parse(value)
        if number is None:
            return value
        return int(number) if number.is_integer() else number

    @staticmethod
    def _parse(value: Any) -> Optional[float]:
        if isinstance(value, bool):
            return None
        if isinstance(value, Number):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                return None
        else:
            return None
        return number if math.isfinite(number) else None


class SingleChoiceValidator(ValidationStrategy):
    """One value out of the effective option list."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        if not isinstance(value, str):
            return f"Please select a valid {spec.display_name.lower()}"
        if active.options and value.strip() not in active.options:
            return f"Please select a valid {spec.display_name.lower()}"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class MultiChoiceValidator(ValidationStrategy):
    """Several values out of the effective option list, with item count limits."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        if not isinstance(value, (list, tuple)):
            return f"{spec.display_name} must be a list of selections"

        invalid = [
            item for item in value
            if not isinstance(item, str) or (active.options and item not in active.options)
        ]
        if invalid:
            return f"Invalid {spec.display_name.lower()}: {', '.join(str(i) for i in invalid)}"
        if len(set(value)) != len(value):
            return f"{spec.display_name} contains duplicate selections"
        if spec.min_length is not None and len(value) < spec.min_length:
            return f"Please select at least {spec.min_length} {spec.display_name.lower()}"
        if spec.max_length is not None and len(value) > spec.max_length:
            return f"Please select at most {spec.max_length} {spec.display_name.lower()}"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        return list(value) if isinstance(value, (list, tuple)) else value


class DateFieldValidator(ValidationStrategy):
    """Calendar date (date object or YYYY-MM-DD) with optional age limits."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        parsed = self._parse(value)
        if parsed is None:
            return f"Please enter a valid {spec.display_name.lower()}"

        age = years_between(parsed, date.today())
        if spec.min_age is not None and age < spec.min_age:
            return f"You must be at least {spec.min_age} years old"
        if spec.max_age is not None and age > spec.max_age:
            return f"Please enter a valid {spec.display_name.lower()}"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        parsed = self._parse(value)
        return parsed.strftime(Config.DATE_FORMAT) if parsed else value

    @staticmethod
    def _parse(value: Any) -> Optional[date]:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return datetime.strptime(value.strip(), Config.DATE_FORMAT).date()
            except ValueError:
                return None
        return None


class TimeFieldValidator(ValidationStrategy):
    """Time of day (time object or HH:MM, 24-hour)."""

    def validate(self, spec: FieldSpec, value: Any, active: ActiveField) -> Optional[str]:
        if self._parse(value) is None:
            return f"{spec.display_name} must be a time in HH:MM format"
        return None

    def normalize(self, spec: FieldSpec, value: Any) -> Any:
        parsed = self._parse(value)
        return parsed.strftime(Config.TIME_FORMAT) if parsed else value

    @staticmethod
    def _parse(value: Any) -> Optional[time]:
        if isinstance(value, datetime):
            return value.time()
        if isinstance(value, time):
            return value
        if isinstance(value, str):
            try:
                return datetime.strptime(value.strip(), Config.TIME_FORMAT).time()
            except ValueError:
                return None
        return None


def years_between(start: date, end: date) -> int:
    """Full years elapsed from start to end (negative if start is later)."""
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def _format_number(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)

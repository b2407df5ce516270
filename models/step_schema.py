# -*- coding: utf-8 -*-
"""
Step schema model.

Declarative description of one wizard step: its fields, the conditional
rules that show/hide or require fields based on sibling values, and
optional cross-field checks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# Field name -> submitted value
FieldValues = Mapping[str, Any]

# Field name -> human-readable error message (empty means valid)
FieldErrors = Dict[str, str]


class FieldType(Enum):
    """Primitive type of a field."""
    TEXT = "text"
    NUMBER = "number"
    SINGLE_CHOICE = "single_choice"
    MULTI_CHOICE = "multi_choice"
    DATE = "date"
    TIME = "time"


# Types whose accepted values can be limited to a list of options
CHOICE_CAPABLE_TYPES = (FieldType.TEXT, FieldType.SINGLE_CHOICE, FieldType.MULTI_CHOICE)


@dataclass(frozen=True)
class FieldSpec:
    """
    Descriptor of a single field.

    Range attributes are interpreted per type:
    - NUMBER: min_value / max_value (inclusive)
    - TEXT: min_length / max_length (characters, after stripping)
    - MULTI_CHOICE: min_length / max_length (number of selected items)
    - DATE: min_age / max_age (full years before today)
    """
    name: str
    field_type: FieldType
    label: str = ""
    required_by_default: bool = False
    options: Tuple[str, ...] = ()
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    unit: str = ""

    @property
    def display_name(self) -> str:
        """Label if set, otherwise the field name."""
        return self.label or self.name


@dataclass(frozen=True)
class FieldEffect:
    """Change a rule applies to one field. None leaves the attribute untouched."""
    field: str
    visible: Optional[bool] = None
    required: Optional[bool] = None
    options: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class ConditionalRule:
    """
    Rule gating other fields on the value of a trigger field.

    The rule matches when the trigger has a value and that value is one of
    `values` (or is not, when `negate` is set). An unset trigger never
    matches.
    """
    trigger: str
    values: Tuple[Any, ...]
    effects: Tuple[FieldEffect, ...]
    negate: bool = False

    def matches(self, values: FieldValues) -> bool:
        value = values.get(self.trigger)
        if is_blank(value):
            return False
        if isinstance(value, str):
            value = value.strip()
        return (value in self.values) != self.negate

    @property
    def gated_fields(self) -> Tuple[str, ...]:
        return tuple(effect.field for effect in self.effects)


@dataclass(frozen=True)
class ActiveField:
    """Resolved state of a field for the current step values."""
    visible: bool
    required: bool
    options: Tuple[str, ...] = ()


# Mapping produced by the resolver, in field declaration order
ActiveFieldSet = Dict[str, ActiveField]

# Extra cross-field validation run after the per-field rules
StepCheck = Callable[[FieldValues], FieldErrors]


@dataclass(frozen=True)
class StepSchema:
    """
    Immutable description of one wizard step.

    `checks` is an extension point for cross-field rules that per-field
    specs cannot express; the profile steps declare none. A check receives
    the visible values and returns field errors.
    """
    id: str
    title: str
    fields: Tuple[FieldSpec, ...]
    conditional_rules: Tuple[ConditionalRule, ...] = ()
    checks: Tuple[StepCheck, ...] = field(default=(), compare=False)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        """Get a field descriptor by name."""
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def has_field(self, name: str) -> bool:
        return self.get_field(name) is not None

    def local_values(self, values: FieldValues) -> Dict[str, Any]:
        """Restrict a mapping to the fields this step declares."""
        return {name: values[name] for name in self.field_names if name in values}

    def validate(self, values: FieldValues) -> FieldErrors:
        """
        Validate values for this step.

        Resolves the active fields for the given values and runs the
        validation engine on them. Does not modify `values`.
        """
        # Import here to avoid circular imports
        from services.conditional_field_resolver import resolve
        from services.wizard.step_validator import validate

        return validate(self, values, resolve(self, values))


def is_blank(value: Any) -> bool:
    """Check whether a submitted value counts as empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False

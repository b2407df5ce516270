# -*- coding: utf-8 -*-
"""
Step validation service for the profile wizard.

Validates the values submitted for one step against its schema and the
resolved active field set, without UI coupling and without keeping
state between calls.
"""

from typing import Any, Dict, Optional

from models.step_schema import (
    ActiveFieldSet,
    FieldErrors,
    FieldSpec,
    FieldType,
    FieldValues,
    StepSchema,
    is_blank,
)
from services.validation.validation_factory import ValidationFactory, get_validation_factory
from utils.logger import get_logger

logger = get_logger(__name__)

# Types whose missing value is reported as "Please select your ..."
_SELECTED_TYPES = (FieldType.SINGLE_CHOICE, FieldType.MULTI_CHOICE, FieldType.DATE, FieldType.TIME)


class StepValidator:
    """Validates and normalizes step values based on their schema."""

    def __init__(self, factory: Optional[ValidationFactory] = None):
        self.factory = factory or get_validation_factory()

    def validate(
        self,
        schema: StepSchema,
        values: FieldValues,
        active_fields: ActiveFieldSet,
    ) -> FieldErrors:
        """
        Validate step values.

        Only visible fields of `active_fields` are checked. Never raises:
        every failure becomes an entry of the returned mapping.

        Args:
            schema: Step schema
            values: Submitted values for the step
            active_fields: Output of the conditional field resolver

        Returns:
            Field name -> error message; empty if the step is valid
        """
        errors: FieldErrors = {}

        for spec in schema.fields:
            active = active_fields.get(spec.name)
            if active is None or not active.visible:
                continue

            value = values.get(spec.name)
            if is_blank(value):
                if active.required:
                    errors[spec.name] = self._required_message(spec)
                continue

            message = self._check_value(spec, value, active)
            if message:
                errors[spec.name] = message

        if schema.checks:
            visible_values = {
                name: value for name, value in values.items()
                if name in active_fields and active_fields[name].visible
            }
            for check in schema.checks:
                try:
                    extra = check(visible_values)
                except (TypeError, ValueError) as e:
                    logger.error(f"Step check failed for '{schema.id}': {e}", exc_info=True)
                    # An unverified step must not pass
                    target = self._first_visible_field(schema, active_fields)
                    if target is not None and target.name not in errors:
                        errors[target.name] = f"Could not validate {target.display_name.lower()}"
                    continue
                for name, message in extra.items():
                    if name in visible_values and name not in errors:
                        errors[name] = message

        return errors

    def normalize(
        self,
        schema: StepSchema,
        values: FieldValues,
        active_fields: ActiveFieldSet,
    ) -> Dict[str, Any]:
        """
        Normalize the visible values present in `values`.

        Blank values become None. Fields that are hidden, undeclared or
        absent from `values` are left out.
        """
        normalized: Dict[str, Any] = {}

        for spec in schema.fields:
            active = active_fields.get(spec.name)
            if active is None or not active.visible or spec.name not in values:
                continue

            value = values[spec.name]
            if is_blank(value):
                normalized[spec.name] = None
                continue

            strategy = self.factory.get_validator(spec.field_type)
            normalized[spec.name] = strategy.normalize(spec, value) if strategy else value

        return normalized

    def _check_value(self, spec: FieldSpec, value: Any, active) -> Optional[str]:
        strategy = self.factory.get_validator(spec.field_type)
        if strategy is None:
            logger.warning(f"No validator registered for field type: {spec.field_type.value}")
            return None
        try:
            return strategy.validate(spec, value, active)
        except (TypeError, ValueError, AttributeError) as e:
            logger.debug(f"Validator raised for '{spec.name}': {e}")
            return f"Invalid value for {spec.display_name.lower()}"

    @staticmethod
    def _first_visible_field(schema: StepSchema, active_fields: ActiveFieldSet) -> Optional[FieldSpec]:
        for spec in schema.fields:
            active = active_fields.get(spec.name)
            if active is not None and active.visible:
                return spec
        return None

    @staticmethod
    def _required_message(spec: FieldSpec) -> str:
        if spec.field_type in _SELECTED_TYPES:
            return f"Please select your {spec.display_name.lower()}"
        return f"{spec.display_name} is required"


def validate(schema: StepSchema, values: FieldValues, active_fields: ActiveFieldSet) -> FieldErrors:
    """Validate step values with the default validation factory."""
    return StepValidator().validate(schema, values, active_fields)

# -*- coding: utf-8 -*-
"""
Validation Factory - Maps field types to their validation strategies.

Provides a central point for looking up the strategy that checks and
normalizes values of a given primitive type.
"""

from typing import Dict, List, Optional

from models.step_schema import FieldType
from .validation_strategy import (
    DateFieldValidator,
    MultiChoiceValidator,
    NumberFieldValidator,
    SingleChoiceValidator,
    TextFieldValidator,
    TimeFieldValidator,
    ValidationStrategy,
)


class ValidationFactory:
    """
    Registry of validation strategies keyed by field type.

    Every FieldType gets a built-in strategy; callers can replace one with
    register_validator().
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._validators: Dict[FieldType, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators for every field type."""
        self.register_validator(FieldType.TEXT, TextFieldValidator())
        self.register_validator(FieldType.NUMBER, NumberFieldValidator())
        self.register_validator(FieldType.SINGLE_CHOICE, SingleChoiceValidator())
        self.register_validator(FieldType.MULTI_CHOICE, MultiChoiceValidator())
        self.register_validator(FieldType.DATE, DateFieldValidator())
        self.register_validator(FieldType.TIME, TimeFieldValidator())

    def register_validator(self, field_type: FieldType, validator: ValidationStrategy):
        """
        Register a validation strategy for a field type.

        Args:
            field_type: Primitive field type
            validator: ValidationStrategy instance
        """
        self._validators[field_type] = validator

    def get_validator(self, field_type: FieldType) -> Optional[ValidationStrategy]:
        """
        Get the registered validator for a field type.

        Args:
            field_type: Primitive field type

        Returns:
            ValidationStrategy instance or None if not found
        """
        return self._validators.get(field_type)

    def get_registered_types(self) -> List[FieldType]:
        """
        Get list of field types with a registered strategy.

        Returns:
            List of field types
        """
        return list(self._validators.keys())


# Shared factory; strategies hold no state
_default_factory: Optional[ValidationFactory] = None


def get_validation_factory() -> ValidationFactory:
    """Get the default validation factory."""
    global _default_factory

    if _default_factory is None:
        _default_factory = ValidationFactory()

    return _default_factory

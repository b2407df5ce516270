# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    DateFieldValidator,
    MultiChoiceValidator,
    NumberFieldValidator,
    SingleChoiceValidator,
    TextFieldValidator,
    TimeFieldValidator,
    ValidationStrategy,
)
from .validation_factory import ValidationFactory, get_validation_factory

__all__ = [
    'ValidationStrategy',
    'TextFieldValidator',
    'NumberFieldValidator',
    'SingleChoiceValidator',
    'MultiChoiceValidator',
    'DateFieldValidator',
    'TimeFieldValidator',
    'ValidationFactory',
    'get_validation_factory',
]

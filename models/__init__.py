# -*- coding: utf-8 -*-
"""
Profile Wizard Data Models
"""

from .step_schema import (
    ActiveField,
    ConditionalRule,
    FieldEffect,
    FieldSpec,
    FieldType,
    StepSchema,
)
from .wizard_session import WizardSession, WizardState

__all__ = [
    "ActiveField",
    "ConditionalRule",
    "FieldEffect",
    "FieldSpec",
    "FieldType",
    "StepSchema",
    "WizardSession",
    "WizardState",
]

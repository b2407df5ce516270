# -*- coding: utf-8 -*-
"""
Profile Wizard Controllers
==========================
Controller layer between the step presenter (UI) and the wizard services.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- State management of the wizard session

Usage:
    from controllers import WizardController

    controller = WizardController()
    result = controller.submit_next({"firstName": "Asha", ...})
    if not result.success:
        print(result.errors)
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.wizard_controller import (
    StepView,
    WizardController,
)

__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Wizard
    "StepView",
    "WizardController",
]

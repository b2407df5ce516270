# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
Drives the profile creation wizard.

Handles:
- Step progression (next/back) with validation before advancing
- Conditional field resolution for the current step
- Accumulation of the profile draft
- Completion and abandonment of the session
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, OperationResult
from models.step_schema import ActiveFieldSet, FieldValues, StepSchema, is_blank
from models.wizard_session import WizardSession, WizardState
from services.conditional_field_resolver import resolve
from services.exceptions import SchemaConfigurationError
from services.wizard.profile_autofill import generate_step_answers
from services.wizard.profile_steps import get_profile_registry
from services.wizard.step_registry import StepRegistry
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)

# Result codes
ADVANCED = "advanced"
COMPLETED = "completed"
MOVED_BACK = "moved_back"
ABANDONED = "abandoned"
VALIDATION_FAILED = "validation_failed"
AT_FIRST_STEP = "at_first_step"
SESSION_CLOSED = "session_closed"
AUTOFILL_DISABLED = "autofill_disabled"


@dataclass
class StepView:
    """Read-only picture of the current step for the presenter."""
    step_id: str
    title: str
    index: int
    step_count: int
    state: WizardState
    values: Dict[str, Any] = field(default_factory=dict)
    active_fields: ActiveFieldSet = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def visible_field_names(self):
        return [name for name, active in self.active_fields.items() if active.visible]


class WizardController(BaseController):
    """
    State machine of one profile creation session.

    States: Active(step index), Completed, Abandoned. Every operation runs
    to completion before its signals are emitted, so listeners always see
    the post-transition state.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(dict)  # field errors
    wizard_completed = pyqtSignal(dict)  # final profile draft
    wizard_abandoned = pyqtSignal()

    def __init__(
        self,
        registry: Optional[StepRegistry] = None,
        step_order: Optional[Sequence[str]] = None,
        session: Optional[WizardSession] = None,
        validator: Optional[StepValidator] = None,
        parent=None,
    ):
        """
        Initialize the controller.

        Args:
            registry: Step schemas (defaults to the profile steps)
            step_order: Step ids to run (defaults to registry order)
            session: Existing session to resume
            validator: Step validator (defaults to the standard strategies)
            parent: Parent QObject

        Raises:
            SchemaConfigurationError: If the step order references unknown steps
        """
        super().__init__(parent)
        self.registry = registry or get_profile_registry()
        self.validator = validator or StepValidator()

        if session is None:
            order = list(step_order) if step_order is not None else self.registry.step_ids
            self._check_step_order(order)
            session = WizardSession(order)
        else:
            self._check_step_order(session.step_order)
        self.session = session

        logger.info(
            f"Wizard session {self.session.reference_number} ready "
            f"({len(self.session.step_order)} steps)"
        )

    def _check_step_order(self, order: Sequence[str]):
        if not order:
            raise SchemaConfigurationError("Wizard step order is empty")
        unknown = [step_id for step_id in order if step_id not in self.registry]
        if unknown:
            raise SchemaConfigurationError(f"Unknown steps in wizard order: {unknown}")
        if len(set(order)) != len(order):
            raise SchemaConfigurationError("Wizard step order repeats a step")

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> WizardState:
        return self.session.state

    @property
    def current_index(self) -> int:
        return self.session.current_index

    @property
    def step_count(self) -> int:
        return len(self.session.step_order)

    @property
    def current_schema(self) -> StepSchema:
        return self.registry[self.session.current_step_id]

    @property
    def profile(self) -> Optional[Dict[str, Any]]:
        """Final profile draft once the wizard is completed, otherwise None."""
        if self.session.state != WizardState.COMPLETED:
            return None
        return dict(self.session.draft)

    def cleaned_profile(self) -> Optional[Dict[str, Any]]:
        """Final profile without empty values, or None if not completed."""
        profile = self.profile
        if profile is None:
            return None
        return {name: value for name, value in profile.items() if not is_blank(value)}

    def can_go_back(self) -> bool:
        """Check if we can navigate to the previous step."""
        return self.session.is_active and self.session.current_index > 0

    def progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if self.session.state == WizardState.COMPLETED:
            return 100.0
        if self.step_count <= 1:
            return 0.0
        return (self.session.current_index / (self.step_count - 1)) * 100.0

    def resolve_active_fields(self, values: FieldValues) -> ActiveFieldSet:
        """Resolve visible/required fields of the current step for in-progress values."""
        schema = self.current_schema
        return resolve(schema, schema.local_values(values))

    def current_step_view(self) -> StepView:
        """Get the current step's id, stored values, active fields and errors."""
        schema = self.current_schema
        values = schema.local_values(self.session.draft)
        return StepView(
            step_id=schema.id,
            title=schema.title,
            index=self.session.current_index,
            step_count=self.step_count,
            state=self.session.state,
            values=values,
            active_fields=resolve(schema, values),
            errors=dict(self.session.last_errors),
        )

    # =========================================================================
    # Transitions
    # =========================================================================

    def submit_next(self, patch: FieldValues) -> OperationResult:
        """
        Validate the current step's values and advance.

        On failure the session stays on the current step and the field
        errors are returned. On success the visible values are merged into
        the draft and the wizard moves to the next step, or completes after
        the last one.
        """
        if not self.session.is_active:
            return self._closed_result("submit_next")

        schema = self.current_schema
        index = self.session.current_index
        values = schema.local_values(patch)

        ignored = sorted(set(patch) - set(values))
        if ignored:
            logger.debug(f"Ignoring fields not declared by step '{schema.id}': {ignored}")

        active_fields = resolve(schema, values)
        errors = self.validator.validate(schema, values, active_fields)

        if errors:
            self.session.last_errors = dict(errors)
            self.session.touch()
            logger.warning(f"Step {index} ('{schema.id}') validation failed: {errors}")
            self.validation_failed.emit(dict(errors))
            return OperationResult.fail(
                VALIDATION_FAILED,
                f"Please correct {len(errors)} field(s)",
                errors=errors,
                data=self.current_step_view(),
            )

        self.session.merge(self.validator.normalize(schema, values, active_fields))
        self.session.last_errors = {}
        self._clear_error()
        self.session.mark_step_completed(index)

        if self.session.is_last_step:
            self.session.state = WizardState.COMPLETED
            self._log_operation("submit_next", step=schema.id, outcome=COMPLETED)
            profile = dict(self.session.draft)
            self.wizard_completed.emit(dict(profile))
            self.data_changed.emit()
            return OperationResult.ok(COMPLETED, data=profile, message="Profile completed")

        self.session.current_index = index + 1
        self._log_operation("submit_next", step=schema.id, outcome=ADVANCED)
        self.step_changed.emit(index, index + 1)
        self.data_changed.emit()
        return OperationResult.ok(ADVANCED, data=self.current_step_view())

    def go_back(self) -> OperationResult:
        """
        Navigate to the previous step.

        At the first step nothing changes and an `at_first_step` result is
        returned. The draft is never modified.
        """
        if not self.session.is_active:
            return self._closed_result("go_back")

        index = self.session.current_index
        if index == 0:
            logger.debug("Cannot go back: already at first step")
            return OperationResult.fail(AT_FIRST_STEP, "Already at the first step",
                                        data=self.current_step_view())

        self.session.current_index = index - 1
        self.session.last_errors = {}
        self._clear_error()
        self.session.touch()
        self._log_operation("go_back", old_index=index, new_index=index - 1)
        self.step_changed.emit(index, index - 1)
        return OperationResult.ok(MOVED_BACK, data=self.current_step_view())

    def abandon(self) -> OperationResult:
        """
        Abandon the wizard and discard the draft.

        Abandoning an already abandoned session is a no-op. A completed
        session is terminal: its profile has already been handed over, so
        abandon returns `session_closed` there instead of discarding it.
        """
        if self.session.state == WizardState.ABANDONED:
            return OperationResult.ok(ABANDONED, message="Wizard already abandoned")
        if self.session.state == WizardState.COMPLETED:
            return self._closed_result("abandon")

        self.session.state = WizardState.ABANDONED
        self.session.draft.clear()
        self.session.last_errors = {}
        self.session.touch()
        self._log_operation("abandon", reference=self.session.reference_number)
        self.wizard_abandoned.emit()
        return OperationResult.ok(ABANDONED, message="Wizard abandoned")

    def autofill(self, seed: Optional[int] = None) -> OperationResult:
        """
        Fill every remaining step with generated answers (development mode).

        Answers go through submit_next, so they are validated like user
        input. Stops at the first step that fails.
        """
        if not Config.DEV_MODE:
            self._set_error("Autofill is only available in development mode")
            return OperationResult.fail(AUTOFILL_DISABLED, self.last_error)
        if not self.session.is_active:
            return self._closed_result("autofill")

        rng = random.Random(seed)
        result = OperationResult.ok(ADVANCED, data=self.current_step_view())
        while self.session.is_active:
            answers = generate_step_answers(self.session.current_step_id, rng)
            result = self.submit_next(answers)
            if not result.success:
                break
        return result

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> Dict[str, Any]:
        """Serialize the session so the wizard can be resumed later."""
        return self.session.to_dict()

    @classmethod
    def restore(cls, snapshot: Dict[str, Any], registry: Optional[StepRegistry] = None,
                parent=None) -> 'WizardController':
        """
        Resume a wizard from a snapshot.

        Raises:
            ValueError: If the snapshot is malformed
            SchemaConfigurationError: If it references unknown steps
        """
        session = WizardSession.from_dict(snapshot)
        return cls(registry=registry, session=session, parent=parent)

    def _closed_result(self, operation: str) -> OperationResult:
        self._set_error(f"{operation} called on a {self.session.state.value} wizard")
        return OperationResult.fail(SESSION_CLOSED, self.last_error)

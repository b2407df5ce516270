# -*- coding: utf-8 -*-
"""
Wizard Session - State and data of one profile creation run.

Provides:
- Step order and current position
- Accumulated profile draft
- Errors of the currently displayed step
- Serialization/deserialization
- Reference number generation
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence
import uuid

from app.config import Config


class WizardState(Enum):
    """Lifecycle state of a wizard session."""
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class WizardSession:
    """
    Session record owned by exactly one WizardController.

    The step order is fixed when the session is created.
    """

    def __init__(self, step_order: Sequence[str]):
        """
        Initialize the session.

        Args:
            step_order: Step ids in wizard order (must not be empty)
        """
        if not step_order:
            raise ValueError("A wizard session needs at least one step")

        self.session_id: str = str(uuid.uuid4())
        self.state: WizardState = WizardState.ACTIVE
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.step_order: tuple = tuple(step_order)
        self.current_index: int = 0
        self.reference_number: str = self._generate_reference_number()

        # Indices of steps validated at least once
        self.completed_steps: set = set()

        # Profile draft: field name -> normalized value
        self.draft: Dict[str, Any] = {}

        # Field name -> error message for the current step
        self.last_errors: Dict[str, str] = {}

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: PRF-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        short_id = self.session_id[:4].upper()
        return f"{Config.REFERENCE_PREFIX}-{timestamp}-{short_id}"

    @property
    def current_step_id(self) -> str:
        return self.step_order[self.current_index]

    @property
    def is_last_step(self) -> bool:
        return self.current_index == len(self.step_order) - 1

    @property
    def is_active(self) -> bool:
        return self.state == WizardState.ACTIVE

    def touch(self):
        """Record a modification."""
        self.updated_at = datetime.now()

    def mark_step_completed(self, step_index: int):
        """Mark a step as validated at least once."""
        self.completed_steps.add(step_index)
        self.touch()

    def is_step_completed(self, step_index: int) -> bool:
        """Check if a step has been validated at least once."""
        return step_index in self.completed_steps

    def merge(self, values: Dict[str, Any]):
        """Overwrite draft entries field by field."""
        self.draft.update(values)
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the session to a dictionary."""
        return {
            "session_id": self.session_id,
            "reference_number": self.reference_number,
            "state": self.state.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "step_order": list(self.step_order),
            "current_index": self.current_index,
            "completed_steps": sorted(self.completed_steps),
            "draft": dict(self.draft),
            "last_errors": dict(self.last_errors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardSession':
        """
        Restore a session from a dictionary.

        Raises:
            ValueError: If the step order is missing or the index is out of range
        """
        step_order: List[str] = data.get("step_order") or []
        session = cls(step_order)

        current_index = int(data.get("current_index", 0))
        if not 0 <= current_index < len(session.step_order):
            raise ValueError(
                f"Invalid step index: {current_index} "
                f"(valid range: 0-{len(session.step_order) - 1})"
            )

        session.session_id = data.get("session_id", session.session_id)
        session.reference_number = data.get("reference_number", session.reference_number)
        session.state = WizardState(data.get("state", WizardState.ACTIVE.value))
        session.current_index = current_index
        session.completed_steps = set(data.get("completed_steps", []))
        session.draft = dict(data.get("draft", {}))
        session.last_errors = dict(data.get("last_errors", {}))

        # Parse datetime strings
        if "created_at" in data:
            session.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            session.updated_at = datetime.fromisoformat(data["updated_at"])

        return session

    def get_summary(self) -> Dict[str, Any]:
        """Get a short summary of the session for logging."""
        return {
            "reference_number": self.reference_number,
            "state": self.state.value,
            "current_step": self.current_step_id,
            "completed_steps": len(self.completed_steps),
            "total_steps": len(self.step_order),
            "draft_fields": len(self.draft),
        }

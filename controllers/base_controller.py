# -*- coding: utf-8 -*-
"""
Base Controller
===============
Shared result type and QObject base for the wizard controllers.

User-facing outcomes (validation failures, boundary conditions, closed
sessions) are returned as OperationResult values; exceptions are kept for
programmer errors such as schema misconfiguration.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """
    Outcome of a controller operation.

    `code` names the outcome (e.g. "advanced", "validation_failed") so the
    presenter can branch on it without parsing messages. `errors` maps
    field names to messages.
    """
    success: bool
    code: str = ""
    data: Optional[T] = None
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls, code: str, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, code=code, data=data, message=message)

    @classmethod
    def fail(cls, code: str, message: str, errors: Dict[str, str] = None,
             data: T = None) -> 'OperationResult[T]':
        """Create a failed result (errors are copied)."""
        return cls(success=False, code=code, data=data, message=message,
                   errors=dict(errors or {}))

    def __bool__(self) -> bool:
        return self.success


class BaseController(QObject):
    """
    Base for controllers driven by a presenter.

    Keeps the message of the last rejected operation and emits
    data_changed whenever stored data changes.
    """

    data_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._last_error = ""

    @property
    def last_error(self) -> str:
        """Message of the last rejected operation, empty if none."""
        return self._last_error

    def _set_error(self, error: str):
        self._last_error = error
        if error:
            logger.warning(f"{self.__class__.__name__}: {error}")

    def _clear_error(self):
        self._last_error = ""

    def _log_operation(self, operation: str, **details: Any):
        """Log a completed state transition at INFO."""
        rendered = ", ".join(f"{key}={value}" for key, value in details.items())
        logger.info(f"{self.__class__.__name__}.{operation}({rendered})")

# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class SchemaConfigurationError(Exception):
    """
    Exception raised when step schemas are declared inconsistently.

    Raised while the step registry is being built, never in response
    to user input.
    """

    def __init__(self, message: str, step_id: str = None,
                 field: str = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id
        self.field = field

    def __str__(self):
        if self.step_id and self.field:
            return f"[{self.step_id}.{self.field}] {self.message}"
        if self.step_id:
            return f"[{self.step_id}] {self.message}"
        return self.message

# -*- coding: utf-8 -*-
"""
Step Registry - Registers step schemas and rejects inconsistent ones.

All configuration problems are reported when a schema is registered,
before any wizard session starts.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from models.step_schema import CHOICE_CAPABLE_TYPES, FieldSpec, FieldType, StepSchema
from services.exceptions import SchemaConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)


class StepRegistry:
    """
    Ordered registry of step schemas.

    Acts as the single source of step order and of the global field
    namespace: a field name declared by two steps must have the same type
    in both.
    """

    def __init__(self, schemas: Iterable[StepSchema] = ()):
        """
        Initialize the registry.

        Args:
            schemas: Schemas to register, in wizard order

        Raises:
            SchemaConfigurationError: If any schema is inconsistent
        """
        self._schemas: Dict[str, StepSchema] = {}
        self._field_types: Dict[str, Tuple[FieldType, str]] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: StepSchema):
        """
        Validate and register a step schema at the end of the order.

        Raises:
            SchemaConfigurationError: If the schema is inconsistent on its
                own or with previously registered schemas
        """
        try:
            self._check_schema(schema)
        except SchemaConfigurationError as e:
            logger.error(f"Rejected step schema: {e}")
            raise

        self._schemas[schema.id] = schema
        for spec in schema.fields:
            self._field_types.setdefault(spec.name, (spec.field_type, schema.id))

        logger.debug(f"Registered step '{schema.id}' with {len(schema.fields)} fields")

    def get(self, step_id: str) -> Optional[StepSchema]:
        """Get a schema by step id."""
        return self._schemas.get(step_id)

    def __getitem__(self, step_id: str) -> StepSchema:
        return self._schemas[step_id]

    def __contains__(self, step_id: str) -> bool:
        return step_id in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    @property
    def step_ids(self) -> List[str]:
        """Registered step ids, in registration order."""
        return list(self._schemas.keys())

    @property
    def schemas(self) -> List[StepSchema]:
        return list(self._schemas.values())

    def field_owner(self, field_name: str) -> Optional[str]:
        """Id of the first step that declared a field."""
        entry = self._field_types.get(field_name)
        return entry[1] if entry else None

    # =========================================================================
    # Consistency checks
    # =========================================================================

    def _check_schema(self, schema: StepSchema):
        if not schema.id:
            raise SchemaConfigurationError("Step id must not be empty")
        if schema.id in self._schemas:
            raise SchemaConfigurationError("Duplicate step id", step_id=schema.id)
        if not schema.fields:
            raise SchemaConfigurationError("Step declares no fields", step_id=schema.id)

        seen = set()
        for spec in schema.fields:
            if spec.name in seen:
                raise SchemaConfigurationError(
                    "Field declared twice in the same step",
                    step_id=schema.id, field=spec.name
                )
            seen.add(spec.name)
            self._check_field(schema, spec)

        for rule in schema.conditional_rules:
            trigger = schema.get_field(rule.trigger)
            if trigger is None:
                raise SchemaConfigurationError(
                    "Conditional rule trigger is not declared in the step",
                    step_id=schema.id, field=rule.trigger
                )
            if not rule.values:
                raise SchemaConfigurationError(
                    "Conditional rule has no trigger values",
                    step_id=schema.id, field=rule.trigger
                )
            if trigger.options:
                unknown = [value for value in rule.values if value not in trigger.options]
                if unknown:
                    raise SchemaConfigurationError(
                        f"Conditional rule values are not trigger options: {unknown}",
                        step_id=schema.id, field=rule.trigger
                    )

            for effect in rule.effects:
                target = schema.get_field(effect.field)
                if target is None:
                    raise SchemaConfigurationError(
                        "Conditional rule targets a field not declared in the step",
                        step_id=schema.id, field=effect.field
                    )
                if effect.field == rule.trigger:
                    raise SchemaConfigurationError(
                        "Conditional rule gates its own trigger field",
                        step_id=schema.id, field=effect.field
                    )
                if effect.options is not None and target.field_type not in CHOICE_CAPABLE_TYPES:
                    raise SchemaConfigurationError(
                        f"Options override on a {target.field_type.value} field",
                        step_id=schema.id, field=effect.field
                    )

    def _check_field(self, schema: StepSchema, spec: FieldSpec):
        if spec.options and spec.field_type not in CHOICE_CAPABLE_TYPES:
            raise SchemaConfigurationError(
                f"Options declared on a {spec.field_type.value} field",
                step_id=schema.id, field=spec.name
            )

        existing = self._field_types.get(spec.name)
        if existing and existing[0] != spec.field_type:
            existing_type, owner = existing
            raise SchemaConfigurationError(
                f"Field already declared by step '{owner}' as {existing_type.value}, "
                f"not {spec.field_type.value}",
                step_id=schema.id, field=spec.name
            )

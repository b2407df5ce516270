# -*- coding: utf-8 -*-
"""
Conditional field resolver.

Computes which fields of a step are visible and required for the values
currently entered in that step. Pure and stateless, so it can run on
every keystroke.
"""

from typing import Dict

from models.step_schema import ActiveField, ActiveFieldSet, FieldValues, StepSchema


def resolve(schema: StepSchema, values: FieldValues) -> ActiveFieldSet:
    """
    Resolve the active field set of a step.

    Every field starts visible with its `required_by_default` flag and
    declared options. Matching rules are applied in declaration order; a
    later rule overrides an earlier one for the same attribute.

    Args:
        schema: Step schema
        values: Values currently held for this step only

    Returns:
        Mapping of field name to ActiveField, in declaration order
    """
    state: Dict[str, dict] = {
        spec.name: {
            "visible": True,
            "required": spec.required_by_default,
            "options": spec.options,
        }
        for spec in schema.fields
    }

    for rule in schema.conditional_rules:
        if not rule.matches(values):
            continue
        for effect in rule.effects:
            current = state[effect.field]
            if effect.visible is not None:
                current["visible"] = effect.visible
            if effect.required is not None:
                current["required"] = effect.required
            if effect.options is not None:
                current["options"] = effect.options

    return {
        name: ActiveField(
            visible=attrs["visible"],
            # Hidden fields are never required
            required=attrs["visible"] and attrs["required"],
            options=tuple(attrs["options"]),
        )
        for name, attrs in state.items()
    }


def visible_fields(active_fields: ActiveFieldSet) -> Dict[str, ActiveField]:
    """Filter an active field set down to the visible fields."""
    return {name: active for name, active in active_fields.items() if active.visible}

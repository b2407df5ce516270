# -*- coding: utf-8 -*-
"""
Tests for the Step Registry.

Tests cover:
- Registration order and lookups
- Schema misconfiguration detected at registration time
"""

import pytest

from models.step_schema import ConditionalRule, FieldEffect, FieldSpec, FieldType, StepSchema
from services.exceptions import SchemaConfigurationError
from services.wizard.step_registry import StepRegistry


def make_step(step_id="work", fields=None, rules=()):
    """Build a small valid step schema."""
    if fields is None:
        fields = (
            FieldSpec("kind", FieldType.SINGLE_CHOICE, "Kind", True, options=("Employed", "Student")),
            FieldSpec("company", FieldType.TEXT, "Company"),
            FieldSpec("height", FieldType.NUMBER, "Height"),
        )
    return StepSchema(id=step_id, title=step_id.title(), fields=fields, conditional_rules=rules)


class TestRegistration:
    """Test successful registration."""

    def test_order_and_lookup(self):
        """Test schemas keep registration order."""
        registry = StepRegistry([make_step("a"), make_step("b", fields=(
            FieldSpec("other", FieldType.TEXT, "Other"),
        ))])

        assert registry.step_ids == ["a", "b"]
        assert len(registry) == 2
        assert "a" in registry
        assert registry["b"].id == "b"
        assert registry.get("missing") is None

    def test_shared_field_with_same_type(self):
        """Test two steps may declare the same field with the same type."""
        registry = StepRegistry([
            make_step("a"),
            make_step("b", fields=(FieldSpec("company", FieldType.TEXT, "Company"),)),
        ])
        assert registry.field_owner("company") == "a"

    def test_profile_steps_register(self, registry):
        """Test the profile steps form a consistent registry."""
        assert registry.step_ids == [
            "basic_info",
            "location",
            "religious_info",
            "physical_attributes",
            "lifestyle",
            "education",
            "occupation",
            "family",
            "horoscope",
            "about",
        ]


class TestMisconfiguration:
    """Test schema errors raised at registration."""

    def test_duplicate_step_id(self):
        """Test duplicate step ids."""
        with pytest.raises(SchemaConfigurationError, match="Duplicate step id"):
            StepRegistry([make_step("a"), make_step("a")])

    def test_step_without_fields(self):
        """Test empty field list."""
        with pytest.raises(SchemaConfigurationError):
            StepRegistry([make_step("a", fields=())])

    def test_duplicate_field_in_step(self):
        """Test a field declared twice."""
        fields = (FieldSpec("x", FieldType.TEXT, "X"), FieldSpec("x", FieldType.TEXT, "X"))
        with pytest.raises(SchemaConfigurationError) as exc_info:
            StepRegistry([make_step("a", fields=fields)])
        assert exc_info.value.field == "x"
        assert str(exc_info.value).startswith("[a.x]")

    def test_undeclared_trigger(self):
        """Test a rule whose trigger is not in the step."""
        rule = ConditionalRule("missing", ("Employed",), (FieldEffect("company", visible=False),))
        with pytest.raises(SchemaConfigurationError, match="trigger is not declared"):
            StepRegistry([make_step(rules=(rule,))])

    def test_undeclared_target(self):
        """Test a rule targeting a field not in the step."""
        rule = ConditionalRule("kind", ("Employed",), (FieldEffect("salary", visible=False),))
        with pytest.raises(SchemaConfigurationError, match="targets a field not declared"):
            StepRegistry([make_step(rules=(rule,))])

    def test_rule_gating_its_trigger(self):
        """Test a rule that gates its own trigger."""
        rule = ConditionalRule("kind", ("Employed",), (FieldEffect("kind", visible=False),))
        with pytest.raises(SchemaConfigurationError, match="own trigger"):
            StepRegistry([make_step(rules=(rule,))])

    def test_rule_value_not_an_option(self):
        """Test rule values must be trigger options."""
        rule = ConditionalRule("kind", ("Retired",), (FieldEffect("company", visible=False),))
        with pytest.raises(SchemaConfigurationError, match="not trigger options"):
            StepRegistry([make_step(rules=(rule,))])

    def test_rule_without_values(self):
        """Test a rule must list trigger values."""
        rule = ConditionalRule("kind", (), (FieldEffect("company", visible=False),))
        with pytest.raises(SchemaConfigurationError, match="no trigger values"):
            StepRegistry([make_step(rules=(rule,))])

    def test_options_override_on_number(self):
        """Test options cannot be imposed on a number field."""
        rule = ConditionalRule("kind", ("Employed",), (FieldEffect("height", options=("1",)),))
        with pytest.raises(SchemaConfigurationError, match="Options override"):
            StepRegistry([make_step(rules=(rule,))])

    def test_options_on_date_field(self):
        """Test declared options on a date field."""
        fields = (FieldSpec("born", FieldType.DATE, "Born", options=("2000-01-01",)),)
        with pytest.raises(SchemaConfigurationError, match="Options declared"):
            StepRegistry([make_step("a", fields=fields)])

    def test_incompatible_field_types_across_steps(self):
        """Test the same field name with different types in two steps."""
        registry = StepRegistry([make_step("a")])
        other = make_step("b", fields=(FieldSpec("company", FieldType.NUMBER, "Company"),))

        with pytest.raises(SchemaConfigurationError, match="already declared by step 'a'"):
            registry.register(other)
        assert "b" not in registry

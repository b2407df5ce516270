# -*- coding: utf-8 -*-
"""
Tests for the Conditional Field Resolver.

Tests cover:
- Default visibility and required-ness
- Rule matching (plain, negated, unset trigger)
- Declaration-order precedence
- Option overrides
- Locality of trigger changes on the profile steps
"""

import pytest

from models.step_schema import (
    ActiveField,
    ConditionalRule,
    FieldEffect,
    FieldSpec,
    FieldType,
    StepSchema,
)
from services.conditional_field_resolver import resolve, visible_fields
from services.wizard import profile_steps


@pytest.fixture
def schema():
    """Small schema with a trigger gating two fields."""
    return StepSchema(
        id="work",
        title="Work",
        fields=(
            FieldSpec("kind", FieldType.SINGLE_CHOICE, "Kind", True,
                      options=("Employed", "Student", "Retired")),
            FieldSpec("company", FieldType.TEXT, "Company"),
            FieldSpec("school", FieldType.TEXT, "School"),
        ),
        conditional_rules=(
            ConditionalRule(
                trigger="kind",
                values=("Employed",),
                effects=(FieldEffect("company", required=True),),
            ),
            ConditionalRule(
                trigger="kind",
                values=("Student",),
                negate=True,
                effects=(FieldEffect("school", visible=False),),
            ),
        ),
    )


class TestDefaults:
    """Test resolution without matching rules."""

    def test_all_fields_visible_by_default(self, schema):
        """Test every field starts visible with its default required flag."""
        active = resolve(schema, {})

        assert list(active) == ["kind", "company", "school"]
        assert active["kind"] == ActiveField(visible=True, required=True,
                                             options=("Employed", "Student", "Retired"))
        assert active["company"] == ActiveField(visible=True, required=False)
        assert active["school"].visible is True

    def test_unset_trigger_never_hides(self, schema):
        """Test a negated rule does not match while its trigger is blank."""
        for values in ({}, {"kind": None}, {"kind": "   "}):
            assert resolve(schema, values)["school"].visible is True

    def test_resolve_does_not_modify_values(self, schema):
        """Test the resolver is pure."""
        values = {"kind": "Employed"}
        resolve(schema, values)
        assert values == {"kind": "Employed"}


class TestRuleMatching:
    """Test rule application."""

    def test_matching_rule_requires_field(self, schema):
        """Test a matching rule sets required."""
        assert resolve(schema, {"kind": "Employed"})["company"].required is True

    def test_trigger_value_is_stripped(self, schema):
        """Test surrounding whitespace does not prevent a match."""
        assert resolve(schema, {"kind": " Employed "})["company"].required is True

    def test_negated_rule_hides_field(self, schema):
        """Test a negated rule matches any other set value."""
        active = resolve(schema, {"kind": "Retired"})
        assert active["school"] == ActiveField(visible=False, required=False)

    def test_negated_rule_keeps_field_for_listed_value(self, schema):
        """Test a negated rule does not match its own values."""
        assert resolve(schema, {"kind": "Student"})["school"].visible is True

    def test_hidden_field_is_never_required(self):
        """Test required is forced false when a field is hidden."""
        schema = StepSchema(
            id="s",
            title="S",
            fields=(
                FieldSpec("a", FieldType.SINGLE_CHOICE, "A", options=("x", "y")),
                FieldSpec("b", FieldType.TEXT, "B", True),
            ),
            conditional_rules=(
                ConditionalRule("a", ("x",), (FieldEffect("b", visible=False),)),
            ),
        )
        assert resolve(schema, {"a": "x"})["b"] == ActiveField(visible=False, required=False)

    def test_later_rule_wins(self):
        """Test rules apply in declaration order, last write wins."""
        schema = StepSchema(
            id="s",
            title="S",
            fields=(
                FieldSpec("a", FieldType.SINGLE_CHOICE, "A", options=("x", "y")),
                FieldSpec("b", FieldType.TEXT, "B"),
            ),
            conditional_rules=(
                ConditionalRule("a", ("x",), (FieldEffect("b", visible=False),)),
                ConditionalRule("a", ("x", "y"), (FieldEffect("b", visible=True, required=True),)),
            ),
        )
        assert resolve(schema, {"a": "x"})["b"] == ActiveField(visible=True, required=True)

    def test_options_override(self):
        """Test a rule can replace the effective option list."""
        schema = profile_steps.LOCATION_STEP

        india = resolve(schema, {"country": "India"})
        usa = resolve(schema, {"country": "USA"})

        assert "Chhattisgarh" in india["state"].options
        assert usa["state"].options == ()

    def test_visible_fields_filter(self, schema):
        """Test visible_fields drops hidden entries."""
        active = resolve(schema, {"kind": "Retired"})
        assert list(visible_fields(active)) == ["kind", "company"]


class TestProfileStepRules:
    """Test conditional rules of the profile steps."""

    def test_occupation_gates_company_and_designation(self):
        """Test company/designation appear only for employed occupations."""
        schema = profile_steps.OCCUPATION_STEP

        employed = resolve(schema, {"occupation": "Government"})
        student = resolve(schema, {"occupation": "Student"})

        assert employed["companyName"] == ActiveField(visible=True, required=True)
        assert employed["designation"] == ActiveField(visible=True, required=True)
        assert student["companyName"].visible is False
        assert student["designation"].visible is False
        assert student["annualIncome"].required is False
        assert employed["annualIncome"].required is True

    def test_native_district_only_for_chhattisgarh(self):
        """Test the native district is shown only for Chhattisgarh."""
        schema = profile_steps.LOCATION_STEP

        assert resolve(schema, {"state": "Chhattisgarh"})["nativeDistrict"].visible is True
        assert resolve(schema, {"state": "Maharashtra"})["nativeDistrict"].visible is False

    def test_gothram_only_for_hindu(self):
        """Test gothram is hidden for other religions."""
        schema = profile_steps.RELIGIOUS_INFO_STEP

        assert resolve(schema, {"religion": "Hindu"})["gothram"].visible is True
        assert resolve(schema, {"religion": "Sikh"})["gothram"].visible is False

    @pytest.mark.parametrize("schema", profile_steps.PROFILE_STEPS, ids=lambda s: s.id)
    def test_trigger_change_only_affects_gated_fields(self, schema, valid_answers):
        """Test changing a trigger value changes only fields gated by it."""
        base_values = valid_answers[schema.id]
        triggers = {rule.trigger for rule in schema.conditional_rules}

        for trigger in triggers:
            gated = {
                name
                for rule in schema.conditional_rules if rule.trigger == trigger
                for name in rule.gated_fields
            }
            candidates = schema.get_field(trigger).options or ("Somewhere", "Maharashtra")
            before = resolve(schema, base_values)

            for candidate in candidates:
                after = resolve(schema, dict(base_values, **{trigger: candidate}))
                changed = {name for name in before if before[name] != after[name]}
                assert changed <= gated, f"{trigger}={candidate} changed {changed - gated}"

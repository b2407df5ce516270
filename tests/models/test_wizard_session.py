# -*- coding: utf-8 -*-
"""
Tests for WizardSession.

Tests cover:
- Initial state
- Reference number format
- Draft merging and step bookkeeping
- Serialization round trip and malformed snapshots
"""

import re

import pytest

from models.wizard_session import WizardSession, WizardState


@pytest.fixture
def session():
    """Create a three step session."""
    return WizardSession(["basic_info", "location", "about"])


class TestSessionInitialization:
    """Test session creation."""

    def test_initial_state(self, session):
        """Test a new session starts active at step 0 with an empty draft."""
        assert session.state == WizardState.ACTIVE
        assert session.current_index == 0
        assert session.current_step_id == "basic_info"
        assert session.draft == {}
        assert session.last_errors == {}
        assert session.is_active is True
        assert session.is_last_step is False

    def test_reference_number_format(self, session):
        """Test PRF-YYYYMMDDHHMMSS-XXXX reference numbers."""
        assert re.fullmatch(r"PRF-\d{14}-[0-9A-F]{4}", session.reference_number)

    def test_empty_step_order_rejected(self):
        """Test a session needs at least one step."""
        with pytest.raises(ValueError):
            WizardSession([])


class TestSessionData:
    """Test draft and step bookkeeping."""

    def test_merge_overwrites_field_by_field(self, session):
        """Test later merges overwrite only the given fields."""
        session.merge({"firstName": "Asha", "lastName": "Sahu"})
        session.merge({"firstName": "Meera"})

        assert session.draft == {"firstName": "Meera", "lastName": "Sahu"}

    def test_completed_steps(self, session):
        """Test marking steps as completed."""
        session.mark_step_completed(0)

        assert session.is_step_completed(0) is True
        assert session.is_step_completed(1) is False

    def test_summary(self, session):
        """Test summary contents."""
        session.merge({"firstName": "Asha"})
        summary = session.get_summary()

        assert summary["current_step"] == "basic_info"
        assert summary["total_steps"] == 3
        assert summary["draft_fields"] == 1


class TestSessionSerialization:
    """Test to_dict/from_dict."""

    def test_round_trip(self, session):
        """Test a restored session matches the original."""
        session.merge({"firstName": "Asha", "height": 170})
        session.current_index = 2
        session.mark_step_completed(0)
        session.mark_step_completed(1)
        session.last_errors = {"bio": "Bio is required"}

        restored = WizardSession.from_dict(session.to_dict())

        assert restored.session_id == session.session_id
        assert restored.reference_number == session.reference_number
        assert restored.step_order == session.step_order
        assert restored.current_index == 2
        assert restored.completed_steps == {0, 1}
        assert restored.draft == session.draft
        assert restored.last_errors == session.last_errors
        assert restored.created_at == session.created_at
        assert restored.state == WizardState.ACTIVE

    def test_index_out_of_range(self, session):
        """Test snapshots with an invalid step index are rejected."""
        data = session.to_dict()
        data["current_index"] = 3

        with pytest.raises(ValueError, match="Invalid step index"):
            WizardSession.from_dict(data)

    def test_unknown_state(self, session):
        """Test snapshots with an unknown state are rejected."""
        data = session.to_dict()
        data["state"] = "paused"

        with pytest.raises(ValueError):
            WizardSession.from_dict(data)

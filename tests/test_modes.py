"""Tests for toolbelt.modes module."""

import pytest

from toolbelt.formatters import CommitFields, PullRequestFields, ReviewFields
from toolbelt.modes import (
    MODE_SPECS,
    ContextRequest,
    OperatingMode,
    get_mode_spec,
    parse_mode,
)


class TestParseMode:
    """Tests for parse_mode function."""

    @pytest.mark.parametrize("value,expected", [
        ("commit", OperatingMode.COMMIT),
        ("pr", OperatingMode.PULL_REQUEST),
        ("review", OperatingMode.REVIEW),
        ("rewrite", OperatingMode.REWRITE),
        ("  PR ", OperatingMode.PULL_REQUEST),
    ])
    def test_valid_modes(self, value, expected):
        """Test parsing each mode name."""
        assert parse_mode(value) == expected

    def test_invalid_mode(self):
        """Test that unknown modes are rejected with the valid list."""
        with pytest.raises(ValueError) as exc_info:
            parse_mode("deploy")

        assert "Invalid operation type: [deploy]" in str(exc_info.value)
        assert "commit, pr, review, rewrite" in str(exc_info.value)


class TestModeSpecs:
    """Tests for the per-mode records."""

    def test_every_mode_has_a_spec(self):
        """Test that MODE_SPECS covers every mode."""
        assert set(MODE_SPECS) == set(OperatingMode)
        for mode, spec in MODE_SPECS.items():
            assert spec.mode == mode

    def test_field_models(self):
        """Test the reply model of each mode."""
        assert get_mode_spec(OperatingMode.COMMIT).fields_model is CommitFields
        assert get_mode_spec(OperatingMode.REWRITE).fields_model is CommitFields
        assert get_mode_spec(OperatingMode.PULL_REQUEST).fields_model is PullRequestFields
        assert get_mode_spec(OperatingMode.REVIEW).fields_model is ReviewFields

    def test_commit_actions_only_for_commit_modes(self):
        """Test that only commit and rewrite offer commit actions."""
        offered = {mode for mode, spec in MODE_SPECS.items() if spec.commit_actions}
        assert offered == {OperatingMode.COMMIT, OperatingMode.REWRITE}

    def test_templates_use_known_placeholders(self):
        """Test that templates only reference collected context keys."""
        context = {"code_changes": "diff", "commit_messages": "log"}
        for spec in MODE_SPECS.values():
            assert "diff" in spec.template.format(**context)


class TestContextRequest:
    """Tests for ContextRequest."""

    def test_is_immutable(self):
        """Test that a resolved request cannot be changed."""
        request = ContextRequest(mode=OperatingMode.COMMIT)
        with pytest.raises(AttributeError):
            request.mode = OperatingMode.REVIEW

"""Tests for parameter checking against rule lists."""

import pytest

from jvmchaos.rules.types import ParameterRule, ParameterType
from jvmchaos.validation.checker import check_parameters, parses_as_bool, parses_as_int
from jvmchaos.validation.field import FieldPath, ViolationKind

FLAGS = FieldPath("spec", "flags")


class TestParsers:
    """Tests for the string parse checks."""

    @pytest.mark.parametrize(
        "value", ["0", "123", "-7", "+42", "9223372036854775807", "-9223372036854775808"]
    )
    def test_valid_ints(self, value):
        assert parses_as_int(value)

    @pytest.mark.parametrize(
        "value",
        [
            "", "abc", " 1", "1 ", "1.5", "1_000", "0x10",
            "9223372036854775808", "-9223372036854775809", "٣",
        ],
    )
    def test_invalid_ints(self, value):
        assert not parses_as_int(value)

    @pytest.mark.parametrize("value", ["true", "false", "True", "FALSE", "t", "F", "1", "0"])
    def test_valid_bools(self, value):
        assert parses_as_bool(value)

    @pytest.mark.parametrize("value", ["maybe", "yes", "tRuE", "", " true", "2"])
    def test_invalid_bools(self, value):
        assert not parses_as_bool(value)

    def test_non_string_values_do_not_parse(self):
        assert not parses_as_int(100)
        assert not parses_as_bool(True)


class TestCheckParameters:
    """Tests for check_parameters."""

    def test_required_missing(self):
        """Test that an absent required parameter is reported once."""
        rules = [ParameterRule("time", ParameterType.INT, required=True)]

        violations = check_parameters({}, rules, FLAGS, "with spec.target: http")

        assert len(violations) == 1
        assert violations[0].kind is ViolationKind.REQUIRED_MISSING
        assert str(violations[0].field) == "spec.flags.time"
        assert violations[0].message == "with spec.target: http"

    def test_none_values_treated_as_empty(self):
        """Test that a missing map behaves like an empty one."""
        rules = [ParameterRule("time", ParameterType.INT, required=True)]
        assert check_parameters(None, rules, FLAGS) == check_parameters({}, rules, FLAGS)

    def test_int_type(self):
        """Test int parse checks."""
        rules = [ParameterRule("time", ParameterType.INT)]

        assert check_parameters({"time": "123"}, rules, FLAGS) == []

        violations = check_parameters({"time": "abc"}, rules, FLAGS)
        assert len(violations) == 1
        assert violations[0].kind is ViolationKind.TYPE_MISMATCH
        assert violations[0].value == "abc"
        assert violations[0].message == "spec.flags.time:abc cannot parse as Int"

    def test_bool_type(self):
        """Test bool parse checks."""
        rules = [ParameterRule("after", ParameterType.BOOL)]

        assert check_parameters({"after": "true"}, rules, FLAGS) == []
        assert check_parameters({"after": "false"}, rules, FLAGS) == []

        violations = check_parameters({"after": "maybe"}, rules, FLAGS)
        assert len(violations) == 1
        assert violations[0].kind is ViolationKind.TYPE_MISMATCH
        assert violations[0].message == "spec.flags.after:maybe cannot parse as boolean"

    def test_required_string_empty(self):
        """Test that a blank required string counts as empty."""
        rules = [ParameterRule("exception", required=True)]

        violations = check_parameters({"exception": ""}, rules, FLAGS)

        assert len(violations) == 1
        assert violations[0].kind is ViolationKind.EMPTY_VALUE
        assert violations[0].message == "spec.flags.exception: cannot be empty"

    def test_optional_string_may_be_empty(self):
        """Test that blank optional strings are accepted."""
        rules = [ParameterRule("exception-message")]
        assert check_parameters({"exception-message": ""}, rules, FLAGS) == []

    def test_required_malformed_int_is_type_mismatch_only(self):
        """Test that a present but malformed required int is not also missing."""
        rules = [ParameterRule("time", ParameterType.INT, required=True)]

        violations = check_parameters({"time": ""}, rules, FLAGS)

        assert [v.kind for v in violations] == [ViolationKind.TYPE_MISMATCH]

    def test_optional_absent_and_extra_keys_ignored(self):
        """Test that absent optional rules and unknown keys produce nothing."""
        rules = [
            ParameterRule("offset", ParameterType.INT),
            ParameterRule("method"),
        ]
        assert check_parameters({"unknown": "x"}, rules, FLAGS) == []

    def test_all_rules_checked_in_order(self):
        """Test that every problem is reported, in rule order."""
        rules = [
            ParameterRule("time", ParameterType.INT, required=True),
            ParameterRule("offset", ParameterType.INT),
            ParameterRule("after", ParameterType.BOOL),
            ParameterRule("classname", required=True),
        ]
        values = {"offset": "soon", "after": "later"}

        violations = check_parameters(values, rules, FLAGS)

        assert [(str(v.field), v.kind) for v in violations] == [
            ("spec.flags.time", ViolationKind.REQUIRED_MISSING),
            ("spec.flags.offset", ViolationKind.TYPE_MISMATCH),
            ("spec.flags.after", ViolationKind.TYPE_MISMATCH),
            ("spec.flags.classname", ViolationKind.REQUIRED_MISSING),
        ]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for Validator.validate: resolution precedence and constraint checks."""

from __future__ import annotations

import pytest

from argvalidator.exceptions import (
    ConfigurationError,
    InstanceofMismatch,
    MissingRequiredParameter,
    ParameterError,
    PatternMismatch,
    TypeMismatch,
    UnknownConstraint,
)
from argvalidator.validation import Validator


class Widget:
    pass


def _validate(values, specs):
    return Validator().validate(values, specs)


# ------------------------------------------------------------------
# Required / optional
# ------------------------------------------------------------------


def test_optional_parameter_absent_is_left_out():
    result = _validate(
        {"foo": 1},
        {"foo": {"is": "int"}, "bar": {"is": "string", "required": False}},
    )

    assert result == {"foo": 1}


def test_all_optional_and_no_values_gives_empty_result():
    result = _validate({}, {"foo": {"required": False}, "bar": {"required": False}})

    assert result == {}


def test_missing_required_parameter_raises():
    with pytest.raises(MissingRequiredParameter) as exc_info:
        _validate({"foo": 1}, {"foo": {"is": "int"}, "bar": {"is": "string"}})

    error = exc_info.value
    assert error.param == "bar"
    assert error.constraint == "required"
    assert "bar" in str(error)
    assert isinstance(error, ValueError)


def test_explicit_required_true_without_fallback_raises():
    with pytest.raises(MissingRequiredParameter):
        _validate({}, {"foo": {"required": True}})


def test_optional_absent_parameter_is_never_constraint_checked():
    """An unknown constraint on an absent optional parameter is never reached."""
    result = _validate({}, {"foo": {"required": False, "no_such_check": 1}})

    assert result == {}


# ------------------------------------------------------------------
# Defaults and builders
# ------------------------------------------------------------------


def test_default_fills_missing_parameter():
    result = _validate(
        {"foo": 1},
        {"foo": {"is": "int", "default": 23}, "bar": {"is": "string", "default": "baz"}},
    )

    assert result == {"foo": 1, "bar": "baz"}


def test_default_is_constraint_checked():
    with pytest.raises(TypeMismatch):
        _validate({}, {"foo": {"is": "int", "default": "not-an-int"}})


def test_default_wins_over_builder_and_builder_is_never_called():
    calls = []

    def builder():
        calls.append(1)
        return "built"

    result = _validate({}, {"foo": {"default": "literal", "builder": builder}})

    assert result == {"foo": "literal"}
    assert calls == []


def test_optional_wins_over_default():
    result = _validate({}, {"foo": {"required": False, "default": "unused"}})

    assert result == {}


def test_builder_not_invoked_when_value_supplied():
    calls = []

    def builder():
        calls.append(1)
        return "none"

    result = _validate({"bar": "baz"}, {"bar": {"is": "string", "builder": builder}})

    assert result == {"bar": "baz"}
    assert calls == []


def test_builder_invoked_once_for_missing_parameter(clock):
    result = _validate({}, {"stamp": {"is": "string", "builder": [clock, "now"]}})

    assert result == {"stamp": clock.stamp}
    assert clock.calls == 1


def test_builder_result_is_constraint_checked():
    with pytest.raises(PatternMismatch):
        _validate({}, {"word": {"regex": "^fee$", "builder": lambda: "fum"}})


def test_builder_exceptions_propagate_unchanged():
    class LookupFailed(RuntimeError):
        pass

    def builder():
        raise LookupFailed("clock offline")

    with pytest.raises(LookupFailed, match="clock offline"):
        _validate({}, {"now": {"builder": builder}})


def test_every_builder_form_resolves_in_one_call(clock):
    """Builders for present parameters are skipped; the rest are all invoked."""
    giant = "fee fye foe fum"
    object_spec = {"is": "object", "builder": Widget}
    existing = Widget()

    result = _validate(
        {"object": existing, "bar": "baz"},
        {
            "foo": object_spec,
            "object": object_spec,
            "bar": {"is": "string", "builder": lambda: "none"},
            "giant": {"is": "array", "builder": [str.split, giant, " "]},
            "now_callable": {"is": "string", "builder": clock.now},
            "now_pair": {"is": "string", "builder": (clock, "now")},
            "join_callable": {"is": "string", "builder": [clock.join, *giant.split()]},
            "join_pair": {"is": "string", "builder": [(clock, "join"), *giant.split()]},
        },
    )

    assert isinstance(result["foo"], Widget)
    assert result["object"] is existing
    assert result["bar"] == "baz"
    assert result["giant"] == ["fee", "fye", "foe", "fum"]
    assert result["now_callable"] == result["now_pair"] == clock.stamp
    assert result["join_callable"] == result["join_pair"] == giant


# ------------------------------------------------------------------
# Constraints
# ------------------------------------------------------------------


def test_type_constraint_passes():
    values = {"foo": 1, "bar": "baz"}

    assert _validate(values, {"foo": {"is": "int"}, "bar": {"is": "string"}}) == values


def test_type_constraint_fails():
    with pytest.raises(TypeMismatch) as exc_info:
        _validate({"foo": "manchu", "bar": "baz"}, {"foo": {"is": "int"}, "bar": {"is": "string"}})

    error = exc_info.value
    assert error.param == "foo"
    assert error.value == "manchu"
    assert error.expected_type == "int"
    assert "'manchu'" in error.message
    assert "'int'" in error.message


def test_regex_constraint_passes():
    values = {"foo": 1, "bar": "fye"}
    specs = {"foo": {"is": "int"}, "bar": {"is": "string", "regex": "^(fee|fye|foe|fum)$"}}

    assert _validate(values, specs) == values


def test_regex_constraint_fails():
    specs = {"foo": {"is": "int"}, "bar": {"is": "string", "regex": "^(fee|fye|foe|fum)$"}}

    with pytest.raises(PatternMismatch) as exc_info:
        _validate({"foo": 1, "bar": "bell"}, specs)

    assert exc_info.value.param == "bar"
    assert exc_info.value.pattern == "^(fee|fye|foe|fum)$"


def test_instanceof_constraint():
    widget = Widget()

    result = _validate(
        {"foo": widget, "bar": "baz"},
        {"foo": {"instanceof": Widget}, "bar": {"is": "string"}},
    )
    assert result["foo"] is widget

    with pytest.raises(InstanceofMismatch):
        _validate(
            {"foo": "manchu", "bar": "baz"},
            {"foo": {"instanceof": Widget}, "bar": {"is": "string"}},
        )


def test_unknown_constraint_is_a_configuration_error():
    with pytest.raises(UnknownConstraint) as exc_info:
        _validate({"limit": 50}, {"limit": {"maximum": 100}})

    assert exc_info.value.param == "limit"
    assert exc_info.value.constraint == "maximum"
    assert "maximum" in str(exc_info.value)
    assert isinstance(exc_info.value, ConfigurationError)


def test_first_failure_aborts_in_spec_order():
    """Specs are checked in insertion order; only the first failure surfaces."""
    with pytest.raises(TypeMismatch) as exc_info:
        _validate(
            {"a": "x", "b": "y"},
            {"a": {"is": "int"}, "b": {"regex": "^z$"}},
        )

    assert exc_info.value.param == "a"


def test_constraints_on_one_param_run_in_key_order():
    with pytest.raises(TypeMismatch):
        _validate({"a": 5}, {"a": {"is": "string", "regex": "^z$"}})

    with pytest.raises(PatternMismatch):
        _validate({"a": 5}, {"a": {"regex": "^z$", "is": "string"}})


def test_non_mapping_parameter_spec_is_rejected():
    with pytest.raises(ConfigurationError, match="must be a mapping"):
        _validate({"a": 1, "b": 2}, {"b": {"is": "int"}, "a": "int"})


# ------------------------------------------------------------------
# Shapes: positional, singleton, pass-through
# ------------------------------------------------------------------


def test_positional_args():
    result = _validate([1, "baz"], [{"is": "int"}, {"is": "string"}])

    assert result == {0: 1, 1: "baz"}


def test_positional_args_missing_second():
    with pytest.raises(MissingRequiredParameter) as exc_info:
        _validate([1], [{"is": "int"}, {"is": "string"}])

    assert exc_info.value.param == 1


def test_positional_default_fills_trailing_index():
    result = _validate((1,), [{"is": "int"}, {"is": "string", "default": "x"}])

    assert result == {0: 1, 1: "x"}


def test_singleton_shorthand_equivalence():
    spec = {"is": "string"}

    single = _validate("foo", spec)
    positional = _validate(["foo"], [spec])

    assert single == positional == {0: "foo"}


def test_single_spec_with_container_argument_is_not_a_spec_set():
    """A single ParameterSpec whose first value is a list is still one spec."""
    result = _validate([], {"default": ["a", "b"], "is": "list"})

    assert result == {0: ["a", "b"]}


def test_values_without_specs_pass_through():
    result = _validate({"foo": 1, "extra": "kept"}, {"foo": {"is": "int"}})

    assert result == {"foo": 1, "extra": "kept"}


@pytest.mark.parametrize("specs", [{}, [], None])
def test_empty_specs_are_legal(specs):
    assert _validate({}, specs) == {}


def test_input_mapping_is_not_mutated():
    values = {"foo": 1}

    result = _validate(values, {"foo": {"is": "int"}, "bar": {"default": "baz"}})

    assert values == {"foo": 1}
    assert result is not values


# ------------------------------------------------------------------
# Properties
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "values,specs",
    [
        ({"foo": 1}, {"foo": {"is": "int"}, "bar": {"is": "string", "default": "baz"}}),
        ({"foo": 1}, {"foo": {"is": "int"}, "bar": {"is": "string", "required": False}}),
        ([1], [{"is": "int"}, {"is": "string", "builder": lambda: "built"}]),
        ("solo", {"is": "string", "regex": "^s"}),
    ],
)
def test_validation_is_idempotent(values, specs):
    validator = Validator()
    first = validator.validate(values, specs)

    assert validator.validate(first, specs) == first


def test_revalidation_does_not_call_builders_again(clock):
    validator = Validator()
    specs = {"stamp": {"builder": [clock, "now"]}}

    first = validator.validate({}, specs)
    second = validator.validate(first, specs)

    assert second == first
    assert clock.calls == 1


def test_every_failure_is_a_parameter_error_with_context():
    failures = [
        ({}, {"a": {"is": "int"}}),
        ({"a": "x"}, {"a": {"is": "int"}}),
        ({"a": "x"}, {"a": {"regex": "^y$"}}),
        ({"a": "x"}, {"a": {"instanceof": Widget}}),
    ]
    for values, specs in failures:
        with pytest.raises(ParameterError) as exc_info:
            _validate(values, specs)
        assert exc_info.value.param == "a"
        assert "'a'" in exc_info.value.message

"""
Unit tests for validator.
"""

import copy

import pytest
from toolprobe.validation import (
    OutcomeStatus,
    PredicateRegistry,
    ResponseValidator,
    TestCase,
    ToolError,
    ToolResponse,
    format_validation_errors,
    quick_validate,
    validate_response,
)


class TestExpectedSuccess:
    """Test the expected-success branch."""

    def test_no_rules_with_data(self, success_response, make_test_case):
        result = validate_response(success_response({"ok": True}), make_test_case())

        assert result.valid is True
        assert result.errors == []

    def test_no_rules_without_data(self, make_test_case):
        result = validate_response({"status": "success"}, make_test_case())

        assert result.valid is False
        assert result.errors == ["No data in response"]

    def test_no_rules_does_not_decode_payload(self, make_test_case):
        response = {"status": "success", "data": {"content": [{"text": "not json"}]}}
        assert validate_response(response, make_test_case()).valid is True

    def test_tool_error_is_terminal(self, make_test_case):
        response = {"status": "error", "error": {"message": "boom"}}
        test_case = make_test_case(rules=[
            {"type": "hasProperty", "target": "x", "message": "never evaluated"},
        ])

        result = validate_response(response, test_case)

        assert result.valid is False
        assert result.errors == ["Tool execution failed: boom"]

    def test_tool_error_without_message(self, make_test_case):
        result = validate_response({"status": "error"}, make_test_case())
        assert result.errors == ["Tool execution failed: Unknown error"]

        result = validate_response({"status": "error", "error": {}}, make_test_case())
        assert result.errors == ["Tool execution failed: Unknown error"]

    def test_rules_run_against_parsed_payload(self, success_response, make_test_case):
        response = success_response({"tags": ["a", "b"], "name": "hello123", "items": [1, 2, 3]})
        test_case = make_test_case(rules=[
            {"type": "contains", "target": "tags", "value": "b", "message": "no b"},
            {"type": "matches", "target": "name", "value": "/^[a-z]+\\d+$/", "message": "bad name"},
            {"type": "arrayLength", "target": "items", "value": 3, "message": "bad length"},
        ])

        result = validate_response(response, test_case)

        assert result.valid is True

    def test_every_failure_reported(self, success_response, make_test_case):
        response = success_response({"tags": ["a"], "items": [1]})
        test_case = make_test_case(rules=[
            {"type": "contains", "target": "tags", "value": "c", "message": "no c"},
            {"type": "startsWith", "target": "tags", "value": "a", "message": "unused"},
            {"type": "arrayLength", "target": "items", "value": 2, "message": "bad length"},
        ])

        result = validate_response(response, test_case)

        assert result.valid is False
        assert result.errors == ["no c", "Unknown rule type: startsWith", "bad length"]

    def test_malformed_payload_is_reported(self, make_test_case):
        response = {"status": "success", "data": {"content": [{"type": "text", "text": "{oops"}]}}
        test_case = make_test_case(rules=[{"type": "hasProperty", "target": "a", "message": "m"}])

        result = validate_response(response, test_case)

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Malformed response payload:")

    def test_missing_content_is_reported(self, make_test_case):
        response = {"status": "success", "data": {"result": 1}}
        test_case = make_test_case(rules=[{"type": "equals", "target": "result", "value": 1}])

        result = validate_response(response, test_case)

        assert result.valid is False
        assert "no content array" in result.errors[0]


class TestExpectedError:
    """Test the expected-error branch."""

    def test_error_response_passes(self, make_test_case):
        response = {"status": "error", "error": {"message": "Not found"}}
        assert validate_response(response, make_test_case(status="error")).valid is True

    def test_success_response_fails(self, success_response, make_test_case):
        result = validate_response(success_response({}), make_test_case(status="error"))

        assert result.valid is False
        assert result.errors == ["Expected tool to return an error"]

    def test_rules_see_raw_response(self, make_test_case):
        response = {"status": "error", "error": {"message": "Not found", "code": 404}}
        test_case = make_test_case(status="error", rules=[
            {"type": "contains", "target": "error.message", "value": "found", "message": "wrong message"},
            {"type": "equals", "target": "error.code", "value": 404, "message": "wrong code"},
            {"type": "equals", "target": "status", "value": "error", "message": "wrong status"},
        ])

        assert validate_response(response, test_case).valid is True

    def test_rules_see_keys_outside_the_typed_model(self, make_test_case):
        response = {
            "status": "error",
            "error": {"message": "nf", "type": "NotFound", "code": None},
            "isError": True,
        }
        test_case = make_test_case(status="error", rules=[
            {"type": "hasProperty", "target": "error.type", "message": "no error.type"},
            {"type": "hasProperty", "target": "error.code", "message": "no error.code"},
            {"type": "equals", "target": "isError", "value": True, "message": "no isError"},
        ])

        result = validate_response(response, test_case)

        assert result.valid is True, result.errors

    def test_string_error_is_kept_as_is(self, make_test_case):
        test_case = make_test_case(status="error", rules=[
            {"type": "equals", "target": "error", "value": "timeout", "message": "bad"},
        ])

        result = validate_response({"status": "error", "error": "timeout"}, test_case)

        assert result.valid is True, result.errors

    def test_raw_response_is_not_mutated(self, make_test_case):
        response = {"status": "error", "error": {"message": "nf", "tags": ["a"]}}
        test_case = make_test_case(status="error", rules=[
            {"type": "contains", "target": "error.tags", "value": "a", "message": "no tag"},
        ])
        parsed = ToolResponse.from_dict(response)
        response["error"]["tags"].append("b")

        assert parsed.raw_dict()["error"]["tags"] == ["a"]
        assert validate_response(parsed, test_case).valid is True

    def test_dataclass_response_falls_back_to_typed_fields(self, make_test_case):
        response = ToolResponse(status=OutcomeStatus.ERROR, error=ToolError(message="nf", code=404))
        test_case = make_test_case(status="error", rules=[
            {"type": "equals", "target": "error.code", "value": 404, "message": "wrong code"},
        ])

        assert validate_response(response, test_case).valid is True

    def test_status_mismatch_is_not_terminal(self, success_response, make_test_case):
        test_case = make_test_case(status="error", rules=[
            {"type": "hasProperty", "target": "error.message", "message": "no error message"},
        ])

        result = validate_response(success_response({"a": 1}), test_case)

        assert result.errors == ["Expected tool to return an error", "no error message"]


class TestCustomRules:
    def test_registry_is_used(self, success_response, make_test_case):
        registry = PredicateRegistry()
        registry.register("two_items", lambda data: len(data["items"]) == 2)
        test_case = make_test_case(rules=[
            {"type": "custom", "predicate": "two_items", "message": "need two items"},
        ])

        validator = ResponseValidator(registry)

        assert validator.validate_response(success_response({"items": [1, 2]}), test_case).valid is True
        result = validator.validate_response(success_response({"items": [1]}), test_case)
        assert result.errors == ["need two items"]


class TestInputs:
    def test_dataclass_inputs(self, success_response, make_test_case):
        response = ToolResponse.from_dict(success_response({"a": 1}))
        test_case = TestCase.from_dict(make_test_case(rules=[
            {"type": "equals", "target": "a", "value": 1, "message": "a != 1"},
        ]))

        assert validate_response(response, test_case).valid is True

    def test_invalid_status_raises(self, make_test_case):
        with pytest.raises(ValueError):
            validate_response({"status": "pending"}, make_test_case())

    def test_idempotent_and_inputs_unchanged(self, success_response, make_test_case):
        response = success_response({"items": [{"id": 1}], "tags": ["x"]})
        test_case = make_test_case(rules=[
            {"type": "contains", "target": "tags", "value": "y", "message": "no y"},
            {"type": "equals", "target": "items[0]", "value": {"id": 1}, "message": "bad item"},
        ])
        response_before = copy.deepcopy(response)
        test_case_before = copy.deepcopy(test_case)

        first = validate_response(response, test_case)
        second = validate_response(response, test_case)

        assert first == second
        assert response == response_before
        assert test_case == test_case_before


class TestHelpers:
    def test_quick_validate(self, success_response, make_test_case):
        assert quick_validate(success_response({"a": 1}), make_test_case()) is True
        assert quick_validate({"status": "success"}, make_test_case()) is False

    def test_format_validation_errors(self):
        formatted = format_validation_errors(["first", "second"])

        assert "Validation failed with 2 error(s)" in formatted
        assert "1. first" in formatted
        assert "2. second" in formatted

    def test_format_no_errors(self):
        assert format_validation_errors([]) == "No validation errors"

"""
Tool response validator.

Decides whether a tool response satisfies a test case's expected outcome.

Decision Procedure:
    Expected success:
        1. Tool returned an error → single failure, rules are not run
        2. Rules declared → decode the JSON payload from data.content[0].text
           and evaluate every rule against it
        3. No rules → the response must carry data

    Expected error:
        1. Tool did not return an error → failure (evaluation continues)
        2. Rules declared → evaluate them against the whole raw response

Validation failures are never raised; they are collected into
ValidationResult.errors so that a test loop can run many cases.

Usage:
    ```python
    from toolprobe.validation import validate_response

    response = {
        "status": "success",
        "data": {"content": [{"type": "text", "text": '{"tags": ["a", "b"]}'}]}
    }
    test_case = {
        "id": "tags-1",
        "toolName": "list_tags",
        "expectedOutcome": {
            "status": "success",
            "validationRules": [
                {"type": "contains", "target": "tags", "value": "b", "message": "tag b missing"}
            ]
        }
    }

    result = validate_response(response, test_case)
    if not result.valid:
        for error in result.errors:
            print(f"Error: {error}")
    ```
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from toolprobe.validation.payload import PayloadError, decode_payload
from toolprobe.validation.rules import PredicateRegistry, default_registry, evaluate_rules
from toolprobe.validation.types import OutcomeStatus, TestCase, ToolResponse, ValidationResult

logger = logging.getLogger(__name__)

ResponseLike = Union[ToolResponse, Mapping[str, Any]]
TestCaseLike = Union[TestCase, Mapping[str, Any]]


class ResponseValidator:
    """
    Validates tool responses against test cases.

    Attributes:
        registry: Predicate registry used to resolve custom rules
    """

    def __init__(self, registry: Optional[PredicateRegistry] = None):
        self.registry = registry if registry is not None else default_registry

    def validate_response(self, response: ResponseLike, test_case: TestCaseLike) -> ValidationResult:
        """
        Validate a tool response against a test case.

        Args:
            response: ToolResponse or its plain-data form
            test_case: TestCase or its plain-data form

        Returns:
            ValidationResult: valid flag plus every failure reason

        Raises:
            ValueError: If a plain-data input has an invalid status
        """
        if not isinstance(response, ToolResponse):
            response = ToolResponse.from_dict(response)
        if not isinstance(test_case, TestCase):
            test_case = TestCase.from_dict(test_case)

        expected = test_case.expected_outcome
        if expected.status is OutcomeStatus.SUCCESS:
            errors = self._expect_success(response, expected.validation_rules)
        else:
            errors = self._expect_error(response, expected.validation_rules)

        logger.debug(
            f"Validated test case {test_case.id or '<unnamed>'}: "
            f"expected={expected.status.value}, actual={response.status.value}, errors={len(errors)}"
        )
        return ValidationResult.from_errors(errors)

    def _expect_success(self, response: ToolResponse, rules: List[Any]) -> List[str]:
        if response.status is OutcomeStatus.ERROR:
            message = response.error.message if response.error and response.error.message else "Unknown error"
            return [f"Tool execution failed: {message}"]

        if not rules:
            return [] if response.data else ["No data in response"]

        try:
            payload = decode_payload(response.data)
        except PayloadError as e:
            logger.info(f"Could not decode response payload: {e}")
            return [f"Malformed response payload: {e}"]

        return evaluate_rules(payload, rules, self.registry)

    def _expect_error(self, response: ToolResponse, rules: List[Any]) -> List[str]:
        errors: List[str] = []

        if response.status is not OutcomeStatus.ERROR:
            errors.append("Expected tool to return an error")

        if rules:
            errors.extend(evaluate_rules(response.raw_dict(), rules, self.registry))

        return errors


def validate_response(
    response: ResponseLike,
    test_case: TestCaseLike,
    registry: Optional[PredicateRegistry] = None
) -> ValidationResult:
    """
    Validate a tool response against a test case.

    Args:
        response: ToolResponse or its plain-data form
        test_case: TestCase or its plain-data form
        registry: Predicate registry for custom rules (default: default_registry)

    Returns:
        ValidationResult: Validation result with errors if any
    """
    return ResponseValidator(registry).validate_response(response, test_case)


def quick_validate(
    response: ResponseLike,
    test_case: TestCaseLike,
    registry: Optional[PredicateRegistry] = None
) -> bool:
    """
    Quick validation - just returns True/False.

    Example:
        ```python
        if quick_validate(response, test_case):
            print("Passed!")
        ```
    """
    return validate_response(response, test_case, registry).valid


def format_validation_errors(errors: List[str]) -> str:
    """
    Format validation errors as human-readable string.

    Example:
        ```python
        print(format_validation_errors(result.errors))
        # Output:
        # Validation failed with 2 error(s):
        #   1. tag b missing
        #   2. Unknown rule type: startsWith
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Validation failed with {len(errors)} error(s):"]
    for i, error in enumerate(errors, 1):
        lines.append(f"  {i}. {error}")

    return "\n".join(lines)

"""
Validation layer module.

This module decides whether a tool response matches what a test case expects,
producing human-readable reasons for every failure.

Components:
    - paths: Path expressions (a.b[0].c) and safe traversal into JSON-like data
    - comparison: Order-insensitive structural equality
    - payload: Decoding of the content[0].text JSON envelope
    - rules: Rule kinds, custom predicate registry and the rule engine
    - types: ToolResponse, TestCase, ValidationResult and friends
    - validator: Outcome orchestration (expected success vs. expected error)

Validation Flow:
    1. Branch on the expected status
    2. Decode the JSON payload of a successful response
    3. Evaluate every rule (no short-circuit on first failure)
    4. Collect failures into ValidationResult.errors

Example:
    ```python
    from toolprobe.validation import validate_response

    result = validate_response(response, test_case)
    if not result.valid:
        print(f"Validation failed: {len(result.errors)} errors")
        for error in result.errors:
            print(f"  - {error}")
    ```
"""

from toolprobe.validation.comparison import deep_equal
from toolprobe.validation.paths import MISSING, has_path, parse_path, resolve_path
from toolprobe.validation.payload import PayloadError, decode_payload
from toolprobe.validation.rules import (
    ArrayLengthRule,
    ContainsRule,
    CustomRule,
    EqualsRule,
    HasPropertyRule,
    MatchesRule,
    PredicateRegistry,
    UnknownRule,
    ValidationRule,
    default_registry,
    evaluate_rules,
    load_predicates,
    parse_rule,
    register_predicate,
)
from toolprobe.validation.types import (
    ExpectedOutcome,
    OutcomeStatus,
    TestCase,
    ToolDefinition,
    ToolError,
    ToolResponse,
    ValidationResult,
)
from toolprobe.validation.validator import (
    ResponseValidator,
    format_validation_errors,
    quick_validate,
    validate_response,
)

__all__ = [
    "validate_response",
    "quick_validate",
    "format_validation_errors",
    "ResponseValidator",
    "ValidationResult",
    "ToolResponse",
    "ToolError",
    "TestCase",
    "ExpectedOutcome",
    "OutcomeStatus",
    "ToolDefinition",
    "ValidationRule",
    "ContainsRule",
    "MatchesRule",
    "HasPropertyRule",
    "EqualsRule",
    "ArrayLengthRule",
    "CustomRule",
    "UnknownRule",
    "parse_rule",
    "evaluate_rules",
    "PredicateRegistry",
    "default_registry",
    "register_predicate",
    "load_predicates",
    "MISSING",
    "parse_path",
    "resolve_path",
    "has_path",
    "deep_equal",
    "PayloadError",
    "decode_payload",
]

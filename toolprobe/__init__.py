"""
toolprobe: Rule-based validation of tool call responses

toolprobe is the assertion engine of a tool-testing harness. Given a tool's
response and a declarative test case, it decides pass/fail and explains
every failure in plain text.

Key Features:
    - Path expressions into nested JSON (user.tags[0].name)
    - Six rule kinds: contains, matches, hasProperty, equals, arrayLength, custom
    - Expected-success and expected-error outcomes
    - Custom assertions as named, registered predicates (rule sets stay plain data)
    - Suite files with recorded responses, runnable from the CLI

Quick Start:
    ```python
    from toolprobe import validate_response

    response = {
        "status": "success",
        "data": {"content": [{"type": "text", "text": '{"items": [1, 2, 3]}'}]}
    }
    test_case = {
        "id": "items-1",
        "toolName": "list_items",
        "expectedOutcome": {
            "status": "success",
            "validationRules": [
                {"type": "arrayLength", "target": "items", "value": 3, "message": "expected 3 items"}
            ]
        }
    }

    result = validate_response(response, test_case)
    print(result.valid, result.errors)
    ```

Architecture:
    1. Path Resolver: Parse and safely traverse path expressions
    2. Rule Engine: Evaluate each typed rule against resolved values
    3. Validator: Outcome branching, payload decoding and error aggregation
    4. Suite Runner: Batch validation of recorded responses
"""

__version__ = "0.1.0"

from toolprobe.api import (  # noqa: F401
    ResponseValidator,
    ValidationResult,
    default_registry,
    load_suite,
    register_predicate,
    run_suite,
    validate_response,
)

__all__ = [
    "validate_response",
    "ResponseValidator",
    "ValidationResult",
    "default_registry",
    "register_predicate",
    "load_suite",
    "run_suite",
]

"""
Test suite loading.

A suite file is a JSON document listing test cases, each optionally paired
with a recorded tool response:

    {
        "name": "weather-server",
        "testCases": [
            {
                "id": "forecast-1",
                "toolName": "get_forecast",
                "input": {"city": "Oslo"},
                "expectedOutcome": {
                    "status": "success",
                    "validationRules": [
                        {"type": "hasProperty", "target": "forecast[0].temp", "message": "no temperature"}
                    ]
                },
                "response": {
                    "status": "success",
                    "data": {"content": [{"type": "text", "text": "{\"forecast\": [{\"temp\": 4}]}"}]}
                }
            }
        ]
    }

The file structure is checked with jsonschema before any test case is built,
and every structural problem is reported at once.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from toolprobe.validation.types import TestCase, ToolResponse

logger = logging.getLogger(__name__)

RULE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "type": {"type": "string"},
        "target": {"type": ["string", "null"]},
        "message": {"type": "string"},
        "predicate": {"type": ["string", "null"]},
    },
    "required": ["type"],
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "status": {"enum": ["success", "error"]},
        "error": {
            "type": "object",
            "properties": {"message": {"type": "string"}},
        },
    },
    "required": ["status"],
}

TEST_CASE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": ["string", "integer"]},
        "toolName": {"type": "string"},
        "description": {"type": "string"},
        "naturalLanguageQuery": {"type": "string"},
        "input": {"type": "object"},
        "expectedOutcome": {
            "type": "object",
            "properties": {
                "status": {"enum": ["success", "error"]},
                "validationRules": {"type": "array", "items": RULE_SCHEMA},
            },
            "required": ["status"],
        },
        "response": RESPONSE_SCHEMA,
    },
    "required": ["id", "toolName", "expectedOutcome"],
}

SUITE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "testCases": {"type": "array", "items": TEST_CASE_SCHEMA},
    },
    "required": ["testCases"],
}


class SuiteLoadError(ValueError):
    """
    Raised when a suite file cannot be read or is structurally invalid.

    Attributes:
        problems: Every problem found, formatted as "<path>: <message>"
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or []
        if self.problems:
            message = message + "\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


@dataclass
class SuiteCase:
    """A test case with its recorded response (if any)."""
    test_case: TestCase
    response: Optional[ToolResponse] = None


@dataclass
class TestSuite:
    """
    A named collection of suite cases.

    Attributes:
        name: Suite name (defaults to the file stem)
        cases: Cases in file order
    """
    __test__ = False  # not a pytest test class

    name: str
    cases: List[SuiteCase] = field(default_factory=list)


def load_json_file(path: Union[str, Path]) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        SuiteLoadError: If file doesn't exist or isn't valid JSON
    """
    path = Path(path)
    if not path.exists():
        raise SuiteLoadError(f"File not found: {path}")

    try:
        with open(path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise SuiteLoadError(f"Invalid JSON in {path}: {e}")


def check_structure(document: Any, schema: Dict[str, Any]) -> List[str]:
    """
    Check a document against one of the suite schemas.

    Args:
        document: Parsed JSON
        schema: SUITE_SCHEMA, TEST_CASE_SCHEMA or RESPONSE_SCHEMA

    Returns:
        List[str]: Problems as "<path>: <message>", empty if the document is well-formed
    """
    try:
        from jsonschema import Draft7Validator
    except ImportError:
        raise ImportError(
            "jsonschema is required. Install with: pip install jsonschema"
        )

    validator = Draft7Validator(schema)
    problems = []
    for error in sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.path]):
        path = "." + ".".join(str(p) for p in error.path) if error.path else "root"
        problems.append(f"{path}: {error.message}")

    return problems


def parse_suite(document: Any, name: str = "suite") -> TestSuite:
    """
    Build a TestSuite from a parsed suite document.

    Raises:
        SuiteLoadError: If the document is structurally invalid
    """
    problems = check_structure(document, SUITE_SCHEMA)
    if problems:
        raise SuiteLoadError(f"Invalid test suite '{name}'", problems)

    cases = []
    for raw in document["testCases"]:
        response = raw.get("response")
        cases.append(SuiteCase(
            test_case=TestCase.from_dict(raw),
            response=ToolResponse.from_dict(response) if response is not None else None
        ))

    return TestSuite(name=document.get("name") or name, cases=cases)


def load_suite(path: Union[str, Path]) -> TestSuite:
    """
    Load a test suite file.

    Args:
        path: Path to the suite JSON file

    Returns:
        TestSuite: Parsed suite

    Raises:
        SuiteLoadError: If the file is missing, not JSON, or structurally invalid
    """
    path = Path(path)
    suite = parse_suite(load_json_file(path), name=path.stem)
    logger.info(f"Loaded suite '{suite.name}' with {len(suite.cases)} test case(s) from {path}")
    return suite

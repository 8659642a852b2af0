"""
Data model for tool responses, test cases and validation results.

Plain-data inputs use the camelCase keys of the test-suite format
(expectedOutcome, validationRules, toolName, ...). Each model converts from
that form with from_dict(); the results of from_dict() never share mutable
state with the input mapping.

Response Envelope:
    A successful tool call looks like:
        {
            "status": "success",
            "data": {"content": [{"type": "text", "text": "{\"id\": 1}"}]}
        }

    A failed one:
        {
            "status": "error",
            "error": {"message": "Not found", "code": 404}
        }
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from toolprobe.validation.rules import ValidationRule, parse_rule


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "OutcomeStatus":
        """
        Convert a raw status into an OutcomeStatus.

        Raises:
            ValueError: If value is not "success" or "error"
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid status: {value!r} (expected 'success' or 'error')")


@dataclass
class ToolError:
    """
    Error payload of a failed tool call.

    Attributes:
        message: Human-readable error message
        code: Optional error code
        details: Any extra error data
    """
    message: Optional[str] = None
    code: Optional[Any] = None
    details: Optional[Any] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ToolError":
        return cls(
            message=raw.get("message"),
            code=copy.deepcopy(raw.get("code")),
            details=copy.deepcopy(raw.get("details"))
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"message": self.message}
        if self.code is not None:
            result["code"] = copy.deepcopy(self.code)
        if self.details is not None:
            result["details"] = copy.deepcopy(self.details)
        return result


@dataclass
class ToolResponse:
    """
    Result of a tool invocation.

    Attributes:
        status: Whether the tool succeeded
        data: Result envelope (meaningful when status is success)
        error: Error payload (meaningful when status is error)
        raw: The plain-data response this was built from, if any
    """
    status: OutcomeStatus
    data: Optional[Any] = None
    error: Optional[ToolError] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ToolResponse":
        """
        Build a response from its plain-data form.

        Raises:
            ValueError: If status is missing or invalid
        """
        error = raw.get("error")
        if isinstance(error, Mapping):
            error = ToolError.from_dict(error)
        elif error is not None:
            error = ToolError(message=str(error))

        return cls(
            status=OutcomeStatus.parse(raw.get("status")),
            data=copy.deepcopy(raw.get("data")),
            error=error,
            raw=copy.deepcopy(dict(raw))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Rebuild the plain-data form from the typed fields."""
        result: Dict[str, Any] = {"status": self.status.value}
        if self.data is not None:
            result["data"] = copy.deepcopy(self.data)
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result

    def raw_dict(self) -> Dict[str, Any]:
        """
        Return a copy of the whole response object, as seen by error-branch rules.

        Responses built with from_dict() keep every key of the input,
        including ones the typed fields do not model. Responses built
        directly fall back to to_dict().
        """
        if self.raw is not None:
            return copy.deepcopy(self.raw)
        return self.to_dict()


@dataclass
class ExpectedOutcome:
    """
    What a test case expects from the tool.

    Attributes:
        status: Expected overall status
        validation_rules: Rules evaluated in order
    """
    status: OutcomeStatus
    validation_rules: List[ValidationRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ExpectedOutcome":
        rules = raw.get("validationRules", raw.get("validation_rules")) or []
        return cls(
            status=OutcomeStatus.parse(raw.get("status")),
            validation_rules=[parse_rule(copy.deepcopy(rule)) for rule in rules]
        )


@dataclass
class TestCase:
    """
    A single expectation about a tool call.

    Attributes:
        id: Test case identifier
        tool_name: Name of the tool under test
        expected_outcome: Expected status and rules
        description: Optional human description
        natural_language_query: Optional prompt describing the call
        input: Arguments passed to the tool
    """
    __test__ = False  # not a pytest test class

    id: str
    tool_name: str
    expected_outcome: ExpectedOutcome
    description: Optional[str] = None
    natural_language_query: Optional[str] = None
    input: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TestCase":
        """
        Build a test case from its plain-data form.

        Raises:
            ValueError: If expectedOutcome is missing or has an invalid status
        """
        outcome = raw.get("expectedOutcome", raw.get("expected_outcome"))
        if not isinstance(outcome, Mapping):
            raise ValueError("Test case has no expectedOutcome")

        return cls(
            id=str(raw.get("id", "")),
            tool_name=str(raw.get("toolName", raw.get("tool_name", ""))),
            expected_outcome=ExpectedOutcome.from_dict(outcome),
            description=raw.get("description"),
            natural_language_query=raw.get("naturalLanguageQuery", raw.get("natural_language_query")),
            input=copy.deepcopy(raw.get("input") or {})
        )


@dataclass
class ValidationResult:
    """
    Outcome of validating one response.

    Attributes:
        valid: True iff errors is empty
        errors: Failure reasons in the order they were found
    """
    valid: bool
    errors: List[str]

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(valid=len(errors) == 0, errors=list(errors))


@dataclass
class ToolDefinition:
    """
    Description of a tool, as advertised by the server that hosts it.

    Attributes:
        name: Tool name
        description: What the tool does
        input_schema: JSON Schema of the tool's arguments
    """
    name: str
    description: str = ""
    input_schema: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ToolDefinition":
        return cls(
            name=str(raw.get("name", "")),
            description=str(raw.get("description") or ""),
            input_schema=copy.deepcopy(raw.get("inputSchema", raw.get("input_schema")) or {})
        )

"""
Suite runner - validate every recorded response in a test suite.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from toolprobe.suite.loader import TestSuite
from toolprobe.validation.types import ValidationResult
from toolprobe.validation.validator import ResponseValidator

logger = logging.getLogger(__name__)


@dataclass
class CaseReport:
    """Validation outcome of one test case."""
    case_id: str
    tool_name: str
    result: ValidationResult

    @property
    def passed(self) -> bool:
        return self.result.valid


@dataclass
class SuiteReport:
    """
    Aggregated outcome of a suite run.

    Attributes:
        suite_name: Name of the suite that was run
        cases: Per-case reports in run order
    """
    suite_name: str
    cases: List[CaseReport] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.cases)

    @property
    def passed(self) -> int:
        return sum(1 for case in self.cases if case.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def pass_rate(self) -> float:
        return (self.passed / self.total * 100) if self.total > 0 else 0.0

    def failures(self) -> List[CaseReport]:
        return [case for case in self.cases if not case.passed]


def run_suite(
    suite: TestSuite,
    validator: Optional[ResponseValidator] = None,
    fail_fast: bool = False
) -> SuiteReport:
    """
    Validate every case of a suite against its recorded response.

    Args:
        suite: Loaded test suite
        validator: Validator to use (default: one bound to the default registry)
        fail_fast: Stop after the first failing case

    Returns:
        SuiteReport: Per-case results
    """
    validator = validator or ResponseValidator()
    report = SuiteReport(suite_name=suite.name)

    for case in suite.cases:
        test_case = case.test_case
        if case.response is None:
            result = ValidationResult.from_errors(["No recorded response for test case"])
        else:
            result = validator.validate_response(case.response, test_case)

        report.cases.append(CaseReport(case_id=test_case.id, tool_name=test_case.tool_name, result=result))

        if not result.valid:
            logger.info(f"Test case {test_case.id} failed with {len(result.errors)} error(s)")
            if fail_fast:
                logger.info("Stopping suite run after first failure")
                break

    logger.info(f"Suite '{suite.name}': {report.passed}/{report.total} passed")
    return report

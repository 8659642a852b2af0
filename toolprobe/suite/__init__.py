"""
Test suite module.

Loads suite files (test cases paired with recorded tool responses) and runs
them through the response validator.

Components:
    - loader: Suite file parsing with jsonschema structure checks
    - runner: Run every case and aggregate a SuiteReport

Example:
    ```python
    from toolprobe.suite import load_suite, run_suite

    report = run_suite(load_suite("suites/weather.json"))
    print(f"{report.passed}/{report.total} passed")
    for case in report.failures():
        print(case.case_id, case.result.errors)
    ```
"""

from toolprobe.suite.loader import (
    SuiteCase,
    SuiteLoadError,
    TestSuite,
    load_json_file,
    load_suite,
    parse_suite,
)
from toolprobe.suite.runner import CaseReport, SuiteReport, run_suite

__all__ = [
    "load_suite",
    "parse_suite",
    "load_json_file",
    "SuiteLoadError",
    "SuiteCase",
    "TestSuite",
    "run_suite",
    "SuiteReport",
    "CaseReport",
]

"""
CLI command implementations.

This module contains the business logic for each CLI command:
- validate: Validate one recorded response against one test case
- run: Validate every case of a suite file
- describe: Generate a natural-language query for a tool definition
"""

from pathlib import Path
from typing import List, Optional

from toolprobe.suite.loader import SuiteLoadError, load_json_file, load_suite
from toolprobe.suite.runner import run_suite
from toolprobe.validation.rules import load_predicates
from toolprobe.validation.types import TestCase, ToolDefinition, ToolResponse
from toolprobe.validation.validator import ResponseValidator

from .display import (
    console,
    create_progress_spinner,
    print_error,
    print_header,
    print_info,
    print_json,
    print_separator,
    print_success,
    print_warning,
    print_suite_results,
    print_validation_errors,
)


def load_predicate_modules(modules: Optional[List[str]]) -> None:
    """
    Import modules that register custom predicates.

    Raises:
        SystemExit: If a module cannot be imported
    """
    for module_path in modules or []:
        try:
            load_predicates(module_path)
            print_success(f"Loaded predicates from: {module_path}")
        except ImportError as e:
            print_error(f"Failed to import predicate module {module_path}: {e}")
            raise SystemExit(1)


def validate_command(
    response_path: Path,
    test_case_path: Path,
    predicate_modules: Optional[List[str]],
    show_response: bool
) -> None:
    """
    Execute the validate command.

    Args:
        response_path: Path to recorded tool response JSON
        test_case_path: Path to test case JSON
        predicate_modules: Modules registering custom predicates
        show_response: Whether to display the response
    """
    print_header("toolprobe - Validate Response")

    load_predicate_modules(predicate_modules)

    try:
        raw_response = load_json_file(response_path)
        response = ToolResponse.from_dict(raw_response)
        print_success(f"Loaded response from: {response_path}")
        test_case = TestCase.from_dict(load_json_file(test_case_path))
        print_success(f"Loaded test case from: {test_case_path}")
    except (SuiteLoadError, ValueError) as e:
        print_error(f"Failed to load input: {e}")
        raise SystemExit(1)

    if show_response:
        print_json(raw_response, title="Tool Response")

    print_separator()
    print_info(f"Test case: [bold]{test_case.id}[/bold] ([bold]{test_case.tool_name}[/bold])")
    print_info(f"Expected status: [bold]{test_case.expected_outcome.status.value}[/bold]")
    print_info(f"Rules: [bold]{len(test_case.expected_outcome.validation_rules)}[/bold]")

    result = ResponseValidator().validate_response(response, test_case)

    console.print()
    if result.valid:
        print_success("Validation passed!")
    else:
        print_error("Validation failed")
        print_validation_errors(result.errors)
        raise SystemExit(1)


def run_command(
    suite_path: Path,
    predicate_modules: Optional[List[str]],
    fail_fast: bool,
    show_responses: bool
) -> None:
    """
    Execute the run command.

    Args:
        suite_path: Path to suite JSON file
        predicate_modules: Modules registering custom predicates
        fail_fast: Stop after the first failing case
        show_responses: Whether to display the responses of failing cases
    """
    print_header("toolprobe - Run Suite")

    load_predicate_modules(predicate_modules)

    try:
        suite = load_suite(suite_path)
        print_success(f"Loaded {len(suite.cases)} test case(s) from: {suite_path}")
    except SuiteLoadError as e:
        print_error(f"Failed to load suite: {e}")
        raise SystemExit(1)

    unrecorded = sum(1 for case in suite.cases if case.response is None)
    if unrecorded:
        print_warning(f"{unrecorded} test case(s) have no recorded response")

    report = run_suite(suite, fail_fast=fail_fast)
    print_suite_results(report)

    if show_responses:
        responses = {case.test_case.id: case.response for case in suite.cases}
        for case in report.failures():
            response = responses.get(case.case_id)
            if response is not None:
                print_json(response.raw_dict(), title=f"Response: {case.case_id}")

    if report.failed:
        print_error(f"{report.failed} test case(s) failed")
        raise SystemExit(1)

    print_success("All test cases passed!")


def describe_command(
    tool_path: Path,
    model: Optional[str],
    api_key: Optional[str]
) -> None:
    """
    Execute the describe command.

    Args:
        tool_path: Path to tool definition JSON ({"name", "description", "inputSchema"})
        model: Model override
        api_key: Anthropic API key
    """
    print_header("toolprobe - Describe Tool")

    try:
        tool = ToolDefinition.from_dict(load_json_file(tool_path))
    except SuiteLoadError as e:
        print_error(f"Failed to load tool definition: {e}")
        raise SystemExit(1)

    from toolprobe.llm import QueryGenerator

    generator = QueryGenerator(api_key=api_key, model=model)
    print_info(f"Tool: [bold]{tool.name}[/bold]")
    print_info(f"Model: [bold]{generator.model}[/bold]")

    with create_progress_spinner() as progress:
        progress.add_task(description="Generating query...", total=None)
        query = generator.generate_natural_language_query(tool)

    console.print()
    if not query:
        print_error("Query generation failed")
        raise SystemExit(1)

    print_success("Generated query:")
    console.print(query, markup=False)

"""
Command-line interface module.

This module provides a rich terminal interface for toolprobe using Typer and Rich.

Commands:
    - validate: Validate one recorded response against one test case
    - run: Run a whole suite file
    - describe: Generate a natural-language query for a tool definition

Example Usage:
    ```bash
    # Single response
    toolprobe validate --response response.json --test-case case.json

    # Whole suite, with custom predicates
    toolprobe run --suite suites/weather.json --predicates my_project.predicates

    # Natural-language prompt for a tool
    toolprobe describe --tool tools/get_forecast.json
    ```
"""

from .main import app

__all__ = ["app"]

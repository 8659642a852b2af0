"""
Main CLI entry point using Typer.

This module defines the command-line interface for toolprobe.
It provides three commands: validate, run, and describe.
"""

from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from toolprobe.config import Settings
from toolprobe.utils.logging import setup_logging

from .commands import describe_command, run_command, validate_command
from .display import print_error

app = typer.Typer(
    name="toolprobe",
    help="toolprobe - Rule-based validation of tool call responses",
    add_completion=False,
    rich_markup_mode="rich"
)

PredicatesOption = Annotated[
    Optional[List[str]],
    typer.Option("--predicates", "-P", help="Module registering custom predicates (can be used multiple times)")
]


@app.command("validate")
def validate(
    response: Annotated[
        Path,
        typer.Option("--response", "-r", help="Path to recorded tool response JSON", exists=True, file_okay=True, dir_okay=False)
    ],
    test_case: Annotated[
        Path,
        typer.Option("--test-case", "-t", help="Path to test case JSON", exists=True, file_okay=True, dir_okay=False)
    ],
    predicates: PredicatesOption = None,
    show_response: Annotated[
        bool,
        typer.Option("--show-response", help="Display the response before validating")
    ] = False,
) -> None:
    """
    Validate a recorded tool response against a test case.

    Example:
        toolprobe validate \\
            --response response.json \\
            --test-case case.json
    """
    try:
        validate_command(
            response_path=response,
            test_case_path=test_case,
            predicate_modules=predicates,
            show_response=show_response
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("run")
def run(
    suite: Annotated[
        Path,
        typer.Option("--suite", "-s", help="Path to test suite JSON", exists=True, file_okay=True, dir_okay=False)
    ],
    predicates: PredicatesOption = None,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast/--no-fail-fast", help="Stop after the first failing test case")
    ] = False,
    show_responses: Annotated[
        bool,
        typer.Option("--show-responses", help="Display the responses of failing test cases")
    ] = False,
) -> None:
    """
    Run every test case of a suite against its recorded response.

    Example:
        toolprobe run --suite suites/weather.json --predicates my_project.predicates
    """
    try:
        run_command(
            suite_path=suite,
            predicate_modules=predicates,
            fail_fast=fail_fast,
            show_responses=show_responses
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("describe")
def describe(
    tool: Annotated[
        Path,
        typer.Option("--tool", help="Path to tool definition JSON", exists=True, file_okay=True, dir_okay=False)
    ],
    model: Annotated[
        Optional[str],
        typer.Option("--model", "-m", help="Claude model (default: CLAUDE_MODEL or claude-3-7-sonnet-20250219)")
    ] = None,
) -> None:
    """
    Generate a natural-language request for calling a tool.

    Example:
        toolprobe describe --tool tools/get_forecast.json
    """
    settings = Settings.from_env()
    try:
        describe_command(
            tool_path=tool,
            model=model or settings.claude_model,
            api_key=settings.anthropic_api_key
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (default: TOOLPROBE_LOG_LEVEL or WARNING)")
    ] = None,
) -> None:
    """
    toolprobe - Rule-based validation of tool call responses.

    Checks recorded tool responses against declarative test cases.
    """
    if version:
        from toolprobe import __version__
        typer.echo(f"toolprobe version {__version__}")
        raise typer.Exit()

    setup_logging(level=log_level or Settings.from_env().log_level)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()

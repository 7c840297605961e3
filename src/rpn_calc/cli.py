"""
Command-line interface for rpn-calc.

Run without a command to be prompted for one expression. Commands:
- eval: evaluate an expression given as an argument
- postfix: show the postfix form of an expression
- rpn: evaluate an expression already in postfix form
"""

import json
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

from rpn_calc.calculator import calculate, describe, format_number
from rpn_calc.config import Settings, configure_logging, load_settings
from rpn_calc.converter import Postfix, convert
from rpn_calc.errors import PostfixError

app = typer.Typer(
    name="rpn-calc",
    help="rpn-calc - infix to postfix calculator",
    add_completion=False,
)

console = Console(soft_wrap=True, highlight=False, emoji=False)
logger = structlog.get_logger()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Entry point
# =============================================================================

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (stderr)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
):
    """Read one expression from standard input, evaluate it and print the result."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")

    if config is not None and not config.exists():
        console.print(f"[red]Config file not found: {config}[/]")
        raise typer.Exit(1)

    settings = load_settings(config)
    configure_logging(log_level or settings.effective_log_level)

    if ctx.invoked_subcommand is None:
        _prompt_once(settings)


def _prompt_once(settings: Settings) -> None:
    console.print(settings.prompt, markup=False)
    console.print(settings.prompt_marker, end="", markup=False)
    console.file.flush()

    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read input", error=str(e))
        console.print(settings.input_error_message, markup=False)
        return

    console.print(describe(line.strip()), markup=False)


# =============================================================================
# Commands
# =============================================================================

@app.command("eval")
def eval_expression(
    expression: str = typer.Argument(..., help="Infix expression, e.g. '2(3 + 4)'"),
    show_postfix: bool = typer.Option(False, "--postfix", "-p", help="Also print the postfix form"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Evaluate an infix expression."""
    expression = expression.strip()
    try:
        calc = calculate(expression)
    except PostfixError as e:
        _report_error(e, as_json)
        return

    if as_json:
        console.print(calc.model_dump_json(), markup=False)
        return

    if show_postfix:
        console.print(f"postfix: {calc.postfix}", markup=False)
    console.print(f"{expression} = {format_number(calc.value)}", markup=False)


@app.command()
def postfix(
    expression: str = typer.Argument(..., help="Infix expression"),
):
    """Print the postfix form of an infix expression."""
    try:
        console.print(str(convert(expression.strip())), markup=False)
    except PostfixError as e:
        _report_error(e)


@app.command()
def rpn(
    rendered: str = typer.Argument(..., help="Postfix expression, e.g. '[2][3][4]*+'"),
):
    """Evaluate an expression in postfix form."""
    rendered = rendered.strip()
    try:
        value = Postfix.from_rendered(rendered).evaluate()
    except PostfixError as e:
        _report_error(e)
        return
    console.print(f"{rendered} = {format_number(value)}", markup=False)


# =============================================================================
# Helpers
# =============================================================================

def _report_error(error: PostfixError, as_json: bool = False) -> None:
    """Errors are reported on stdout; the exit code stays 0."""
    if as_json:
        console.print(json.dumps({"error": error.kind.value}), markup=False)
    else:
        console.print(f"Error: {error.kind.value}", markup=False)


if __name__ == "__main__":
    app()

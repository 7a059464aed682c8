"""CLI interface for calckit."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from calckit import __version__
from calckit.core.arithmetic import Number, add as add_numbers
from calckit.core.calculator import Calculator
from calckit.core.formatter import format_history, format_number
from calckit.core.greeting import greet as greet_name
from calckit.schemas.config import DEFAULT_CONFIG_FILE, CalckitConfig
from calckit.schemas.steps import CalculationScript, Step, StepParseError, parse_number
from calckit.utils.logging import setup_logger

console = Console()
logger = logging.getLogger(__name__)


class NumberParamType(click.ParamType):
    """Click parameter accepting integer or float literals."""

    name = "number"

    def convert(self, value, param, ctx):
        if isinstance(value, (int, float)):
            return value
        try:
            return parse_number(value)
        except StepParseError as e:
            self.fail(str(e), param, ctx)


NUMBER = NumberParamType()

# Lets negative numbers through as arguments instead of unknown options
NUMERIC_ARGS = {"ignore_unknown_options": True}


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log every applied operation")
def main(verbose: bool) -> None:
    """calckit: greetings, addition and a chainable calculator."""
    setup_logger(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("name")
def greet(name: str) -> None:
    """Greet NAME."""
    click.echo(greet_name(name))


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
def add(a: Number, b: Number) -> None:
    """Print the sum of A and B."""
    click.echo(format_number(add_numbers(a, b)))


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("steps", nargs=-1)
@click.option("--start", "-s", type=NUMBER, help="Initial value (default from config)")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help=f"Path to config file ({DEFAULT_CONFIG_FILE})",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def calc(steps: tuple[str, ...], start: Number | None, config: str | None, as_json: bool) -> None:
    """Fold STEPS into a calculator, left to right.

    Each step is written as OPERATION:NUMBER, for example add:5 or sub:3.
    """
    cfg = _load_config(config)

    try:
        parsed = [Step.parse(text) for text in steps]
    except StepParseError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    initial = start if start is not None else cfg.calculator.initial_value
    _report(Calculator(initial).run(parsed), parsed, cfg, as_json)


@main.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help=f"Path to config file ({DEFAULT_CONFIG_FILE})",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def run(script: str, config: str | None, as_json: bool) -> None:
    """Run a YAML calculation script.

    The script holds an optional start value and a list of steps:

    \b
        start: 10
        steps:
          - {operation: add, operand: 5}
          - {operation: subtract, operand: 3}
    """
    cfg = _load_config(config)

    try:
        calculation = CalculationScript.load(script)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]✗[/red] Invalid script {escape(script)}: {escape(str(e))}")
        sys.exit(1)

    logger.debug("Loaded %d steps from %s", len(calculation.steps), script)
    initial = calculation.start if calculation.start is not None else cfg.calculator.initial_value
    _report(Calculator(initial).run(calculation.steps), calculation.steps, cfg, as_json)


@main.command()
@click.argument("output", type=click.Path(), default=DEFAULT_CONFIG_FILE)
def init(output: str) -> None:
    """Initialize a new configuration file."""
    output_path = Path(output)

    if output_path.exists():
        if not click.confirm(f"{output} already exists. Overwrite?"):
            return

    config = CalckitConfig()
    config.save(output_path)
    console.print(f"[green]Created:[/green] {output}")


@main.command()
def version() -> None:
    """Show version information."""
    console.print(f"calckit v{__version__}")


def _load_config(config: str | None) -> CalckitConfig:
    """Load the config file, exiting with an error if it is invalid."""
    config_path = Path(config) if config else Path(DEFAULT_CONFIG_FILE)
    try:
        return CalckitConfig.load(config_path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]✗[/red] Invalid config {escape(str(config_path))}: {escape(str(e))}")
        sys.exit(1)


def _report(calculator: Calculator, steps: list[Step], cfg: CalckitConfig, as_json: bool) -> None:
    """Print a finished calculation."""
    if as_json:
        data = {
            "start": calculator.initial_value,
            "steps": [step.model_dump(mode="json") for step in steps],
            "result": calculator.get_result(),
        }
        try:
            output = json.dumps(data, indent=cfg.output.json_indent, allow_nan=False)
        except ValueError:
            # NaN and Infinity have no JSON representation
            console.print(
                f"[red]✗[/red] Cannot write non-finite result as JSON: "
                f"{format_history(calculator)}"
            )
            sys.exit(1)
        click.echo(output)
        return

    if cfg.output.show_steps:
        click.echo(format_history(calculator))
    else:
        click.echo(format_number(calculator.get_result()))


if __name__ == "__main__":
    main()

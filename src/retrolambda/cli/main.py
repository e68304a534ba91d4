"""
Typer-based entry point for Retrolambda.

Collects the system properties from ``-D`` definitions and an optional
properties file, refuses to continue until every required property is
set, and reports the resolved configuration that the bytecode
transformation will run with.

Usage Patterns:
1. Help: run without properties, or with --show-properties
2. Check: pass -D definitions to validate and log the resolved settings
3. Scripting: add --json to print the resolved settings as JSON
"""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console

from retrolambda.core.config import (
    ConfigError,
    PropertiesConfig,
    ResolvedConfig,
    validate_properties,
)
from retrolambda.core.utils.logger import (
    log_configuration,
    log_error,
    log_warning,
    setup_logging,
)

from .exit_codes import CliExit
from .properties_file import load_properties_file, parse_definitions

app = typer.Typer(
    name="retrolambda",
    help="Retrolambda - backport Java 8 language features to older bytecode",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def collect_properties(
    definitions: Optional[List[str]], properties_file: Optional[Path]
) -> Dict[str, str]:
    """Merge file properties with -D definitions; definitions win."""
    properties: Dict[str, str] = {}
    if properties_file is not None:
        properties.update(load_properties_file(properties_file))
    properties.update(parse_definitions(definitions))
    return properties


def _summary(resolved: ResolvedConfig) -> Dict[str, object]:
    included = resolved.included_files
    return {
        "Bytecode version": resolved.bytecode_version,
        "Default methods": resolved.default_methods,
        "Input directory": resolved.input_dir,
        "Output directory": resolved.output_dir,
        "Classpath": [str(p) for p in resolved.classpath],
        "Included files": "all" if included is None else len(included),
        "Javac hacks": resolved.javac_hacks,
    }


@app.command()
def main(
    define: Optional[List[str]] = typer.Option(
        None,
        "--define",
        "-D",
        help="System property as KEY=VALUE, e.g. -Dretrolambda.inputDir=classes",
    ),
    properties_file: Optional[Path] = typer.Option(
        None, "--properties-file", "-p", help="Read properties from a KEY=VALUE file"
    ),
    show_properties: bool = typer.Option(
        False, "--show-properties", help="Describe the configurable properties and exit"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the resolved configuration as JSON"
    ),
    log_level: str = typer.Option(
        "INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    ),
) -> None:
    """Validate Retrolambda system properties and report the resolved settings."""
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level '{log_level}'. Use one of: {', '.join(LOG_LEVELS)}.",
            param_hint="--log-level",
        )
    # JSON output owns stdout
    log_stream = sys.stderr if json_output else sys.stdout
    setup_logging(level=log_level, stream=log_stream)

    try:
        properties = collect_properties(define, properties_file)
    except ConfigError as exc:
        log_error("cli", exc.message, context=str(exc.context.get("cause", "")))
        raise CliExit.config_error()

    config = PropertiesConfig(properties)

    if show_properties:
        typer.echo(config.get_help(), nl=False)
        raise CliExit.success()

    if not config.is_fully_configured():
        for error in validate_properties(config.registry, properties):
            log_warning("cli", f"{error.field}: {error.message}")
        typer.echo(config.get_help(), nl=False)
        raise CliExit.config_error()

    try:
        resolved = config.resolve()
    except ConfigError as exc:
        log_error("cli", exc.message, exception=exc.__cause__)
        raise CliExit.config_error()

    if resolved.quiet:
        setup_logging(level="WARNING", stream=log_stream)

    if json_output:
        console.print_json(json.dumps(resolved.to_dict()), highlight=False)
        return

    log_configuration(_summary(resolved))


if __name__ == "__main__":
    app()

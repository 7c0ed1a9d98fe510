#src/geokit/cli/main.py
"""
Main CLI entry point for geokit.

Covers an address or a GeoJSON FeatureCollection with S2 cells and writes
the cells to stdout as a GeoJSON FeatureCollection.
"""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from geokit import __version__
from geokit.core.constants import DEFAULT_LOG_LEVEL, DEFAULT_MIN_LEVEL, DEFAULT_MAX_LEVEL
from geokit.core.exceptions import ConfigurationError, GeoKitError
from geokit.core.logging_setup import setup_logging
from geokit.processors.covering import CoveringProcessor
from geokit.schemas.config_models import CoveringConfig, LogLevel
from geokit.utils.geojson_utils import encode_feature_collection
from geokit.utils.validation import describe_validation_error


@click.command()
@click.version_option(version=__version__, prog_name="geokit")
@click.option(
    "--address",
    default="",
    help="Address that should be geocoded to a point",
)
@click.option(
    "--geojson",
    default="",
    help="Path to file containing GeoJSON FeatureCollection",
)
@click.option(
    "--merge",
    is_flag=True,
    help="Prepend the input features to the output",
)
@click.option(
    "--interior",
    is_flag=True,
    help="Restrict covering to fully-contained cells",
)
@click.option(
    "--min", "min_level",
    type=int,
    default=DEFAULT_MIN_LEVEL,
    show_default=True,
    help="Min level of S2 cells desired",
)
@click.option(
    "--max", "max_level",
    type=int,
    default=DEFAULT_MAX_LEVEL,
    show_default=True,
    help="Max level of S2 cells desired",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel]),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Set logging level (logs go to stderr)",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    help="File to write logs to",
)
def cli(address: str, geojson: str, merge: bool, interior: bool,
        min_level: int, max_level: int, log_level: str, log_file: Optional[Path]):
    """
    Cover an address or GeoJSON geometry with S2 cells.
    
    Exactly one of --address or --geojson must be given. The resulting
    FeatureCollection is written to stdout.
    """
    setup_logging(level=log_level, log_file=log_file)
    
    try:
        config = CoveringConfig(
            address=address,
            geojson=geojson,
            merge=merge,
            interior=interior,
            min_level=min_level,
            max_level=max_level,
        )
    except PydanticValidationError as e:
        raise ConfigurationError(describe_validation_error(e))
    
    processor = CoveringProcessor(config)
    processor.process()
    
    click.echo(encode_feature_collection(processor.output), nl=False)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
        
    except GeoKitError as e:
        error_console = Console(stderr=True)
        error_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}", highlight=False)
        if e.details:
            error_console.print(f"[dim]Details: {escape(str(e.details))}[/dim]", highlight=False)
        sys.exit(1)
    except KeyboardInterrupt:
        error_console = Console(stderr=True)
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        error_console = Console(stderr=True)
        error_console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(e))}")
        error_console.print("[dim]Run with --log-level DEBUG for more details[/dim]")
        sys.exit(1)


if __name__ == "__main__":
    main()

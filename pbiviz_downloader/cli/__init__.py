"""
Unified CLI entry point for pbiviz-downloader using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import download
from .._version import __version__
from ..utils.constants import EXIT_USER_INTERRUPT


# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="pbiviz-downloader")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to TOML config file (default: ~/.config/pbiviz-downloader/config.toml, if present)",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.option(
    "--wrap-logs",
    is_flag=True,
    default=False,
    help="Wrap long log lines at 120 characters",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], debug: int, wrap_logs: bool) -> None:
    """pbiviz-downloader - Bulk download Power BI custom visuals from the marketplace catalog."""
    # Store shared options in context for subcommands to access
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["debug"] = debug
    ctx.obj["wrap_logs"] = wrap_logs


# Register subcommands
cli.add_command(download.download)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(EXIT_USER_INTERRUPT)


__all__ = ["cli", "main"]

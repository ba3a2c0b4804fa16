"""
Download command for pbiviz-downloader CLI.

This module provides the download command, which walks the catalog page by
page and saves every visual that passes the selected filters.
"""

import logging
import sys
from typing import Any, Dict, Optional

import click
from click.core import ParameterSource

from ..api import CatalogClient
from ..bulk import log_download_summary, run_bulk_download
from ..models.context import DownloadContext
from ..utils import setup_logging
from ..utils.config_manager import ConfigManager
from ..utils.constants import (
    CATALOG_URL_TEMPLATE,
    DEFAULT_DESTINATION,
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    EXIT_GENERAL_ERROR,
)
from ..utils.error_handling import FatalPaginationError, handle_generic_error, handle_retry_exhausted

# Command-line parameter name -> setting name understood by DownloadContext.from_settings
SETTING_PARAMETERS = {
    "certified_only": "certified_only",
    "microsoft_only": "microsoft_only",
    "retry_count": "retry_count",
    "retry_delay": "retry_delay",
    "timeout": "timeout",
    "output_dir": "destination",
    "catalog_url": "catalog_url",
}


def load_config_section(config: Optional[str]) -> Dict[str, Any]:
    """Read the ``[downloader]`` section of the explicit or default config file.

    A missing default config file is not an error; an explicit one always exists
    because Click validated the path.
    """
    config_manager = ConfigManager(config)
    if config is None and not config_manager.exists():
        logging.debug("No config file at %s, using defaults", config_manager.config_path)
        return {}
    return config_manager.get_section()


def merge_settings(ctx: click.Context, params: Dict[str, Any], config_section: Dict[str, Any]) -> Dict[str, Any]:
    """Layer command-line values over config values over built-in defaults.

    A flag left at its default only fills settings the config file does not set.
    """
    settings = dict(config_section)
    for param_name, setting in SETTING_PARAMETERS.items():
        if ctx.get_parameter_source(param_name) is not ParameterSource.DEFAULT or setting not in settings:
            settings[setting] = params[param_name]
    return settings


@click.command()
@click.option(
    "--certified-only/--all-certifications",
    default=False,
    help="Only download visuals carrying the certified tag",
)
@click.option(
    "--microsoft-only/--any-publisher",
    default=False,
    help="Only download visuals published by Microsoft Corporation",
)
@click.option(
    "--retry-count",
    type=click.IntRange(min=0),
    default=DEFAULT_RETRY_COUNT,
    show_default=True,
    help="Retries after the first attempt of each page fetch and download",
)
@click.option(
    "--retry-delay",
    type=click.FloatRange(min=0),
    default=DEFAULT_RETRY_DELAY,
    show_default=True,
    help="Seconds to wait between attempts",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Per-request timeout in seconds",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=DEFAULT_DESTINATION,
    show_default=True,
    help="Folder to save visuals to, relative to the working directory",
)
@click.option(
    "--catalog-url",
    default=CATALOG_URL_TEMPLATE,
    help="Catalog endpoint template; must contain a {page} placeholder",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Walk and filter the catalog without downloading anything",
)
@click.pass_context
def download(  # pylint: disable=too-many-positional-arguments,too-many-arguments
    ctx: click.Context,
    certified_only: bool,
    microsoft_only: bool,
    retry_count: int,
    retry_delay: float,
    timeout: int,
    output_dir: str,
    catalog_url: str,
    dry_run: bool,
) -> None:
    """Download every catalog visual that passes the selected filters."""
    # Get shared options from context
    config = ctx.obj["config"]
    debug = ctx.obj["debug"]

    setup_logging(debug, use_wrapping=ctx.obj["wrap_logs"])

    params = {
        "certified_only": certified_only,
        "microsoft_only": microsoft_only,
        "retry_count": retry_count,
        "retry_delay": retry_delay,
        "timeout": timeout,
        "output_dir": output_dir,
        "catalog_url": catalog_url,
    }

    try:
        settings = merge_settings(ctx, params, load_config_section(config))
        settings.update(dry_run=dry_run, debug=debug)
        context = DownloadContext.from_settings(settings)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_GENERAL_ERROR)

    logging.info(
        "Starting bulk download to %s (certified only: %s, Microsoft only: %s)",
        context.destination,
        context.download_filter.certified_only,
        context.download_filter.microsoft_only,
    )

    try:
        with CatalogClient(context.catalog_url, timeout=context.timeout) as client:
            result = run_bulk_download(client, context)
    except FatalPaginationError as e:
        handle_retry_exhausted(e)
        logging.error("Cannot continue past page %d, stopping", e.page_number)
        sys.exit(EXIT_GENERAL_ERROR)
    except Exception as e:
        handle_generic_error(e, "bulk download")
        sys.exit(EXIT_GENERAL_ERROR)

    log_download_summary(result, context)


__all__ = ["download", "load_config_section", "merge_settings"]

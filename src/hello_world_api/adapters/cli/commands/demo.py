"""The ``demo`` command: banner, three greetings and one store per target."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from hello_world_api import __init__conf__
from hello_world_api.application.demo import DemoBanner, run_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_on_recorded_failures, open_store

logger = logging.getLogger(__name__)

DEMO_TITLE = "HelloWorldAPI"


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving config.toml / config.enc (default: [storage] directory, then ~/Desktop)",
)
@click.pass_context
def cli_demo(ctx: click.Context, directory: Path | None) -> None:
    """Walk through every greeting and storage feature once.

    Failures do not stop the walkthrough; the command exits with the code of
    the last one.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        logger.info("Running demo", extra={"directory": str(directory) if directory else None})
        store = open_store(cli_ctx, directory)
        banner = DemoBanner(title=DEMO_TITLE, version=__init__conf__.version, author=__init__conf__.author)
        results = run_demo(store, store.writer, banner)
        logger.info("Demo finished", extra={"operations": len(results), "failures": len(store.errors)})
        exit_on_recorded_failures(store)


__all__ = ["cli_demo"]

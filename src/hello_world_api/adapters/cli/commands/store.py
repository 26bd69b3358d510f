"""The ``store`` command: persist data as plaintext TOML or an encrypted container."""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click

from hello_world_api.domain.enums import StorageTarget

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_on_recorded_failures, open_store

logger = logging.getLogger(__name__)


@click.command("store", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--data", "-d", type=str, required=True, help="Text stored in the document's data entry")
@click.option(
    "--target",
    type=click.Choice([t.value for t in StorageTarget], case_sensitive=False),
    default=StorageTarget.FILE.value,
    show_default=True,
    help="Where to store the document",
)
@click.option(
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving config.toml / config.enc (default: [storage] directory, then ~/Desktop)",
)
@click.pass_context
def cli_store(ctx: click.Context, data: str, target: str, directory: Path | None) -> None:
    r"""Wrap DATA in a configuration document and store it.

    \b
    Targets:
    - file:      plaintext config.toml (overwritten)
    - container: AES-256-CBC encrypted config.enc (overwritten)
    - database:  not available; prints a warning and succeeds

    The directory must already exist.
    """
    cli_ctx = get_cli_context(ctx)
    storage_target = StorageTarget(target.lower())
    extra = {"command": "store", "target": storage_target.value}
    with lib_log_rich.runtime.bind(job_id="cli-store", extra=extra):
        logger.info("Executing store command", extra={"directory": str(directory) if directory else None})
        store = open_store(cli_ctx, directory)
        store.store_data(data, storage_target)
        exit_on_recorded_failures(store)


__all__ = ["cli_store"]

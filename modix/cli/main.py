# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from typing import Optional

import click

from .. import __version__
from ..config import AppConfig, load_env_file
from ..constant import get_working_dir
from .config_cmd import check_cmd, init_cmd, path_cmd
from .models_cmd import (
    add_cmd,
    list_cmd,
    remove_cmd,
    show_cmd,
    status_cmd,
    switch_cmd,
    update_cmd,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.group("modix")
@click.version_option(__version__, prog_name="modix")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (defaults to $MODIX_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Manage LLM vendors and models, and switch Claude Code between them.

    \b
    Examples:
      modix init
      modix add my-model -c MyCorp -v my-vendor -u https://api.x -k key
      modix list
      modix switch my-model
      modix status
    """
    if not isinstance(ctx.obj, AppConfig):
        load_env_file(get_working_dir())
        ctx.obj = AppConfig.from_env()
    app: AppConfig = ctx.obj

    level = (log_level or app.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger.debug("Settings file: %s", app.settings_path)


for _cmd in (
    add_cmd,
    remove_cmd,
    switch_cmd,
    status_cmd,
    list_cmd,
    show_cmd,
    init_cmd,
    path_cmd,
    update_cmd,
    check_cmd,
):
    cli.add_command(_cmd)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

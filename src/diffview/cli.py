# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import importlib.metadata
import sys
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from diffview.constants import APP_NAME
from diffview.context import DiffConfig
from diffview.core.config.config_loader import ConfigLoader
from diffview.core.diff.differ import Diff
from diffview.core.exceptions import (
    handle_diffview_exception,
    invalid_theme,
    path_not_found,
)
from diffview.core.logging.logging import get_log_directory, setup_logger
from diffview.core.ui.theme import available_themes, set_theme

app = typer.Typer(
    help=f"{APP_NAME}: colorized before/after comparison of two texts",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)


def ensure_utf8_output():
    # force utf-8 encoding
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8")


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        try:
            version = importlib.metadata.version(APP_NAME)
            typer.echo(f"{APP_NAME} version {version}")
        except importlib.metadata.PackageNotFoundError:
            typer.echo(f"{APP_NAME} version: development")
        raise typer.Exit()


def log_dir_callback(value: bool):
    """Show the log directory and exit."""
    if value:
        typer.echo(str(get_log_directory()))
        raise typer.Exit()


def load_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        DiffConfig,
        config_args,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


def read_input(value: str, is_text: bool) -> str:
    if is_text:
        return value

    path = Path(value)
    if not path.is_file():
        raise path_not_found(value)
    return path.read_text(encoding="utf-8", errors="replace")


@app.command()
def main(
    old: str = typer.Argument(..., help="The 'before' file (or text with --text)"),
    new: str = typer.Argument(..., help="The 'after' file (or text with --text)"),
    text: bool = typer.Option(
        False, "--text", "-t", help="Compare the arguments themselves, not files"
    ),
    theme: str | None = typer.Option(
        None, "--theme", help=DiffConfig.model_fields["theme"].description
    ),
    width: int | None = typer.Option(
        None, "--width", help=DiffConfig.model_fields["width"].description
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=DiffConfig.model_fields["verbose"].description
    ),
    silent: bool = typer.Option(
        False, "--silent", "-s", help=DiffConfig.model_fields["silent"].description
    ),
    custom_config: str | None = typer.Option(
        None, "--custom-config", help="Path to a custom config file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_dir: bool = typer.Option(
        False,
        "--log-dir",
        callback=log_dir_callback,
        is_eager=True,
        help="Show the directory diffview writes its logs to and exit",
    ),
) -> None:
    """
    Show the difference between OLD and NEW.

    Single line inputs are compared word by word, anything else line by line.
    """
    # quiet until the config says otherwise
    logger.remove()
    logger.add(sys.stderr, level="WARNING", format="{message}")

    with handle_diffview_exception(exit_on_fail=True):
        if theme is not None and theme not in available_themes():
            raise invalid_theme(theme, available_themes())

        config, used_sources, _ = load_config(
            custom_config,
            theme=theme,
            width=width,
            verbose=verbose or None,
            silent=silent or None,
        )

        setup_logger("diff", debug=config.verbose, silent=config.silent)
        logger.debug(f"Used {used_sources} to build config: {config!r}")

        set_theme(config.theme)

        before = read_input(old, text)
        after = read_input(new, text)

        Diff(before, after, width=config.width).print()


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # Initialize colorama (colored output in terminal)
    init(autoreset=True)
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()

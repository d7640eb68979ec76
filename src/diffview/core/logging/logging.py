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

"""
Logging configuration for the diffview CLI.

The console only shows warnings and errors by default so log output never
mixes with a rendered diff; everything is kept in a timestamped log file.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from platformdirs import user_log_path
from rich.console import Console
from rich.text import Text

from diffview.constants import APP_NAME, ENV_APP_PREFIX

LOG_DIR = Path(user_log_path(appname=APP_NAME))


class StructuredLogger:
    """Sets up loguru sinks for one command run."""

    def __init__(
        self, command_name: str, console_level: str = "WARNING", silent: bool = False
    ):
        self.command_name = command_name
        self.console_level = console_level.upper()
        self.silent = silent
        self.console = Console(stderr=True)
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with a rich console sink and a file sink."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        log_level = os.getenv(f"{ENV_APP_PREFIX}LOG_LEVEL", "DEBUG").upper()

        def console_sink(message):
            record = message.record
            text = record["message"].rstrip("\n")
            style = "bold red" if record["level"].no >= 40 else None
            self.console.print(Text(text, style=style))

        if not self.silent:
            logger.add(
                console_sink, level=self.console_level, format="{message}", catch=True
            )

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"{APP_NAME}_{timestamp}.log"

        logger.add(
            logfile,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=False,
        )

        logger.bind(command=self.command_name, logfile=str(logfile)).debug(
            "Logger initialized"
        )

        self.logfile = logfile

    def get_logfile(self) -> Path:
        """Get the current log file path."""
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show debug output on the console
        silent: Do not log to the console at all

    Returns:
        Path to the log file
    """
    if debug:
        console_level = "DEBUG"
    else:
        console_level = os.getenv(f"{ENV_APP_PREFIX}CONSOLE_LOG_LEVEL", "WARNING")

    structured_logger = StructuredLogger(command_name, console_level, silent=silent)
    return structured_logger.get_logfile()


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR

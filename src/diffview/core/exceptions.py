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
Exception hierarchy for diffview.

Every error raised on purpose by diffview derives from DiffViewError so the
CLI can report it consistently. Errors raised by output sinks (closed pipes,
full disks, ...) are not wrapped and reach the caller unchanged.
"""

import contextlib

import typer
from loguru import logger


class DiffViewError(Exception):
    """
    Base exception for all diffview errors.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a DiffViewError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class MalformedPatchError(DiffViewError):
    """
    Raised when a serialized hunk contains a line whose prefix is not one of
    header, context, insertion or deletion.

    Output written before the bad line is left in the target.
    """

    def __init__(self, message: str, details: str | None = None, line: str = ""):
        self.line = line
        super().__init__(message, details)


class ConfigurationError(DiffViewError):
    """
    Configuration-related errors.

    Raised when configuration files or environment variables contain
    values that do not validate.
    """

    pass


class InputError(DiffViewError):
    """Raised when the CLI cannot read one of its inputs."""

    pass


def malformed_patch_line(line: str) -> MalformedPatchError:
    """Create a MalformedPatchError for a line with an unknown prefix."""
    return MalformedPatchError(
        f"Unknown patch line prefix {line[:1]!r}",
        f"Offending line: {line!r}. The diff engine produced a patch diffview cannot render",
        line=line,
    )


def path_not_found(path: str) -> InputError:
    """Create an InputError for a missing input file."""
    return InputError(
        f"Path not found: {path}",
        "Pass an existing file, or use --text to compare the arguments themselves",
    )


def invalid_theme(name: str, available: list[str]) -> ConfigurationError:
    """Create a ConfigurationError for an unknown theme name."""
    return ConfigurationError(
        f"Unknown theme: {name}",
        f"Available themes: {', '.join(available)}",
    )


@contextlib.contextmanager
def handle_diffview_exception(exit_on_fail: bool = True):
    """
    Report errors escaping the wrapped block.

    DiffViewError is logged with its details, anything else with a traceback.
    With exit_on_fail the process exits with status 1, otherwise the error
    is re-raised after logging.
    """
    try:
        yield
    except typer.Exit:
        raise
    except DiffViewError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(e.details)
        if not exit_on_fail:
            raise
        raise typer.Exit(1) from e
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        if not exit_on_fail:
            raise
        raise typer.Exit(1) from e

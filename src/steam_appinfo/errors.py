"""Exceptions raised by steam_appinfo."""

from __future__ import annotations


class AppInfoError(Exception):
    """Base class for every error raised by this package."""


class MalformedInput(AppInfoError):
    """No brace-delimited payload could be isolated from a dump."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class ConversionFailed(AppInfoError):
    """The rewritten payload is not a valid document.

    ``text`` holds the rewritten single-line text that failed to parse.
    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class SteamCmdError(AppInfoError):
    """The steamcmd process could not produce usable output."""

    def __init__(
        self,
        message: str,
        args: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command_args = list(args or [])
        self.returncode = returncode
        self.stderr = stderr

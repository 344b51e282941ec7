"""
steamcmd runner — invokes the external tool and converts its output.

The tool itself is a black box: given an argument list it either prints
an app info dump on stdout or fails. Installing steamcmd and retrying
failed runs are left to the caller.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from .config import Settings, load_settings
from .converter import convert_dump
from .errors import SteamCmdError
from .node import Object

logger = logging.getLogger(__name__)


class SteamCmd:
    """Run steamcmd and capture its output.

    Args:
        binary: Executable name (looked up on PATH) or path.
        timeout: Seconds before the process is killed.
    """

    def __init__(self, binary: str = "steamcmd", timeout: int = 300) -> None:
        self.binary = binary
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "SteamCmd":
        return cls(binary=settings.binary, timeout=settings.timeout)

    def resolve(self) -> str:
        """Return the full path of the binary, or raise SteamCmdError."""
        path = shutil.which(self.binary)
        if path is None:
            raise SteamCmdError(f"steamcmd not found: {self.binary}")
        return path

    def run(self, args: list[str]) -> str:
        """Run steamcmd with *args* and return its stdout.

        Raises SteamCmdError when the binary is missing, the process
        cannot be started or times out, anything is written to stderr,
        or stdout is empty.
        """
        binary = self.resolve()
        cmd = [binary, *args]

        logger.debug("Executing: %s", " ".join(cmd))
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise SteamCmdError(
                f"steamcmd timed out after {self.timeout}s", args=args
            ) from exc
        except OSError as exc:
            raise SteamCmdError(f"steamcmd could not be started: {exc}", args=args) from exc

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info("steamcmd exited with code %d in %d ms", result.returncode, elapsed_ms)

        stderr = result.stderr.strip()
        if stderr:
            raise SteamCmdError(
                f"steamcmd failed: {stderr}",
                args=args,
                returncode=result.returncode,
                stderr=stderr,
            )
        if not result.stdout.strip():
            raise SteamCmdError(
                "steamcmd produced no output", args=args, returncode=result.returncode
            )
        return result.stdout


# ---------------------------------------------------------------------------
# App info
# ---------------------------------------------------------------------------

def app_info_args(app_id: str, platform: str) -> list[str]:
    """Argument list that prints fresh app info for *app_id* anonymously."""
    return [
        "+@sSteamCmdForcePlatformType", platform,
        "+login", "anonymous",
        "+app_info_update", "1",
        "+app_info_print", app_id,
        "+quit",
    ]


def clear_appinfo_cache(path: Path) -> bool:
    """Remove the cached appinfo.vdf so steamcmd prints current data.

    Returns True if a file was removed. Raises SteamCmdError if the path
    exists but cannot be removed (a directory, missing permissions).
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise SteamCmdError(f"could not remove appinfo cache {path}: {exc}") from exc
    logger.debug("Removed appinfo cache %s", path)
    return True


def app_info(
    app_id: str | int,
    settings: Settings | None = None,
    runner: SteamCmd | None = None,
) -> Object:
    """Fetch app info for *app_id* and return it as an Object tree.

    Raises ValueError for a non-numeric app id, SteamCmdError when the
    tool fails, and MalformedInput / ConversionFailed when its output
    cannot be converted.
    """
    app_id = str(app_id).strip()
    if not (app_id.isascii() and app_id.isdigit()):
        raise ValueError(f"app id must be numeric, got {app_id!r}")

    settings = settings or load_settings()
    runner = runner or SteamCmd.from_settings(settings)

    clear_appinfo_cache(settings.appinfo_cache)
    output = runner.run(app_info_args(app_id, settings.platform))
    logger.info("Converting app info for %s (%d chars)", app_id, len(output))
    return convert_dump(output)

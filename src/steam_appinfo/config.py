"""Settings loaded from environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

DEFAULT_BINARY = "steamcmd"
DEFAULT_TIMEOUT = 300
DEFAULT_CACHE = "~/Steam/appcache/appinfo.vdf"
DEFAULT_LOG_LEVEL = "WARNING"


def default_platform(platform: str | None = None) -> str:
    """Map ``sys.platform`` to the name steamcmd expects for forced platform type."""
    platform = platform or sys.platform
    if platform.startswith(("win32", "cygwin")):
        return "windows"
    if platform == "darwin":
        return "macos"
    return "linux"


@dataclass
class Settings:
    binary: str = DEFAULT_BINARY
    platform: str = field(default_factory=default_platform)
    timeout: int = DEFAULT_TIMEOUT
    appinfo_cache: Path = field(default_factory=lambda: Path(DEFAULT_CACHE).expanduser())
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from *environ* (defaults to ``os.environ``).

    Recognised variables:
        STEAMCMD_PATH           steamcmd binary (name on PATH or full path)
        STEAMCMD_PLATFORM       windows | macos | linux
        STEAMCMD_TIMEOUT        seconds, positive integer
        STEAMCMD_APPINFO_CACHE  appinfo.vdf cache file removed before a run
        STEAM_APPINFO_LOG_LEVEL logging level name
    """
    env = os.environ if environ is None else environ

    raw_timeout = env.get("STEAMCMD_TIMEOUT", "")
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = int(raw_timeout)
        except ValueError:
            raise ValueError(f"STEAMCMD_TIMEOUT must be an integer, got {raw_timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"STEAMCMD_TIMEOUT must be positive, got {timeout}")

    return Settings(
        binary=env.get("STEAMCMD_PATH") or DEFAULT_BINARY,
        platform=env.get("STEAMCMD_PLATFORM") or default_platform(),
        timeout=timeout,
        appinfo_cache=Path(env.get("STEAMCMD_APPINFO_CACHE") or DEFAULT_CACHE).expanduser(),
        log_level=(env.get("STEAM_APPINFO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )

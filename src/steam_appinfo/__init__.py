"""steam-appinfo — Steam app info from steamcmd dumps as structured data."""

__version__ = "0.1.0"

from .converter import convert, convert_dump, dumps, parse, rewrite
from .errors import AppInfoError, ConversionFailed, MalformedInput, SteamCmdError
from .extractor import extract
from .node import Entry, Leaf, Node, Object, from_python, to_python
from .steamcmd import SteamCmd, app_info

__all__ = [
    "extract",
    "convert",
    "convert_dump",
    "rewrite",
    "parse",
    "dumps",
    "Leaf",
    "Object",
    "Entry",
    "Node",
    "to_python",
    "from_python",
    "AppInfoError",
    "MalformedInput",
    "ConversionFailed",
    "SteamCmdError",
    "SteamCmd",
    "app_info",
]

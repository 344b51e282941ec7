"""Extractor: isolates the brace-delimited payload of a steamcmd dump."""

from __future__ import annotations

from .errors import MalformedInput


def extract(text: str) -> str:
    """Return the substring of *text* from the first ``{`` to the last ``}``.

    steamcmd prints log noise (update banners, login messages, the app id
    line) around exactly one top-level object, so only the outer
    boundaries are trimmed. Braces in between are not balanced or checked.

    Raises ``MalformedInput`` when either brace is missing or the last
    ``}`` comes before the first ``{``.
    """
    start = text.find("{")
    if start < 0:
        raise MalformedInput("no opening brace found in input", text)

    end = text.rfind("}")
    if end < 0:
        raise MalformedInput("no closing brace found in input", text)

    if end < start:
        raise MalformedInput("closing brace precedes opening brace", text)

    return text[start:end + 1]

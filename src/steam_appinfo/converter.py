"""Converter: KeyValues payload → StructuredNode.

The payload syntax is a near-superset of a JSON object with the
separators left out::

    {
    	"common"
    	{
    		"name"		"Dedicated Server"
    		"type"		"Tool"
    	}
    }

``rewrite`` walks the token stream once and puts the missing ``:`` and
``,`` back, tracking per nesting level whether the next string is a key or
a value. The result is then parsed strictly with ``json``; the rewrite is
never trusted on its own, and any parse failure raises ``ConversionFailed``
carrying the rewritten text.
"""

from __future__ import annotations

import json
import logging
from enum import Enum, auto

from .errors import ConversionFailed
from .extractor import extract
from .node import Entry, Leaf, Node, Object, to_python
from .scanner import TokenType, tokenize

logger = logging.getLogger(__name__)


class _Expect(Enum):
    KEY = auto()
    VALUE = auto()


_JSON_ESCAPES = frozenset('"\\/bfnrt')
_HEX = frozenset("0123456789abcdefABCDEF")


# ---------------------------------------------------------------------------
# String re-encoding
# ---------------------------------------------------------------------------

def _encode_string(raw: str) -> str:
    """Quote the raw body of a scanned string as a JSON string literal.

    Raw tabs and line breaks are dropped (they are layout in this format).
    Valid JSON escapes (``\\"``, ``\\\\``, ``\\/``, ``\\b``, ``\\f``,
    ``\\n``, ``\\r``, ``\\t``, ``\\uXXXX``) are kept and decoded by the
    strict parse, so ``bin\\tools`` yields a real tab. Any other backslash
    is taken literally. Remaining control characters are escaped.
    """
    body = raw.replace("\t", "").replace("\r", "").replace("\n", "")
    out = ['"']
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == "\\":
            nxt = body[i + 1] if i + 1 < n else ""
            if nxt and nxt in _JSON_ESCAPES:
                out.append(body[i:i + 2])
                i += 2
                continue
            if nxt == "u" and len(body) >= i + 6 and all(c in _HEX for c in body[i + 2:i + 6]):
                out.append(body[i:i + 6])
                i += 6
                continue
            out.append("\\\\")
        elif ch < " ":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
        i += 1
    out.append('"')
    return "".join(out)


# ---------------------------------------------------------------------------
# rewrite
# ---------------------------------------------------------------------------

def rewrite(payload: str) -> str:
    """Return *payload* as single-line JSON text (not yet validated).

    - ``"KEY" {``       → ``"KEY":{``
    - ``"KEY" "VALUE"`` → ``"KEY":"VALUE"``
    - ``} "KEY"`` and ``"VALUE" "KEY"`` → separated by ``,``

    Separators already present in the input are kept and never doubled.
    Unknown text is passed through unchanged.
    """
    out: list[str] = []
    stack: list[_Expect] = []
    prev: TokenType | None = None

    for tok in tokenize(payload):
        kind = tok.type

        if kind is TokenType.STRING:
            if stack and stack[-1] is _Expect.VALUE:
                if prev is TokenType.STRING:
                    out.append(":")
                stack[-1] = _Expect.KEY
            else:
                if prev in (TokenType.STRING, TokenType.CLOSE):
                    out.append(",")
                if stack:
                    stack[-1] = _Expect.VALUE
            out.append(_encode_string(tok.value))

        elif kind is TokenType.OPEN:
            if stack and stack[-1] is _Expect.VALUE and prev is TokenType.STRING:
                out.append(":")
            stack.append(_Expect.KEY)
            out.append("{")

        elif kind is TokenType.CLOSE:
            if stack:
                stack.pop()
            # a closed object completes the member it was the value of
            if stack:
                stack[-1] = _Expect.KEY
            out.append("}")

        else:
            out.append(tok.value)

        prev = kind

    return "".join(out)


# ---------------------------------------------------------------------------
# Strict parse
# ---------------------------------------------------------------------------

def _build_object(pairs: list[tuple[str, object]]) -> Object:
    entries: list[Entry] = []
    seen: set[str] = set()
    for key, value in pairs:
        if key in seen:
            raise ValueError(f"duplicate key {key!r}")
        seen.add(key)
        if isinstance(value, str):
            value = Leaf(value)
        elif not isinstance(value, Object):
            raise ValueError(f"value of {key!r} is not a string or object")
        entries.append(Entry(key=key, value=value))
    return Object(entries)


def parse(text: str) -> Object:
    """Strictly parse rewritten JSON *text* into an Object tree."""
    try:
        value = json.loads(text, object_pairs_hook=_build_object)
    except (ValueError, RecursionError) as exc:
        logger.debug("Strict parse failed (%s): %s", exc, text)
        raise ConversionFailed(f"invalid document: {exc}", text) from exc

    if not isinstance(value, Object):
        raise ConversionFailed("top-level value is not an object", text)
    return value


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def convert(payload: str) -> Object:
    """Convert a brace-delimited payload into an Object tree.

    Raises ``ConversionFailed`` if the rewritten text is not a valid
    object of objects and strings. There is no partial result.
    """
    text = rewrite(payload)
    logger.debug("Rewrote payload: %d chars in, %d chars out", len(payload), len(text))
    return parse(text)


def convert_dump(text: str) -> Object:
    """Extract the payload from a raw steamcmd dump and convert it."""
    return convert(extract(text))


def dumps(node: Node, indent: int | None = None) -> str:
    """Serialize *node* canonically.

    Keys keep insertion order and non-ASCII text is written as is. Without
    *indent* the output is a single compact line.
    """
    if indent is None:
        return json.dumps(to_python(node), ensure_ascii=False, separators=(",", ":"))
    return json.dumps(to_python(node), ensure_ascii=False, indent=indent)

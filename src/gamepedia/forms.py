"""Decode form-encoded requests and resolve them into Game records."""

import re
from collections.abc import AsyncIterable, Mapping, Sequence
from urllib.parse import parse_qsl

from gamepedia.errors import FormDecodeFault
from gamepedia.models import GAME_FIELDS, Game

FORM_URLENCODED = "application/x-www-form-urlencoded"
DEFAULT_CONTENT_TYPE = "application/octet-stream"
MAX_FORM_SIZE = 10 << 20

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MEDIA_TYPE_RE = re.compile(rf"^{_TOKEN}/{_TOKEN}$")
_PARAM_RE = re.compile(rf'\s*;\s*({_TOKEN})\s*=\s*({_TOKEN}|"(?:[^"\\]|\\.)*")\s*')
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_params(content_type: str, params: str) -> None:
    """Each parameter must be `;name=value` (value a token or quoted), names unique."""
    seen = set()
    pos = 0
    while params[pos:].strip():
        # A lone trailing semicolon is tolerated.
        if params[pos:].strip() == ";":
            return
        m = _PARAM_RE.match(params, pos)
        if not m:
            raise FormDecodeFault(f"malformed Content-Type parameter: {content_type!r}")
        name = m.group(1).lower()
        if name in seen:
            raise FormDecodeFault(f"duplicate Content-Type parameter {name!r}")
        seen.add(name)
        pos = m.end()


def media_type(content_type: str | None) -> str:
    """
    Lower-cased media type of a Content-Type header, parameters checked then dropped.
    A missing header means an opaque byte stream.
    """
    if content_type is None or not content_type.strip():
        return DEFAULT_CONTENT_TYPE
    mtype, sep, params = content_type.partition(";")
    mtype = mtype.strip().lower()
    if not _MEDIA_TYPE_RE.match(mtype):
        raise FormDecodeFault(f"malformed Content-Type: {content_type!r}")
    _check_params(content_type, sep + params)
    return mtype


async def read_form_body(chunks: AsyncIterable[bytes], limit: int = MAX_FORM_SIZE) -> bytes:
    """Collect a request body, giving up as soon as it grows past limit bytes."""
    body = bytearray()
    async for chunk in chunks:
        body.extend(chunk)
        if len(body) > limit:
            raise FormDecodeFault(f"form body too large (over {limit} bytes)")
    return bytes(body)


def parse_urlencoded(data: str) -> list[tuple[str, str]]:
    """
    Parse `a=1&b=2` into ordered pairs; blank values are kept.
    Escapes that are not UTF-8 decode to U+FFFD rather than failing.
    """
    if not data:
        return []
    if ";" in data:
        raise FormDecodeFault("invalid semicolon separator in form data")
    bad = _BAD_ESCAPE_RE.search(data)
    if bad:
        raise FormDecodeFault(f"invalid percent escape at offset {bad.start()}")
    return parse_qsl(data, keep_blank_values=True, errors="replace")


def decode_form(
    content_type: str | None,
    body: bytes,
    query: str = "",
) -> dict[str, list[str]]:
    """
    Collect form values from a urlencoded body and the URL query string.

    Body values come first for each key, so they win over the query string.
    Bodies of any other media type contribute nothing.
    """
    pairs: list[tuple[str, str]] = []
    if media_type(content_type) == FORM_URLENCODED:
        if len(body) > MAX_FORM_SIZE:
            raise FormDecodeFault(f"form body too large (over {MAX_FORM_SIZE} bytes)")
        pairs.extend(parse_urlencoded(body.decode("utf-8", errors="replace")))
    pairs.extend(parse_urlencoded(query))

    form: dict[str, list[str]] = {}
    for key, value in pairs:
        form.setdefault(key, []).append(value)
    return form


def resolve_game_fields(form: Mapping[str, Sequence[str]]) -> Game:
    """First supplied value per field; missing fields resolve to empty text."""
    values = {}
    for name in GAME_FIELDS:
        supplied = form.get(name) or [""]
        values[name] = supplied[0]
    return Game(**values)

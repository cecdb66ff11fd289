"""Request URL construction for the unofficial Google Translate web API."""

from __future__ import annotations

import urllib.parse
from typing import Optional

from translation_errors import QueryBuildError


ENDPOINT = "https://translate.googleapis.com/translate_a/single"
CLIENT_ID = "gtx"  # Any other client id gets an error page instead of JSON.
OUTPUT_FORMAT = "t"  # dt=t: translated segments only.
DEFAULT_SOURCE = "auto"


def encode_component(value: str) -> str:
    """Percent-encode ``value`` for use inside a query component.

    Only ``A-Z a-z 0-9 - _ . ~`` are left as is; every other UTF-8 byte
    becomes ``%XX`` with uppercase hex digits.
    """

    try:
        return urllib.parse.quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise QueryBuildError(f"Text cannot be encoded as UTF-8: {exc.reason}") from exc


def build_url(text: str, source_lang: Optional[str], target_lang: str) -> str:
    """Return the GET URL translating ``text`` from ``source_lang`` to ``target_lang``.

    Language codes are passed through untouched apart from escaping; a missing
    source language means auto-detection.
    """

    params = (
        ("client", CLIENT_ID),
        ("sl", source_lang or DEFAULT_SOURCE),
        ("tl", target_lang),
        ("dt", OUTPUT_FORMAT),
        ("q", text),
    )
    query = "&".join(f"{name}={encode_component(value)}" for name, value in params)
    return f"{ENDPOINT}?{query}"

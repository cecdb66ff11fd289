"""Parsing of the nested-list body returned by ``translate_a/single``.

A successful body looks like::

    [[["Xin chào", "Hello", null, null, 3], ["thế giới", " world", ...]], null, "en", ...]

Only two coordinates matter: ``body[0][i][0]`` holds the translated
fragments and ``body[2]`` the detected source language. Everything else is
ignored, whatever its shape, because the format is undocumented and changes
without notice.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from translation_errors import EmptyResponseError, MalformedResponseError


logger = logging.getLogger("gtxtranslate.response")

SNIPPET_LENGTH = 120


@dataclass(frozen=True)
class ParsedResponse:
    text: str
    detected_source: Optional[str] = None


def _item(node: Any, index: int) -> Any:
    """Return ``node[index]`` when ``node`` is a list long enough, else ``None``."""

    if isinstance(node, list) and 0 <= index < len(node):
        return node[index]
    return None


def _string(node: Any) -> Optional[str]:
    return node if isinstance(node, str) else None


def _decode(body: bytes) -> str:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedResponseError(
            "Response is not valid UTF-8",
            snippet=body.decode("utf-8", "replace")[:SNIPPET_LENGTH],
        ) from exc


def _load_tree(body: bytes) -> Any:
    document = _decode(body).strip()
    if not document:
        raise EmptyResponseError("Empty response from Google Translate")

    # JSONDecodeError is a ValueError; oversized integers raise a plain
    # ValueError and very deep nesting a RecursionError.
    try:
        return json.loads(document)
    except (ValueError, RecursionError) as exc:
        raise MalformedResponseError(
            "Unexpected response format", snippet=document[:SNIPPET_LENGTH]
        ) from exc


def _extract_fragments(segments: List[Any]) -> List[str]:
    fragments = []
    for position, segment in enumerate(segments):
        fragment = _string(_item(segment, 0))
        if fragment is None:
            logger.debug("Skipping segment %d without a text fragment", position)
            continue
        fragments.append(fragment)
    return fragments


def parse_response(body: bytes) -> ParsedResponse:
    """Extract the translation and the detected language from ``body``.

    Raises :class:`EmptyResponseError` for an empty body or an empty
    translation and :class:`MalformedResponseError` when the segment list
    cannot be located.
    """

    tree = _load_tree(body)
    if not isinstance(tree, list):
        raise MalformedResponseError(
            f"Expected a list at the top level, got {type(tree).__name__}",
            snippet=_decode(body).strip()[:SNIPPET_LENGTH],
        )
    if not tree or tree[0] is None:
        raise EmptyResponseError("Google Translate returned no segments")

    segments = tree[0]
    if not isinstance(segments, list):
        raise MalformedResponseError(
            f"Expected a list of segments, got {type(segments).__name__}",
            snippet=_decode(body).strip()[:SNIPPET_LENGTH],
        )

    text = "".join(_extract_fragments(segments))
    if not text.strip():
        raise EmptyResponseError("Google Translate returned an empty translation")

    return ParsedResponse(text=text, detected_source=_string(_item(tree, 2)))


def parse_translation(body: bytes) -> str:
    """Return only the translated text of ``body``."""

    return parse_response(body).text

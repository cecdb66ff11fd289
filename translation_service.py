"""Translation utilities for gtxtranslate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from translation_query import DEFAULT_SOURCE, build_url
from translation_response import parse_response
from translation_transport import DEFAULT_TIMEOUT, Transport, UrllibTransport


logger = logging.getLogger("gtxtranslate.service")


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    source_lang: Optional[str]
    target_lang: str


@dataclass
class TranslationResult:
    text: str
    detected_source: Optional[str]


class GoogleTranslateClient:
    """Minimal client for the unofficial Google Translate web API."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, *, transport: Optional[Transport] = None) -> None:
        self.timeout = timeout
        self.transport = transport if transport is not None else UrllibTransport(timeout=timeout)

    def translate(self, text: str, src: Optional[str], dest: str) -> TranslationResult:
        url = build_url(text, src, dest)
        logger.debug("Translating %d characters %s -> %s", len(text), src or DEFAULT_SOURCE, dest)

        payload = self.transport.fetch(url)
        parsed = parse_response(payload)
        return TranslationResult(text=parsed.text, detected_source=parsed.detected_source)

    def translate_request(self, request: TranslationRequest) -> TranslationResult:
        return self.translate(request.text, src=request.source_lang, dest=request.target_lang)


def translate(
    text: str,
    source_lang: Optional[str],
    target_lang: str,
    *,
    client: Optional[GoogleTranslateClient] = None,
) -> str:
    """Translate a single string and return the translated text.

    Raises a :class:`TranslationError` subclass on any failure.
    """

    client = client if client is not None else GoogleTranslateClient()
    return client.translate(text, src=source_lang, dest=target_lang).text

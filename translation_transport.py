"""HTTP transports used to reach the translation endpoint."""

from __future__ import annotations

import http.client
import logging
import socket
import urllib.error
import urllib.request
from typing import Protocol

from translation_errors import TransportError


logger = logging.getLogger("gtxtranslate.transport")

DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = "Mozilla/5.0"


class Transport(Protocol):  # pragma: no cover - protocol is for type checking only
    def fetch(self, url: str) -> bytes:
        """Return the full response body or raise :class:`TransportError`."""


def _is_timeout(exc: BaseException) -> bool:
    return isinstance(exc, (socket.timeout, TimeoutError))


class UrllibTransport:
    """Transport backed by :mod:`urllib.request`."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> bytes:
        request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                return response.read()
        except urllib.error.HTTPError as exc:
            logger.warning("Google Translate answered with HTTP %s", exc.code)
            raise TransportError(
                f"Google Translate returned HTTP {exc.code}", url=url, status=exc.code
            ) from exc
        except urllib.error.URLError as exc:
            if _is_timeout(exc.reason):
                logger.warning("Request timed out after %.1fs", self.timeout)
                raise TransportError(
                    f"Request to Google Translate timed out after {self.timeout}s", url=url
                ) from exc
            logger.warning("Network error: %s", exc.reason)
            raise TransportError(
                f"Network error while contacting Google Translate: {exc.reason}", url=url
            ) from exc
        except OSError as exc:
            if _is_timeout(exc):
                logger.warning("Request timed out after %.1fs", self.timeout)
                raise TransportError(
                    f"Request to Google Translate timed out after {self.timeout}s", url=url
                ) from exc
            logger.warning("Connection failed: %s", exc)
            raise TransportError(f"Connection to Google Translate failed: {exc}", url=url) from exc
        except http.client.HTTPException as exc:
            logger.warning("Invalid HTTP response: %r", exc)
            raise TransportError(
                f"Invalid HTTP response from Google Translate: {exc!r}", url=url
            ) from exc

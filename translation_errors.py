"""Exception hierarchy shared by the gtxtranslate modules."""

from __future__ import annotations

from typing import Optional


class TranslationError(RuntimeError):
    """Raised when the translation service cannot complete a request."""


class QueryBuildError(TranslationError):
    """Raised when the request URL cannot be built from the input text."""


class TransportError(TranslationError):
    """Raised when the HTTP request fails before a usable body is received."""

    def __init__(self, message: str, *, url: Optional[str] = None, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ResponseParseError(TranslationError):
    """Base class for failures while reading the response body."""


class EmptyResponseError(ResponseParseError):
    """The body, or every fragment extracted from it, was empty.

    Google commonly answers with an empty body when it is rate limiting the
    caller, but a genuinely empty translation looks the same, so treat this
    as a hint to back off rather than proof of throttling.
    """


class MalformedResponseError(ResponseParseError):
    """The body is present but does not have the nested-list shape."""

    def __init__(self, message: str, *, snippet: str = "") -> None:
        super().__init__(message)
        self.snippet = snippet


class BatchCancelledError(TranslationError):
    """Recorded for batch items that were never started because of cancellation."""

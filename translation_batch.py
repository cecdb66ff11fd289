"""Batch translation with per-item failure isolation."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from translation_errors import BatchCancelledError, TranslationError
from translation_service import GoogleTranslateClient, TranslationRequest, TranslationResult


logger = logging.getLogger("gtxtranslate.batch")

DEFAULT_WORKERS = 4


@dataclass(frozen=True)
class BatchOutcome:
    """Result slot for one batch input; exactly one of ``result``/``error`` is set."""

    request: TranslationRequest
    result: Optional[TranslationResult] = None
    error: Optional[TranslationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> Optional[str]:
        return self.result.text if self.result is not None else None

    def unwrap(self) -> str:
        """Return the translated text or raise the recorded error."""

        if self.error is not None:
            raise self.error
        assert self.result is not None  # For type checkers
        return self.result.text


def _run_single(client: GoogleTranslateClient, request: TranslationRequest) -> BatchOutcome:
    try:
        result = client.translate_request(request)
    except TranslationError as exc:
        return BatchOutcome(request=request, error=exc)
    except Exception as exc:
        logger.exception("Unexpected error while translating batch item: %s", exc)
        error = TranslationError(f"Unexpected error during translation: {exc}")
        error.__cause__ = exc
        return BatchOutcome(request=request, error=error)
    return BatchOutcome(request=request, result=result)


def translate_many(
    requests: Iterable[TranslationRequest],
    *,
    client: Optional[GoogleTranslateClient] = None,
    max_workers: int = DEFAULT_WORKERS,
    cancel_event: Optional[threading.Event] = None,
) -> List[BatchOutcome]:
    """Translate every request and return outcomes in input order.

    Items are processed by up to ``max_workers`` threads. A failure is
    recorded in the item's slot and never affects other items. Once
    ``cancel_event`` is set no new items are started; those slots receive
    :class:`BatchCancelledError` while finished slots keep their results.
    """

    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")

    pending: Sequence[TranslationRequest] = list(requests)
    if not pending:
        return []

    client = client if client is not None else GoogleTranslateClient()
    cancel_event = cancel_event if cancel_event is not None else threading.Event()
    outcomes: List[Optional[BatchOutcome]] = [None] * len(pending)
    work_queue: "queue.Queue[int]" = queue.Queue()
    for index in range(len(pending)):
        work_queue.put(index)

    def worker() -> None:
        while True:
            try:
                index = work_queue.get_nowait()
            except queue.Empty:
                return
            request = pending[index]
            if cancel_event.is_set():
                outcomes[index] = BatchOutcome(
                    request=request, error=BatchCancelledError("Batch was cancelled before this item started")
                )
                continue
            outcomes[index] = _run_single(client, request)

    worker_count = min(max_workers, len(pending))
    logger.info("Translating %d items with %d workers", len(pending), worker_count)
    threads = [
        threading.Thread(target=worker, name=f"TranslationWorker-{number}", daemon=True)
        for number in range(worker_count)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    missing = [index for index, outcome in enumerate(outcomes) if outcome is None]
    if missing:
        raise RuntimeError(f"Batch workers left {len(missing)} items unprocessed: {missing}")
    results: List[BatchOutcome] = list(outcomes)  # type: ignore[arg-type]
    failed = sum(1 for outcome in results if not outcome.ok)
    if cancel_event.is_set():
        logger.info("Batch cancelled; %d of %d items did not succeed", failed, len(results))
    else:
        logger.info("Batch finished: %d ok, %d failed", len(results) - failed, failed)
    return results


def translate_texts(
    texts: Iterable[str],
    source_lang: Optional[str],
    target_lang: str,
    *,
    client: Optional[GoogleTranslateClient] = None,
    max_workers: int = DEFAULT_WORKERS,
    cancel_event: Optional[threading.Event] = None,
) -> List[BatchOutcome]:
    """Translate ``texts`` sharing one language pair; see :func:`translate_many`."""

    requests = [TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang) for text in texts]
    return translate_many(requests, client=client, max_workers=max_workers, cancel_event=cancel_event)

"""Command line front end: translate texts from arguments, stdin or the clipboard."""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import IO, Callable, List, Optional, Sequence

import pyperclip

import translation_preferences
from translation_batch import BatchOutcome, translate_texts
from translation_preferences import TranslatorPreferences, load_preferences, save_dest_language
from translation_service import GoogleTranslateClient


LOG_FILE_NAME = "gtxtranslate.log"
LOG_MAX_BYTES = 2_097_152
LOG_BACKUP_COUNT = 3

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger("gtxtranslate")
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    log_dir = translation_preferences.PREFERENCES_FILE.parent
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        handler = None
    if handler is not None:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(formatter)
    logger.addHandler(console)
    return logger


def parse_args(argv: Optional[Sequence[str]] = None, preferences: Optional[TranslatorPreferences] = None) -> argparse.Namespace:
    preferences = preferences if preferences is not None else load_preferences()
    parser = argparse.ArgumentParser(
        prog="gtxtranslate",
        description="Translate text with the Google Translate web API.",
    )
    parser.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Texts to translate. Without any, reads the clipboard (--clipboard) or one text per stdin line.",
    )
    parser.add_argument(
        "--src",
        default=preferences.source_language,
        help=f"Source language (default: {preferences.source_language}). Use 'auto' to auto-detect.",
    )
    parser.add_argument(
        "--dest",
        default=preferences.dest_language,
        help=f"Destination language (default: last saved or {preferences.dest_language}). Use Google Translate language codes.",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=preferences.max_workers,
        help=f"Number of parallel requests (default: {preferences.max_workers}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=preferences.timeout,
        help=f"Per-request timeout in seconds (default: {preferences.timeout}).",
    )
    parser.add_argument("--clipboard", action="store_true", help="Translate the current clipboard text.")
    parser.add_argument("--verbose", action="store_true", help="Print debug logging to the console.")
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("--threads must be at least 1")
    if args.timeout <= 0:
        parser.error("--timeout must be positive")
    return args


def _collect_texts(args: argparse.Namespace, clipboard_module, stdin: IO[str]) -> List[str]:
    if args.texts:
        return list(args.texts)
    if args.clipboard:
        text = clipboard_module.paste().strip()
        return [text] if text else []
    return [line.strip() for line in stdin if line.strip()]


def _report(outcomes: Sequence[BatchOutcome], stdout: IO[str], stderr: IO[str]) -> None:
    if len(outcomes) == 1:
        outcome = outcomes[0]
        if outcome.ok:
            print(outcome.text, file=stdout)
        else:
            print(f"Error: {outcome.error}", file=stderr)
        return

    for outcome in outcomes:
        if outcome.ok:
            print(f"{outcome.request.text} → {outcome.text}", file=stdout)
        else:
            print(f"{outcome.request.text} → ERROR: {outcome.error}", file=stdout)


def run(
    argv: Optional[Sequence[str]] = None,
    *,
    client_factory: Callable[[float], GoogleTranslateClient] = GoogleTranslateClient,
    clipboard_module=pyperclip,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = parse_args(argv)
    logger = _configure_logging(args.verbose)

    try:
        texts = _collect_texts(args, clipboard_module, stdin)
    except pyperclip.PyperclipException as exc:
        logger.error("Failed to read clipboard: %s", exc)
        print(f"Failed to read clipboard: {exc}", file=stderr)
        return EXIT_FAILED

    if not texts:
        print("gtxtranslate: nothing to translate", file=stderr)
        return EXIT_USAGE

    client = client_factory(args.timeout)
    outcomes = translate_texts(texts, args.src, args.dest, client=client, max_workers=args.threads)
    _report(outcomes, stdout, stderr)
    save_dest_language(args.dest)

    return EXIT_OK if all(outcome.ok for outcome in outcomes) else EXIT_FAILED


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

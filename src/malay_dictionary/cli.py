"""Command-line front end for :class:`~malay_dictionary.dictionary.MalayDictionary`.

Usage::

    malay-dictionary hello
    malay-dictionary computer --verbose
    malay-dictionary "hello world" --json
    malay-dictionary reluctant --delay 2000 --timeout 45000

Simple mode prints the first Malay definition.  ``--verbose`` runs a full
search (proverbs and thesaurus included) and prints every entry.

Exit codes:
    0: Success (including "no definition found") or help shown.
    1: No word given, or the lookup failed.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from pydantic import ValidationError as OptionsValidationError

from malay_dictionary.config.settings import get_settings
from malay_dictionary.core.exceptions import MalayDictionaryError
from malay_dictionary.core.logging_config import configure_logging
from malay_dictionary.core.schemas.dictionary import SearchOptions, SearchResult
from malay_dictionary.dictionary import MalayDictionary


def _build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="malay-dictionary",
        description="Look up English words in the DBP Malay dictionary (prpm.dbp.gov.my).",
    )
    parser.add_argument("word", nargs="?", help="Word to search for.")
    parser.add_argument("--word", dest="word_option", metavar="WORD", help="Word to search for.")
    parser.add_argument(
        "--delay",
        type=int,
        default=settings.delay_ms,
        metavar="MS",
        help="Delay before each request in milliseconds (default: %(default)s).",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=settings.timeout_ms,
        metavar="MS",
        help="Request timeout in milliseconds (default: %(default)s).",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=settings.retries,
        metavar="N",
        help="Number of attempts per request (default: %(default)s).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show full results including proverbs and thesaurus.",
    )
    parser.add_argument("-j", "--json", action="store_true", help="Output JSON.")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log verbosity written to stderr (default: %(default)s).",
    )
    return parser


def format_result(result: SearchResult) -> str:
    """Human-readable rendering of a full search result."""
    if not result.has_results:
        return "No results found"

    lines = ["", "Definitions:"]
    for index, entry in enumerate(result.definitions, start=1):
        lines.append("")
        lines.append(f"   {index}. {entry.word}")
        if entry.phonetic:
            lines.append(f"      Phonetic: [{entry.phonetic}]")
        if entry.jawi:
            lines.append(f"      Jawi: {entry.jawi}")
        if entry.part_of_speech:
            lines.append(f"      Part of Speech: {entry.part_of_speech}")
        if entry.context:
            lines.append(f"      Context: {entry.context}")
        lines.append(f"      Malay: {entry.malay_definition}")
        lines.append(f"      Source: {entry.source}")

    if result.related_services:
        lines += ["", "Related Services:"]
        for service in result.related_services:
            lines.append(f"   {service.name} ({service.count} results)")

    if result.peribahasa:
        lines += ["", "Peribahasa (Proverbs):"]
        for proverb in result.peribahasa:
            lines += [
                f"   {proverb.malay_text}",
                f"   {proverb.english_text}",
                f"   {proverb.explanation}",
                "",
            ]

    if result.tesaurus:
        lines += ["", "Tesaurus:", f"   {result.tesaurus}"]

    return "\n".join(lines)


async def _run(args: argparse.Namespace, word: str) -> None:
    async with MalayDictionary(
        timeout=args.timeout, delay=args.delay, retries=args.retries
    ) as dictionary:
        if args.verbose:
            result = await dictionary.search(
                word,
                SearchOptions(include_peribahasa=True, include_tesaurus=True),
            )
            if args.json:
                print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            else:
                print(format_result(result))
            return

        definition = await dictionary.get_definition(word)
        if args.json:
            print(json.dumps({"word": word, "definition": definition}, indent=2, ensure_ascii=False))
        elif definition:
            print(f"Definition: {definition}")
        else:
            print("No definition found")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``malay-dictionary`` console script.

    Returns:
        Process exit code.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    word = args.word_option or args.word
    if not word:
        print("Error: No word specified", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    if not args.json:
        print(f'Searching for: "{word}"')

    try:
        asyncio.run(_run(args, word))
    except (MalayDictionaryError, OptionsValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

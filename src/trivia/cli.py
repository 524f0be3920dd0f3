"""Command-line entry point: ``python -m trivia [question|categories|category ID]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import TriviaSettings
from .service import TriviaService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trivia", description="Query the jService trivia API.")
    subcommands = parser.add_subparsers(dest="command")

    subcommands.add_parser("question", help="print one random clue as question|answer")

    categories = subcommands.add_parser("categories", help="list categories")
    categories.add_argument("--count", type=int, default=10)
    categories.add_argument("--offset", type=int, default=None)

    category = subcommands.add_parser("category", help="show one category and its clues")
    category.add_argument("category_id", type=int)

    return parser


def main(argv: Optional[Sequence[str]] = None, *, service: Optional[TriviaService] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = TriviaSettings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    service = service or TriviaService.from_settings(settings)
    command = args.command or "question"

    try:
        if command == "categories":
            categories = service.categories(args.count, args.offset)
            for item in categories:
                print(f"{item.id}\t{item.title}")
            return 0 if categories else 1

        if command == "category":
            found = service.category(args.category_id)
            if found is None:
                return 1
            print(found.title)
            for clue in found.clues or []:
                print(clue.as_message())
            return 0

        message = service.load_trivia_question()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if message is None:
        return 1
    print(message)
    return 0

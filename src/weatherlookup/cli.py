# connects input (typed or argv city names) to the submission handler and the console presenter.

from __future__ import annotations
import argparse
from typing import List, Optional
from .client import OpenMeteoClient
from .config import Settings
from .handler import SubmissionHandler
from .presenter import ConsolePresenter
from .service import LookupFailure

PROMPT = "city> "
QUIT_WORDS = {"quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weatherlookup",
        description="Look up the current weather for a city via open-meteo.",
    )
    parser.add_argument("cities", nargs="*", help="city names; omit to start an interactive prompt")
    return parser


def interactive(handler: SubmissionHandler) -> None:
    while True:
        try:
            text = input(PROMPT)
        except EOFError:
            break
        if text.strip().lower() in QUIT_WORDS:
            break
        handler.submit(text)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    settings.configure_logging()

    presenter = ConsolePresenter()
    presenter.show_banner()

    failed = False
    with OpenMeteoClient(settings) as client:
        handler = SubmissionHandler(client, presenter)
        if not args.cities:
            interactive(handler)
            return 0
        # one submission per argument, strictly one after the other
        for city in args.cities:
            if isinstance(handler.submit(city), LookupFailure):
                failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())

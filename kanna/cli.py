"""
Kanna command line.

    kanna -w serendipity          look up a word
    kanna -w cat -w dog           several lookups, printed in order
    kanna -wl 10                  the 10 most recently seen words
    kanna -wl 10 --order frequent the 10 most frequently seen words
    kanna                         interactive: "w <word>", "wl [n]" or a bare word
"""

import argparse
import asyncio
import logging
import sys
from typing import Awaitable, Callable, Dict, IO, List, Optional

from kanna import __version__
from kanna.config.constants import DEFAULT_WORD_LIST_SIZE, LIST_COMMAND, LOOKUP_COMMAND
from kanna.config.settings import Settings, get_settings
from kanna.main import lifespan
from kanna.models.database import create_engine, init_db

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")

Flags = Dict[str, Callable[[str], Awaitable[None]]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kanna", description="Vocabulary lookup with a local cache")
    parser.add_argument("-w", dest="words", action="append", metavar="WORD",
                        help="look up WORD (repeatable)")
    parser.add_argument("-wl", dest="list_count", nargs="?", const=str(DEFAULT_WORD_LIST_SIZE),
                        metavar="N", help=f"list N cached words (default {DEFAULT_WORD_LIST_SIZE})")
    parser.add_argument("--order", choices=("recent", "frequent"),
                        help="word list order (default from WORD_LIST_ORDER)")
    parser.add_argument("--no-audio", action="store_true", help="do not play pronunciations")
    parser.add_argument("--init-db", action="store_true", help="create the database tables and exit")
    parser.add_argument("--debug", action="store_true", help="log to stderr and echo SQL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_interactive_line(line: str) -> Optional[tuple]:
    """
    Turn one interactive input line into (command, argument).

    Returns:
        None for blank lines; ("quit", "") for quit words
    """
    line = line.strip()
    if not line:
        return None
    if line.lower() in QUIT_WORDS:
        return ("quit", "")

    head, _, rest = line.partition(" ")
    if head in (LOOKUP_COMMAND, LIST_COMMAND):
        return (head, rest.strip())
    return (LOOKUP_COMMAND, line)


async def submit_arguments(flags: Flags, args: argparse.Namespace) -> None:
    for word in args.words or []:
        await flags[LOOKUP_COMMAND](word.strip())
    if args.list_count is not None:
        await flags[LIST_COMMAND](args.list_count)


async def interactive(flags: Flags, join: Callable[[], Awaitable[None]], stdin: IO[str], stdout: IO[str]) -> None:
    """Read commands from ``stdin`` until EOF or a quit word."""
    while True:
        stdout.write("> ")
        stdout.flush()
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            stdout.write("\n")
            return

        parsed = parse_interactive_line(line)
        if parsed is None:
            continue
        command, argument = parsed
        if command == "quit":
            return

        await flags[command](argument)
        await join()


async def initialize_database(settings: Settings) -> None:
    settings.ensure_directories()
    engine = create_engine(settings)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


async def run(args: argparse.Namespace, stdin: IO[str] = sys.stdin, stdout: IO[str] = sys.stdout) -> int:
    overrides = {}
    if args.no_audio:
        overrides["AUDIO_ENABLED"] = False
    if args.order:
        overrides["WORD_LIST_ORDER"] = args.order
    if args.debug:
        overrides["DEBUG"] = True
    settings = get_settings(**overrides)

    if args.init_db:
        await initialize_database(settings)
        stdout.write(f"Database ready at {settings.DATABASE_URL}\n")
        return 0

    async with lifespan(settings, stdout) as context:
        dispatcher = context.dispatcher
        flags = dispatcher.register_flags()
        if args.words or args.list_count is not None:
            await submit_arguments(flags, args)
        else:
            await interactive(flags, dispatcher.join, stdin, stdout)
        await dispatcher.join()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())

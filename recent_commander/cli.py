import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .app import ADD, CLEAN, FORGET, OPEN, STATS, VALIDATE, AppController
from .config import APP_NAME, VERSION, load_config
from .errors import InvalidArgumentError, MruError
from .logger import LOGGER_NAME, configure_logging

log = logging.getLogger(LOGGER_NAME)


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad input; we report it like any other failure."""

    def error(self, message):
        raise InvalidArgumentError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=APP_NAME,
        usage=f"{APP_NAME} [OPTIONS] <ARGS...>",
        description="A faster way to open your files",
    )
    parser.add_argument("-a", dest="action", action="store_const", const=ADD, help="Add entries to the database")
    parser.add_argument("-c", dest="action", action="store_const", const=CLEAN, help="Clean the database")
    parser.add_argument("-d", dest="action", action="store_const", const=FORGET, help="Remove entries from the database")
    parser.add_argument("-q", dest="quiet", action="store_true", help="Do not write anything but listings")
    parser.add_argument("-s", dest="action", action="store_const", const=STATS, help="Print MRU files")
    parser.add_argument("-t", dest="action", action="store_const", const=VALIDATE, help="Validate the database")
    parser.add_argument("-V", action="version", version=f"{APP_NAME} {VERSION}")
    parser.add_argument("args", nargs="*", metavar="ARGS", help="Patterns to search, or files for -a/-d")
    parser.set_defaults(action=OPEN)
    return parser


def _wants_quiet(argv: Sequence[str]) -> bool:
    """Look for -q before argparse runs, so its own errors can be silenced too."""
    for arg in argv:
        if arg == "--":
            break
        if arg.startswith("-") and not arg.startswith("--") and "q" in arg[1:]:
            return True
    return False


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    configure_logging(quiet=_wants_quiet(argv))

    try:
        ns = build_parser().parse_intermixed_args(argv)
        configure_logging(quiet=ns.quiet)
        controller = AppController(load_config())
        return controller.run(ns.action, ns.args)
    except MruError as exc:
        log.error("%s", exc)
        return exc.exit_code
    except KeyboardInterrupt:
        print()
        return 1


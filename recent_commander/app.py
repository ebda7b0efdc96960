import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from .config import PEEK_SIZE, StoreConfig
from .editor import launch_editor
from .errors import InvalidArgumentError, NoMatchError
from .history import HistoryStore
from .picker import Picker, format_listing

log = logging.getLogger(__name__)

OPEN = "open"
ADD = "add"
CLEAN = "clean"
FORGET = "forget"
STATS = "stats"
VALIDATE = "validate"

ACTIONS = (OPEN, ADD, CLEAN, FORGET, STATS, VALIDATE)


class AppController:
    """Runs one command mode against the store and exits."""

    def __init__(
        self,
        config: StoreConfig,
        launcher: Callable[[str, str], int] = launch_editor,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.config = config
        self.store = HistoryStore(config)
        self.launcher = launcher
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self, action: str, args: Sequence[str]) -> int:
        if action not in ACTIONS:
            raise InvalidArgumentError(f"Unknown action '{action}'")
        if action in (CLEAN, STATS, VALIDATE) and args:
            raise InvalidArgumentError(f"Unexpected arguments: {' '.join(args)}")
        if action == CLEAN:
            self.clean()
            return 0

        self.store.ensure()
        if action == ADD:
            self.add(args)
        elif action == FORGET:
            self.forget(args)
        elif action == STATS:
            self.stats()
        elif action == VALIDATE:
            self.validate()
        else:
            self.open(args)
        return 0

    # ---------- Modes ----------

    def add(self, paths: Sequence[str]):
        if not paths:
            raise InvalidArgumentError("No file given")
        for p in paths:
            self.store.insert(p)

    def forget(self, paths: Sequence[str]):
        if not paths:
            raise InvalidArgumentError("No entry given")
        removed = self.store.forget(paths)
        log.info("Removed %d %s", removed, "entry" if removed == 1 else "entries")

    def clean(self):
        self.store.drop()

    def stats(self):
        head, more = self.store.peek(PEEK_SIZE)
        for line in format_listing(head, more):
            print(line, file=self.stdout)

    def validate(self):
        removed = self.store.validate()
        log.info("Removed %d stale %s", removed, "entry" if removed == 1 else "entries")

    def open(self, patterns: Sequence[str]) -> Optional[str]:
        matches = self.store.search(patterns)
        if not matches:
            raise NoMatchError("Couldn't find any match")
        if len(matches) == 1:
            chosen = matches[0]
            log.info("%s", chosen)
        else:
            chosen = Picker(self.stdin, self.stdout).choose(matches)
            if chosen is None:
                return None
        entry = self.store.insert(chosen)
        self.launcher(self.config.editor, entry)
        return entry

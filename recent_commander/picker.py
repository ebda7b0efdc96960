import enum
import logging
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .config import PEEK_SIZE
from .errors import InvalidArgumentError

log = logging.getLogger(__name__)

PROMPT = "Select a file to open (q to abort): "
QUIT_INPUT = "q"


class PickerState(enum.Enum):
    PROMPTING = "prompting"
    VALIDATED = "validated"
    QUIT = "quit"


def format_listing(entries: Sequence[str], more: bool = False) -> List[str]:
    """Numbered ``[i] path`` lines, with a trailing ellipsis when truncated."""
    lines = [f"[{i}] {entry}" for i, entry in enumerate(entries, start=1)]
    if more:
        lines.append("...")
    return lines


def parse_selection(raw: str, count: int) -> int:
    """Turn user input into a 0-based index, or raise InvalidArgumentError."""
    text = raw.strip()
    try:
        n = int(text)
    except ValueError:
        raise InvalidArgumentError(f"Not a number: '{text}'") from None
    if not 1 <= n <= count:
        raise InvalidArgumentError(f"Choose a number between 1 and {count}")
    return n - 1


class Picker:
    """Numbered menu over search results.

    PROMPTING loops on invalid input; a valid number moves to VALIDATED,
    ``q`` or end of input moves to QUIT.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, limit: int = PEEK_SIZE):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.limit = limit
        self.state = PickerState.PROMPTING

    def _step(self, raw: Optional[str], count: int) -> Tuple[PickerState, Optional[int]]:
        if raw is None or raw.strip() == QUIT_INPUT:
            return PickerState.QUIT, None
        try:
            return PickerState.VALIDATED, parse_selection(raw, count)
        except InvalidArgumentError as exc:
            log.debug("Rejected selection: %s", exc)
            return PickerState.PROMPTING, None

    def _read(self) -> Optional[str]:
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def choose(self, matches: Sequence[str]) -> Optional[str]:
        shown = list(matches[:self.limit])
        for line in format_listing(shown, more=len(matches) > len(shown)):
            print(line, file=self.stdout)
        print(file=self.stdout)

        self.state = PickerState.PROMPTING
        index = None
        while self.state is PickerState.PROMPTING:
            self.state, index = self._step(self._read(), len(shown))

        if self.state is PickerState.QUIT:
            print(file=self.stdout)
            return None
        return shown[index]

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from PySide6 import QtCore

from .config import PEEK_SIZE, StoreConfig
from .errors import InvalidArgumentError, NotFoundError, StoreIOError

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def build_matcher(patterns: Iterable[str]) -> Optional[QtCore.QRegularExpression]:
    """Join ordered patterns with '.*' into one smart-case expression.

    Returns None when no non-empty pattern was given.
    """
    pattern = '.*'.join(p for p in patterns if p)
    if not pattern:
        return None
    options = QtCore.QRegularExpression.PatternOption.NoPatternOption
    if not any(c.isupper() for c in pattern):
        options = QtCore.QRegularExpression.PatternOption.CaseInsensitiveOption
    rx = QtCore.QRegularExpression(pattern, options)
    if not rx.isValid():
        raise InvalidArgumentError(f"Invalid pattern '{pattern}': {rx.errorString()}")
    return rx


def canonical_path(path: PathLike) -> str:
    """Absolute path with symlinks resolved; raises NotFoundError unless it is a regular file."""
    info = QtCore.QFileInfo(str(path))
    canonical = info.canonicalFilePath()
    if not canonical or not QtCore.QFileInfo(canonical).isFile():
        raise NotFoundError(f"File not found: {path}")
    return canonical


def _check_single_line(path: str):
    # a bare '\r' would split the entry for any universal-newline reader
    if "\n" in path or "\r" in path:
        raise InvalidArgumentError("Paths containing a line break can't be stored")


def is_regular_file(path: str) -> bool:
    return QtCore.QFileInfo(path).isFile()


class HistoryStore:
    # swapped out in tests to simulate a failed commit
    save_file_class = QtCore.QSaveFile

    def __init__(self, config: StoreConfig):
        self.config = config

    @property
    def path(self) -> Path:
        return self.config.store_path

    # ---------- Lifecycle ----------

    def ensure(self):
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreIOError(f"Couldn't create {directory}") from exc
        if self.path.is_file():
            return
        try:
            self.path.touch()
        except OSError as exc:
            raise StoreIOError(f"Couldn't create {self.path}") from exc

    def drop(self):
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreIOError(f"Couldn't remove {self.path}") from exc
        log.debug("Dropped %s", self.path)

    # ---------- Mutations ----------

    def insert(self, path: PathLike) -> str:
        _check_single_line(str(path))
        entry = canonical_path(path)
        _check_single_line(entry)
        items = [e for e in self._load() if e != entry]
        items.insert(0, entry)
        del items[self.config.max_entries:]
        self._save(items)
        return entry

    def forget(self, paths: Iterable[PathLike]) -> int:
        targets = set()
        for p in paths:
            targets.add(str(p))
            canonical = QtCore.QFileInfo(str(p)).canonicalFilePath()
            if canonical:
                targets.add(canonical)
        items = self._load()
        kept = [e for e in items if e not in targets]
        removed = len(items) - len(kept)
        if removed:
            self._save(kept)
        return removed

    def validate(self) -> int:
        items = self._load()
        kept = [e for e in items if is_regular_file(e)]
        self._save(kept)
        return len(items) - len(kept)

    # ---------- Queries ----------

    def entries(self) -> List[str]:
        return self._load()

    def peek(self, n: int = PEEK_SIZE) -> Tuple[List[str], bool]:
        head: List[str] = []
        for entry in self._iter_lines():
            if len(head) == n:
                return head, True
            head.append(entry)
        return head, False

    def iter_matches(self, patterns: Iterable[str]) -> Iterator[str]:
        rx = build_matcher(patterns)
        if rx is None:
            yield from self.peek(PEEK_SIZE)[0]
            return
        for entry in self._iter_lines():
            if rx.match(entry).hasMatch():
                yield entry

    def search(self, patterns: Iterable[str]) -> List[str]:
        return list(self.iter_matches(patterns))

    # ---------- Storage ----------

    def _iter_lines(self) -> Iterator[str]:
        try:
            with open(self.path, "r", encoding="utf-8", newline="\n") as f:
                for line in f:
                    line = line.rstrip("\n")
                    if line.endswith("\r"):
                        line = line[:-1]
                    if line:
                        yield line
        except FileNotFoundError:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreIOError(f"Couldn't read {self.path}") from exc

    def _load(self) -> List[str]:
        return list(self._iter_lines())

    def _save(self, items: List[str]):
        data = ''.join(e + '\n' for e in items).encode('utf-8')
        f = self.save_file_class(str(self.path))
        if not f.open(QtCore.QIODevice.OpenModeFlag.WriteOnly):
            raise StoreIOError(f"Couldn't write to the database: {f.errorString()}")
        if f.write(data) != len(data):
            f.cancelWriting()
            raise StoreIOError(f"Couldn't write to the database: {f.errorString()}")
        if not f.commit():
            raise StoreIOError(f"Couldn't write to the database: {f.errorString()}")
        log.debug("Wrote %d entries to %s", len(items), self.path)

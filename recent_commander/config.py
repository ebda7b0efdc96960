import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from PySide6 import QtCore

from .errors import InvalidArgumentError

APP_NAME = "recent-commander"
VERSION = "0.3.0"


def _data_root() -> Path:
    loc = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.StandardLocation.GenericDataLocation)
    if loc:
        return Path(loc)
    return Path.home() / ".local" / "share"


APP_DIR = _data_root() / "recent_commander"
HISTORY_PATH = APP_DIR / "recent.txt"
MAX_ITEMS = 10000
PEEK_SIZE = 9
DEFAULT_EDITOR = "vim"

ENV_DB = "RECENT_COMMANDER_DB"
ENV_SIZE = "RECENT_COMMANDER_SIZE"


@dataclass
class StoreConfig:
    store_path: Path = HISTORY_PATH
    max_entries: int = MAX_ITEMS
    editor: str = DEFAULT_EDITOR


def _editor_from(env: Mapping[str, str]) -> str:
    for name in ("VISUAL", "EDITOR"):
        value = (env.get(name) or '').strip()
        if value:
            return value
    return DEFAULT_EDITOR


def _size_from(env: Mapping[str, str]) -> int:
    raw = (env.get(ENV_SIZE) or '').strip()
    if not raw:
        return MAX_ITEMS
    try:
        size = int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{ENV_SIZE} must be a positive integer, got '{raw}'") from None
    if size < 1:
        raise InvalidArgumentError(f"{ENV_SIZE} must be a positive integer, got '{raw}'")
    return size


def load_config(env: Optional[Mapping[str, str]] = None) -> StoreConfig:
    """Build the store configuration, honouring environment overrides."""
    if env is None:
        env = os.environ
    db = (env.get(ENV_DB) or '').strip()
    store_path = Path(os.path.expanduser(db)) if db else HISTORY_PATH
    return StoreConfig(store_path=store_path, max_entries=_size_from(env), editor=_editor_from(env))

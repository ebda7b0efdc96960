import logging
import shlex
import subprocess
from typing import List

from .errors import InvalidArgumentError, StoreIOError

log = logging.getLogger(__name__)


def editor_command(editor: str, path: str) -> List[str]:
    try:
        argv = shlex.split(editor)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid editor command '{editor}'") from exc
    if not argv:
        raise InvalidArgumentError("No editor configured")
    return argv + [path]


def launch_editor(editor: str, path: str) -> int:
    """Run the editor on ``path`` and wait for it; its status is informational only."""
    argv = editor_command(editor, path)
    try:
        proc = subprocess.run(argv, check=False)
    except OSError as exc:
        raise StoreIOError(f"Couldn't launch editor {argv[0]}") from exc
    log.debug("%s exited with status %d", argv[0], proc.returncode)
    return proc.returncode

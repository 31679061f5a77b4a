"""Clipboard access for the compiled prompt.

Copying is best-effort: failure is reported through CopyResult and a warning
log, never raised, so the caller's session state is never affected.
"""

import shlex
import shutil
import subprocess

from pydantic import BaseModel, ConfigDict

from rephrazer.logging import get_logger
from rephrazer.settings import settings

logger = get_logger(__name__)

COPY_OK_MESSAGE = "Prompt copied to clipboard."
COPY_FAILED_MESSAGE = "Could not copy to clipboard. You can select and copy manually."

# Tried in order when no command is configured
_PLATFORM_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)


class CopyResult(BaseModel):
    """Outcome of a clipboard copy, with the message to show the user."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    message: str


def _detect_command() -> list[str] | None:
    """Return the first platform clipboard command found on PATH."""
    for cmd in _PLATFORM_COMMANDS:
        if shutil.which(cmd[0]):
            return list(cmd)
    return None


def _failed(reason: str) -> CopyResult:
    logger.warning(f"Clipboard copy failed: {reason}")
    return CopyResult(ok=False, message=COPY_FAILED_MESSAGE)


def copy_to_clipboard(text: str, command: str | None = None) -> CopyResult:
    """Pipe ``text`` into a clipboard command.

    Uses ``command`` if given, then REPHRAZER_CLIPBOARD_COMMAND, then the first
    platform tool found (pbcopy, wl-copy, xclip, xsel, clip).
    """
    configured = command or settings.clipboard_command
    try:
        argv = shlex.split(configured) if configured else _detect_command()
    except ValueError as e:
        return _failed(f"invalid clipboard command {configured!r}: {e}")
    if not argv:
        return _failed("no clipboard command available")

    try:
        result = subprocess.run(
            argv,
            input=text,
            capture_output=True,
            text=True,
            timeout=settings.clipboard_timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return _failed(f"'{argv[0]}' timed out after {settings.clipboard_timeout}s")
    except OSError as e:
        return _failed(f"'{argv[0]}' could not be started: {e}")

    if result.returncode != 0:
        return _failed(f"'{argv[0]}' exited with {result.returncode}: {result.stderr.strip()}")

    logger.info(f"Copied {len(text)} characters to clipboard via '{argv[0]}'")
    return CopyResult(ok=True, message=COPY_OK_MESSAGE)


__all__ = ["COPY_FAILED_MESSAGE", "COPY_OK_MESSAGE", "CopyResult", "copy_to_clipboard"]

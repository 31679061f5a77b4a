"""Session: the host-side owner of the current OptionState.

Every mutation replaces the held state and recompiles the document, so
``session.document`` always reflects the latest options.
"""

from collections.abc import Callable
from typing import Any

from rephrazer.clipboard import COPY_FAILED_MESSAGE, CopyResult, copy_to_clipboard
from rephrazer.logging import get_logger
from rephrazer.options import Level, OptionState, apply_preset, clear_options
from rephrazer.prompt_compiler import compile_prompt

logger = get_logger(__name__)

Copier = Callable[[str], CopyResult]


class Session:
    """Holds one OptionState for the duration of an editing session.

    Args:
        state: Initial options. Defaults to the all-default state.
        clipboard: Callable receiving the document text. Defaults to copy_to_clipboard.

    Example:
        >>> session = Session()
        >>> session.apply_preset("medium")
        >>> session.edit(audience="expert")
        >>> session.state.level
        <Level.CUSTOM: 'custom'>
    """

    def __init__(self, state: OptionState | None = None, clipboard: Copier | None = None):
        self._clipboard = clipboard or copy_to_clipboard
        self._state = state if state is not None else OptionState()
        self._document = compile_prompt(self._state)

    @property
    def state(self) -> OptionState:
        return self._state

    @property
    def document(self) -> str:
        return self._document

    @property
    def level(self) -> Level:
        return self._state.level

    def _replace(self, state: OptionState) -> OptionState:
        self._state = state
        self._document = compile_prompt(state)
        return state

    def edit(self, **changes: Any) -> OptionState:
        """Directly edit one or more fields. The level becomes custom."""
        return self._replace(self._state.edit(**changes))

    def set_text(self, text: str) -> OptionState:
        """Replace the source text."""
        return self.edit(source_text=text)

    def apply_preset(self, name: Level | str) -> OptionState:
        """Apply a preset, or clear the directives if it is already active."""
        return self._replace(apply_preset(name, self._state))

    def clear(self) -> OptionState:
        """Reset every directive field; output flags and text are kept."""
        return self._replace(clear_options(self._state))

    def copy(self) -> CopyResult:
        """Copy the current document. Never raises; failures come back as ``ok=False``."""
        try:
            return self._clipboard(self._document)
        except Exception as e:  # noqa: BLE001 — copy failures must not escape the session
            logger.warning(f"Clipboard copy failed: {e}")
            return CopyResult(ok=False, message=COPY_FAILED_MESSAGE)


__all__ = ["Session"]

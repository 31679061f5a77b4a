"""Common test fixtures."""

import pytest

from rephrazer.clipboard import COPY_FAILED_MESSAGE, COPY_OK_MESSAGE, CopyResult
from rephrazer.options import OptionState, apply_preset


class FakeClipboard:
    """Clipboard stand-in that records copied texts."""

    def __init__(self, *, ok: bool = True):
        self.ok = ok
        self.copied: list[str] = []

    def __call__(self, text: str) -> CopyResult:
        self.copied.append(text)
        return CopyResult(ok=self.ok, message=COPY_OK_MESSAGE if self.ok else COPY_FAILED_MESSAGE)


@pytest.fixture
def default_state() -> OptionState:
    return OptionState()


@pytest.fixture
def medium_state() -> OptionState:
    return apply_preset("medium")


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def failing_clipboard() -> FakeClipboard:
    return FakeClipboard(ok=False)

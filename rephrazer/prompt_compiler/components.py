"""Supporting class types for prompt directives: Rule and OutputRule."""

from textwrap import dedent
from typing import Any, ClassVar

MAX_RULE_LINES = 5


def _require_docstring(cls: type, *, kind: str) -> None:
    """Validate that a class has a non-empty docstring."""
    if cls.__doc__ is None or not cls.__doc__.strip():
        raise TypeError(f"{kind} '{cls.__name__}' must define a non-empty docstring")


def _require_text(cls: type, *, kind: str, max_lines: int | None = None) -> None:
    """Validate that a class defines a non-empty `text` ClassVar, optionally capped at max_lines."""
    value = cls.__dict__.get("text")
    if not isinstance(value, str):
        raise TypeError(f"{kind} '{cls.__name__}' must define 'text' as a ClassVar[str]")
    normalized = dedent(value).strip()
    if not normalized:
        raise TypeError(f"{kind} '{cls.__name__}' has empty 'text'")
    if max_lines is not None and len(normalized.splitlines()) > max_lines:
        raise TypeError(f"{kind} '{cls.__name__}' text exceeds {max_lines} lines")
    cls.text = normalized


class _Directive:
    """Shared base for Rule and OutputRule.

    Direct subclasses define a kind of directive; their own subclasses are the
    concrete directives and must carry a docstring and a ``text`` ClassVar (max 5 lines).
    """

    text: ClassVar[str]
    kind: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if _Directive in cls.__bases__:
            cls.kind = cls.__name__
            return
        _require_docstring(cls, kind=cls.kind)
        _require_text(cls, kind=cls.kind, max_lines=MAX_RULE_LINES)


class Rule(_Directive):
    """Base class for editing directives listed under "Rules:"."""


class OutputRule(_Directive):
    """Base class for output formatting constraints listed under "Output Rules:"."""


__all__ = ["MAX_RULE_LINES", "OutputRule", "Rule"]

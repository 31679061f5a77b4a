"""OptionState: the single option record compiled into a prompt."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from rephrazer.exceptions import OptionError

from .types import Audience, Clarity, LengthPolicy, Level, Meaning

# Fields a preset assigns. Output-shaping flags and the source text are never touched by presets.
DIRECTIVE_FIELDS: tuple[str, ...] = (
    "spelling_grammar",
    "syntax_refinement",
    "logical_coherence",
    "fact_check",
    "restructure",
    "style_enhance",
    "tone_adjust",
    "format_adjust",
    "clarity",
    "length_policy",
    "meaning",
    "audience",
)


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


class OptionState(BaseModel):
    """Complete set of editing options for one session.

    Every field has a default, so ``OptionState()`` is the "clear" state.
    Instances are immutable: use :meth:`edit` for direct edits and
    ``rephrazer.options.apply_preset`` for bulk preset assignment.

    ``level`` is informational only. It never influences the compiled prompt.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Level = Level.CUSTOM

    # Single-branch directives: contribute a rule only when enabled
    spelling_grammar: bool = False
    syntax_refinement: bool = False
    logical_coherence: bool = False
    fact_check: bool = False
    restructure: bool = False
    style_enhance: bool = False

    # Both-branch directives: enabled and disabled map to different rules
    tone_adjust: bool = False
    format_adjust: bool = False

    clarity: Clarity = Clarity.NONE
    length_policy: LengthPolicy = LengthPolicy.PRESERVE
    meaning: Meaning = Meaning.PRESERVE
    audience: Audience = Audience.UNCHANGED

    highlight_changes: bool = True
    append_final_comment: bool = False

    source_text: str = ""

    @field_validator("level", "clarity", "length_policy", "meaning", "audience", mode="before")
    @classmethod
    def _normalize_enum_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OptionState":
        """Build a validated state from a plain mapping such as a parsed YAML file.

        Raises:
            OptionError: If the mapping has unknown keys or invalid values.
        """
        if not isinstance(data, Mapping):
            raise OptionError(f"Options must be a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise OptionError(f"Invalid options: {_format_validation_error(e)}") from e

    def edit(self, **changes: Any) -> "OptionState":
        """Return a copy with the given fields changed and ``level`` reset to custom.

        The level becomes custom even when the resulting values match a preset.

        Raises:
            OptionError: On unknown field names, invalid values, or an attempt to set ``level``.
        """
        if "level" in changes:
            raise OptionError("'level' cannot be edited directly; apply a preset instead")
        unknown = sorted(set(changes) - set(type(self).model_fields))
        if unknown:
            raise OptionError(f"Unknown option(s): {', '.join(unknown)}")
        try:
            return type(self).model_validate({**self.model_dump(), **changes, "level": Level.CUSTOM})
        except ValidationError as e:
            raise OptionError(f"Invalid options: {_format_validation_error(e)}") from e


__all__ = ["DIRECTIVE_FIELDS", "OptionState"]

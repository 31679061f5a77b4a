"""Named presets: bulk assignment of every directive field.

Applying the preset that is already active clears the directives instead of
re-applying it, so a preset behaves like a toggle button.
"""

from types import MappingProxyType
from typing import Any

from rephrazer.exceptions import PresetError
from rephrazer.logging import get_logger

from .state import DIRECTIVE_FIELDS, OptionState
from .types import Audience, Clarity, LengthPolicy, Level, Meaning

logger = get_logger(__name__)

_PRESETS: MappingProxyType[Level, MappingProxyType[str, Any]] = MappingProxyType({
    Level.SOFT: MappingProxyType({
        "spelling_grammar": True,
        "syntax_refinement": True,
        "logical_coherence": False,
        "fact_check": False,
        "restructure": False,
        "style_enhance": False,
        "tone_adjust": False,
        "format_adjust": False,
        "clarity": Clarity.MINIMAL,
        "length_policy": LengthPolicy.PRESERVE,
        "meaning": Meaning.PRESERVE,
        "audience": Audience.UNCHANGED,
    }),
    Level.MEDIUM: MappingProxyType({
        "spelling_grammar": True,
        "syntax_refinement": True,
        "logical_coherence": True,
        "fact_check": True,
        "restructure": True,
        "style_enhance": True,
        "tone_adjust": False,
        "format_adjust": False,
        "clarity": Clarity.MODERATE,
        "length_policy": LengthPolicy.SLIGHT,
        "meaning": Meaning.ADAPT,
        "audience": Audience.UNCHANGED,
    }),
    Level.HARD: MappingProxyType({
        "spelling_grammar": True,
        "syntax_refinement": True,
        "logical_coherence": True,
        "fact_check": True,
        "restructure": True,
        "style_enhance": True,
        "tone_adjust": True,
        "format_adjust": True,
        "clarity": Clarity.FULL,
        "length_policy": LengthPolicy.FLEXIBLE,
        "meaning": Meaning.REWRITE,
        "audience": Audience.UNCHANGED,
    }),
})

# Import-time check: every preset assigns exactly the directive fields
for _level, _values in _PRESETS.items():
    if set(_values) != set(DIRECTIVE_FIELDS):
        raise TypeError(f"Preset '{_level}' must assign exactly: {', '.join(DIRECTIVE_FIELDS)}")

PRESET_NAMES: tuple[Level, ...] = tuple(_PRESETS)


def _resolve_preset(name: Level | str) -> Level:
    """Map a preset name (case-insensitive) to its Level, rejecting custom and unknown names."""
    try:
        level = Level(name.strip().lower() if isinstance(name, str) else name)
    except ValueError:
        raise PresetError(f"Unknown preset '{name}'. Available presets: {', '.join(PRESET_NAMES)}") from None
    if level not in _PRESETS:
        raise PresetError(f"'{level}' is not a preset. Available presets: {', '.join(PRESET_NAMES)}")
    return level


def preset_values(name: Level | str) -> dict[str, Any]:
    """Return the field assignments of a named preset."""
    return dict(_PRESETS[_resolve_preset(name)])


def clear_options(state: OptionState | None = None) -> OptionState:
    """Reset every directive field to its default and the level to custom.

    Output-shaping flags and the source text are kept.
    """
    base = state if state is not None else OptionState()
    defaults = {field: OptionState.model_fields[field].default for field in DIRECTIVE_FIELDS}
    return base.model_copy(update={**defaults, "level": Level.CUSTOM})


def apply_preset(name: Level | str, state: OptionState | None = None) -> OptionState:
    """Apply a named preset to ``state`` (or to the default state).

    Every directive field is overwritten, never merged. If ``state`` already has
    this preset active, the directives are cleared instead.

    Raises:
        PresetError: If ``name`` is not soft, medium or hard.
    """
    level = _resolve_preset(name)
    base = state if state is not None else OptionState()
    if base.level == level:
        logger.debug(f"Preset '{level}' already active, clearing options")
        return clear_options(base)
    logger.debug(f"Applying preset '{level}'")
    return base.model_copy(update={**_PRESETS[level], "level": level})


__all__ = ["PRESET_NAMES", "apply_preset", "clear_options", "preset_values"]

"""Option model and presets for prompt compilation."""

from .presets import PRESET_NAMES, apply_preset, clear_options, preset_values
from .state import DIRECTIVE_FIELDS, OptionState
from .types import Audience, Clarity, LengthPolicy, Level, Meaning

__all__ = [
    "DIRECTIVE_FIELDS",
    "PRESET_NAMES",
    "Audience",
    "Clarity",
    "LengthPolicy",
    "Level",
    "Meaning",
    "OptionState",
    "apply_preset",
    "clear_options",
    "preset_values",
]

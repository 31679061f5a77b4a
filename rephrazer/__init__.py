"""Rephrazer - compose prompts for rephrasing texts.

Choose editing directives (spelling, tone, clarity, length, meaning, audience,
output formatting), optionally apply a preset, and compile them into a single
instruction document for a text-rewriting model.

Quick Start:
    >>> from rephrazer import OptionState, apply_preset, compile_prompt
    >>>
    >>> state = apply_preset("medium").edit(source_text="Their going to the park.")
    >>> print(compile_prompt(state))
"""

from .clipboard import CopyResult, copy_to_clipboard
from .exceptions import OptionError, PresetError, RephrazerError
from .logging import get_logger, setup_logging
from .options import (
    Audience,
    Clarity,
    LengthPolicy,
    Level,
    Meaning,
    OptionState,
    apply_preset,
    clear_options,
    preset_values,
)
from .prompt_compiler import OutputRule, Rule, compile_prompt, render_preview, select_output_rules, select_rules
from .session import Session
from .settings import Settings, settings

__version__ = "0.1.0"

__all__ = [
    "Audience",
    "Clarity",
    "CopyResult",
    "LengthPolicy",
    "Level",
    "Meaning",
    "OptionError",
    "OptionState",
    "OutputRule",
    "PresetError",
    "RephrazerError",
    "Rule",
    "Session",
    "Settings",
    "apply_preset",
    "clear_options",
    "compile_prompt",
    "copy_to_clipboard",
    "get_logger",
    "preset_values",
    "render_preview",
    "select_output_rules",
    "select_rules",
    "settings",
    "setup_logging",
]

"""Prompt compiler: turns an OptionState into a rephrasing prompt.

Every directive is a documented Rule or OutputRule class; options select
which ones appear, and the renderer lays them out as bullet lists.
"""

from .components import OutputRule, Rule
from .directives import ALL_OUTPUT_RULES, ALL_RULES, select_output_rules, select_rules
from .render import TEXT_PLACEHOLDER, compile_prompt, render_preview

__all__ = [
    "ALL_OUTPUT_RULES",
    "ALL_RULES",
    "TEXT_PLACEHOLDER",
    "OutputRule",
    "Rule",
    "compile_prompt",
    "render_preview",
    "select_output_rules",
    "select_rules",
]

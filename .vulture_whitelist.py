"""Vulture whitelist — methods called by frameworks, not direct code."""

# Pydantic validators — called by Pydantic, not our code
from rephrazer.options.state import OptionState

OptionState._normalize_enum_value

# __init_subclass__ — called by Python
from rephrazer.prompt_compiler.components import OutputRule, Rule

Rule.__init_subclass__
OutputRule.__init_subclass__

# Add more as vulture reports false positives

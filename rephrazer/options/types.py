"""Closed value sets for option fields."""

from enum import StrEnum


class Level(StrEnum):
    """Provenance of the current option values.

    CUSTOM after any direct edit; a named value only right after a preset is applied.
    """

    CUSTOM = "custom"
    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"


class Clarity(StrEnum):
    """How freely the text may be reworded for clarity."""

    NONE = "none"
    MINIMAL = "minimal"
    MODERATE = "moderate"
    FULL = "full"


class LengthPolicy(StrEnum):
    """Allowed change in text length."""

    PRESERVE = "preserve"
    SLIGHT = "slight"
    SHORTER = "shorter"
    LONGER = "longer"
    FLEXIBLE = "flexible"


class Meaning(StrEnum):
    """How far the rewrite may depart from the original meaning."""

    PRESERVE = "preserve"
    ADAPT = "adapt"
    REWRITE = "rewrite"


class Audience(StrEnum):
    """Target reader of the rewritten text."""

    UNCHANGED = "unchanged"
    GENERAL = "general"
    LAYMAN = "layman"
    EXPERT = "expert"


__all__ = ["Audience", "Clarity", "LengthPolicy", "Level", "Meaning"]

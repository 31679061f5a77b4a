"""Directive catalogue: every rule line a prompt can contain, and how options select them.

Rules are emitted in catalogue order:
basics, structure and accuracy, tone and format, clarity, length, meaning, audience.
"""

from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from rephrazer.options import Audience, Clarity, LengthPolicy, Meaning, OptionState

from .components import OutputRule, Rule

E = TypeVar("E", bound=Enum)

# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------


class FixSpellingGrammar(Rule):
    """Enabled by spelling_grammar."""

    text = "Fix spelling, grammar, and punctuation."


class RefineSyntax(Rule):
    """Enabled by syntax_refinement."""

    text = "Improve syntax and minor wording to enhance readability without altering meaning unnecessarily."


# ---------------------------------------------------------------------------
# Structure & accuracy
# ---------------------------------------------------------------------------


class EnsureLogicalCoherence(Rule):
    """Enabled by logical_coherence."""

    text = "Ensure logical coherence and fix contradictions."


class FactCheck(Rule):
    """Enabled by fact_check. Sources are cited in the final comment when one is requested."""

    text = "Fact-check doubtful, technical, historical, or numerical statements. Correct inaccuracies. Cite sources in the final comment if corrections were made."


class AllowRestructure(Rule):
    """Enabled by restructure."""

    text = "You may restructure sentences for better flow."


class EnhanceStyle(Rule):
    """Enabled by style_enhance."""

    text = "Enhance style and vocabulary when it improves readability and precision."


# ---------------------------------------------------------------------------
# Tone & format (both branches always emit a line)
# ---------------------------------------------------------------------------


class AdjustTone(Rule):
    """tone_adjust enabled."""

    text = "Adjust tone if it improves quality and intent."


class PreserveTone(Rule):
    """tone_adjust disabled."""

    text = "Preserve the original tone."


class AdjustFormatting(Rule):
    """format_adjust enabled."""

    text = "You may adjust formatting and structure if it improves readability."


class PreserveFormatting(Rule):
    """format_adjust disabled."""

    text = "Preserve the original formatting and structure."


# ---------------------------------------------------------------------------
# Clarity
# ---------------------------------------------------------------------------


class ClarityMinimal(Rule):
    """clarity = minimal."""

    text = "Improve clarity minimally; only adjust phrasing where necessary."


class ClarityModerate(Rule):
    """clarity = moderate."""

    text = "Improve clarity and flow with moderate rewording and limited restructuring."


class ClarityFull(Rule):
    """clarity = full."""

    text = "Improve clarity with freedom to heavily rephrase and restructure when beneficial."


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


class KeepLength(Rule):
    """length_policy = preserve."""

    text = "Keep length approximately the same."


class SlightLengthChange(Rule):
    """length_policy = slight."""

    text = "Allow slight length adjustments (±15%)."


class PreferShorter(Rule):
    """length_policy = shorter."""

    text = "Prefer a shorter version while retaining key information."


class AllowLonger(Rule):
    """length_policy = longer."""

    text = "Allow a longer version if needed for clarity."


class FlexibleLength(Rule):
    """length_policy = flexible."""

    text = "Length is flexible; shorten or expand as needed for quality."


# ---------------------------------------------------------------------------
# Meaning
# ---------------------------------------------------------------------------


class PreserveMeaning(Rule):
    """meaning = preserve."""

    text = "Keep the main meaning and purpose the same."


class AdaptMeaning(Rule):
    """meaning = adapt."""

    text = "If the original is flawed or ambiguous, adapt wording slightly to clarify without changing the core message."


class RewriteCreatively(Rule):
    """meaning = rewrite."""

    text = "You may rewrite creatively while keeping the core message."


# ---------------------------------------------------------------------------
# Audience
# ---------------------------------------------------------------------------


class GeneralAudience(Rule):
    """audience = general."""

    text = "Write for a general audience."


class LaymanAudience(Rule):
    """audience = layman."""

    text = "Explain for non-experts (layman-friendly)."


class ExpertAudience(Rule):
    """audience = expert."""

    text = "Write for an expert audience (precise and concise)."


# ---------------------------------------------------------------------------
# Output rules
# ---------------------------------------------------------------------------


class ReturnTextOnly(OutputRule):
    """Always present."""

    text = "Return the corrected text only."


class HighlightChangesBold(OutputRule):
    """highlight_changes enabled. Nothing is emitted when disabled."""

    text = "Highlight every change by making only the changed word(s) **bold**."


class AddFinalComment(OutputRule):
    """append_final_comment enabled."""

    text = "After the text, add a short *final comment* in italic, placed after a line with three dashes (---). Summarize what changed and why; if factual corrections were made, cite sources."


class NoExplanation(OutputRule):
    """append_final_comment disabled."""

    text = "Do not include any explanation or final comment."


# ---------------------------------------------------------------------------
# Selection tables
# ---------------------------------------------------------------------------


def _check_exhaustive(table: dict[E, type[Rule] | None], enum_cls: type[E], *, name: str) -> MappingProxyType[E, type[Rule] | None]:
    """Reject a lookup table that does not map every enum member exactly once."""
    missing = [member.value for member in enum_cls if member not in table]
    if missing:
        raise TypeError(f"Lookup table '{name}' is missing {enum_cls.__name__} value(s): {', '.join(missing)}")
    extra = [key for key in table if not isinstance(key, enum_cls)]
    if extra:
        raise TypeError(f"Lookup table '{name}' has keys that are not {enum_cls.__name__}: {extra!r}")
    return MappingProxyType(table)


# Single-branch flags in emission order
SINGLE_BRANCH_RULES: tuple[tuple[str, type[Rule]], ...] = (
    ("spelling_grammar", FixSpellingGrammar),
    ("syntax_refinement", RefineSyntax),
    ("logical_coherence", EnsureLogicalCoherence),
    ("fact_check", FactCheck),
    ("restructure", AllowRestructure),
    ("style_enhance", EnhanceStyle),
)

# Both-branch flags: (field, rule when enabled, rule when disabled)
BOTH_BRANCH_RULES: tuple[tuple[str, type[Rule], type[Rule]], ...] = (
    ("tone_adjust", AdjustTone, PreserveTone),
    ("format_adjust", AdjustFormatting, PreserveFormatting),
)

# None values are no-op sentinels that suppress the line
CLARITY_RULES = _check_exhaustive(
    {
        Clarity.NONE: None,
        Clarity.MINIMAL: ClarityMinimal,
        Clarity.MODERATE: ClarityModerate,
        Clarity.FULL: ClarityFull,
    },
    Clarity,
    name="CLARITY_RULES",
)

LENGTH_RULES = _check_exhaustive(
    {
        LengthPolicy.PRESERVE: KeepLength,
        LengthPolicy.SLIGHT: SlightLengthChange,
        LengthPolicy.SHORTER: PreferShorter,
        LengthPolicy.LONGER: AllowLonger,
        LengthPolicy.FLEXIBLE: FlexibleLength,
    },
    LengthPolicy,
    name="LENGTH_RULES",
)

MEANING_RULES = _check_exhaustive(
    {
        Meaning.PRESERVE: PreserveMeaning,
        Meaning.ADAPT: AdaptMeaning,
        Meaning.REWRITE: RewriteCreatively,
    },
    Meaning,
    name="MEANING_RULES",
)

AUDIENCE_RULES = _check_exhaustive(
    {
        Audience.UNCHANGED: None,
        Audience.GENERAL: GeneralAudience,
        Audience.LAYMAN: LaymanAudience,
        Audience.EXPERT: ExpertAudience,
    },
    Audience,
    name="AUDIENCE_RULES",
)

ALL_RULES: tuple[type[Rule], ...] = (
    *(rule for _, rule in SINGLE_BRANCH_RULES),
    *(rule for _, enabled, disabled in BOTH_BRANCH_RULES for rule in (enabled, disabled)),
    *(rule for rule in CLARITY_RULES.values() if rule is not None),
    *LENGTH_RULES.values(),
    *MEANING_RULES.values(),
    *(rule for rule in AUDIENCE_RULES.values() if rule is not None),
)

ALL_OUTPUT_RULES: tuple[type[OutputRule], ...] = (ReturnTextOnly, HighlightChangesBold, AddFinalComment, NoExplanation)


def select_rules(state: OptionState) -> tuple[type[Rule], ...]:
    """Return the rules enabled by ``state``, in catalogue order."""
    rules: list[type[Rule]] = [rule for field, rule in SINGLE_BRANCH_RULES if getattr(state, field)]
    rules.extend(enabled if getattr(state, field) else disabled for field, enabled, disabled in BOTH_BRANCH_RULES)
    for rule in (
        CLARITY_RULES[state.clarity],
        LENGTH_RULES[state.length_policy],
        MEANING_RULES[state.meaning],
        AUDIENCE_RULES[state.audience],
    ):
        if rule is not None:
            rules.append(rule)
    return tuple(rules)


def select_output_rules(state: OptionState) -> tuple[type[OutputRule], ...]:
    """Return the output rules for ``state``: text only, highlight policy, final-comment policy."""
    rules: list[type[OutputRule]] = [ReturnTextOnly]
    if state.highlight_changes:
        rules.append(HighlightChangesBold)
    rules.append(AddFinalComment if state.append_final_comment else NoExplanation)
    return tuple(rules)


__all__ = [
    "ALL_OUTPUT_RULES",
    "ALL_RULES",
    "AUDIENCE_RULES",
    "BOTH_BRANCH_RULES",
    "CLARITY_RULES",
    "LENGTH_RULES",
    "MEANING_RULES",
    "SINGLE_BRANCH_RULES",
    "select_output_rules",
    "select_rules",
]

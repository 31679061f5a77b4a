"""Rendering logic: compile an OptionState into the prompt document."""

from rephrazer.logging import get_logger
from rephrazer.options import OptionState

from .components import OutputRule, Rule
from .directives import select_output_rules, select_rules

logger = get_logger(__name__)

HEADER = "You will rephrase the provided text using the following rules."
RULES_HEADING = "Rules:"
OUTPUT_RULES_HEADING = "Output Rules:"
TEXT_HEADING = "Text to rephrase:"
FENCE = "```"
TEXT_PLACEHOLDER = "[PASTE TEXT HERE]"
BULLET = "- "


def _format_bullets(rules: tuple[type[Rule], ...] | tuple[type[OutputRule], ...]) -> str:
    """Format rule texts as a bullet list, one rule per line."""
    return "\n".join(f"{BULLET}{rule_cls.text}" for rule_cls in rules)


def compile_prompt(state: OptionState) -> str:
    """Compile ``state`` into the prompt document.

    Rendering order: Header -> Rules -> Output Rules -> fenced source text.
    Deterministic and total: every state compiles, equal states give identical output.
    An empty source text is replaced by a placeholder so the fenced block is never empty.
    """
    rules = select_rules(state)
    output_rules = select_output_rules(state)
    text = state.source_text or TEXT_PLACEHOLDER

    sections = [
        HEADER,
        f"{RULES_HEADING}\n{_format_bullets(rules)}",
        f"{OUTPUT_RULES_HEADING}\n{_format_bullets(output_rules)}",
        f"{TEXT_HEADING}\n\n{FENCE}\n{text}\n{FENCE}",
    ]
    logger.debug(f"Compiled prompt with {len(rules)} rule(s) and {len(output_rules)} output rule(s)")
    return "\n\n".join(sections)


def render_preview() -> str:
    """Compile the default state, showing the placeholder in place of source text."""
    return compile_prompt(OptionState())


__all__ = [
    "FENCE",
    "HEADER",
    "OUTPUT_RULES_HEADING",
    "RULES_HEADING",
    "TEXT_HEADING",
    "TEXT_PLACEHOLDER",
    "compile_prompt",
    "render_preview",
]

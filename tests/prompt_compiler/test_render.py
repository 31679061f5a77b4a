"""Tests for prompt_compiler.render (compile_prompt)."""

import itertools

import pytest

from rephrazer.options import Audience, Clarity, LengthPolicy, Meaning, OptionState, apply_preset
from rephrazer.prompt_compiler.render import (
    FENCE,
    HEADER,
    OUTPUT_RULES_HEADING,
    RULES_HEADING,
    TEXT_HEADING,
    TEXT_PLACEHOLDER,
    compile_prompt,
    render_preview,
)

SINGLE_BRANCH_FIELDS = ("spelling_grammar", "syntax_refinement", "logical_coherence", "fact_check", "restructure", "style_enhance")


def _section_lines(document: str, heading: str) -> list[str]:
    """Return the bullet lines listed under a section heading."""
    block = document.split(f"{heading}\n", 1)[1].split("\n\n", 1)[0]
    return block.splitlines()


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def test_default_document_exact() -> None:
    expected = (
        "You will rephrase the provided text using the following rules.\n"
        "\n"
        "Rules:\n"
        "- Preserve the original tone.\n"
        "- Preserve the original formatting and structure.\n"
        "- Keep length approximately the same.\n"
        "- Keep the main meaning and purpose the same.\n"
        "\n"
        "Output Rules:\n"
        "- Return the corrected text only.\n"
        "- Highlight every change by making only the changed word(s) **bold**.\n"
        "- Do not include any explanation or final comment.\n"
        "\n"
        "Text to rephrase:\n"
        "\n"
        "```\n"
        "[PASTE TEXT HERE]\n"
        "```"
    )
    assert compile_prompt(OptionState()) == expected


def test_render_preview_is_default_document() -> None:
    assert render_preview() == compile_prompt(OptionState())


@pytest.mark.parametrize("state", [OptionState(), apply_preset("soft"), apply_preset("hard"), OptionState(source_text="x")])
def test_document_contains_all_markers(state: OptionState) -> None:
    document = compile_prompt(state)
    assert document.startswith(HEADER)
    assert f"\n\n{RULES_HEADING}\n" in document
    assert f"\n\n{OUTPUT_RULES_HEADING}\n" in document
    assert f"\n\n{TEXT_HEADING}\n\n{FENCE}\n" in document
    assert document.endswith(f"\n{FENCE}")
    assert document.index(RULES_HEADING) < document.index(OUTPUT_RULES_HEADING) < document.index(TEXT_HEADING)


def test_empty_text_uses_placeholder() -> None:
    document = compile_prompt(OptionState(source_text=""))
    assert document.endswith(f"{FENCE}\n{TEXT_PLACEHOLDER}\n{FENCE}")


def test_multiline_text_is_kept_verbatim() -> None:
    text = "First paragraph.\n\n  Second, indented.  "
    assert compile_prompt(OptionState(source_text=text)).endswith(f"{FENCE}\n{text}\n{FENCE}")


def test_whitespace_text_is_not_placeholder() -> None:
    assert TEXT_PLACEHOLDER not in compile_prompt(OptionState(source_text=" "))


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def test_deterministic_for_equal_states() -> None:
    a = apply_preset("medium").edit(source_text="Same text.")
    b = apply_preset("medium").edit(source_text="Same text.")
    assert a is not b
    assert compile_prompt(a) == compile_prompt(b)


def test_level_is_not_rendered() -> None:
    hard = apply_preset("hard")
    assert compile_prompt(hard) == compile_prompt(hard.edit(tone_adjust=True))


@pytest.mark.parametrize("field", SINGLE_BRANCH_FIELDS)
def test_single_branch_toggle_adds_exactly_one_rule_line(field: str) -> None:
    off = OptionState()
    on = off.edit(**{field: True})
    off_doc, on_doc = compile_prompt(off), compile_prompt(on)

    off_rules = _section_lines(off_doc, RULES_HEADING)
    on_rules = _section_lines(on_doc, RULES_HEADING)
    assert len(on_rules) == len(off_rules) + 1
    added = [line for line in on_rules if line not in off_rules]
    assert len(added) == 1
    assert [line for line in on_rules if line != added[0]] == off_rules
    # Nothing else changes
    assert on_doc.replace(f"{added[0]}\n", "", 1) == off_doc
    # Toggling back removes exactly that line
    assert compile_prompt(on.edit(**{field: False})) == off_doc


@pytest.mark.parametrize(
    ("tone", "fmt"),
    list(itertools.product([True, False], repeat=2)),
)
def test_both_branch_lines_mutually_exclusive(tone: bool, fmt: bool) -> None:
    rules = _section_lines(compile_prompt(OptionState(tone_adjust=tone, format_adjust=fmt)), RULES_HEADING)
    tone_lines = {"- Adjust tone if it improves quality and intent.", "- Preserve the original tone."} & set(rules)
    format_lines = {
        "- You may adjust formatting and structure if it improves readability.",
        "- Preserve the original formatting and structure.",
    } & set(rules)
    assert len(tone_lines) == 1
    assert len(format_lines) == 1


def test_all_rule_lines_are_bullets() -> None:
    document = compile_prompt(apply_preset("hard").edit(audience="layman", append_final_comment=True))
    for heading in (RULES_HEADING, OUTPUT_RULES_HEADING):
        assert all(line.startswith("- ") for line in _section_lines(document, heading))


def test_total_over_sampled_combinations() -> None:
    for clarity, length, meaning, audience in itertools.product(Clarity, LengthPolicy, Meaning, Audience):
        state = OptionState(clarity=clarity, length_policy=length, meaning=meaning, audience=audience)
        rules = _section_lines(compile_prompt(state), RULES_HEADING)
        expected = 4 + (clarity != Clarity.NONE) + (audience != Audience.UNCHANGED)
        assert len(rules) == expected


def test_rule_order() -> None:
    state = OptionState(
        spelling_grammar=True,
        style_enhance=True,
        tone_adjust=True,
        clarity=Clarity.MINIMAL,
        length_policy=LengthPolicy.SHORTER,
        meaning=Meaning.ADAPT,
        audience=Audience.GENERAL,
    )
    assert _section_lines(compile_prompt(state), RULES_HEADING) == [
        "- Fix spelling, grammar, and punctuation.",
        "- Enhance style and vocabulary when it improves readability and precision.",
        "- Adjust tone if it improves quality and intent.",
        "- Preserve the original formatting and structure.",
        "- Improve clarity minimally; only adjust phrasing where necessary.",
        "- Prefer a shorter version while retaining key information.",
        "- If the original is flawed or ambiguous, adapt wording slightly to clarify without changing the core message.",
        "- Write for a general audience.",
    ]


# ---------------------------------------------------------------------------
# Output rules
# ---------------------------------------------------------------------------


def test_no_highlight_omits_bold_line() -> None:
    output = _section_lines(compile_prompt(OptionState(highlight_changes=False)), OUTPUT_RULES_HEADING)
    assert output == ["- Return the corrected text only.", "- Do not include any explanation or final comment."]


def test_final_comment_replaces_no_explanation() -> None:
    output = _section_lines(compile_prompt(OptionState(append_final_comment=True)), OUTPUT_RULES_HEADING)
    assert output[-1].startswith("- After the text, add a short *final comment* in italic")
    assert "- Do not include any explanation or final comment." not in output


# ---------------------------------------------------------------------------
# Worked example
# ---------------------------------------------------------------------------


def test_spelling_example() -> None:
    state = OptionState(
        spelling_grammar=True,
        length_policy=LengthPolicy.PRESERVE,
        audience=Audience.UNCHANGED,
        highlight_changes=True,
        append_final_comment=False,
        source_text="Hi.",
    )
    document = compile_prompt(state)
    lines = document.splitlines()

    assert "- Fix spelling, grammar, and punctuation." in lines
    assert "- Keep length approximately the same." in lines
    assert "- Highlight every change by making only the changed word(s) **bold**." in lines
    assert "- Do not include any explanation or final comment." in lines
    assert document.endswith("```\nHi.\n```")
    assert not any("audience" in line for line in lines)

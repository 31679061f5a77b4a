"""CLI for building rephrasing prompts from options, presets and config files."""

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml

from .exceptions import RephrazerError
from .logging import setup_logging
from .options import PRESET_NAMES, Audience, Clarity, LengthPolicy, Level, Meaning, OptionState, apply_preset, preset_values
from .prompt_compiler import ALL_OUTPUT_RULES, ALL_RULES
from .session import Session

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# (flag, OptionState field, help)
_BOOL_FLAGS: tuple[tuple[str, str, str], ...] = (
    ("--spelling-grammar", "spelling_grammar", "Fix spelling, grammar and punctuation"),
    ("--syntax-refinement", "syntax_refinement", "Refine syntax and minor wording"),
    ("--logical-coherence", "logical_coherence", "Ensure logical coherence"),
    ("--fact-check", "fact_check", "Fact-check statements"),
    ("--restructure", "restructure", "Allow restructuring sentences"),
    ("--style-enhance", "style_enhance", "Enhance style and vocabulary"),
    ("--tone-adjust", "tone_adjust", "Adjust tone if helpful (otherwise preserve it)"),
    ("--format-adjust", "format_adjust", "Adjust formatting if helpful (otherwise preserve it)"),
    ("--highlight", "highlight_changes", "Highlight changes in bold"),
    ("--final-comment", "append_final_comment", "Add a final comment after the text"),
)

# (flag, OptionState field, enum)
_CHOICE_FLAGS: tuple[tuple[str, str, Any], ...] = (
    ("--clarity", "clarity", Clarity),
    ("--length", "length_policy", LengthPolicy),
    ("--meaning", "meaning", Meaning),
    ("--audience", "audience", Audience),
)


def _print_table(headers: list[str], rows: list[list[str]]) -> None:
    """Print an aligned text table."""
    if not rows:
        return
    widths = [max(len(h), *(len(row[i]) for row in rows)) for i, h in enumerate(headers)]
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths, strict=True))
    separator = "  ".join("-" * w for w in widths)
    print(header_line)
    print(separator)
    for row in rows:
        print("  ".join(val.ljust(w) for val, w in zip(row, widths, strict=True)))


def _load_config(path: Path) -> OptionState:
    """Load an OptionState from a YAML file. An empty file gives the default state."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RephrazerError(f"Cannot read config file '{path}': {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise RephrazerError(f"Config file '{path}' is not valid YAML: {e}") from e
    return OptionState.from_mapping(data or {})


def _read_source_text(args: argparse.Namespace) -> str | None:
    """Return text from --text or --file ('-' reads stdin), or None if neither was given."""
    if args.text is not None:
        return args.text
    if args.file is None:
        return None
    if args.file == "-":
        return sys.stdin.read()
    try:
        return Path(args.file).read_text(encoding="utf-8")
    except OSError as e:
        raise RephrazerError(f"Cannot read text file '{args.file}': {e.strerror or e}") from e


def _flag_changes(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the option fields explicitly set on the command line."""
    changes: dict[str, Any] = {}
    for _, field, _ in (*_BOOL_FLAGS, *_CHOICE_FLAGS):
        value = getattr(args, field)
        if value is not None:
            changes[field] = value
    return changes


def build_state(args: argparse.Namespace) -> OptionState:
    """Build the options in order: config file, source text, preset, individual flags.

    A one-shot build has no toggle: --preset always applies, even when the
    config file already names the same level. Individual flags are direct
    edits, so any flag resets the level to custom.
    """
    state = _load_config(args.config) if args.config else OptionState()

    text = _read_source_text(args)
    if text is not None:
        state = state.edit(source_text=text)

    if args.preset:
        state = apply_preset(args.preset, state.model_copy(update={"level": Level.CUSTOM}))

    changes = _flag_changes(args)
    if changes:
        state = state.edit(**changes)
    return state


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_build(args: argparse.Namespace) -> int:
    """Compile and print the prompt, optionally copying it to the clipboard."""
    session = Session(build_state(args))
    print(session.document)

    if args.copy:
        result = session.copy()
        print(result.message, file=sys.stdout if result.ok else sys.stderr)
    return 0


def _cmd_presets(args: argparse.Namespace) -> int:
    """List presets and the values they assign."""
    levels = list(PRESET_NAMES)
    values = {level: preset_values(level) for level in levels}
    fields = list(values[levels[0]])

    headers = ["Field", *(level.value for level in levels)]
    rows = [[field, *(_format_value(values[level][field]) for level in levels)] for field in fields]
    _print_table(headers, rows)
    return 0


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _cmd_rules(args: argparse.Namespace) -> int:
    """List every rule and output rule a prompt can contain."""
    print(f"Rules ({len(ALL_RULES)}):")
    for i, rule_cls in enumerate(ALL_RULES, 1):
        print(f"  {i}. {rule_cls.__name__}: {rule_cls.text}")
    print(f"\nOutput Rules ({len(ALL_OUTPUT_RULES)}):")
    for i, rule_cls in enumerate(ALL_OUTPUT_RULES, 1):
        print(f"  {i}. {rule_cls.__name__}: {rule_cls.text}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rephrazer", description="Build prompts for rephrasing texts")
    parser.add_argument("--log-level", type=str.upper, choices=_LOG_LEVELS, help="Log level override")
    subparsers = parser.add_subparsers(dest="command")

    # build
    build_parser = subparsers.add_parser("build", help="Compile a rephrasing prompt")
    build_parser.add_argument("--config", type=Path, help="YAML file with option values")
    build_parser.add_argument("--preset", choices=[level.value for level in PRESET_NAMES], help="Apply a named preset")
    for flag, field, help_text in _BOOL_FLAGS:
        build_parser.add_argument(flag, dest=field, action=argparse.BooleanOptionalAction, default=None, help=help_text)
    for flag, field, enum_cls in _CHOICE_FLAGS:
        build_parser.add_argument(flag, dest=field, choices=[member.value for member in enum_cls], default=None)
    text_group = build_parser.add_mutually_exclusive_group()
    text_group.add_argument("--text", help="Text to rephrase")
    text_group.add_argument("--file", help="File with the text to rephrase ('-' for stdin)")
    build_parser.add_argument("--copy", action="store_true", help="Also copy the prompt to the clipboard")

    # presets
    subparsers.add_parser("presets", help="List presets and their values")

    # rules
    subparsers.add_parser("rules", help="List all rules a prompt can contain")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(level=args.log_level)

    handlers = {"build": _cmd_build, "presets": _cmd_presets, "rules": _cmd_rules}
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except RephrazerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


__all__ = ["build_state", "main"]

#!/usr/bin/env python3
"""Showcase of Rephrazer features.

Demonstrates:
  - OptionState: immutable option record with total defaults
  - edit(): direct edits always reset the level to custom
  - apply_preset(): soft / medium / hard, re-applying the active preset clears it
  - compile_prompt(): deterministic option-to-prompt compilation
  - select_rules(): which directive classes a state enables
  - Session: host-side holder that recompiles on every change

No clipboard or network access required.

Usage:
  python examples/showcase.py
"""

from rephrazer import Level, OptionState, Session, apply_preset, compile_prompt, select_rules

# =============================================================================
# 1. Default state
# =============================================================================

print("=== Default prompt ===")
print(compile_prompt(OptionState()))

# =============================================================================
# 2. Presets and direct edits
# =============================================================================

medium = apply_preset("medium")
print(f"\nAfter medium preset: level={medium.level}")

edited = medium.edit(audience="expert")
print(f"After editing audience: level={edited.level}")

cleared = apply_preset("medium", medium)
print(f"Re-applying medium: level={cleared.level}, clarity={cleared.clarity}")

# =============================================================================
# 3. Rule selection
# =============================================================================

print("\n=== Rules enabled by hard preset ===")
for rule_cls in select_rules(apply_preset(Level.HARD)):
    print(f"  {rule_cls.__name__}: {rule_cls.text}")

# =============================================================================
# 4. Session
# =============================================================================

session = Session()
session.apply_preset("soft")
session.set_text("Their going too the park tomorow.")
session.edit(append_final_comment=True)

print("\n=== Session prompt ===")
print(session.document)

# SPDX-License-Identifier: Apache-2.0
"""Stop Words plugin for NeMo Data Designer.

Adds a ``stop-words`` column type that flags discouraged words and phrases
in text (``utilize``, ``just``, ``obviously`` ...) and suggests plain
replacements, keeping the capitalization of the original word. Matching is
whole-word only: hyphenated compounds and file names such as ``utilize.md``
are left alone.

Usage::

    from data_designer_stop_words import StopWordsColumnConfig

    builder.add_column(StopWordsColumnConfig(
        name="stop_words",
        target_columns=["article"],
        exclude=["just"],
    ))

The checker also works without Data Designer::

    from data_designer_stop_words import ScanOptions, fix_text

    fix_text("Utilize Elm", ScanOptions.from_options())  # "Use Elm"
"""

from data_designer_stop_words.config import StopWordsColumnConfig
from data_designer_stop_words.core import Fix, Match, ResultRecord, find_all, scan_text
from data_designer_stop_words.dictionary import Rule, default_rules, load_dict, parse_dict
from data_designer_stop_words.linter import ScanOptions, analyze_text, apply_fixes, fix_text, lint_text
from data_designer_stop_words.rules import build_rule_set, filter_rules

__all__ = [
    "Fix",
    "Match",
    "ResultRecord",
    "Rule",
    "ScanOptions",
    "StopWordsColumnConfig",
    "analyze_text",
    "apply_fixes",
    "build_rule_set",
    "default_rules",
    "filter_rules",
    "find_all",
    "fix_text",
    "lint_text",
    "load_dict",
    "parse_dict",
    "scan_text",
]

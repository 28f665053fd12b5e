"""Document-level linting and fixing on top of the per-node scanner."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

from data_designer_stop_words.core import ResultRecord, scan_text
from data_designer_stop_words.dictionary import Rule, RuleLike
from data_designer_stop_words.markdown import NodeKind, iter_text_nodes, resolve_skip_kinds
from data_designer_stop_words.rules import build_rule_set

logger = logging.getLogger(__name__)

DEFAULT_SKIP = ("BlockQuote",)


@dataclass(frozen=True)
class ScanOptions:
    """Everything a scan needs, resolved once per configuration."""

    rule_set: tuple[Rule, ...]
    skip: frozenset[NodeKind] = frozenset({NodeKind.BLOCK_QUOTE})

    @classmethod
    def from_options(
        cls,
        words: str | os.PathLike[str] | Iterable[RuleLike] = (),
        exclude: Iterable[RuleLike] = (),
        default_words: bool = True,
        skip: Iterable[str] = DEFAULT_SKIP,
    ) -> ScanOptions:
        return cls(
            rule_set=build_rule_set(default_words=default_words, words=words, exclude=exclude),
            skip=resolve_skip_kinds(skip),
        )


def lint_text(text: str, options: ScanOptions) -> list[ResultRecord]:
    """Scan every text run of ``text``.

    Offsets in the results are absolute, and results are ordered by position;
    matches at the same position keep rule order.
    """
    results: list[ResultRecord] = []
    for node in iter_text_nodes(text):
        records = scan_text(node.text, options.rule_set, skip=node.is_descendant_of(options.skip))
        results.extend(record.shifted(node.offset) for record in records)
    results.sort(key=lambda r: r.offset)
    return results


def apply_fixes(text: str, records: Iterable[ResultRecord]) -> str:
    """Apply the fixes carried by ``records``; a fix overlapping an earlier one is dropped."""
    fixes = sorted((r.fix for r in records if r.fix is not None), key=lambda f: f.range)
    parts: list[str] = []
    pos = 0
    for fix in fixes:
        start, end = fix.range
        if start < pos:
            logger.debug(f"Skipping overlapping fix {fix.text!r} at {start}:{end}")
            continue
        parts.append(text[pos:start])
        parts.append(fix.text)
        pos = end
    parts.append(text[pos:])
    return "".join(parts)


def fix_text(text: str, options: ScanOptions) -> str:
    return apply_fixes(text, lint_text(text, options))


def analyze_text(text: str, options: ScanOptions) -> dict:
    """Lint ``text`` and summarize the outcome.

    Args:
        text: The prose (Markdown) to check.
        options: Rule set and skip kinds, see :meth:`ScanOptions.from_options`.

    Returns:
        Dict with keys: issue_count, messages, violations, fixed_text.
    """
    records = lint_text(text, options)
    return {
        "issue_count": len(records),
        "messages": [r.message for r in records],
        "violations": [r.to_payload() for r in records],
        "fixed_text": apply_fixes(text, records),
    }

# Whole-word stop-word matching with case-preserving fixes.
#
# Each rule compiles to a pattern with explicit left and right boundary checks:
# no hyphen or word character on the left; a space, a sentence-final period,
# or the end of text on the right.

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from data_designer_stop_words.dictionary import Rule

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_APOSTROPHE_CLASS = "['’‘]"
# Preceded by start of text or a character that is neither a hyphen nor a word
# character; followed by a space, a period and a space, a final period, or the end.
_LEFT_BOUNDARY = r"(?:^|[^-\w])"
_RIGHT_BOUNDARY = r"(?= |\. |\.\Z|\Z)"


@lru_cache(maxsize=1024)
def get_pattern(term: str) -> re.Pattern[str]:
    """Compile the case-insensitive pattern matching ``term`` as a whole word."""
    word_pattern = _APOSTROPHE_CLASS.join(re.escape(part) for part in term.split("'"))
    return re.compile(f"{_LEFT_BOUNDARY}({word_pattern}){_RIGHT_BOUNDARY}", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Match:
    """One occurrence of a rule's term.

    ``matched`` spans ``start:end`` and includes the boundary character consumed
    before the term, if any; ``word`` is the term as written in the source.
    """

    rule: Rule
    start: int
    end: int
    matched: str
    word: str
    word_start: int

    @property
    def display(self) -> str:
        return self.matched.strip()


@dataclass(frozen=True)
class Fix:
    range: tuple[int, int]
    text: str


@dataclass(frozen=True)
class ResultRecord:
    offset: int
    message: str
    rule: Rule
    matched: str
    fix: Fix | None = None

    def to_payload(self) -> dict[str, object]:
        return {
            "type": "StopWord",
            "term": self.rule.term,
            "replacement": self.rule.replacement,
            "match": self.matched.strip(),
            "offset": self.offset,
            "message": self.message,
            "fix": None if self.fix is None else {"range": list(self.fix.range), "text": self.fix.text},
        }

    def shifted(self, delta: int) -> ResultRecord:
        """Same record with offsets moved by ``delta`` (node-relative to document-relative)."""
        if not delta:
            return self
        fix = None
        if self.fix is not None:
            start, end = self.fix.range
            fix = Fix(range=(start + delta, end + delta), text=self.fix.text)
        return ResultRecord(offset=self.offset + delta, message=self.message, rule=self.rule, matched=self.matched, fix=fix)


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


def find_all(rule: Rule, text: str) -> list[Match]:
    """All non-overlapping matches of ``rule.term`` in ``text``, left to right."""
    return [
        Match(
            rule=rule,
            start=m.start(),
            end=m.end(),
            matched=m.group(0),
            word=m.group(1),
            word_start=m.start(1),
        )
        for m in get_pattern(rule.term).finditer(text)
    ]


# ---------------------------------------------------------------------------
# Case-preserving replacement
# ---------------------------------------------------------------------------


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def clone_case(clone: str, original: str) -> str:
    """Capitalize the first letter of ``clone`` if ``original`` starts with a capital."""
    return upper_first(clone) if upper_first(original) == original else clone


def replace_match(match: Match, replacement: str) -> str:
    """The matched span with only the term swapped; the boundary character stays."""
    prefix = match.matched[: match.word_start - match.start]
    return prefix + clone_case(replacement, match.word)


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


def _to_record(match: Match) -> ResultRecord:
    rule = match.rule
    if rule.replacement is not None:
        return ResultRecord(
            offset=match.start,
            message=f'Avoid using "{rule.term}", use "{rule.replacement}" instead',
            rule=rule,
            matched=match.matched,
            fix=Fix(range=(match.start, match.end), text=replace_match(match, rule.replacement)),
        )
    return ResultRecord(
        offset=match.start,
        message=f'Avoid using "{match.display}"',
        rule=rule,
        matched=match.matched,
    )


def scan_text(text: str, rule_set: tuple[Rule, ...], skip: bool = False) -> list[ResultRecord]:
    """Report every match of every rule in ``text``.

    Results come in rule order, then left to right within a rule. A skipped node
    is not scanned at all.
    """
    if skip:
        return []
    return [_to_record(match) for rule in rule_set for match in find_all(rule, text)]

"""Build the ordered, filtered rule set used for a scan."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from data_designer_stop_words.dictionary import Rule, RuleLike, default_rules, load_dict

logger = logging.getLogger(__name__)

RuleSet = tuple[Rule, ...]


def normalize_rules(words: str | os.PathLike[str] | Iterable[RuleLike]) -> list[Rule]:
    """A string or path names a dictionary file; anything else is a sequence of rules."""
    if isinstance(words, (str, os.PathLike)):
        return load_dict(words)
    return [Rule.from_value(w) for w in words]


def _exclusion_key(value: RuleLike) -> tuple[str, ...]:
    return Rule.from_value(value).as_tuple()


def filter_rules(rules: Iterable[Rule], exclude: Iterable[RuleLike]) -> list[Rule]:
    """Drop rules structurally equal to an exclusion.

    A bare term only removes the rule with that term and no replacement; to drop
    ``utilize > use`` the exclusion has to name both sides.
    """
    excluded = {_exclusion_key(x) for x in exclude}
    return [rule for rule in rules if rule.as_tuple() not in excluded]


def build_rule_set(
    default_words: bool = True,
    words: str | os.PathLike[str] | Iterable[RuleLike] = (),
    exclude: Iterable[RuleLike] = (),
) -> RuleSet:
    """Built-in rules (optional) followed by ``words``, minus ``exclude``.

    Order is preserved: it decides the report order when several rules match the
    same text. Dictionary read errors surface here, before any scanning.
    """
    base = list(default_rules()) if default_words else []
    rule_set = tuple(filter_rules(base + normalize_rules(words), exclude))
    logger.debug(f"Built stop-word rule set with {len(rule_set)} rules (default_words={default_words})")
    return rule_set

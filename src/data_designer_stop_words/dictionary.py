"""Stop-word dictionaries: one rule per line, ``term`` or ``term > replacement``."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Union

logger = logging.getLogger(__name__)

DEFAULT_DICT_RESOURCE = "dict.txt"

_SEPARATOR_RE = re.compile(r"\s*>\s*")


@dataclass(frozen=True)
class Rule:
    """A discouraged ``term`` and the optional literal that should replace it."""

    term: str
    replacement: str | None = None

    def as_tuple(self) -> tuple[str, ...]:
        if self.replacement is None:
            return (self.term,)
        return (self.term, self.replacement)

    @classmethod
    def from_value(cls, value: RuleLike) -> Rule:
        """Coerce a bare term, a ``[term]`` / ``[term, replacement]`` sequence, or a Rule.

        Terms and replacements must be non-empty strings.
        """
        if isinstance(value, Rule):
            return value
        if isinstance(value, str):
            value = (value,)
        if isinstance(value, Sequence) and 1 <= len(value) <= 2 and all(isinstance(v, str) and v for v in value):
            return cls(*value)
        raise ValueError(f"Expected a term or a [term, replacement] pair, got {value!r}")


RuleLike = Union[Rule, str, Sequence[str]]


def _parse_line(line: str) -> Rule:
    parts = _SEPARATOR_RE.split(line, maxsplit=1)
    if len(parts) == 1 or not parts[1]:
        return Rule(parts[0])
    return Rule(parts[0], parts[1])


def parse_dict(contents: str) -> list[Rule]:
    """Parse dictionary text into rules, in file order.

    Blank and whitespace-only lines are ignored. Each remaining line is split on
    the first ``>`` only, so ``a > b > c`` suggests ``b > c`` for ``a``.
    """
    stripped = (line.strip() for line in contents.splitlines())
    return [_parse_line(line) for line in stripped if line]


def load_dict(path: str | os.PathLike[str]) -> list[Rule]:
    """Read and parse a UTF-8 dictionary file. Read errors propagate to the caller."""
    with open(path, encoding="utf-8") as fh:
        rules = parse_dict(fh.read())
    logger.debug(f"Loaded {len(rules)} stop-word rules from {os.fspath(path)!r}")
    return rules


@lru_cache(maxsize=None)
def default_rules() -> tuple[Rule, ...]:
    """Built-in dictionary shipped with the package, loaded once and shared."""
    contents = resources.files(__package__).joinpath(DEFAULT_DICT_RESOURCE).read_text(encoding="utf-8")
    return tuple(parse_dict(contents))

"""Split Markdown into the plain-text runs that get scanned.

This is a line-oriented walk, not a full CommonMark parser. It knows enough
structure to decide which runs sit inside a block quote, to leave fenced and
indented code alone, and to keep inline markup (code spans, URLs, link targets,
link definitions, emphasis markers) out of the scanned text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


class NodeKind(str, Enum):
    DOCUMENT = "Document"
    PARAGRAPH = "Paragraph"
    HEADER = "Header"
    BLOCK_QUOTE = "BlockQuote"
    LIST_ITEM = "ListItem"
    CODE_BLOCK = "CodeBlock"
    STR = "Str"


NODE_KINDS: dict[str, NodeKind] = {kind.value: kind for kind in NodeKind}


class UnknownNodeKindError(ValueError):
    """A configured skip name has no matching node kind."""


def resolve_skip_kinds(names: Iterable[str], kinds: Mapping[str, NodeKind] = NODE_KINDS) -> frozenset[NodeKind]:
    resolved = set()
    for name in names:
        if name not in kinds:
            raise UnknownNodeKindError(f"Unknown node kind {name!r}; expected one of {sorted(kinds)}")
        resolved.add(kinds[name])
    return frozenset(resolved)


@dataclass(frozen=True)
class TextNode:
    text: str
    offset: int
    ancestors: tuple[NodeKind, ...]

    def is_descendant_of(self, kinds: Iterable[NodeKind]) -> bool:
        return any(kind in self.ancestors for kind in kinds)


_FENCE_RE = re.compile(r"^\s{0,3}(```|~~~)")
_QUOTE_PREFIX_RE = re.compile(r"^\s{0,3}>\s?")
_HEADER_PREFIX_RE = re.compile(r"^#{1,6}\s+")
_LIST_PREFIX_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
_INDENTED_CODE_RE = re.compile(r"^(?: {4}|\t)")
_LINK_DEFINITION_RE = re.compile(r"^\s{0,3}\[[^\]\n]+\]:\s*\S")
# Inline markup that never belongs to a text run.
_INLINE_MARKUP_RE = re.compile(
    r"(?:[a-z][a-z0-9+.-]*://|www\.)[^\s<]*[^\s<.,:;!?\"')\]]"  # bare URL
    r"|`+[^`\n]*`+"  # code span
    r"|\]\([^)\n]*\)"  # link destination, including the closing bracket
    r"|<[a-z][a-z0-9+.-]*:[^>\s]*>"  # autolink
    r"|!?\["  # link / image opener
    r"|\]"
    r"|\*{1,3}"
    r"|(?<!\w)_{1,3}|_{1,3}(?!\w)",
    re.IGNORECASE,
)


def _split_inline(line: str, offset: int, ancestors: tuple[NodeKind, ...]) -> Iterator[TextNode]:
    pos = 0
    for m in _INLINE_MARKUP_RE.finditer(line):
        if m.start() > pos:
            yield TextNode(line[pos : m.start()], offset + pos, ancestors)
        pos = m.end()
    if pos < len(line):
        yield TextNode(line[pos:], offset + pos, ancestors)


def iter_text_nodes(text: str) -> Iterator[TextNode]:
    """Yield ``Str`` runs of ``text`` with their absolute offsets and ancestors."""
    offset = 0
    fence: str | None = None
    # Indented code may start the document or follow a blank line or more code.
    code_allowed = True
    for raw_line in text.splitlines(keepends=True):
        line_offset = offset
        offset += len(raw_line)
        line = raw_line.rstrip("\r\n")

        fence_match = _FENCE_RE.match(line)
        if fence is not None:
            if fence_match and fence_match.group(1) == fence:
                fence = None
                code_allowed = True
            continue
        if fence_match:
            fence = fence_match.group(1)
            continue
        if not line.strip():
            code_allowed = True
            continue
        if code_allowed and _INDENTED_CODE_RE.match(line):
            continue
        code_allowed = False

        ancestors: list[NodeKind] = [NodeKind.DOCUMENT]
        start = 0
        quote = _QUOTE_PREFIX_RE.match(line)
        while quote:
            ancestors.append(NodeKind.BLOCK_QUOTE)
            start += quote.end()
            quote = _QUOTE_PREFIX_RE.match(line[start:])

        body = line[start:]
        if _LINK_DEFINITION_RE.match(body):
            continue
        header = _HEADER_PREFIX_RE.match(body)
        list_item = _LIST_PREFIX_RE.match(body)
        if header:
            ancestors.append(NodeKind.HEADER)
            start += header.end()
        elif list_item:
            ancestors.append(NodeKind.LIST_ITEM)
            start += list_item.end()
        else:
            ancestors.append(NodeKind.PARAGRAPH)

        yield from _split_inline(line[start:], line_offset + start, tuple(ancestors))

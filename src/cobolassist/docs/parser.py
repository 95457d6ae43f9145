"""Documentation comment parsing.

Two dialects are recognized, and exactly one runs per comment block.

Structured dialect, selected when any line contains ``*>/**``::

      *>/**
      *> Computes the invoice total.
      *>
      *> @param WS-INVOICE invoice being totalled
      *> @return WS-TOTAL
      *> @throws INVALID-INVOICE when the invoice has no items
      *>*/

Freeform dialect, used otherwise::

      *>-> Computes the invoice total. <-<*

Structured blocks are parsed by a four-state machine:

    OUTSIDE  --opener-->  SUMMARY  --tag-->  TAGS
       ^                     |                 |
       |                   closer            closer
       |                     v                 v
       +---- (ignored) ---- CLOSED <-----------+
                              |
                            opener --> SUMMARY

Tag lines are recorded in both inside states; summary text only in SUMMARY.
Blank comment lines inside the summary contribute nothing.
"""

from __future__ import annotations

from enum import Enum

from cobolassist.config.constants import (
    COMMENT_MARKER,
    FREEFORM_DOC_CLOSER,
    FREEFORM_DOC_OPENER,
    STRUCTURED_DOC_CLOSER,
    STRUCTURED_DOC_OPENER,
)
from cobolassist.core.logging import get_logger
from cobolassist.docs.models import DocElement, DocumentationRecord
from cobolassist.source.comments import CommentBlock
from cobolassist.source.scanner import NAME_CHARS

log = get_logger("docs.parser")

PARAM_TAG = "@param"
RETURN_TAGS = frozenset({"@return", "@returns"})
THROWS_TAG = "@throws"
TERMINATOR_TAGS = frozenset({"@enum", "@optional", "@default", "@extends"})
"""Tags that end the summary but carry no data here."""


class DocState(Enum):
    """States of the structured documentation parser."""

    OUTSIDE = "outside"
    SUMMARY = "summary"
    TAGS = "tags"
    CLOSED = "closed"

    @property
    def inside(self) -> bool:
        return self in (DocState.SUMMARY, DocState.TAGS)


def is_structured(block: CommentBlock) -> bool:
    """True when the block uses the structured (tagged) dialect."""
    return any(STRUCTURED_DOC_OPENER in line for line in block)


def parse_documentation(block: CommentBlock) -> DocumentationRecord:
    """Parse a comment block into a documentation record."""
    if is_structured(block):
        return StructuredDocParser().parse(block)
    return _parse_freeform(block)


def _tag_of(line: str) -> tuple[str, str] | None:
    """Split a tag line into (tag, text after the tag).

    The tag must be the first token after the comment marker.
    """
    marker = line.find(COMMENT_MARKER)
    if marker < 0:
        return None
    body = line[marker + len(COMMENT_MARKER) :].strip()
    if not body.startswith("@"):
        return None
    parts = body.split(None, 1)
    return parts[0], parts[1] if len(parts) > 1 else ""


def _element_from(rest: str) -> DocElement | None:
    """Build an element from the text after a tag; None when there is no name."""
    text = rest.lstrip()
    end = 0
    while end < len(text) and text[end] in NAME_CHARS:
        end += 1
    if end == 0:
        return None
    return DocElement(name=text[:end], description=text[end:].strip())


class StructuredDocParser:
    """State machine over the lines of a structured documentation block.

    A parser instance handles one block; ``parse`` resets it first.
    """

    def __init__(self) -> None:
        self.state = DocState.OUTSIDE
        self._fragments: list[str] = []
        self._parameters: list[DocElement] = []
        self._returns: list[DocElement] = []
        self._throws: list[DocElement] = []

    def reset(self) -> None:
        self.state = DocState.OUTSIDE
        self._fragments = []
        self._parameters = []
        self._returns = []
        self._throws = []

    def parse(self, block: CommentBlock) -> DocumentationRecord:
        self.reset()
        for line in block:
            self.feed(line)
        return self.record()

    def feed(self, line: str) -> DocState:
        """Consume one line and return the resulting state."""
        trimmed = line.strip()
        if trimmed.startswith(STRUCTURED_DOC_OPENER):
            self.state = DocState.SUMMARY
            return self.state
        if not self.state.inside:
            return self.state
        if trimmed.startswith(STRUCTURED_DOC_CLOSER):
            self.state = DocState.CLOSED
            return self.state

        tagged = _tag_of(line)
        if tagged is not None:
            tag, rest = tagged
            target = self._target_for(tag)
            if target is not None or tag in TERMINATOR_TAGS:
                self.state = DocState.TAGS
                if target is not None:
                    self._append(target, tag, rest)
                return self.state

        if self.state is DocState.SUMMARY:
            fragment = line.replace(COMMENT_MARKER, "", 1).strip()
            if fragment:
                self._fragments.append(fragment)
        return self.state

    def record(self) -> DocumentationRecord:
        return DocumentationRecord(
            summary=" ".join(self._fragments),
            parameters=tuple(self._parameters),
            returns=tuple(self._returns),
            throws=tuple(self._throws),
        )

    def _target_for(self, tag: str) -> list[DocElement] | None:
        if tag == PARAM_TAG:
            return self._parameters
        if tag in RETURN_TAGS:
            return self._returns
        if tag == THROWS_TAG:
            return self._throws
        return None

    def _append(self, target: list[DocElement], tag: str, rest: str) -> None:
        element = _element_from(rest)
        if element is None:
            log.debug("doc_tag_without_name", tag=tag)
            return
        target.append(element)


def _strip_trailing_dots(text: str) -> str:
    while text.endswith("."):
        text = text[:-1]
    return text


def _parse_freeform(block: CommentBlock) -> DocumentationRecord:
    fragments: list[str] = []
    for line in block:
        if not line.strip().startswith(FREEFORM_DOC_OPENER):
            continue
        text = line.replace(FREEFORM_DOC_OPENER, "", 1).replace(FREEFORM_DOC_CLOSER, "", 1).strip()
        text = _strip_trailing_dots(text)
        if text:
            fragments.append(text)
    return DocumentationRecord(summary=" ".join(fragments))

"""Declaration index: name -> completion-ready record for one buffer."""

from __future__ import annotations

from dataclasses import dataclass

from cobolassist.core.logging import get_logger
from cobolassist.docs.models import DocumentationRecord
from cobolassist.docs.parser import parse_documentation
from cobolassist.source.buffer import SourceBuffer
from cobolassist.source.comments import extract_comment_block
from cobolassist.source.scanner import PARAGRAPH, DeclarationKind, DeclarationPattern, scan

log = get_logger("completion.index")


@dataclass(frozen=True, slots=True)
class DeclarationRecord:
    """A declaration ready to be offered as a completion."""

    name: str
    insertion_text: str
    documentation: DocumentationRecord
    kind: DeclarationKind = DeclarationKind.PARAGRAPH
    line_index: int = 0


DeclarationIndex = dict[str, DeclarationRecord]
"""Declarations keyed by literal name, in order of first appearance."""


def build_index(buffer: SourceBuffer, pattern: DeclarationPattern = PARAGRAPH) -> DeclarationIndex:
    """Scan ``buffer`` and index every declaration matching ``pattern``.

    The first declaration of a name wins; later duplicates are ignored.
    """
    index: DeclarationIndex = {}
    duplicates = 0
    for occurrence in scan(buffer, pattern):
        if occurrence.name in index:
            duplicates += 1
            continue
        block = extract_comment_block(buffer, occurrence.line_index)
        index[occurrence.name] = DeclarationRecord(
            name=occurrence.name,
            insertion_text=occurrence.name,
            documentation=parse_documentation(block),
            kind=pattern.kind,
            line_index=occurrence.line_index,
        )
    log.debug(
        "index_built",
        kind=pattern.kind.value,
        lines=len(buffer),
        declarations=len(index),
        duplicates=duplicates,
    )
    return index


def merge_missing(primary: DeclarationIndex, secondary: DeclarationIndex) -> DeclarationIndex:
    """Return ``primary`` extended with the entries of ``secondary`` it lacks.

    Entries already in ``primary`` are never replaced. Neither input is mutated.
    """
    merged = dict(primary)
    for name, record in secondary.items():
        if name not in merged:
            merged[name] = record
    return merged

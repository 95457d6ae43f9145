"""Completion service: the entry point editors talk to.

Owns the declaration cache and routes a request to the right completion
source based on what precedes the cursor:

- after PERFORM / THRU / THROUGH / GO TO: paragraph declarations
- in a statement operand position (after MOVE, TO, SET, IF ...): data items
- on a data item declaration: the VALUE clause
- anywhere else: statement snippets
"""

from __future__ import annotations

from dataclasses import dataclass

from cobolassist.completion.cache import SingleSlotCache
from cobolassist.completion.columns import find_word_start, render_insertion
from cobolassist.completion.coordinator import ExpansionCoordinator, ModeSource
from cobolassist.completion.index import DeclarationRecord, build_index
from cobolassist.completion.items import (
    CompletionItem,
    CompletionItemKind,
    MarkupContent,
    Range,
    TextEdit,
)
from cobolassist.completion.keywords import keyword_completions
from cobolassist.completion.value import value_completion
from cobolassist.config.models import CompletionConfig
from cobolassist.core.errors import ExpansionError
from cobolassist.core.logging import clear_request_id, get_logger, set_request_id
from cobolassist.expansion.models import ExpansionMode, ExpansionProvider
from cobolassist.source.buffer import SourceBuffer
from cobolassist.source.scanner import DATA_ITEM, PARAGRAPH, DeclarationKind

log = get_logger("completion.service")

_PARAGRAPH_INTRODUCERS = frozenset({"PERFORM", "THRU", "THROUGH"})
_VARIABLE_INTRODUCERS = frozenset(
    {
        "ADD",
        "BY",
        "COMPUTE",
        "DISPLAY",
        "DIVIDE",
        "FROM",
        "GIVING",
        "IF",
        "INITIALIZE",
        "INTO",
        "MOVE",
        "MULTIPLY",
        "OF",
        "SET",
        "SUBTRACT",
        "TO",
        "UNTIL",
        "USING",
        "VARYING",
        "WHEN",
    }
)


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """One completion request from the editor.

    ``line`` and ``character`` are the 0-based cursor position in ``lines``.
    """

    uri: str
    file_identity: str
    line: int
    character: int
    lines: SourceBuffer
    mode: ModeSource = ExpansionMode.USE_LOCAL_BUFFER
    variable_mode: ModeSource = ExpansionMode.USE_LOCAL_BUFFER

    @property
    def current_line(self) -> str:
        if 0 <= self.line < len(self.lines):
            return self.lines[self.line]
        return ""


def _tokens_before_word(line: str, character: int) -> list[str]:
    start = find_word_start(line, character)
    return line[:start].split("*>", 1)[0].upper().split()


def wants_paragraph(line: str, character: int) -> bool:
    """True when the word at the cursor is a paragraph reference."""
    before = _tokens_before_word(line, character)
    if not before:
        return False
    if before[-1] in _PARAGRAPH_INTRODUCERS:
        return True
    return before[-2:] == ["GO", "TO"]


def wants_variable(line: str, character: int) -> bool:
    """True when the word at the cursor is a data item operand."""
    before = _tokens_before_word(line, character)
    return bool(before) and before[-1] in _VARIABLE_INTRODUCERS


def declaration_item(record: DeclarationRecord, line_index: int, character: int, line: str) -> CompletionItem:
    """Completion item inserting a declaration name over the word being typed."""
    start = find_word_start(line, character)
    documentation = record.documentation
    return CompletionItem(
        label=record.name,
        kind=(
            CompletionItemKind.METHOD
            if record.kind is DeclarationKind.PARAGRAPH
            else CompletionItemKind.VARIABLE
        ),
        detail=documentation.summary,
        documentation=(
            MarkupContent(documentation.elements_as_markdown())
            if documentation.has_elements
            else None
        ),
        text_edit=TextEdit(Range.on_line(line_index, start, character), record.insertion_text),
    )


class CompletionService:
    """Declaration candidates, snippets and column rendering for one process.

    Paragraphs and data items are indexed separately, each with its own cache
    created here (or injected) that lives as long as the service.
    """

    def __init__(
        self,
        config: CompletionConfig | None = None,
        provider: ExpansionProvider | None = None,
        cache: SingleSlotCache | None = None,
        variable_cache: SingleSlotCache | None = None,
    ) -> None:
        self._config = config or CompletionConfig()
        self._cache = cache if cache is not None else SingleSlotCache(self._config.cache_capacity)
        self._variable_cache = (
            variable_cache
            if variable_cache is not None
            else SingleSlotCache(self._config.cache_capacity)
        )
        self._coordinators = {
            DeclarationKind.PARAGRAPH: ExpansionCoordinator(provider, self._cache, PARAGRAPH),
            DeclarationKind.VARIABLE: ExpansionCoordinator(provider, self._variable_cache, DATA_ITEM),
        }

    @property
    def cache(self) -> SingleSlotCache:
        return self._cache

    @property
    def variable_cache(self) -> SingleSlotCache:
        return self._variable_cache

    async def get_completion_candidates(
        self,
        file_identity: str,
        local_buffer: SourceBuffer,
        mode: ModeSource,
        *,
        uri: str | None = None,
        kind: DeclarationKind = DeclarationKind.PARAGRAPH,
    ) -> list[DeclarationRecord]:
        """Declarations of ``kind`` visible from ``file_identity``, in source order.

        Raises:
            ExpansionError: Expansion was requested and failed.
        """
        coordinator = self._coordinators[kind]
        index = await coordinator.resolve(file_identity, local_buffer, mode, uri=uri)
        return self._limit(list(index.values()))

    def cached_candidates(
        self,
        file_identity: str,
        local_buffer: SourceBuffer,
        *,
        kind: DeclarationKind = DeclarationKind.PARAGRAPH,
    ) -> list[DeclarationRecord]:
        """Cached declarations for ``file_identity``, or a local build on a miss.

        Never writes the cache and never waits on expansion.
        """
        coordinator = self._coordinators[kind]
        entry = coordinator.cache.get(file_identity)
        if entry is not None:
            return self._limit(list(entry.index.values()))
        return self._limit(list(build_index(local_buffer, coordinator.pattern).values()))

    def invalidate(self) -> None:
        """Forget every cached index."""
        self._cache.clear()
        self._variable_cache.clear()

    def on_document_closed(self, file_identity: str) -> None:
        for kind, coordinator in self._coordinators.items():
            if coordinator.cache.discard(file_identity):
                log.debug("cache_released", identity=file_identity, kind=kind.value)

    @staticmethod
    def render_insertion(target_column: int, reference_column: int, content: str) -> str:
        return render_insertion(target_column, reference_column, content)

    async def complete(self, request: CompletionRequest) -> list[CompletionItem]:
        """Completion items for the cursor position of ``request``."""
        set_request_id()
        try:
            line = request.current_line
            if wants_paragraph(line, request.character):
                return await self._declaration_items(
                    request, line, DeclarationKind.PARAGRAPH, request.mode
                )
            if wants_variable(line, request.character):
                return await self._declaration_items(
                    request, line, DeclarationKind.VARIABLE, request.variable_mode
                )
            value_item = value_completion(request.line, request.character, line)
            if value_item is not None:
                return [value_item]
            return keyword_completions(request.line, request.character, line)
        finally:
            clear_request_id()

    async def _declaration_items(
        self,
        request: CompletionRequest,
        line: str,
        kind: DeclarationKind,
        mode: ModeSource,
    ) -> list[CompletionItem]:
        try:
            records = await self.get_completion_candidates(
                request.file_identity, request.lines, mode, uri=request.uri, kind=kind
            )
        except ExpansionError as e:
            log.warning(
                "completion_fell_back_to_local",
                uri=request.uri,
                kind=kind.value,
                error=e.error_name,
                reason=e.message,
            )
            records = self.cached_candidates(request.file_identity, request.lines, kind=kind)
        log.info("completion_items_generated", uri=request.uri, kind=kind.value, items=len(records))
        return [declaration_item(record, request.line, request.character, line) for record in records]

    def _limit(self, records: list[DeclarationRecord]) -> list[DeclarationRecord]:
        if self._config.max_candidates:
            return records[: self._config.max_candidates]
        return records

"""Declaration indexing, caching and completion rendering."""

from cobolassist.completion.cache import CacheEntry, SingleSlotCache
from cobolassist.completion.columns import (
    fill_missing_spaces,
    fill_spaces_from_word_end,
    find_word_end,
    find_word_start,
    render_insertion,
    replace_last_word,
    separator_for_column,
)
from cobolassist.completion.coordinator import ExpansionCoordinator, resolve_mode
from cobolassist.completion.index import (
    DeclarationIndex,
    DeclarationRecord,
    build_index,
    merge_missing,
)
from cobolassist.completion.items import CompletionItem, CompletionItemKind
from cobolassist.completion.service import CompletionRequest, CompletionService

__all__ = [
    "CacheEntry",
    "SingleSlotCache",
    "fill_missing_spaces",
    "fill_spaces_from_word_end",
    "find_word_end",
    "find_word_start",
    "render_insertion",
    "replace_last_word",
    "separator_for_column",
    "ExpansionCoordinator",
    "resolve_mode",
    "DeclarationIndex",
    "DeclarationRecord",
    "build_index",
    "merge_missing",
    "CompletionItem",
    "CompletionItemKind",
    "CompletionRequest",
    "CompletionService",
]

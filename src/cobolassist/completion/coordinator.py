"""Choosing between the local buffer and the copy-expanded source.

A request first resolves its expansion mode, and only then (if asked) fetches
the expanded buffer. The declaration index is built over the expanded source
and extended with declarations found only in the local buffer, so paragraphs
typed since the last expansion are still offered. The cache is written once,
with the complete mapping, after a successful resolution.

An expanded index stays cached for its identity until the cache is
invalidated or the identity changes; later requests in expansion mode reuse it
and only rescan the local buffer for declarations added since.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable

from cobolassist.completion.cache import SingleSlotCache
from cobolassist.completion.index import DeclarationIndex, build_index, merge_missing
from cobolassist.core.errors import ExpansionError
from cobolassist.core.logging import get_logger
from cobolassist.expansion.models import ExpansionFailed, ExpansionMode, ExpansionProvider
from cobolassist.source.buffer import SourceBuffer
from cobolassist.source.scanner import PARAGRAPH, DeclarationPattern

log = get_logger("completion.coordinator")

ModeSource = (
    ExpansionMode
    | str
    | Awaitable[ExpansionMode | str]
    | Callable[[], Awaitable[ExpansionMode | str]]
)
"""An expansion mode, or something that eventually produces one."""


async def resolve_mode(source: ModeSource) -> ExpansionMode:
    """Await ``source`` (value, awaitable, or coroutine function) into a mode."""
    if isinstance(source, ExpansionMode | str):
        return ExpansionMode.parse(source)
    if inspect.isawaitable(source):
        value = await source
    else:
        value = await source()
    return ExpansionMode.parse(value)


class ExpansionCoordinator:
    """Builds the declaration index for one request and stores it in the cache."""

    def __init__(
        self,
        provider: ExpansionProvider | None,
        cache: SingleSlotCache,
        pattern: DeclarationPattern = PARAGRAPH,
    ) -> None:
        self._provider = provider
        self._cache = cache
        self._pattern = pattern

    @property
    def cache(self) -> SingleSlotCache:
        return self._cache

    @property
    def pattern(self) -> DeclarationPattern:
        return self._pattern

    async def resolve(
        self,
        file_identity: str,
        local_buffer: SourceBuffer,
        mode: ModeSource,
        *,
        uri: str | None = None,
    ) -> DeclarationIndex:
        """Build, cache and return the declaration index for ``file_identity``.

        Raises:
            ExpansionError: The expanded source could not be obtained. The cache
                is not modified.
        """
        resolved = await resolve_mode(mode)
        if resolved is ExpansionMode.USE_LOCAL_BUFFER:
            index = build_index(local_buffer, self._pattern)
            self._cache.put(file_identity, index)
            log.debug("index_from_local_buffer", identity=file_identity, declarations=len(index))
            return index

        local_index = build_index(local_buffer, self._pattern)
        entry = self._cache.get(file_identity)
        if entry is not None and entry.expanded:
            log.debug("index_reused", identity=file_identity, declarations=len(entry.index))
            return merge_missing(entry.index, local_index)

        target = uri or file_identity
        expanded = await self._fetch_expanded(target)
        index = merge_missing(build_index(expanded, self._pattern), local_index)
        self._cache.put(file_identity, index, expanded=True)
        log.debug("index_from_expansion", identity=file_identity, declarations=len(index))
        return index

    async def _fetch_expanded(self, uri: str) -> SourceBuffer:
        if self._provider is None:
            raise ExpansionError.not_configured()
        try:
            result = await self._provider(uri)
        except ExpansionError:
            raise
        except Exception as e:
            log.warning("expansion_failed", uri=uri, reason=str(e))
            raise ExpansionError.failed(uri, str(e) or type(e).__name__) from e

        if isinstance(result, ExpansionFailed):
            log.warning("expansion_failed", uri=uri, reason=result.reason)
            if result.timeout_sec is not None:
                raise ExpansionError.timeout(uri, result.timeout_sec)
            raise ExpansionError.failed(uri, result.reason)
        return result.buffer

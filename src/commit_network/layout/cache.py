"""Memoization for layouts, keyed by the content of the input graph."""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict

from commit_network.config import DEFAULT_LAYOUT, LayoutConfig
from commit_network.ir.model import NetworkGraph
from commit_network.layout.engine import full_layout_with_config
from commit_network.layout.types import LayoutResult

logger = logging.getLogger(__name__)


def cache_key(network: NetworkGraph, config: LayoutConfig) -> str:
    digest = hashlib.sha1()
    digest.update(network.content_hash().encode("utf-8"))
    digest.update(repr(config).encode("utf-8"))
    return digest.hexdigest()


class LayoutCache:
    """LRU cache of LayoutResults.

    Two graphs with equal content share an entry even when they are
    distinct objects. Results are shared between callers and must be
    treated as read-only.
    """

    def __init__(self, max_entries: int = 64) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, LayoutResult] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(self, network: NetworkGraph, config: LayoutConfig = DEFAULT_LAYOUT) -> LayoutResult:
        key = cache_key(network, config)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug("Layout cache hit for %s", key[:12])
                return cached
            self.misses += 1

        logger.debug("Layout cache miss for %s", key[:12])
        result = full_layout_with_config(network, config)

        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

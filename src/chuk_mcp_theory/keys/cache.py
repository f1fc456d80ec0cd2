"""
Memoization for key-signature results.

The domain is closed (12 tonics x 4 tonalities) and results are frozen
models, so a plain dict under a lock is all that is needed. A miss
recomputes the same pure result; correctness never depends on a hit.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from chuk_mcp_theory.core.pitch import PitchClass
from chuk_mcp_theory.core.scale import Tonality
from chuk_mcp_theory.models.key_signature import KeySignature

logger = logging.getLogger(__name__)

CacheKey = tuple[PitchClass, Tonality]
KeySignatures = tuple[KeySignature, ...]


class KeySignatureCache:
    """Thread-safe cache of key signatures keyed by (tonic, tonality)."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, KeySignatures] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        tonic: int,
        tonality: Tonality,
        compute: Callable[[PitchClass, Tonality], KeySignatures],
    ) -> KeySignatures:
        """
        Return the cached result for (tonic, tonality), computing it on a miss.

        The computation runs outside the lock; if two threads race on the
        same key the first stored result wins and both return it.
        """
        key: CacheKey = (PitchClass(int(tonic) % 12), Tonality(tonality))
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1

        logger.debug("Key signature cache miss: %s %s", key[0].name, key[1].value)
        result = compute(*key)
        with self._lock:
            return self._entries.setdefault(key, result)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

from __future__ import annotations
import logging
import random
import threading
from collections import OrderedDict
from typing import Any, Optional

from .config import CACHE_MAX_ENTRIES
from .models import LocalityScores, PropertyInput, PropertyLike, as_property
from .scoring import RandomSource, calculate_locality_scores

logger = logging.getLogger(__name__)


def _key_part(v: Any) -> str:
    # Integral floats render without the trailing ".0" so 25000000 and 25000000.0 share a key
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def cache_key(prop: PropertyInput) -> str:
    """Fingerprint ``id-location-price-type``.

    Area, coordinates and year built are not part of the key, so two
    properties differing only in those share an entry.
    """
    return '-'.join(_key_part(v) for v in (prop.id, prop.location, prop.price, prop.type))


class ScoringService:
    """Owns a bounded score cache and the random source used for variance.

    Entries are evicted oldest-inserted first once the cache grows past
    ``max_entries``; reads never reorder entries. ``max_entries=0``
    disables caching.
    """

    def __init__(
        self,
        max_entries: int = CACHE_MAX_ENTRIES,
        rng: Optional[RandomSource] = None,
        variance: bool = True,
    ) -> None:
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.max_entries = max_entries
        self.rng = rng if rng is not None else random.Random()
        self.variance = variance
        self._cache: OrderedDict[str, LocalityScores] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._cache)

    def calculate(self, prop: PropertyLike) -> LocalityScores:
        return calculate_locality_scores(prop, rng=self.rng, variance=self.variance)

    def get_scores(self, prop: PropertyLike) -> LocalityScores:
        p = as_property(prop)
        key = cache_key(p)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return cached
            scores = self.calculate(p)
            if self.max_entries <= 0:
                return scores
            self._cache[key] = scores
            if len(self._cache) > self.max_entries:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Score cache full (%d); evicted %s", self.max_entries, evicted)
            return scores

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


_default_service: ScoringService | None = None


def get_default_service() -> ScoringService:
    """Process-wide service configured from settings on first use."""
    global _default_service
    if _default_service is None:
        from zaminseva.config.settings import get_settings
        from zaminseva.logging_config import configure_logging

        configure_logging()
        settings = get_settings()
        _default_service = ScoringService(
            max_entries=settings.SCORE_CACHE_MAX_ENTRIES,
            rng=random.Random(settings.SCORE_RANDOM_SEED),
            variance=settings.SCORE_VARIANCE_ENABLED,
        )
    return _default_service


def reset_default_service(service: ScoringService | None = None) -> None:
    """Replace (or drop, when None) the process-wide service."""
    global _default_service
    _default_service = service


def get_cached_locality_scores(prop: PropertyLike) -> LocalityScores:
    """Memoized ``calculate_locality_scores`` backed by the default service."""
    return get_default_service().get_scores(prop)

"""Final subset selection spreading photos across time and geography."""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Union

from models import Coordinates, PhotoRecord


logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
JITTER_RANGE = (0.8, 1.2)


class SelectionStrategy(str, Enum):
    TEMPORAL = "temporal"
    GEOGRAPHIC = "geographic"
    RANDOM = "random"
    SEGMENTED = "segmented"


def haversine_km(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance in kilometres."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)
    h = (
        math.sin((lat2 - lat1) / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


class DiversitySelector:
    """
    Picks the final N records from a larger valid pool.

    Every strategy returns exactly min(N, distinct pool size) records with
    distinct ids, and the final order is always shuffled.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._strategies: Dict[SelectionStrategy, Callable[[List[PhotoRecord], int], List[PhotoRecord]]] = {
            SelectionStrategy.TEMPORAL: self._temporal_spread,
            SelectionStrategy.GEOGRAPHIC: self._geographic_spread,
            SelectionStrategy.RANDOM: self._pure_random,
            SelectionStrategy.SEGMENTED: self._segmented_mixed,
        }

    @property
    def strategies(self) -> List[SelectionStrategy]:
        return list(self._strategies)

    def select(
        self,
        pool: Sequence[PhotoRecord],
        n: int,
        strategy: Optional[Union[SelectionStrategy, str]] = None,
    ) -> List[PhotoRecord]:
        """Select n distinct records; strategy is drawn uniformly when not given."""
        unique: List[PhotoRecord] = []
        seen = set()
        for record in pool:
            if record.id not in seen:
                seen.add(record.id)
                unique.append(record)

        n = min(max(0, int(n)), len(unique))
        if n == 0:
            return []

        chosen_strategy = SelectionStrategy(strategy) if strategy else self._rng.choice(self.strategies)
        if n == len(unique):
            selected = list(unique)
        else:
            selected = self._strategies[chosen_strategy](unique, n)
            selected = self._top_up(unique, selected, n)

        self._rng.shuffle(selected)
        logger.debug(f"Selected {len(selected)}/{len(unique)} photos with {chosen_strategy.value} strategy")
        return selected

    def _top_up(self, pool: List[PhotoRecord], selected: List[PhotoRecord], n: int) -> List[PhotoRecord]:
        """Drop duplicate picks and fill any gap with random leftovers."""
        result: List[PhotoRecord] = []
        seen = set()
        for record in selected:
            if record.id not in seen:
                seen.add(record.id)
                result.append(record)

        if len(result) < n:
            remaining = [record for record in pool if record.id not in seen]
            self._rng.shuffle(remaining)
            result.extend(remaining[: n - len(result)])
        return result[:n]

    def _temporal_spread(self, pool: List[PhotoRecord], n: int) -> List[PhotoRecord]:
        ordered = sorted(pool, key=lambda record: record.year)
        stride = len(ordered) / n
        jitter_span = max(1, int(stride))
        selected = []
        for i in range(n):
            index = int(i * stride) + self._rng.randrange(jitter_span)
            selected.append(ordered[min(index, len(ordered) - 1)])
        return selected

    def _geographic_spread(self, pool: List[PhotoRecord], n: int) -> List[PhotoRecord]:
        remaining = list(pool)
        first = remaining.pop(self._rng.randrange(len(remaining)))
        selected = [first]
        # min distance from each remaining record to the selected set
        min_distance = [haversine_km(first.coordinates, record.coordinates) for record in remaining]

        while len(selected) < n and remaining:
            scores = [distance * self._rng.uniform(*JITTER_RANGE) for distance in min_distance]
            best = max(range(len(remaining)), key=scores.__getitem__)
            picked = remaining.pop(best)
            min_distance.pop(best)
            selected.append(picked)
            min_distance = [
                min(current, haversine_km(picked.coordinates, record.coordinates))
                for current, record in zip(min_distance, remaining)
            ]
        return selected

    def _pure_random(self, pool: List[PhotoRecord], n: int) -> List[PhotoRecord]:
        shuffled = list(pool)
        self._rng.shuffle(shuffled)
        return shuffled[:n]

    def _segmented_mixed(self, pool: List[PhotoRecord], n: int) -> List[PhotoRecord]:
        shuffled = list(pool)
        self._rng.shuffle(shuffled)
        segment_size = max(1, len(shuffled) // n)
        selected = []
        for i in range(n):
            segment = shuffled[i * segment_size:(i + 1) * segment_size]
            if segment:
                selected.append(self._rng.choice(segment))
        return selected

"""Search fan-out for a single acquisition attempt."""

from __future__ import annotations

import asyncio
import logging
import random
import string
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence, Union

from config import CATEGORY_PROFILES, GENERAL_KEYWORDS, SEED_LOCATIONS, SeedLocation, Settings, get_settings
from models import Candidate, PhotoCategory, SearchAttempt
from scrapers import WikimediaCommonsScraper
from storage import MemoryCache, cached_call, get_cache
from utils.exceptions import ScraperError


logger = logging.getLogger(__name__)

SubSearch = Callable[[], Awaitable[List[Candidate]]]


@dataclass
class SearchOutcome:
    """Candidates gathered by one attempt plus sub-search bookkeeping."""

    attempt: SearchAttempt
    candidates: List[Candidate] = field(default_factory=list)
    sub_search_count: int = 0
    transport_failures: int = 0
    last_error: Optional[BaseException] = None

    @property
    def transport_failed(self) -> bool:
        return self.sub_search_count > 0 and self.transport_failures == self.sub_search_count


class SearchOrchestrator:
    """Runs geosearch, category and keyword strategies concurrently for one attempt."""

    def __init__(
        self,
        scraper: WikimediaCommonsScraper,
        *,
        cache: Optional[MemoryCache] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        locations: Sequence[SeedLocation] = SEED_LOCATIONS,
    ) -> None:
        self._scraper = scraper
        self._settings = settings or get_settings()
        self._cache = cache or get_cache()
        self._rng = rng or random.Random()
        self._locations = tuple(locations)

    def build_attempt(self, count: int, attempt: int) -> SearchAttempt:
        """Search parameters for attempt n; every dimension grows with n up to its cap."""
        cfg = self._settings.acquisition
        radius = min(cfg.base_radius * cfg.radius_multiplier ** attempt, cfg.max_radius)
        limit = min(cfg.base_limit * cfg.limit_multiplier ** attempt, cfg.max_limit)
        location_count = min(count * (1 + attempt), cfg.location_cap, len(self._locations))
        return SearchAttempt(
            attempt_number=attempt,
            radius=max(1, int(radius)),
            per_location_limit=max(1, int(limit)),
            location_count=max(0, location_count),
        )

    async def search(
        self,
        count: int,
        category: Union[PhotoCategory, str] = PhotoCategory.ALL,
        attempt: int = 0,
        force_refresh: bool = False,
    ) -> SearchOutcome:
        """Fan out every strategy and collect candidates in strategy order."""
        category = PhotoCategory(category)
        params = self.build_attempt(count, attempt)

        sub_searches = (
            self._geo_searches(params, force_refresh)
            + self._category_searches(params, category, force_refresh)
            + self._keyword_searches(params, category, force_refresh)
        )
        outcome = SearchOutcome(attempt=params, sub_search_count=len(sub_searches))

        results = await asyncio.gather(*(self._run_sub_search(label, call) for label, call in sub_searches))
        for candidates, error in results:
            outcome.candidates.extend(candidates)
            if error is not None:
                outcome.transport_failures += 1
                outcome.last_error = error

        logger.info(
            f"Attempt {attempt}: {len(outcome.candidates)} candidates from {outcome.sub_search_count} "
            f"sub-searches (radius={params.radius}m, limit={params.per_location_limit}, "
            f"locations={params.location_count}, transport failures={outcome.transport_failures})"
        )
        return outcome

    async def _run_sub_search(self, label: str, call: SubSearch):
        """Run one sub-search; failures degrade to an empty list."""
        try:
            return await call(), None
        except ScraperError as exc:
            logger.warning(f"Sub-search {label} failed: {exc}")
            return [], exc
        except Exception as exc:
            logger.error(f"Sub-search {label} raised unexpectedly: {exc}")
            return [], None

    def _cached(self, key: str, producer: SubSearch, force_refresh: bool) -> SubSearch:
        async def _call() -> List[Candidate]:
            return await cached_call(
                self._cache,
                key,
                producer,
                ttl=self._settings.cache.ttl,
                force_refresh=force_refresh,
            )

        return _call

    def _geo_searches(self, params: SearchAttempt, force_refresh: bool):
        locations = self._rng.sample(self._locations, params.location_count)
        searches = []
        for location in locations:
            key = f"geo:{MemoryCache.make_key(location.latitude, location.longitude, params.radius, params.per_location_limit)}"

            async def _producer(location: SeedLocation = location) -> List[Candidate]:
                return await self._scraper.geosearch(
                    location.latitude,
                    location.longitude,
                    params.radius,
                    params.per_location_limit,
                )

            searches.append((f"geo:{location.name}", self._cached(key, _producer, force_refresh)))
        return searches

    def _category_searches(self, params: SearchAttempt, category: PhotoCategory, force_refresh: bool):
        if category is PhotoCategory.ALL:
            return []

        searches = []
        for commons_category in CATEGORY_PROFILES[category.value].commons_categories:
            prefix = self._rng.choice(string.ascii_uppercase)
            key = f"category:{MemoryCache.make_key(commons_category, prefix, params.per_location_limit)}"

            async def _producer(commons_category: str = commons_category, prefix: str = prefix) -> List[Candidate]:
                return await self._scraper.category_members(
                    commons_category,
                    params.per_location_limit,
                    start_prefix=prefix,
                )

            searches.append((f"category:{commons_category}", self._cached(key, _producer, force_refresh)))
        return searches

    def _keyword_searches(self, params: SearchAttempt, category: PhotoCategory, force_refresh: bool):
        cfg = self._settings.acquisition
        terms = list(GENERAL_KEYWORDS) + list(CATEGORY_PROFILES[category.value].keywords)
        chosen = self._rng.sample(terms, min(cfg.keyword_queries, len(terms)))

        searches = []
        for term in chosen:
            offset = self._rng.randint(0, cfg.keyword_offset_window * (params.attempt_number + 1))
            key = f"keyword:{MemoryCache.make_key(term, offset, params.per_location_limit)}"

            async def _producer(term: str = term, offset: int = offset) -> List[Candidate]:
                return await self._scraper.search(term, max_results=params.per_location_limit, offset=offset)

            searches.append((f"keyword:{term}", self._cached(key, _producer, force_refresh)))
        return searches

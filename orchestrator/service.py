"""Photo acquisition service: the entry point used by callers and the CLI."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import Awaitable, Callable, Optional, Tuple, Union

from aggregator import ResultAggregator
from config import Settings, get_settings
from models import PhotoCategory, PhotoRecord
from processing import FormatValidator, MetadataExtractor, MetadataFormatValidator
from scrapers import WikimediaCommonsScraper
from storage import MemoryCache, cached_call, get_cache
from .diversity import DiversitySelector
from .retry import AcquisitionResult, RetryController
from .search import SearchOrchestrator


logger = logging.getLogger(__name__)


class PhotoAcquisitionService:
    """Wires scraper, extractor, validator and cache into one fetch_photos call."""

    def __init__(
        self,
        *,
        settings: Optional[Settings] = None,
        scraper: Optional[WikimediaCommonsScraper] = None,
        validator: Optional[FormatValidator] = None,
        cache: Optional[MemoryCache] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._settings = settings or get_settings()
        self._cache = cache or MemoryCache(
            ttl=self._settings.cache.ttl,
            max_size=self._settings.cache.max_size,
        )
        self._clock = clock
        self._scraper = scraper or WikimediaCommonsScraper(settings=self._settings)

        rng = rng or random.Random()
        aggregator = ResultAggregator(
            self._scraper,
            validator or MetadataFormatValidator(),
            extractor=MetadataExtractor(min_year=self._settings.acquisition.min_year),
            cache=self._cache,
            cache_ttl=self._settings.cache.ttl,
        )
        orchestrator = SearchOrchestrator(self._scraper, cache=self._cache, settings=self._settings, rng=rng)
        self._controller = RetryController(
            orchestrator,
            aggregator,
            selector=DiversitySelector(rng),
            settings=self._settings,
            rng=rng,
            sleep=sleep,
        )

    def result_key(self, count: int, category: PhotoCategory) -> str:
        """Cache key for a whole result, bucketed so repeats inside a window are reused."""
        bucket = int(self._clock() // max(1, self._settings.cache.bucket_seconds))
        return f"photos:{count}:{category.value}:{bucket}"

    async def fetch_photos(
        self,
        count: int,
        category: Union[PhotoCategory, str] = PhotoCategory.ALL,
        force_refresh: bool = False,
    ) -> Tuple[PhotoRecord, ...]:
        """
        Return up to `count` validated historical photos.

        Exactly `count` records on success, fewer on partial success.
        Raises InsufficientCandidatesError or FetchTransportError when nothing
        usable was found.
        """
        if count < 1:
            raise ValueError("count must be at least 1")
        category = PhotoCategory(category)
        key = self.result_key(count, category)

        async def _producer() -> AcquisitionResult:
            return await self._controller.run(count, category, force_refresh)

        result: AcquisitionResult = await cached_call(
            self._cache,
            key,
            _producer,
            ttl=self._settings.cache.photo_ttl,
            force_refresh=force_refresh,
        )
        if result.is_partial:
            # short results are served once, never reused
            self._cache.delete(key)
        logger.info(
            f"Fetched {len(result.records)}/{count} photos ({category.value}, "
            f"{result.state.value}, {result.attempts_used} attempts)"
        )
        return result.records

    async def close(self) -> None:
        await self._scraper.close()

    async def __aenter__(self) -> "PhotoAcquisitionService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


_default_service: Optional[PhotoAcquisitionService] = None


def get_photo_service() -> PhotoAcquisitionService:
    global _default_service
    if _default_service is None:
        _default_service = PhotoAcquisitionService(cache=get_cache())
    return _default_service


async def fetch_photos(
    count: int,
    category: Union[PhotoCategory, str] = PhotoCategory.ALL,
    force_refresh: bool = False,
) -> Tuple[PhotoRecord, ...]:
    return await get_photo_service().fetch_photos(count, category, force_refresh)

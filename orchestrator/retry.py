"""Attempt loop with expanding search parameters."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Tuple, Union

from aggregator import ResultAggregator
from config import Settings, get_settings
from models import PhotoCategory, PhotoRecord
from utils.exceptions import FetchTransportError, InsufficientCandidatesError
from .diversity import DiversitySelector
from .search import SearchOrchestrator


logger = logging.getLogger(__name__)


class AcquisitionState(str, Enum):
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    PARTIAL_SUCCESS = "partial_success"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class AcquisitionResult:
    """Records returned by a finished run and how it ended."""

    records: Tuple[PhotoRecord, ...]
    state: AcquisitionState
    attempts_used: int

    @property
    def is_partial(self) -> bool:
        return self.state is AcquisitionState.PARTIAL_SUCCESS


class RetryController:
    """
    Drives search -> aggregate attempts until enough valid records exist.

    Valid records are pooled by id across attempts. The run ends as SUCCEEDED
    once the pool covers the request, PARTIAL_SUCCESS when retries run out
    with a non-empty pool, and raises when the pool is still empty.
    """

    def __init__(
        self,
        orchestrator: SearchOrchestrator,
        aggregator: ResultAggregator,
        *,
        selector: Optional[DiversitySelector] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._orchestrator = orchestrator
        self._aggregator = aggregator
        self._rng = rng or random.Random()
        self._selector = selector or DiversitySelector(self._rng)
        self._settings = settings or get_settings()
        self._sleep = sleep
        self.state = AcquisitionState.ATTEMPTING

    @property
    def max_retries(self) -> int:
        return max(0, int(self._settings.acquisition.max_retries))

    async def run(
        self,
        requested: int,
        category: Union[PhotoCategory, str] = PhotoCategory.ALL,
        force_refresh: bool = False,
    ) -> AcquisitionResult:
        """Run attempts 0..max_retries; raises when nothing usable was found."""
        if requested < 1:
            raise ValueError("requested must be at least 1")

        pool: Dict[str, PhotoRecord] = {}
        final_attempt = self.max_retries
        transport_failed = False
        cause: Optional[BaseException] = None

        for attempt in range(final_attempt + 1):
            self.state = AcquisitionState.ATTEMPTING

            search = await self._orchestrator.search(requested, category, attempt, force_refresh)
            aggregated = await self._aggregator.aggregate(search.candidates, force_refresh)
            for record in aggregated.records:
                pool.setdefault(record.id, record)

            valid = len(pool)
            logger.info(f"Attempt {attempt}/{final_attempt}: {valid}/{requested} valid photos pooled")

            if valid >= requested:
                self.state = AcquisitionState.SUCCEEDED
                records = self._selector.select(list(pool.values()), requested)
                return AcquisitionResult(tuple(records), self.state, attempt + 1)

            transport_failed = search.transport_failed or aggregated.transport_failed
            cause = search.last_error or aggregated.last_error

            if attempt < final_attempt and self._settings.acquisition.attempt_delay > 0:
                await self._sleep(self._settings.acquisition.attempt_delay)

        attempts_used = final_attempt + 1
        if pool:
            self.state = AcquisitionState.PARTIAL_SUCCESS
            records = list(pool.values())
            self._rng.shuffle(records)
            logger.warning(
                f"Only {len(records)} of {requested} requested photos found after {attempts_used} attempts"
            )
            return AcquisitionResult(tuple(records), self.state, attempts_used)

        self.state = AcquisitionState.EXHAUSTED
        if transport_failed:
            logger.error(f"Photo provider unreachable on final attempt: {cause}")
            raise FetchTransportError(attempts_used, cause)

        logger.warning(f"No usable photos after {attempts_used} attempts")
        raise InsufficientCandidatesError(requested, attempts_used)

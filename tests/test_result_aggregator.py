"""Unit tests for aggregator.result_aggregator."""

from __future__ import annotations

import pytest

from aggregator import ResultAggregator, chunk, dedupe_candidates
from models import Candidate
from storage import MemoryCache


def _candidates(*ids):
    return [Candidate(id=str(i), title=f"File:Photo {i}.jpg") for i in ids]


def test_dedupe_keeps_first_occurrence():
    first = Candidate(id="1", title="first")
    second = Candidate(id="1", title="second")
    unique = dedupe_candidates([first, Candidate(id="2", title="x"), second])

    assert [candidate.id for candidate in unique] == ["1", "2"]
    assert unique[0].title == "first"


def test_chunk_sizes():
    assert chunk(list(range(5)), 2) == [[0, 1], [2, 3], [4]]
    assert chunk([], 50) == []
    with pytest.raises(ValueError):
        chunk([1], 0)


@pytest.mark.asyncio
async def test_one_validation_batch_per_chunk(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(i) for i in range(1, 6)], batch_size=2)
    validator = validator_factory()
    aggregator = ResultAggregator(scraper, validator, cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2, 3, 4, 5, 1, 2))

    assert outcome.candidate_count == 7
    assert outcome.unique_count == 5
    assert outcome.chunk_count == 3
    assert len(scraper.detail_batches) == 3
    assert len(validator.batches) == 3
    assert sorted(record.id for record in outcome.records) == ["1", "2", "3", "4", "5"]
    assert not outcome.transport_failed


@pytest.mark.asyncio
async def test_metadata_rejects_never_reach_validator(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1, year="1850-01-01"), page_factory(2, latitude="0", longitude="0")])
    validator = validator_factory()
    aggregator = ResultAggregator(scraper, validator, cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2))

    assert outcome.records == []
    assert outcome.metadata_rejected == 2
    assert validator.batches == []


@pytest.mark.asyncio
async def test_only_survivors_are_validated(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1), page_factory(2, year=None), page_factory(3)])
    validator = validator_factory()
    aggregator = ResultAggregator(scraper, validator, cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2, 3))

    assert validator.batches == [
        ["https://upload.wikimedia.org/photo_1.jpg", "https://upload.wikimedia.org/photo_3.jpg"]
    ]
    assert [record.id for record in outcome.records] == ["1", "3"]


@pytest.mark.asyncio
async def test_rejected_verdicts_produce_no_records(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1), page_factory(2)])
    aggregator = ResultAggregator(scraper, validator_factory(accept=False), cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2))

    assert outcome.records == []
    assert outcome.format_rejected == 2
    assert outcome.failed_chunks == 0


@pytest.mark.asyncio
async def test_validator_error_drops_only_that_chunk(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(i) for i in range(1, 5)], batch_size=2)

    class _FlakyValidator(validator_factory):
        async def validate_batch(self, requests):
            self.batches.append([request.url for request in requests])
            if any(request.url.endswith("photo_1.jpg") for request in requests):
                raise RuntimeError("validator crashed")
            return [self._verdict() for _ in requests]

    validator = _FlakyValidator()
    aggregator = ResultAggregator(scraper, validator, cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2, 3, 4))

    assert sorted(record.id for record in outcome.records) == ["3", "4"]
    assert outcome.failed_chunks == 1
    assert isinstance(outcome.last_error, RuntimeError)
    assert not outcome.transport_failed


@pytest.mark.asyncio
async def test_missing_verdicts_count_as_invalid(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1), page_factory(2)])

    class _ShortValidator(validator_factory):
        async def validate_batch(self, requests):
            return [self._verdict()]

    aggregator = ResultAggregator(scraper, _ShortValidator(), cache=MemoryCache())
    outcome = await aggregator.aggregate(_candidates(1, 2))

    assert [record.id for record in outcome.records] == ["1"]
    assert outcome.format_rejected == 1


@pytest.mark.asyncio
async def test_detail_transport_failure(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1), page_factory(2)], batch_size=1, fail_details=True)
    aggregator = ResultAggregator(scraper, validator_factory(), cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2))

    assert outcome.records == []
    assert outcome.transport_failed_chunks == 2
    assert outcome.transport_failed


@pytest.mark.asyncio
async def test_details_and_verdicts_are_cached(page_factory, scraper_factory, validator_factory):
    scraper = scraper_factory([page_factory(1)])
    validator = validator_factory()
    aggregator = ResultAggregator(scraper, validator, cache=MemoryCache())

    await aggregator.aggregate(_candidates(1))
    await aggregator.aggregate(_candidates(1))
    assert len(scraper.detail_batches) == 1
    assert len(validator.batches) == 1

    await aggregator.aggregate(_candidates(1), force_refresh=True)
    assert len(scraper.detail_batches) == 2
    assert len(validator.batches) == 2


@pytest.mark.asyncio
async def test_empty_input(scraper_factory, validator_factory):
    aggregator = ResultAggregator(scraper_factory(), validator_factory(), cache=MemoryCache())
    outcome = await aggregator.aggregate([])

    assert outcome.records == []
    assert outcome.chunk_count == 0
    assert not outcome.transport_failed


@pytest.mark.asyncio
async def test_malformed_page_costs_only_that_candidate(page_factory, scraper_factory, validator_factory):
    broken = page_factory(2)
    broken["imageinfo"] = {"url": "https://upload.wikimedia.org/photo_2.jpg"}
    scraper = scraper_factory([page_factory(1), broken, page_factory(3)])
    aggregator = ResultAggregator(scraper, validator_factory(), cache=MemoryCache())

    outcome = await aggregator.aggregate(_candidates(1, 2, 3))

    assert sorted(record.id for record in outcome.records) == ["1", "3"]
    assert outcome.metadata_rejected == 1
    assert outcome.failed_chunks == 0


@pytest.mark.asyncio
async def test_verdicts_are_not_shared_between_validators(page_factory, scraper_factory, validator_factory):
    class _StrictValidator(validator_factory):
        def __init__(self):
            super().__init__(accept=False)

    cache = MemoryCache()
    scraper = scraper_factory([page_factory(1)])
    lenient = ResultAggregator(scraper, validator_factory(), cache=cache)
    strict_validator = _StrictValidator()
    strict = ResultAggregator(scraper, strict_validator, cache=cache)

    assert len((await lenient.aggregate(_candidates(1))).records) == 1
    assert (await strict.aggregate(_candidates(1))).records == []
    assert len(strict_validator.batches) == 1

"""Unit tests for orchestrator.service."""

from __future__ import annotations

import asyncio
import random

import httpx
import pytest

from models import PhotoCategory, PhotoRecord
from orchestrator import PhotoAcquisitionService
from orchestrator import service as service_module
from scrapers import WikimediaCommonsScraper
from storage import MemoryCache
from utils.exceptions import FetchTransportError, InsufficientCandidatesError


class _Clock:
    def __init__(self, now: float = 3_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _service(scraper, validator, settings, cache=None, clock=None) -> PhotoAcquisitionService:
    return PhotoAcquisitionService(
        settings=settings,
        scraper=scraper,
        validator=validator,
        cache=cache or MemoryCache(),
        rng=random.Random(5),
        clock=clock or _Clock(),
    )


@pytest.mark.asyncio
async def test_fetch_photos_returns_immutable_records(page_factory, scraper_factory, validator_factory, settings):
    scraper = scraper_factory([page_factory(i) for i in range(1, 6)])
    records = await _service(scraper, validator_factory(), settings).fetch_photos(3, "architecture")

    assert isinstance(records, tuple)
    assert len(records) == 3
    assert all(isinstance(record, PhotoRecord) for record in records)


@pytest.mark.asyncio
async def test_whole_result_is_cached_per_time_bucket(page_factory, scraper_factory, validator_factory, settings):
    scraper = scraper_factory([page_factory(i) for i in range(1, 6)])
    clock = _Clock()
    cache = MemoryCache()
    service = _service(scraper, validator_factory(), settings, cache=cache, clock=clock)

    first = await service.fetch_photos(3)
    calls = len(scraper.search_calls)
    assert await service.fetch_photos(3) == first
    assert len(scraper.search_calls) == calls

    clock.now += settings.cache.bucket_seconds
    next_key = service.result_key(3, PhotoCategory.ALL)
    assert next_key == "photos:3:all:11"
    assert not cache.has(next_key)
    await service.fetch_photos(3)
    assert cache.has(next_key)


@pytest.mark.asyncio
async def test_force_refresh_bypasses_cached_result(page_factory, scraper_factory, validator_factory, settings):
    scraper = scraper_factory([page_factory(i) for i in range(1, 6)])
    service = _service(scraper, validator_factory(), settings)

    await service.fetch_photos(2)
    calls = len(scraper.search_calls)
    await service.fetch_photos(2, force_refresh=True)

    assert len(scraper.search_calls) > calls


@pytest.mark.asyncio
async def test_partial_result_is_not_kept(page_factory, scraper_factory, validator_factory, settings):
    scraper = scraper_factory([page_factory(1)])
    cache = MemoryCache()
    service = _service(scraper, validator_factory(), settings, cache=cache)

    records = await service.fetch_photos(4)

    assert len(records) == 1
    assert not cache.has(service.result_key(4, PhotoCategory.ALL))


@pytest.mark.asyncio
async def test_errors_surface_with_user_messages(page_factory, scraper_factory, validator_factory, settings):
    rejecting = _service(scraper_factory([page_factory(1)]), validator_factory(accept=False), settings)
    with pytest.raises(InsufficientCandidatesError) as exc_info:
        await rejecting.fetch_photos(5)
    assert exc_info.value.attempts_used == settings.acquisition.max_retries + 1
    assert exc_info.value.user_message == "No suitable photos found. Please try again."

    offline = _service(scraper_factory([page_factory(1)], fail_search=True), validator_factory(), settings)
    with pytest.raises(FetchTransportError) as exc_info:
        await offline.fetch_photos(5)
    assert "internet connection" in exc_info.value.user_message


@pytest.mark.asyncio
async def test_count_must_be_positive(scraper_factory, validator_factory, settings):
    with pytest.raises(ValueError):
        await _service(scraper_factory(), validator_factory(), settings).fetch_photos(0)


@pytest.mark.asyncio
async def test_context_manager_closes_scraper(scraper_factory, validator_factory, settings):
    scraper = scraper_factory()
    async with _service(scraper, validator_factory(), settings):
        pass
    assert scraper.closed


@pytest.mark.asyncio
async def test_module_level_fetch_photos_uses_default_service(monkeypatch):
    calls = []

    class _StubService:
        async def fetch_photos(self, count, category, force_refresh):
            calls.append((count, category, force_refresh))
            return ()

    monkeypatch.setattr(service_module, "_default_service", _StubService())

    assert await service_module.fetch_photos(2, "people", True) == ()
    assert calls == [(2, "people", True)]


@pytest.mark.asyncio
async def test_services_do_not_share_results_by_default(page_factory, scraper_factory, validator_factory, settings):
    def _uncached_service(validator):
        return PhotoAcquisitionService(
            settings=settings,
            scraper=scraper_factory([page_factory(i) for i in range(1, 6)]),
            validator=validator,
            rng=random.Random(5),
            clock=_Clock(),
        )

    assert len(await _uncached_service(validator_factory()).fetch_photos(3)) == 3
    with pytest.raises(InsufficientCandidatesError):
        await _uncached_service(validator_factory(accept=False)).fetch_photos(3)


def test_service_survives_a_new_event_loop(page_factory, settings):
    settings.wikimedia.requests_per_second = 50
    pages = {str(i): page_factory(i) for i in range(1, 6)}
    list_requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        if params.get("prop") == "imageinfo":
            ids = params["pageids"].split("|")
            return httpx.Response(200, json={"query": {"pages": {i: pages[i] for i in ids if i in pages}}})
        list_requests.append(params["list"])
        hits = [{"pageid": page["pageid"], "title": page["title"]} for page in pages.values()]
        return httpx.Response(200, json={"query": {params["list"]: hits}})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    service = PhotoAcquisitionService(
        settings=settings,
        scraper=WikimediaCommonsScraper(settings=settings, client=client),
        cache=MemoryCache(),
        rng=random.Random(5),
    )

    first = asyncio.run(service.fetch_photos(3, force_refresh=True))
    first_requests = len(list_requests)
    second = asyncio.run(service.fetch_photos(3, force_refresh=True))

    assert len(first) == len(second) == 3
    assert first_requests > 1
    # every sub-search of the second run reached the provider again
    assert len(list_requests) == 2 * first_requests

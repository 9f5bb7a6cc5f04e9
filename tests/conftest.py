"""
Shared fixtures: settings without delays, an in-memory Commons stand-in and a recording validator
"""
from typing import Any, Dict, List, Optional, Sequence

import pytest

from config import AcquisitionSettings, CacheSettings, GeneralSettings, Settings, WikimediaSettings
from models import Candidate, ValidationVerdict
from utils.exceptions import ScraperError


def make_page(
    page_id: int,
    *,
    year: Optional[str] = "1965-06-15",
    latitude: Optional[str] = "40.7128",
    longitude: Optional[str] = "-74.0060",
    mime: str = "image/jpeg",
    url: Optional[str] = None,
) -> Dict[str, Any]:
    """imageinfo page shaped like the Commons API response"""
    extmetadata: Dict[str, Any] = {
        "LicenseShortName": {"value": "CC BY-SA 4.0"},
        "Artist": {"value": "<a href='/wiki/User:Archive'>City Archive</a>"},
        "ImageDescription": {"value": "<p>Street scene</p>"},
    }
    if year is not None:
        extmetadata["DateTimeOriginal"] = {"value": year}
    if latitude is not None:
        extmetadata["GPSLatitude"] = {"value": latitude}
    if longitude is not None:
        extmetadata["GPSLongitude"] = {"value": longitude}

    return {
        "pageid": page_id,
        "title": f"File:Photo {page_id}.jpg",
        "imageinfo": [
            {
                "url": url or f"https://upload.wikimedia.org/photo_{page_id}.jpg",
                "mime": mime,
                "extmetadata": extmetadata,
                "metadata": [],
            }
        ],
    }


class FakeCommonsScraper:
    """Every list endpoint returns all known pages; details come from the same table"""

    def __init__(
        self,
        pages: Sequence[Dict[str, Any]] = (),
        *,
        batch_size: int = 50,
        fail_search: bool = False,
        fail_details: bool = False,
    ):
        self.pages = {str(page["pageid"]): page for page in pages}
        self.batch_size = batch_size
        self.fail_search = fail_search
        self.fail_details = fail_details
        self.search_calls: List[tuple] = []
        self.detail_batches: List[List[str]] = []
        self.closed = False

    def _hits(self, call: tuple) -> List[Candidate]:
        self.search_calls.append(call)
        if self.fail_search:
            raise ScraperError(f"{call[0]} unreachable", source="fake")
        return [Candidate(id=page_id, title=page["title"]) for page_id, page in self.pages.items()]

    async def geosearch(self, latitude, longitude, radius, limit):
        return self._hits(("geosearch", latitude, longitude, radius, limit))

    async def category_members(self, category, limit, start_prefix=None):
        return self._hits(("category", category, limit, start_prefix))

    async def search(self, query, max_results=None, offset=0):
        return self._hits(("search", query, max_results, offset))

    async def get_details_batch(self, page_ids):
        self.detail_batches.append(list(page_ids))
        if self.fail_details:
            raise ScraperError("detail batch unreachable", source="fake")
        return [self.pages[page_id] for page_id in page_ids if page_id in self.pages]

    async def close(self):
        self.closed = True


class RecordingValidator:
    """Accepts or rejects everything, remembering each batch it was asked about"""

    def __init__(self, accept: bool = True, error: Optional[Exception] = None):
        self.accept = accept
        self.error = error
        self.batches: List[List[str]] = []

    def _verdict(self) -> ValidationVerdict:
        if self.accept:
            return ValidationVerdict(
                is_valid=True,
                detected_format="jpeg",
                detected_mime_type="image/jpeg",
                confidence=0.9,
                detection_method="mime-type",
            )
        return ValidationVerdict(
            is_valid=False,
            detected_format="tiff",
            confidence=0.9,
            detection_method="mime-type",
            rejection_reason="Limited browser support",
        )

    async def validate(self, url, mime_hint=None, metadata_hint=None):
        return self._verdict()

    async def validate_batch(self, requests):
        self.batches.append([request.url for request in requests])
        if self.error is not None:
            raise self.error
        return [self._verdict() for _ in requests]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        wikimedia=WikimediaSettings(requests_per_second=0),
        acquisition=AcquisitionSettings(attempt_delay=0, location_cap=3, keyword_queries=1),
        cache=CacheSettings(),
        general=GeneralSettings(),
    )


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def scraper_factory():
    return FakeCommonsScraper


@pytest.fixture
def validator_factory():
    return RecordingValidator

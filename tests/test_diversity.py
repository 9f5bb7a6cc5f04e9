"""Unit tests for orchestrator.diversity."""

from __future__ import annotations

import random
from datetime import date

import pytest

from models import Coordinates, PhotoMetadata, PhotoRecord
from orchestrator import DiversitySelector, SelectionStrategy, haversine_km


def _record(i: int, year: int, lat: float, lon: float) -> PhotoRecord:
    return PhotoRecord(
        id=str(i),
        url=f"https://upload.wikimedia.org/{i}.jpg",
        title=f"Photo {i}",
        year=year,
        coordinates=Coordinates(latitude=lat, longitude=lon),
        metadata=PhotoMetadata(
            license="CC0",
            date_created=date(year, 1, 1),
            format="jpeg",
            mime_type="image/jpeg",
        ),
    )


@pytest.fixture
def pool():
    rng = random.Random(42)
    return [
        _record(i, rng.randint(1900, 2000), rng.uniform(-60, 60) or 1.0, rng.uniform(-170, 170) or 1.0)
        for i in range(40)
    ]


@pytest.mark.parametrize("strategy", list(SelectionStrategy))
@pytest.mark.parametrize("n", [1, 5, 17, 39, 40])
def test_every_strategy_returns_n_distinct_records(pool, strategy, n):
    selected = DiversitySelector(random.Random(n)).select(pool, n, strategy)

    assert len(selected) == n
    assert len({record.id for record in selected}) == n


def test_duplicates_in_pool_are_ignored(pool):
    doubled = pool[:5] + pool[:5]
    selected = DiversitySelector(random.Random(1)).select(doubled, 10)
    assert sorted(record.id for record in selected) == sorted(record.id for record in pool[:5])


def test_small_pool_returns_everything(pool):
    assert len(DiversitySelector().select(pool[:3], 10)) == 3
    assert DiversitySelector().select([], 3) == []


def test_final_order_is_shuffled(pool):
    orders = {
        tuple(record.id for record in DiversitySelector(random.Random(seed)).select(pool, 40, "temporal"))
        for seed in range(5)
    }
    assert len(orders) > 1


def test_temporal_spread_covers_the_year_range(pool):
    selected = DiversitySelector(random.Random(0)).select(pool, 4, SelectionStrategy.TEMPORAL)
    years = sorted(record.year for record in pool)

    # one pick per quarter of the year-sorted pool
    assert min(record.year for record in selected) <= years[len(years) // 4]
    assert max(record.year for record in selected) >= years[3 * len(years) // 4]


def test_geographic_spread_prefers_distant_records():
    clustered = [_record(i, 1950, 48.85 + i * 0.001, 2.35 + i * 0.001) for i in range(10)]
    far = _record(99, 1950, -33.87, 151.21)

    for seed in range(5):
        selected = DiversitySelector(random.Random(seed)).select(clustered + [far], 2, "geographic")
        assert "99" in {record.id for record in selected}


def test_haversine_known_distance():
    paris = Coordinates(latitude=48.8566, longitude=2.3522)
    london = Coordinates(latitude=51.5074, longitude=-0.1278)
    assert haversine_km(paris, london) == pytest.approx(343.5, abs=2)


def test_unknown_strategy_rejected(pool):
    with pytest.raises(ValueError):
        DiversitySelector().select(pool, 3, "alphabetical")

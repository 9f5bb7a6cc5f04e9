"""Unit tests for the fetch CLI."""

from __future__ import annotations

import json
from datetime import date

import pytest

import main as cli
from models import Coordinates, PhotoMetadata, PhotoRecord
from utils.exceptions import InsufficientCandidatesError


def _record() -> PhotoRecord:
    return PhotoRecord(
        id="42",
        url="https://upload.wikimedia.org/42.jpg",
        title="Harbour 1931",
        year=1931,
        coordinates=Coordinates(latitude=53.55, longitude=9.99),
        metadata=PhotoMetadata(license="CC0", date_created=date(1931, 1, 1), format="jpeg", mime_type="image/jpeg"),
    )


class _StubService:
    calls = []
    error = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def fetch_photos(self, count, category, force_refresh):
        _StubService.calls.append((count, category, force_refresh))
        if _StubService.error is not None:
            raise _StubService.error
        return (_record(),)


@pytest.fixture
def stub_service(monkeypatch):
    _StubService.calls = []
    _StubService.error = None
    monkeypatch.setattr(cli, "PhotoAcquisitionService", _StubService)
    return _StubService


def test_parser_defaults():
    args = cli.build_parser().parse_args(["fetch"])
    assert (args.count, args.category, args.force_refresh, args.json) == (5, "all", False, False)


def test_parser_rejects_bad_values():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["fetch", "--count", "0"])
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["fetch", "--category", "food"])


def test_fetch_prints_json(stub_service, capsys):
    exit_code = cli.main(["fetch", "--count", "1", "--category", "transport", "--force-refresh", "--json"])

    assert exit_code == 0
    assert stub_service.calls == [(1, "transport", True)]
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["id"] == "42"
    assert payload[0]["metadata"]["format"] == "jpeg"


def test_fetch_error_shows_user_message(stub_service, capsys):
    stub_service.error = InsufficientCandidatesError(requested_count=3, attempts_used=4)

    assert cli.main(["fetch", "--count", "3"]) == 1
    assert "No suitable photos found" in capsys.readouterr().out

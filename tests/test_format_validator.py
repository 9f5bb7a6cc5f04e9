"""
Tests for the default format validator
"""
import pytest

from models import ValidationRequest
from processing import FormatValidator, MetadataFormatValidator


def test_default_validator_satisfies_protocol():
    assert isinstance(MetadataFormatValidator(), FormatValidator)


@pytest.mark.asyncio
async def test_mime_hint_wins_over_extension():
    verdict = await MetadataFormatValidator().validate("https://x.org/photo.tif", mime_hint="image/jpeg")

    assert verdict.accepted
    assert verdict.detected_format == "jpeg"
    assert verdict.detection_method == "mime-type"
    assert verdict.confidence == 0.9


@pytest.mark.asyncio
async def test_extension_used_without_hint():
    verdict = await MetadataFormatValidator().validate("https://x.org/Photo.PNG?download=1")

    assert verdict.accepted
    assert verdict.detected_format == "png"
    assert verdict.detected_mime_type == "image/png"
    assert verdict.detection_method == "url-extension"


@pytest.mark.asyncio
async def test_rejected_formats_carry_reason():
    verdict = await MetadataFormatValidator().validate("https://x.org/scan.tiff", mime_hint="image/tiff")

    assert not verdict.is_valid
    assert verdict.detected_format == "tiff"
    assert verdict.rejection_reason == "Limited browser support"


@pytest.mark.asyncio
async def test_unknown_format():
    verdict = await MetadataFormatValidator().validate("https://x.org/file.ogv", mime_hint="video/ogg")

    assert not verdict.accepted
    assert verdict.detection_method == "unknown"
    assert verdict.confidence == 0.0


@pytest.mark.asyncio
async def test_empty_url_is_invalid():
    verdict = await MetadataFormatValidator().validate("")
    assert verdict.detection_method == "input-validation"
    assert not verdict.is_valid


@pytest.mark.asyncio
async def test_batch_preserves_order():
    requests = [
        ValidationRequest(url="https://x.org/a.gif"),
        ValidationRequest(url="https://x.org/b.jpg"),
        ValidationRequest(url="https://x.org/c.webp", mime_hint="image/webp"),
    ]
    verdicts = await MetadataFormatValidator().validate_batch(requests)

    assert [verdict.detected_format for verdict in verdicts] == ["gif", "jpeg", "webp"]
    assert [verdict.is_valid for verdict in verdicts] == [False, True, True]

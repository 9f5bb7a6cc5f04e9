"""
Metadata Extractor
从 Commons imageinfo 原始数据中解析年份、坐标、许可证和作者
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import html
import logging
import math
import re

from models import (
    MIN_YEAR,
    Coordinates,
    PhotoMetadata,
    PhotoRecord,
    SourceType,
    ValidationVerdict,
)


logger = logging.getLogger(__name__)

UNKNOWN_LICENSE = "Unknown License"
MAX_TEXT_LENGTH = 200

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")
MULTIPLE_SPACES = re.compile(r"\s+")
TITLE_EXTENSION_PATTERN = re.compile(r"\.(jpe?g|png|gif|webp|tiff?)$", re.IGNORECASE)

# 日期字段, 顺序即优先级
DATE_FIELDS: Tuple[str, ...] = ("DateTimeOriginal", "DateTime", "DateTimeDigitized")

# 年份解析表: 按顺序尝试, 第一个得到合法年份的解析器生效
YEAR_PARSERS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("iso-date", re.compile(r"(\d{4})-\d{2}-\d{2}")),       # 1965-06-15
    ("exif-date", re.compile(r"(\d{4}):\d{2}:\d{2}")),      # 1965:06:15 12:00:00
    ("bare-year", re.compile(r"(\d{4})")),                  # 1965
)


def _dms_to_decimal(degrees: str, minutes: str, seconds: str, hemisphere: Optional[str]) -> float:
    value = float(degrees) + float(minutes) / 60 + float(seconds) / 3600
    return -value if hemisphere in ("S", "W") else value


_DMS_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*°\s*(\d+(?:\.\d+)?)\s*['′]\s*(\d+(?:\.\d+)?)\s*(?:\"|″|'')?\s*([NSEW])?",
    re.IGNORECASE,
)
_DM_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*°\s*(\d+(?:\.\d+)?)\s*['′]\s*([NSEW])?", re.IGNORECASE)
_DECIMAL_PATTERN = re.compile(r"^\s*([-+]?\d+(?:\.\d+)?)\s*°?\s*([NSEW])?\s*$", re.IGNORECASE)


def _parse_dms(text: str) -> Optional[float]:
    match = _DMS_PATTERN.search(text)
    if not match:
        return None
    degrees, minutes, seconds, hemisphere = match.groups()
    return _dms_to_decimal(degrees, minutes, seconds, (hemisphere or "").upper() or None)


def _parse_degrees_minutes(text: str) -> Optional[float]:
    match = _DM_PATTERN.search(text)
    if not match:
        return None
    degrees, minutes, hemisphere = match.groups()
    return _dms_to_decimal(degrees, minutes, "0", (hemisphere or "").upper() or None)


def _parse_decimal(text: str) -> Optional[float]:
    match = _DECIMAL_PATTERN.match(text)
    if not match:
        return None
    value = float(match.group(1))
    hemisphere = (match.group(2) or "").upper()
    if hemisphere in ("S", "W") and value > 0:
        value = -value
    return value


# 坐标解析表: 度分秒优先, 十进制最后
COORDINATE_PARSERS: Tuple[Tuple[str, Callable[[str], Optional[float]]], ...] = (
    ("dms", _parse_dms),
    ("degrees-minutes", _parse_degrees_minutes),
    ("decimal", _parse_decimal),
)


def strip_html(value: Any) -> str:
    """移除 HTML 标签和实体, 合并空白"""
    if value is None:
        return ""
    text = HTML_TAG_PATTERN.sub(" ", str(value))
    text = html.unescape(text)
    return MULTIPLE_SPACES.sub(" ", text).strip()


def parse_year(text: str, min_year: int = MIN_YEAR, max_year: Optional[int] = None) -> Optional[int]:
    """
    从日期字符串中解析年份

    Args:
        text: 日期字符串 (可含 HTML)
        min_year: 最早年份
        max_year: 最晚年份, 默认当前年份

    Returns:
        [min_year, max_year] 内的年份, 否则 None
    """
    if max_year is None:
        max_year = date.today().year
    cleaned = strip_html(text)
    if not cleaned:
        return None

    for _name, pattern in YEAR_PARSERS:
        match = pattern.search(cleaned)
        if not match:
            continue
        year = int(match.group(1))
        if min_year <= year <= max_year:
            return year
    return None


def parse_coordinate(value: Any) -> Optional[float]:
    """
    解析单个坐标分量

    支持数值、十进制字符串 (可带半球字母) 和度分秒字符串, S/W 为负。
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = strip_html(value)
    if not text:
        return None

    for _name, parser in COORDINATE_PARSERS:
        try:
            result = parser(text)
        except ValueError:
            result = None
        if result is not None:
            return result if math.isfinite(result) else None
    return None


def _ext_value(extmetadata: Mapping[str, Any], name: str) -> Optional[Any]:
    entry = extmetadata.get(name)
    if isinstance(entry, Mapping):
        value = entry.get("value")
    else:
        value = entry
    if value in (None, ""):
        return None
    return value


@dataclass(frozen=True)
class ExtractedPhoto:
    """元数据提取通过、尚未做格式校验的候选"""
    id: str
    url: str
    title: str
    year: int
    coordinates: Coordinates
    license: str
    description: Optional[str] = None
    photographer: Optional[str] = None
    mime_hint: Optional[str] = None
    metadata_hint: Dict[str, Any] = field(default_factory=dict)

    def to_record(self, verdict: ValidationVerdict) -> PhotoRecord:
        """结合格式判定生成 PhotoRecord; 判定未通过时抛 ValueError"""
        if not verdict.accepted:
            raise ValueError(f"Verdict for {self.url} does not accept the photo")

        format_name = str(verdict.detected_format)
        mime_type = verdict.detected_mime_type or self.mime_hint or f"image/{format_name}"
        return PhotoRecord(
            id=self.id,
            url=self.url,
            title=self.title,
            description=self.description,
            year=self.year,
            coordinates=self.coordinates,
            source=SourceType.WIKIMEDIA_COMMONS,
            metadata=PhotoMetadata(
                photographer=self.photographer,
                license=self.license,
                date_created=date(self.year, 1, 1),
                format=format_name,
                mime_type=mime_type,
            ),
        )


class MetadataExtractor:
    """
    元数据提取器

    全有或全无: 任何必填字段缺失或不合法时整条候选被拒绝, 不做修补。
    年份检查在坐标之前, 都在格式校验之前完成。
    """

    def __init__(self, min_year: int = MIN_YEAR, max_year: Optional[int] = None):
        """
        Args:
            min_year: 最早可接受年份
            max_year: 最晚可接受年份, 默认每次调用时取当前年份
        """
        self.min_year = max(MIN_YEAR, int(min_year))
        self._max_year = max_year

    @property
    def max_year(self) -> int:
        return self._max_year if self._max_year is not None else date.today().year

    def extract(self, page: Mapping[str, Any]) -> Optional[ExtractedPhoto]:
        """
        解析一条 imageinfo 页面数据

        Returns:
            ExtractedPhoto, 不满足要求时返回 None
        """
        imageinfo = (page.get("imageinfo") or [None])[0]
        page_id = page.get("pageid")
        raw_title = str(page.get("title") or "")
        if not imageinfo or page_id is None or not raw_title:
            logger.debug(f"Rejected {raw_title or page_id}: missing imageinfo")
            return None

        url = imageinfo.get("url")
        if not url:
            logger.debug(f"Rejected {raw_title}: missing url")
            return None

        extmetadata = imageinfo.get("extmetadata") or {}
        metadata = imageinfo.get("metadata") or []

        year = self.extract_year(extmetadata)
        if year is None:
            logger.debug(f"Rejected {raw_title}: no usable year")
            return None

        coordinates = self.extract_coordinates(extmetadata, metadata)
        if coordinates is None:
            logger.debug(f"Rejected {raw_title}: no usable coordinates")
            return None

        mime_hint = imageinfo.get("mime") or _ext_value(extmetadata, "MimeType")
        description = self.clean_text(_ext_value(extmetadata, "ImageDescription")) or None
        photographer = self.clean_text(_ext_value(extmetadata, "Artist")) or None

        return ExtractedPhoto(
            id=str(page_id),
            url=str(url),
            title=self.clean_title(raw_title),
            year=year,
            coordinates=coordinates,
            license=self.extract_license(extmetadata),
            description=description,
            photographer=photographer,
            mime_hint=str(mime_hint) if mime_hint else None,
            metadata_hint={"mime_type": mime_hint} if mime_hint else {},
        )

    def extract_year(self, extmetadata: Mapping[str, Any]) -> Optional[int]:
        """按字段优先级解析年份, 第一个合法年份生效"""
        max_year = self.max_year
        for field_name in DATE_FIELDS:
            value = _ext_value(extmetadata, field_name)
            if value is None:
                continue
            year = parse_year(str(value), self.min_year, max_year)
            if year is not None:
                return year
        return None

    def extract_coordinates(
        self,
        extmetadata: Mapping[str, Any],
        metadata: Sequence[Mapping[str, Any]] = (),
    ) -> Optional[Coordinates]:
        """
        解析 GPS 坐标

        先读 extmetadata 的 GPSLatitude/GPSLongitude, 再回退到原始 EXIF
        metadata 数组 (带 GPSLatitudeRef/GPSLongitudeRef 时按半球取符号)。
        缺失、越界或任一分量为 0 时返回 None。
        """
        latitude = longitude = None

        lat_value = _ext_value(extmetadata, "GPSLatitude")
        lon_value = _ext_value(extmetadata, "GPSLongitude")
        if lat_value is not None and lon_value is not None:
            latitude = parse_coordinate(lat_value)
            longitude = parse_coordinate(lon_value)

        if (latitude is None or longitude is None) and metadata:
            raw: Dict[str, Any] = {}
            for item in metadata:
                if isinstance(item, Mapping) and item.get("name"):
                    raw[str(item["name"])] = item.get("value")

            if "GPSLatitude" in raw:
                latitude = self._apply_ref(parse_coordinate(raw["GPSLatitude"]), raw.get("GPSLatitudeRef"))
            if "GPSLongitude" in raw:
                longitude = self._apply_ref(parse_coordinate(raw["GPSLongitude"]), raw.get("GPSLongitudeRef"))

        if latitude is None or longitude is None:
            return None
        if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
            return None
        if latitude == 0 or longitude == 0:
            return None
        return Coordinates(latitude=latitude, longitude=longitude)

    @staticmethod
    def _apply_ref(value: Optional[float], ref: Any) -> Optional[float]:
        if value is None:
            return None
        if str(ref or "").strip().upper() in ("S", "W") and value > 0:
            return -value
        return value

    def extract_license(self, extmetadata: Mapping[str, Any]) -> str:
        """LicenseShortName -> UsageTerms -> Unknown License"""
        for field_name in ("LicenseShortName", "UsageTerms"):
            license_name = self.clean_text(_ext_value(extmetadata, field_name))
            if license_name:
                return license_name
        return UNKNOWN_LICENSE

    @staticmethod
    def clean_text(value: Any, max_length: int = MAX_TEXT_LENGTH) -> str:
        """清洗描述类文本并截断"""
        return strip_html(value)[:max_length].strip()

    @staticmethod
    def clean_title(title: str) -> str:
        title = re.sub(r"^File:", "", title.strip())
        return TITLE_EXTENSION_PATTERN.sub("", title)

    def extract_many(self, pages: Sequence[Mapping[str, Any]]) -> List[ExtractedPhoto]:
        """批量提取, 单条失败只影响该条"""
        extracted = []
        for page in pages:
            try:
                photo = self.extract(page)
            except Exception as e:
                title = page.get("title") if isinstance(page, Mapping) else None
                logger.warning(f"Metadata extraction failed for {title}: {e}")
                photo = None
            if photo:
                extracted.append(photo)
        return extracted

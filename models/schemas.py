"""
Data Models / Schemas
定义统一的数据结构
"""
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


MIN_YEAR = 1900


class SourceType(str, Enum):
    """数据来源类型"""
    WIKIMEDIA_COMMONS = "Wikimedia Commons"


class PhotoCategory(str, Enum):
    """照片分类过滤 (ALL = 不过滤)"""
    ALL = "all"
    ARCHITECTURE = "architecture"
    PEOPLE = "people"
    TRANSPORT = "transport"
    EVENTS = "events"
    LANDSCAPES = "landscapes"


class Coordinates(BaseModel):
    """经纬度 (十进制度)"""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Candidate(BaseModel):
    """搜索命中, 尚未获取详情和校验"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Commons pageid")
    title: str = Field(..., description="文件页标题 (File:...)")
    raw_coordinates: Optional[Coordinates] = Field(None, description="geosearch 返回的坐标")


class PhotoMetadata(BaseModel):
    """照片元数据"""
    model_config = ConfigDict(frozen=True)

    photographer: Optional[str] = None
    license: str = Field(..., min_length=1)
    date_created: date
    format: str = Field(..., min_length=1, description="FormatValidator 判定的格式")
    mime_type: str = Field(..., min_length=1)


class PhotoRecord(BaseModel):
    """通过元数据提取和格式校验的历史照片"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    year: int
    coordinates: Coordinates
    source: SourceType = Field(default=SourceType.WIKIMEDIA_COMMONS)
    metadata: PhotoMetadata

    @field_validator("year")
    @classmethod
    def _year_in_range(cls, value: int) -> int:
        if not MIN_YEAR <= value <= date.today().year:
            raise ValueError(f"year {value} outside [{MIN_YEAR}, {date.today().year}]")
        return value

    @field_validator("coordinates")
    @classmethod
    def _non_zero_coordinates(cls, value: Coordinates) -> Coordinates:
        if value.latitude == 0 or value.longitude == 0:
            raise ValueError("coordinates must be non-zero")
        return value


class ValidationRequest(BaseModel):
    """单个 URL 的格式校验请求"""
    url: str
    mime_hint: Optional[str] = None
    metadata_hint: Dict[str, Any] = Field(default_factory=dict)


class ValidationVerdict(BaseModel):
    """FormatValidator 对单个 URL 的判定, 只读"""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    detected_format: Optional[str] = None
    detected_mime_type: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    detection_method: str
    rejection_reason: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.is_valid and bool(self.detected_format)


class SearchAttempt(BaseModel):
    """一次尝试的搜索参数, 随尝试次数单调扩大"""
    model_config = ConfigDict(frozen=True)

    attempt_number: int = Field(..., ge=0)
    radius: int = Field(..., gt=0, description="geosearch 半径(米)")
    per_location_limit: int = Field(..., gt=0)
    location_count: int = Field(..., ge=0)

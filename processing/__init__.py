"""
Processing Module
候选处理模块 - 元数据提取、格式校验
"""
from .metadata_extractor import (
    MetadataExtractor,
    ExtractedPhoto,
    UNKNOWN_LICENSE,
    parse_year,
    parse_coordinate,
    strip_html,
)
from .format_validator import (
    FormatValidator,
    MetadataFormatValidator,
    SUPPORTED_FORMATS,
    REJECTED_FORMATS,
)

__all__ = [
    # Metadata
    "MetadataExtractor",
    "ExtractedPhoto",
    "UNKNOWN_LICENSE",
    "parse_year",
    "parse_coordinate",
    "strip_html",
    # Format validation
    "FormatValidator",
    "MetadataFormatValidator",
    "SUPPORTED_FORMATS",
    "REJECTED_FORMATS",
]

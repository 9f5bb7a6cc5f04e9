"""
Utils Module
通用工具函数
"""
from .logger import setup_logger
from .exceptions import (
    PhotoAcquisitionError,
    ScraperError,
    InsufficientCandidatesError,
    FetchTransportError,
)

__all__ = [
    "setup_logger",
    "PhotoAcquisitionError",
    "ScraperError",
    "InsufficientCandidatesError",
    "FetchTransportError",
]

"""
Data Models
"""
from .schemas import (
    MIN_YEAR,
    SourceType,
    PhotoCategory,
    Coordinates,
    Candidate,
    PhotoMetadata,
    PhotoRecord,
    ValidationRequest,
    ValidationVerdict,
    SearchAttempt,
)

__all__ = [
    "MIN_YEAR",
    "SourceType",
    "PhotoCategory",
    "Coordinates",
    "Candidate",
    "PhotoMetadata",
    "PhotoRecord",
    "ValidationRequest",
    "ValidationVerdict",
    "SearchAttempt",
]

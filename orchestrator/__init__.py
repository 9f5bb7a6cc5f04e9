"""Photo acquisition orchestration: search fan-out, retries and final selection."""

from .diversity import DiversitySelector, SelectionStrategy, haversine_km
from .retry import AcquisitionResult, AcquisitionState, RetryController
from .search import SearchOrchestrator, SearchOutcome
from .service import PhotoAcquisitionService, fetch_photos, get_photo_service

__all__ = [
    "AcquisitionResult",
    "AcquisitionState",
    "DiversitySelector",
    "PhotoAcquisitionService",
    "RetryController",
    "SearchOrchestrator",
    "SearchOutcome",
    "SelectionStrategy",
    "fetch_photos",
    "get_photo_service",
    "haversine_km",
]

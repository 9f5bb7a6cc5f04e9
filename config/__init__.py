"""
Configuration Management Module
统一配置管理
"""
from .settings import (
    Settings,
    WikimediaSettings,
    AcquisitionSettings,
    CacheSettings,
    GeneralSettings,
    get_settings,
    get_cache_settings,
)
from .locations import SeedLocation, SEED_LOCATIONS
from .categories import CategoryProfile, CATEGORY_PROFILES, GENERAL_KEYWORDS

__all__ = [
    "Settings",
    "WikimediaSettings",
    "AcquisitionSettings",
    "CacheSettings",
    "GeneralSettings",
    "get_settings",
    "get_cache_settings",
    "SeedLocation",
    "SEED_LOCATIONS",
    "CategoryProfile",
    "CATEGORY_PROFILES",
    "GENERAL_KEYWORDS",
]

"""
Scrapers Module
"""
from .base import BaseScraper, RateLimitedScraper
from .wikimedia_scraper import WikimediaCommonsScraper

__all__ = [
    # Base
    "BaseScraper",
    "RateLimitedScraper",
    # Wikimedia Commons
    "WikimediaCommonsScraper",
]

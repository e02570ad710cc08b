"""Shared dependencies for API routes."""

import logging
from functools import lru_cache

from config import Settings, settings
from services.license.base import LicenseVerifier
from services.license.http_verifier import HttpVerifier
from services.license.mock_verifier import MockVerifier
from services.profanity_filter import (
    DEFAULT_WORDS,
    FileWordSource,
    ProfanityFilter,
    StaticWordSource,
)

logger = logging.getLogger(__name__)


def build_license_verifier(config: Settings) -> LicenseVerifier:
    """Pick the verifier implementation from configuration."""
    if config.use_mock_verifier:
        logger.warning("No NURSYS_API_KEY set or mock mode forced - using mock license verifier")
        return MockVerifier()
    return HttpVerifier(
        api_url=config.nursys_api_url,
        api_key=config.nursys_api_key,
        timeout=config.license_request_timeout,
    )


def build_profanity_filter(config: Settings) -> ProfanityFilter:
    if config.profanity_words_file:
        source = FileWordSource(config.profanity_words_file)
    else:
        source = StaticWordSource(DEFAULT_WORDS)
    return ProfanityFilter(source, ttl_seconds=config.profanity_cache_ttl_seconds)


@lru_cache
def get_license_verifier() -> LicenseVerifier:
    return build_license_verifier(settings)


@lru_cache
def get_profanity_filter() -> ProfanityFilter:
    return build_profanity_filter(settings)


def close_cached_dependencies() -> None:
    """Close the process-wide verifier, if one was built, and drop the cache."""
    if get_license_verifier.cache_info().currsize:
        get_license_verifier().close()
    get_license_verifier.cache_clear()
    get_profanity_filter.cache_clear()

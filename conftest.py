import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _isolated_cache_and_throttle(settings):
    """Start every test with an empty cache and the burst throttle off."""
    settings.API_BURST_RATE = None
    cache.clear()
    yield
    cache.clear()

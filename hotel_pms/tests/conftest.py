import os

os.environ.setdefault("JWT_SECRET", "test-secret-for-hotel-pms")

import pytest

from hotel_pms.core.config import DEFAULT_DATA_DIR, get_settings
from hotel_pms.db.store import JsonStore


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def seeded_store() -> JsonStore:
    """A store loaded from the placeholder data shipped with the package."""
    return JsonStore.from_directory(DEFAULT_DATA_DIR)

import random
import sys
from pathlib import Path

import pytest

# Ensure src on path for imports without an editable install
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / 'src'
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from zaminseva.locality.cache import ScoringService, reset_default_service  # noqa: E402


@pytest.fixture()
def mock_property():
    return {
        'id': 'test-1',
        'location': 'Bandra West, Mumbai',
        'latitude': 19.0596,
        'longitude': 72.8295,
        'price': 25000000,  # 2.5 Cr
        'area': 1200,
        'type': 'apartment',
        'yearBuilt': 2020,
    }


@pytest.fixture()
def service():
    """Variance-free service so expected scores are exact."""
    return ScoringService(variance=False)


@pytest.fixture()
def seeded_rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _fresh_default_service():
    reset_default_service()
    yield
    reset_default_service()

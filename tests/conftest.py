from datetime import date

import pytest

from .helpers import FixedRandom


@pytest.fixture
def fixed_random() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def today() -> date:
    return date(2025, 6, 14)

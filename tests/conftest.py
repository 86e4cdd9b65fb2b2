import os
import sys
from datetime import date, timedelta

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from api.routes.common import reset_provider
from engine.models import DatedCount


@pytest.fixture(autouse=True)
def clear_provider():
    """Drop the process-wide source provider before and after each test."""
    reset_provider()
    yield
    reset_provider()


@pytest.fixture
def counts():
    """Build a daily DatedCount series starting at ``start`` from raw values."""

    def build(values, start=date(2021, 1, 1)):
        return [DatedCount(date=start + timedelta(days=i), count=int(v)) for i, v in enumerate(values)]

    return build

"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest
import respx
from tenacity import wait_none

# Add src/ to path so tests can import agriops
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from agriops.core import client  # noqa: E402
from agriops.core.config import settings  # noqa: E402
from agriops.grazing.inputs import Herd, Paddock  # noqa: E402


@pytest.fixture
def mock_record_store():
    """Mock the AgriOps record-store API."""
    with respx.mock(base_url=settings.agriops_api_url) as mock:
        yield mock


@pytest.fixture
def no_retry_wait(monkeypatch):
    """Retry immediately instead of backing off."""
    monkeypatch.setattr(client.call_action_with_retry.retry, "wait", wait_none())


@pytest.fixture
def scenario_herd():
    """60 head of 1200 lb cattle eating 2.6% of body weight (1872 lb DM/day)."""
    return Herd(head_count=60, avg_body_weight_lb=1200, intake_pct_body_weight=2.6)


@pytest.fixture
def scenario_paddocks():
    """Two paddocks worth ~2.56 and ~2.69 days of the scenario herd."""
    return [
        Paddock(
            id="1",
            name="North 1",
            acres=5,
            standing_dm_lb_per_acre=2800,
            target_residual_lb_per_acre=1200,
            utilization_pct=60,
        ),
        Paddock(
            id="2",
            name="North 2",
            acres=6,
            standing_dm_lb_per_acre=2600,
            target_residual_lb_per_acre=1200,
            utilization_pct=60,
        ),
    ]


@pytest.fixture
def sample_paddock_rows():
    """Sample listWithCounts rows from the record store."""
    return [
        {
            "id": 1,
            "tenant_id": "demo",
            "name": "North 1",
            "acres": 5,
            "zone": "Zone 6",
            "notes": None,
            "forage_dm_lb_ac": 2800,
            "residual_lb_ac": 1200,
            "util_pct": 60,
            "growth_lb_ac_day": 40,
            "head_count": 12,
        },
        {
            "id": 2,
            "tenant_id": "demo",
            "name": "North 2",
            "acres": None,
            "zone": None,
            "notes": "",
            "forage_dm_lb_ac": "2600",
            "residual_lb_ac": 1200,
            "util_pct": 60,
            "growth_lb_ac_day": None,
            "head_count": 0,
        },
    ]

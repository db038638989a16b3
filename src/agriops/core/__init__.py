"""Core module - configuration, record-store client and units."""

from agriops.core import client, units
from agriops.core.client import (
    PADDOCKS_ENDPOINT,
    RecordStoreAPIError,
    RecordStoreError,
    RetryableError,
    call_action,
    call_action_with_retry,
)
from agriops.core.config import get_cache_dir, settings
from agriops.core.logging_config import setup_logging
from agriops.core.units import (
    format_area,
    format_currency,
    format_dm_rate,
    format_mass,
    is_imperial,
)

__all__ = [
    "client",
    "units",
    "settings",
    "get_cache_dir",
    "setup_logging",
    "call_action",
    "call_action_with_retry",
    "PADDOCKS_ENDPOINT",
    "RecordStoreError",
    "RetryableError",
    "RecordStoreAPIError",
    # Unit conversion helpers
    "format_area",
    "format_currency",
    "format_dm_rate",
    "format_mass",
    "is_imperial",
]

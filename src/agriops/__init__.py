"""AgriOps grazing planning tools.

This package provides the forage budget and grazing-rotation planner,
the paddock amendment cost model, and a client for the AgriOps record
store that holds paddocks and their seeding/amendment history.

Subpackages:
- agriops.core: Configuration, record-store client, units
- agriops.data: Paddock, seeding and amendment records
- agriops.grazing: Planning engine, session and CLI
"""

# Re-export common items for convenience
from agriops.core import (
    call_action,
    call_action_with_retry,
    client,
    settings,
)

__all__ = [
    "client",
    "settings",
    "call_action",
    "call_action_with_retry",
]

__version__ = "0.1.0"

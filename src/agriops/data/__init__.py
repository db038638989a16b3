"""Data modules - record-store paddocks, seeding and amendment history."""

from agriops.data import paddocks
from agriops.data.paddocks import (
    count_head_by_paddock,
    delete_amendment_record,
    delete_paddock,
    delete_seeding_record,
    list_amendment_records,
    list_paddocks,
    list_seeding_records,
    load_paddocks_cache,
    load_paddocks_file,
    save_paddocks_cache,
    upsert_amendment_record,
    upsert_paddock,
    upsert_seeding_record,
)

__all__ = [
    "paddocks",
    "list_paddocks",
    "upsert_paddock",
    "delete_paddock",
    "list_seeding_records",
    "upsert_seeding_record",
    "delete_seeding_record",
    "list_amendment_records",
    "upsert_amendment_record",
    "delete_amendment_record",
    "count_head_by_paddock",
    "save_paddocks_cache",
    "load_paddocks_cache",
    "load_paddocks_file",
]

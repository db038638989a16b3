"""Record-store functions for paddocks, seeding records and amendment records.

All calls are tenant scoped and go through the /api/paddocks action endpoint.
Seeding and amendment records are application history (what was planted or
spread, and when); the cost-model inputs on `Paddock` are not persisted here.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TypedDict

from agriops.core import get_cache_dir
from agriops.core.client import call_action_with_retry
from agriops.grazing.inputs import Paddock, numeric_or_zero

PADDOCKS_CACHE_FILE = "paddocks.json"


class SpeciesRate(TypedDict):
    """One species line in a seed mix."""

    species: str
    rate_lb_ac: float


def _clean_text(value: str | None) -> str | None:
    """Trim text; blank becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def clean_species_rates(species_rates: list[dict] | None) -> list[SpeciesRate]:
    """Trim species names, drop blank or malformed rows and coerce rates to numbers."""
    cleaned: list[SpeciesRate] = []
    for item in species_rates or []:
        if not isinstance(item, Mapping):
            continue
        species = str(item.get("species") or "").strip()
        if not species:
            continue
        cleaned.append(SpeciesRate(species=species, rate_lb_ac=numeric_or_zero(item.get("rate_lb_ac"))))
    return cleaned


# =============================================================================
# Paddocks
# =============================================================================


async def list_paddocks(tenant_id: str) -> list[Paddock]:
    """
    Fetch all paddocks for a tenant, with head counts.

    Head counts come from the store's paddocks-with-counts view (animals whose
    current location is the paddock).
    """
    rows = await call_action_with_retry("listWithCounts", tenant_id=tenant_id)
    return [Paddock.from_record(row) for row in rows or []]


async def upsert_paddock(tenant_id: str, paddock: Paddock) -> dict:
    """Create or update a paddock row."""
    row = paddock.to_record()
    row.pop("head_count", None)  # derived by the store's view
    if not row["id"]:
        row.pop("id")
    row["tenant_id"] = tenant_id
    return await call_action_with_retry("upsertPaddock", tenant_id=tenant_id, row=row)


async def delete_paddock(tenant_id: str, paddock_id: str) -> dict:
    """Delete a paddock."""
    return await call_action_with_retry("deletePaddock", tenant_id=tenant_id, id=paddock_id)


# =============================================================================
# Seeding Records
# =============================================================================


async def list_seeding_records(tenant_id: str, paddock_id: str) -> list[dict]:
    """Fetch seeding history for a paddock."""
    return await call_action_with_retry("listSeeding", tenant_id=tenant_id, paddock_id=paddock_id) or []


async def upsert_seeding_record(
    tenant_id: str,
    paddock_id: str,
    mix_name: str | None,
    species_rates: list[dict] | None,
    notes: str | None = None,
    date_planted: str | None = None,
) -> dict:
    """
    Save a seeding record for a paddock.

    Args:
        tenant_id: Tenant the paddock belongs to
        paddock_id: Paddock ID
        mix_name: Name of the seed mix
        species_rates: List of {species, rate_lb_ac}; always sent as a list
        notes: Free-text notes
        date_planted: ISO date, optional

    Returns:
        The saved row
    """
    row = {
        "paddock_id": paddock_id,
        "date_planted": date_planted or None,
        "mix_name": _clean_text(mix_name),
        "mix_items": clean_species_rates(species_rates),
        "notes": _clean_text(notes),
    }
    return await call_action_with_retry("upsertSeeding", tenant_id=tenant_id, row=row)


async def delete_seeding_record(tenant_id: str, record_id: str) -> dict:
    """Delete a seeding record."""
    return await call_action_with_retry("deleteSeeding", tenant_id=tenant_id, id=record_id)


# =============================================================================
# Amendment Records
# =============================================================================


async def list_amendment_records(tenant_id: str, paddock_id: str) -> list[dict]:
    """Fetch amendment history for a paddock."""
    return await call_action_with_retry("listAmendments", tenant_id=tenant_id, paddock_id=paddock_id) or []


async def upsert_amendment_record(
    tenant_id: str,
    paddock_id: str,
    product: str,
    rate_text: str | None,
    notes: str | None = None,
    date_applied: str | None = None,
) -> dict:
    """
    Save an amendment application record.

    Raises:
        ValueError: If product is blank
    """
    product_name = _clean_text(product)
    if not product_name:
        raise ValueError("Product is required")

    row = {
        "paddock_id": paddock_id,
        "date_applied": date_applied or None,
        "product": product_name,
        "rate": _clean_text(rate_text),
        "notes": _clean_text(notes),
    }
    return await call_action_with_retry("upsertAmendment", tenant_id=tenant_id, row=row)


async def delete_amendment_record(tenant_id: str, record_id: str) -> dict:
    """Delete an amendment record."""
    return await call_action_with_retry("deleteAmendment", tenant_id=tenant_id, id=record_id)


# =============================================================================
# Head Counts
# =============================================================================


def count_head_by_paddock(cattle_rows: list[dict]) -> dict[str, int]:
    """
    Count animals per paddock name from cattle rows.

    Uses each row's `current_paddock`; rows without a location are skipped.
    """
    counts: dict[str, int] = {}
    for row in cattle_rows:
        key = (row.get("current_paddock") or "").strip()
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts


# =============================================================================
# Local Cache
# =============================================================================


def save_paddocks_cache(paddocks: list[Paddock], cache_path: Path | None = None) -> Path:
    """Write paddocks to the local JSON cache."""
    if cache_path is None:
        cache_path = get_cache_dir() / PADDOCKS_CACHE_FILE

    with open(cache_path, "w") as f:
        json.dump({"paddocks": [p.to_record() for p in paddocks]}, f, indent=2)

    return cache_path


def load_paddocks_file(path: Path) -> list[Paddock]:
    """
    Load paddocks from a JSON file.

    Accepts either a bare list of paddock rows or {"paddocks": [...]}.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not JSON or its rows are not objects
    """
    with open(path) as f:
        data = json.load(f)

    rows = data.get("paddocks", []) if isinstance(data, dict) else data
    if not isinstance(rows, list) or not all(isinstance(row, Mapping) for row in rows):
        raise ValueError(f"Expected a list of paddock objects in {path}")
    return [Paddock.from_record(row) for row in rows]


def load_paddocks_cache(cache_path: Path | None = None) -> list[Paddock]:
    """Load cached paddocks (written by `save_paddocks_cache`)."""
    if cache_path is None:
        cache_path = get_cache_dir() / PADDOCKS_CACHE_FILE
    return load_paddocks_file(cache_path)

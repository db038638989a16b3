"""
Herd and paddock input snapshots for the grazing planner.

Every number that enters the planning engine passes through
`numeric_or_zero()` exactly once, in `__post_init__` of `Herd` or `Paddock`.
Missing, blank, non-numeric, non-finite and negative values all become 0,
so partially-typed user input degrades to "no contribution" instead of
raising. The formulas downstream can then assume clean non-negative floats.

Herd and Paddock are frozen dataclasses. Edits produce new snapshots via
`replace()`; nothing in the engine mutates them.
"""

import dataclasses
import math
from dataclasses import dataclass
from typing import Any

# Representative planner defaults
DEFAULT_HEAD_COUNT = 45
DEFAULT_BODY_WEIGHT_LB = 1200.0
DEFAULT_INTAKE_PCT = 2.5

# Amendment inputs; all optional and 0 when absent
AMENDMENT_FIELDS = (
    "seed_rate_lb_per_acre",
    "seed_price_per_lb",
    "n_rate_lb_per_acre",
    "p_rate_lb_per_acre",
    "k_rate_lb_per_acre",
    "n_cost_per_lb",
    "p_cost_per_lb",
    "k_cost_per_lb",
    "lime_rate_tons_per_acre",
    "lime_cost_per_ton",
)

FORAGE_FIELDS = (
    "acres",
    "standing_dm_lb_per_acre",
    "target_residual_lb_per_acre",
    "growth_lb_per_acre_per_day",
)

# Record-store column -> Paddock field
RECORD_FIELD_MAP = {
    "acres": "acres",
    "forage_dm_lb_ac": "standing_dm_lb_per_acre",
    "residual_lb_ac": "target_residual_lb_per_acre",
    "util_pct": "utilization_pct",
    "growth_lb_ac_day": "growth_lb_per_acre_per_day",
    "seed_rate_lb_ac": "seed_rate_lb_per_acre",
    "seed_price_lb": "seed_price_per_lb",
    "n_rate_lb_ac": "n_rate_lb_per_acre",
    "p_rate_lb_ac": "p_rate_lb_per_acre",
    "k_rate_lb_ac": "k_rate_lb_per_acre",
    "n_cost_lb": "n_cost_per_lb",
    "p_cost_lb": "p_cost_per_lb",
    "k_cost_lb": "k_cost_per_lb",
    "lime_rate_t_ac": "lime_rate_tons_per_acre",
    "lime_cost_t": "lime_cost_per_ton",
}


def numeric_or_zero(value: Any) -> float:
    """
    Coerce user input to a finite, non-negative float.

    Numbers and numeric strings are accepted; anything else (None, "",
    "abc", NaN, inf, negatives, booleans) becomes 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def percent_or_zero(value: Any) -> float:
    """Coerce a percentage to [0, 100]."""
    return min(numeric_or_zero(value), 100.0)


@dataclass(frozen=True)
class Herd:
    """Herd parameters for a planning session."""

    head_count: int = DEFAULT_HEAD_COUNT
    avg_body_weight_lb: float = DEFAULT_BODY_WEIGHT_LB
    intake_pct_body_weight: float = DEFAULT_INTAKE_PCT

    def __post_init__(self):
        object.__setattr__(self, "head_count", int(numeric_or_zero(self.head_count)))
        object.__setattr__(self, "avg_body_weight_lb", numeric_or_zero(self.avg_body_weight_lb))
        object.__setattr__(self, "intake_pct_body_weight", numeric_or_zero(self.intake_pct_body_weight))

    def replace(self, **changes: Any) -> "Herd":
        return dataclasses.replace(self, **changes)


DEFAULT_HERD = Herd()


@dataclass(frozen=True)
class Paddock:
    """
    Forage state and amendment rates for one paddock.

    Forage figures are per acre; `utilization_pct` is the share of takeable
    forage actually eaten (the rest is trampled or refused).
    """

    id: str
    name: str = ""
    acres: float = 0.0
    standing_dm_lb_per_acre: float = 0.0
    target_residual_lb_per_acre: float = 0.0
    utilization_pct: float = 0.0
    growth_lb_per_acre_per_day: float = 0.0

    seed_rate_lb_per_acre: float = 0.0
    seed_price_per_lb: float = 0.0
    n_rate_lb_per_acre: float = 0.0
    p_rate_lb_per_acre: float = 0.0
    k_rate_lb_per_acre: float = 0.0
    n_cost_per_lb: float = 0.0
    p_cost_per_lb: float = 0.0
    k_cost_per_lb: float = 0.0
    lime_rate_tons_per_acre: float = 0.0
    lime_cost_per_ton: float = 0.0

    # Display only; never used in a formula
    zone: str | None = None
    head_count: int = 0
    notes: str | None = None

    def __post_init__(self):
        pid = str(self.id)
        label = str(self.name).strip() if self.name is not None else ""
        object.__setattr__(self, "id", pid)
        object.__setattr__(self, "name", label or f"Paddock {pid}")

        for key in FORAGE_FIELDS + AMENDMENT_FIELDS:
            object.__setattr__(self, key, numeric_or_zero(getattr(self, key)))
        object.__setattr__(self, "utilization_pct", percent_or_zero(self.utilization_pct))
        object.__setattr__(self, "head_count", int(numeric_or_zero(self.head_count)))

        zone = self.zone
        object.__setattr__(self, "zone", (str(zone).strip() or None) if zone is not None else None)
        object.__setattr__(self, "notes", self.notes or None)

    @classmethod
    def from_values(cls, **fields: Any) -> "Paddock":
        """
        Build a paddock from raw values.

        Unknown keys are ignored so whole form payloads can be passed in.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{key: value for key, value in fields.items() if key in known})

    @classmethod
    def from_record(cls, row: dict) -> "Paddock":
        """Map a record-store paddock row to a Paddock."""
        fields = {target: row.get(column) for column, target in RECORD_FIELD_MAP.items()}
        return cls(
            id=row.get("id", ""),
            name=row.get("name"),
            zone=row.get("zone"),
            notes=row.get("notes"),
            head_count=row.get("head_count"),
            **fields,
        )

    def to_record(self) -> dict:
        """Inverse of `from_record()`, for caching and upserts."""
        row: dict[str, Any] = {"id": self.id, "name": self.name}
        for column, target in RECORD_FIELD_MAP.items():
            row[column] = getattr(self, target)
        row["zone"] = self.zone
        row["notes"] = self.notes
        row["head_count"] = self.head_count
        return row

    def replace(self, **changes: Any) -> "Paddock":
        """Return a new sanitized snapshot with `changes` applied."""
        return dataclasses.replace(self, **changes)

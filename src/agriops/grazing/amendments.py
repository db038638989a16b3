"""
Seeding and amendment cost model.

Per paddock:

    seed       = seed_rate_lb_per_acre * seed_price_per_lb * acres
    fertilizer = (N rate * N cost + P rate * P cost + K rate * K cost) * acres
    lime       = lime_rate_tons_per_acre * lime_cost_per_ton * acres
    total      = seed + fertilizer + lime

Project totals are the plain sum over paddocks. No rounding happens here;
formatting is left to the caller.

Also holds the seed-mix catalog and the default amendment plan used when a
paddock is first added to a seeding project.
"""

from dataclasses import dataclass
from typing import TypedDict

from agriops.grazing.inputs import Paddock

# Default recipe for a new paddock (lb/ac, tons/ac)
DEFAULT_SEED_RATE = 15.0  # when the zone has no mixes
DEFAULT_N_RATE = 40.0
DEFAULT_P_RATE = 20.0  # P2O5
DEFAULT_K_RATE = 40.0  # K2O
DEFAULT_LIME_RATE = 0.5

DEFAULT_ZONE = "Zone 6"


@dataclass(frozen=True)
class UnitCosts:
    """Project-wide unit prices, in dollars."""

    seed_per_lb: float = 2.75
    n_per_lb: float = 0.80
    p2o5_per_lb: float = 0.90
    k2o_per_lb: float = 0.60
    lime_per_ton: float = 45.0


DEFAULT_UNIT_COSTS = UnitCosts()


@dataclass(frozen=True)
class SeedMix:
    """A named seed mix and its suggested total seeding rate."""

    name: str
    suggested_rate_lb_per_acre: float
    notes: str | None = None


# Seed mixes by USDA hardiness zone
SEED_MIXES_BY_ZONE: dict[str, list[SeedMix]] = {
    "Zone 5": [
        SeedMix("Cool-season pasture (orchardgrass + clover)", 12, "OG 8 + Clover 4"),
        SeedMix("Fescue + White Clover", 10),
    ],
    "Zone 6": [
        SeedMix("Perennial rye + Clover", 18),
        SeedMix("Warm-season annual (sorghum-sudan)", 25),
    ],
    "Zone 7": [
        SeedMix("Bermuda overseed (ryegrass)", 20),
    ],
}


def add_custom_mix(
    zone: str,
    mix: SeedMix,
    mixes_by_zone: dict[str, list[SeedMix]] | None = None,
) -> dict[str, list[SeedMix]]:
    """Return a copy of the catalog with `mix` appended to `zone` (created if new)."""
    if mixes_by_zone is None:
        mixes_by_zone = SEED_MIXES_BY_ZONE
    catalog = {name: list(mixes) for name, mixes in mixes_by_zone.items()}
    catalog.setdefault(zone, []).append(mix)
    return catalog


class PaddockCost(TypedDict):
    """Seeding and amendment cost for one paddock (dollars)."""

    paddock_id: str
    paddock_name: str
    acres: float
    seed: float
    nitrogen: float
    phosphorus: float
    potassium: float
    fertilizer: float
    lime: float
    total: float


class ProjectTotals(TypedDict):
    """Seeding and amendment cost summed over a project (dollars)."""

    acres: float
    seed: float
    nitrogen: float
    phosphorus: float
    potassium: float
    fertilizer: float
    lime: float
    total: float


def compute_paddock_cost(paddock: Paddock) -> PaddockCost:
    """Calculate seed, fertilizer and lime cost for a single paddock."""
    acres = paddock.acres

    seed = paddock.seed_rate_lb_per_acre * paddock.seed_price_per_lb * acres
    nitrogen = paddock.n_rate_lb_per_acre * paddock.n_cost_per_lb * acres
    phosphorus = paddock.p_rate_lb_per_acre * paddock.p_cost_per_lb * acres
    potassium = paddock.k_rate_lb_per_acre * paddock.k_cost_per_lb * acres
    fertilizer = nitrogen + phosphorus + potassium
    lime = paddock.lime_rate_tons_per_acre * paddock.lime_cost_per_ton * acres

    return PaddockCost(
        paddock_id=paddock.id,
        paddock_name=paddock.name,
        acres=acres,
        seed=seed,
        nitrogen=nitrogen,
        phosphorus=phosphorus,
        potassium=potassium,
        fertilizer=fertilizer,
        lime=lime,
        total=seed + fertilizer + lime,
    )


def cost_per_acre(paddock: Paddock) -> float:
    """Total amendment cost per acre; independent of paddock size."""
    return (
        paddock.seed_rate_lb_per_acre * paddock.seed_price_per_lb
        + paddock.n_rate_lb_per_acre * paddock.n_cost_per_lb
        + paddock.p_rate_lb_per_acre * paddock.p_cost_per_lb
        + paddock.k_rate_lb_per_acre * paddock.k_cost_per_lb
        + paddock.lime_rate_tons_per_acre * paddock.lime_cost_per_ton
    )


def compute_project_totals(paddocks: list[Paddock]) -> ProjectTotals:
    """Sum per-paddock costs across a project."""
    totals = ProjectTotals(
        acres=0.0,
        seed=0.0,
        nitrogen=0.0,
        phosphorus=0.0,
        potassium=0.0,
        fertilizer=0.0,
        lime=0.0,
        total=0.0,
    )

    for paddock in paddocks:
        cost = compute_paddock_cost(paddock)
        for key in totals:
            totals[key] += cost[key]

    return totals


def default_amendment_plan(
    zone: str = DEFAULT_ZONE,
    unit_costs: UnitCosts = DEFAULT_UNIT_COSTS,
    mixes_by_zone: dict[str, list[SeedMix]] | None = None,
) -> dict[str, float]:
    """
    Default seeding and amendment inputs for a paddock in `zone`.

    The seed rate comes from the zone's first mix; prices come from
    `unit_costs`.

    Returns:
        Dict of Paddock amendment field -> value
    """
    if mixes_by_zone is None:
        mixes_by_zone = SEED_MIXES_BY_ZONE

    mixes = mixes_by_zone.get(zone) or []
    seed_rate = mixes[0].suggested_rate_lb_per_acre if mixes else DEFAULT_SEED_RATE

    return {
        "seed_rate_lb_per_acre": seed_rate,
        "seed_price_per_lb": unit_costs.seed_per_lb,
        "n_rate_lb_per_acre": DEFAULT_N_RATE,
        "p_rate_lb_per_acre": DEFAULT_P_RATE,
        "k_rate_lb_per_acre": DEFAULT_K_RATE,
        "n_cost_per_lb": unit_costs.n_per_lb,
        "p_cost_per_lb": unit_costs.p2o5_per_lb,
        "k_cost_per_lb": unit_costs.k2o_per_lb,
        "lime_rate_tons_per_acre": DEFAULT_LIME_RATE,
        "lime_cost_per_ton": unit_costs.lime_per_ton,
    }


def apply_amendment_plan(paddock: Paddock, plan: dict[str, float], overwrite: bool = False) -> Paddock:
    """
    Fill a paddock's amendment fields from `plan`.

    By default only fields that are still 0 are filled, so values the user
    already entered are kept.
    """
    changes = {
        key: value
        for key, value in plan.items()
        if overwrite or not getattr(paddock, key)
    }
    return paddock.replace(**changes) if changes else paddock

"""
Forage budget for a grazing plan.

For each paddock:

    grazeable_dm_lb_per_acre = max(standing - residual, 0) * utilization_pct / 100
    daily_supply_lb          = grazeable_dm_lb_per_acre * acres
    days_on                  = daily_supply_lb / daily_demand_lb   (0 if no demand)

`daily_supply_lb` is the paddock's whole takeable stock; dividing it by the
herd's daily demand gives how many days the herd can stay.

Across the paddock set, the horizon adds regrowth on every acre:

    growth_over_horizon_lb = sum(growth_lb_per_acre_per_day * acres) * horizon_days
    total_available_dm_lb  = sum(daily_supply_lb) + growth_over_horizon_lb
    coverage_days          = total_available_dm_lb / daily_demand_lb
    deficit_lb             = max(0, horizon_days * daily_demand_lb - total_available_dm_lb)

A positive deficit means the plan needs supplemental feed.

Zero demand yields zero days-on and zero coverage rather than infinity.
"""

from typing import TypedDict

from agriops.grazing.demand import compute_daily_demand
from agriops.grazing.inputs import Herd, Paddock, numeric_or_zero


class PaddockBudget(TypedDict):
    """Forage budget for one paddock."""

    paddock_id: str
    paddock_name: str
    acres: float
    grazeable_dm_lb_per_acre: float
    daily_supply_lb: float  # takeable DM stock on the whole paddock
    days_on: float
    growth_lb_per_day: float  # regrowth over the whole paddock


class ForageBudget(TypedDict):
    """Forage budget for a paddock set over a planning horizon."""

    per_paddock: list[PaddockBudget]
    daily_demand_lb: float
    horizon_days: float
    total_acres: float
    total_daily_supply_lb: float
    total_days_on_all_paddocks: float
    average_growth_lb_per_acre_per_day: float
    growth_over_horizon_lb: float
    total_available_dm_lb: float
    coverage_days: float
    deficit_lb: float
    supplement_required: bool


def grazeable_dm_per_acre(paddock: Paddock) -> float:
    """DM per acre the herd will actually eat before hitting the residual."""
    above_residual = max(paddock.standing_dm_lb_per_acre - paddock.target_residual_lb_per_acre, 0.0)
    return above_residual * (paddock.utilization_pct / 100)


def days_of_supply(supply_lb: float, daily_demand_lb: float) -> float:
    """Days `supply_lb` lasts at `daily_demand_lb`; 0 when there is no demand."""
    if daily_demand_lb <= 0:
        return 0.0
    return supply_lb / daily_demand_lb


def compute_paddock_budget(paddock: Paddock, daily_demand_lb: float) -> PaddockBudget:
    """Calculate grazeable DM, supply and days-on for a single paddock."""
    grazeable = grazeable_dm_per_acre(paddock)
    supply = grazeable * paddock.acres

    return PaddockBudget(
        paddock_id=paddock.id,
        paddock_name=paddock.name,
        acres=paddock.acres,
        grazeable_dm_lb_per_acre=grazeable,
        daily_supply_lb=supply,
        days_on=days_of_supply(supply, daily_demand_lb),
        growth_lb_per_day=paddock.growth_lb_per_acre_per_day * paddock.acres,
    )


def average_growth(paddocks: list[Paddock]) -> float:
    """Simple mean of per-paddock growth rates (lb/ac/day), ignoring acreage."""
    if not paddocks:
        return 0.0
    return sum(p.growth_lb_per_acre_per_day for p in paddocks) / len(paddocks)


def acreage_weighted_growth(paddocks: list[Paddock]) -> float:
    """
    Acreage-weighted mean growth rate (lb/ac/day).

    This is the figure that reproduces `growth_over_horizon_lb` when
    multiplied by total acres and horizon. `compute_budget()` reports the
    simple mean instead; both are exposed so callers choose explicitly.
    """
    total_acres = sum(p.acres for p in paddocks)
    if total_acres <= 0:
        return 0.0
    return sum(p.growth_lb_per_acre_per_day * p.acres for p in paddocks) / total_acres


def compute_budget(herd: Herd, paddocks: list[Paddock], horizon_days: float) -> ForageBudget:
    """
    Calculate the forage budget for a herd grazing a set of paddocks.

    Args:
        herd: Herd parameters
        paddocks: Paddocks available for grazing, in rotation order
        horizon_days: Planning window in days (invalid input counts as 0)

    Returns:
        ForageBudget with per-paddock results and horizon aggregates
    """
    horizon = numeric_or_zero(horizon_days)
    demand = compute_daily_demand(herd)

    per_paddock = [compute_paddock_budget(p, demand) for p in paddocks]

    total_supply = sum(b["daily_supply_lb"] for b in per_paddock)
    total_days_on = sum(b["days_on"] for b in per_paddock)
    growth_over_horizon = sum(b["growth_lb_per_day"] for b in per_paddock) * horizon
    total_available = total_supply + growth_over_horizon

    deficit = max(0.0, horizon * demand - total_available)

    return ForageBudget(
        per_paddock=per_paddock,
        daily_demand_lb=demand,
        horizon_days=horizon,
        total_acres=sum(p.acres for p in paddocks),
        total_daily_supply_lb=total_supply,
        total_days_on_all_paddocks=total_days_on,
        average_growth_lb_per_acre_per_day=average_growth(paddocks),
        growth_over_horizon_lb=growth_over_horizon,
        total_available_dm_lb=total_available,
        coverage_days=days_of_supply(total_available, demand),
        deficit_lb=deficit,
        supplement_required=deficit > 0,
    )

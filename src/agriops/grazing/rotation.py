"""
Grazing rotation planning.

Two separate answers built from the same paddock budgets:

1. `build_move_plan()` - an ordered move schedule. Paddocks are visited
   round-robin in the order given, each for its standalone days-on figure
   (never less than MINIMUM_STAY_DAYS), until the horizon is covered.
   It is a simple auditable heuristic, not an optimizer.

2. `allocate_horizon_growth()` - a proportional contribution breakdown.
   Horizon regrowth is shared out in proportion to each paddock's takeable
   DM, and each paddock's stock plus growth share is expressed in days of
   herd demand.
"""

import math
from collections import Counter
from typing import TypedDict

from agriops.grazing.budget import PaddockBudget, days_of_supply
from agriops.grazing.inputs import numeric_or_zero

# Floor on a single stay so empty paddocks cannot stall the schedule
MINIMUM_STAY_DAYS = 0.25

# Hard cap on emitted steps, whatever the horizon
MAX_ROTATION_STEPS = 1000


class MoveStep(TypedDict):
    """One paddock occupancy in a move plan."""

    start_day: int  # 1-based
    paddock_id: str
    paddock_name: str
    estimated_days: float


class PaddockAllocation(TypedDict):
    """A paddock's share of the horizon forage."""

    paddock_id: str
    paddock_name: str
    takeable_dm_lb: float
    share: float  # fraction of total takeable DM, 0-1
    allocated_growth_lb: float
    contribution_days: float


def build_move_plan(
    paddock_budgets: list[PaddockBudget],
    horizon_days: float,
    minimum_stay_days: float = MINIMUM_STAY_DAYS,
    max_steps: int = MAX_ROTATION_STEPS,
) -> list[MoveStep]:
    """
    Build a round-robin move plan covering the planning horizon.

    Args:
        paddock_budgets: Per-paddock budgets, in rotation order
        horizon_days: Days the plan must cover
        minimum_stay_days: Shortest stay on any paddock
        max_steps: Maximum number of moves emitted

    Returns:
        Ordered list of MoveStep; empty if there are no paddocks
    """
    if not paddock_budgets:
        return []

    horizon = numeric_or_zero(horizon_days)
    floor_days = numeric_or_zero(minimum_stay_days) or MINIMUM_STAY_DAYS

    plan: list[MoveStep] = []
    day = 0.0
    i = 0
    while day < horizon and i < max_steps:
        budget = paddock_budgets[i % len(paddock_budgets)]
        # Recorded stays sum to the days advanced
        stay = max(floor_days, round(budget["days_on"], 2))

        plan.append(
            MoveStep(
                start_day=math.floor(day) + 1,
                paddock_id=budget["paddock_id"],
                paddock_name=budget["paddock_name"],
                estimated_days=stay,
            )
        )

        day += stay
        i += 1

    return plan


def summarize_move_plan(plan: list[MoveStep]) -> dict:
    """
    Summarize a move plan.

    Returns dict with:
    - steps: number of moves
    - planned_days: sum of estimated stays
    - visits: paddock_id -> number of visits
    """
    return {
        "steps": len(plan),
        "planned_days": round(sum(step["estimated_days"] for step in plan), 2),
        "visits": dict(Counter(step["paddock_id"] for step in plan)),
    }


def allocate_horizon_growth(
    paddock_budgets: list[PaddockBudget],
    daily_demand_lb: float,
    growth_over_horizon_lb: float,
) -> list[PaddockAllocation]:
    """
    Split horizon regrowth across paddocks in proportion to takeable DM.

    Allocated shares always sum to `growth_over_horizon_lb`. If no paddock
    has takeable DM the growth is split evenly, so nothing is dropped.

    Args:
        paddock_budgets: Per-paddock budgets
        daily_demand_lb: Herd demand used to convert lb to days
        growth_over_horizon_lb: Total regrowth expected over the horizon

    Returns:
        One PaddockAllocation per budget, in the same order
    """
    if not paddock_budgets:
        return []

    demand = numeric_or_zero(daily_demand_lb)
    growth = numeric_or_zero(growth_over_horizon_lb)
    total_takeable = sum(b["daily_supply_lb"] for b in paddock_budgets)

    allocations: list[PaddockAllocation] = []
    for budget in paddock_budgets:
        takeable = budget["daily_supply_lb"]
        if total_takeable > 0:
            share = takeable / total_takeable
        else:
            share = 1 / len(paddock_budgets)

        allocated = growth * share
        allocations.append(
            PaddockAllocation(
                paddock_id=budget["paddock_id"],
                paddock_name=budget["paddock_name"],
                takeable_dm_lb=takeable,
                share=share,
                allocated_growth_lb=allocated,
                contribution_days=days_of_supply(takeable + allocated, demand),
            )
        )

    return allocations

"""Grazing planning engine.

This module provides:
- Herd and paddock input snapshots (inputs.py)
- Herd dry matter demand (demand.py)
- Forage budget per paddock and over a horizon (budget.py)
- Round-robin move plan and proportional growth allocation (rotation.py)
- Seeding and amendment cost model (amendments.py)
- Single-editor planning session (session.py, import directly)
- Command-line planner (cli.py, import directly)
"""

from agriops.grazing.amendments import (
    DEFAULT_UNIT_COSTS,
    SEED_MIXES_BY_ZONE,
    PaddockCost,
    ProjectTotals,
    SeedMix,
    UnitCosts,
    add_custom_mix,
    apply_amendment_plan,
    compute_paddock_cost,
    compute_project_totals,
    cost_per_acre,
    default_amendment_plan,
)
from agriops.grazing.budget import (
    ForageBudget,
    PaddockBudget,
    acreage_weighted_growth,
    compute_budget,
    compute_paddock_budget,
)
from agriops.grazing.demand import compute_daily_demand, compute_horizon_demand, per_head_demand
from agriops.grazing.inputs import DEFAULT_HERD, Herd, Paddock, numeric_or_zero
from agriops.grazing.rotation import (
    MAX_ROTATION_STEPS,
    MINIMUM_STAY_DAYS,
    MoveStep,
    PaddockAllocation,
    allocate_horizon_growth,
    build_move_plan,
    summarize_move_plan,
)

__all__ = [
    # inputs
    "Herd",
    "Paddock",
    "DEFAULT_HERD",
    "numeric_or_zero",
    # demand
    "compute_daily_demand",
    "compute_horizon_demand",
    "per_head_demand",
    # budget
    "compute_budget",
    "compute_paddock_budget",
    "acreage_weighted_growth",
    "ForageBudget",
    "PaddockBudget",
    # rotation
    "build_move_plan",
    "allocate_horizon_growth",
    "summarize_move_plan",
    "MoveStep",
    "PaddockAllocation",
    "MINIMUM_STAY_DAYS",
    "MAX_ROTATION_STEPS",
    # amendments
    "compute_paddock_cost",
    "compute_project_totals",
    "cost_per_acre",
    "default_amendment_plan",
    "apply_amendment_plan",
    "add_custom_mix",
    "PaddockCost",
    "ProjectTotals",
    "SeedMix",
    "UnitCosts",
    "DEFAULT_UNIT_COSTS",
    "SEED_MIXES_BY_ZONE",
]

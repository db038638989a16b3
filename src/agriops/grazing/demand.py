"""
Herd dry matter demand.

Daily DM intake is estimated as a percentage of body weight, the usual
rule of thumb for grazing cattle (2-3% of BW per day on pasture):

    daily_demand_lb = head_count * avg_body_weight_lb * intake_pct / 100
"""

from agriops.grazing.inputs import Herd, numeric_or_zero


def per_head_demand(herd: Herd) -> float:
    """Daily DM intake for one animal (lb/day)."""
    return herd.avg_body_weight_lb * (herd.intake_pct_body_weight / 100)


def compute_daily_demand(herd: Herd) -> float:
    """
    Daily DM demand for the whole herd (lb/day).

    Never negative; a herd with any zero parameter demands nothing.
    """
    return per_head_demand(herd) * herd.head_count


def compute_horizon_demand(herd: Herd, horizon_days: float) -> float:
    """Total DM the herd will eat over the planning horizon (lb)."""
    return compute_daily_demand(herd) * numeric_or_zero(horizon_days)

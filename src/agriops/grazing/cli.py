"""Command-line grazing planner.

Loads paddocks from the local cache (or a JSON file), runs the forage
budget, rotation and cost model, and prints the results.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from agriops.core import (
    format_area,
    format_currency,
    format_dm_rate,
    format_mass,
    get_cache_dir,
    settings,
    setup_logging,
)
from agriops.core.client import RecordStoreAPIError, RetryableError
from agriops.data.paddocks import (
    PADDOCKS_CACHE_FILE,
    list_paddocks,
    load_paddocks_file,
    save_paddocks_cache,
)
from agriops.grazing.amendments import SEED_MIXES_BY_ZONE, apply_amendment_plan, default_amendment_plan
from agriops.grazing.inputs import DEFAULT_HERD, Herd, Paddock
from agriops.grazing.rotation import summarize_move_plan
from agriops.grazing.session import compute_plan


def _load_paddocks(args: argparse.Namespace) -> list[Paddock] | None:
    """Load paddocks from --file or the local cache; None after printing why not."""
    if args.file:
        path = Path(args.file)
    else:
        path = get_cache_dir() / PADDOCKS_CACHE_FILE
        if not path.exists():
            print(f"No paddock cache at {path}")
            print("Run 'agriops-grazing fetch' first, or pass --file.")
            return None

    try:
        return load_paddocks_file(path)
    except (OSError, ValueError) as e:
        print(f"Error: could not load paddocks from {path}: {e}")
        return None


def _herd_from_args(args: argparse.Namespace) -> Herd:
    return Herd(
        head_count=args.head if args.head is not None else DEFAULT_HERD.head_count,
        avg_body_weight_lb=args.weight if args.weight is not None else DEFAULT_HERD.avg_body_weight_lb,
        intake_pct_body_weight=args.intake if args.intake is not None else DEFAULT_HERD.intake_pct_body_weight,
    )


# =============================================================================
# Commands
# =============================================================================


async def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch paddocks from the record store into the local cache."""
    tenant_id = args.tenant or settings.agriops_tenant_id
    print(f"Fetching paddocks for tenant '{tenant_id}'...")

    try:
        paddocks = await list_paddocks(tenant_id)
    except (RecordStoreAPIError, RetryableError) as e:
        print(f"  Error: {e}")
        return

    path = save_paddocks_cache(paddocks)
    print(f"  Cached {len(paddocks)} paddocks to {path}")


async def cmd_plan(args: argparse.Namespace) -> None:
    """Print forage budget, move plan and growth allocation."""
    paddocks = _load_paddocks(args)
    if paddocks is None:
        return

    herd = _herd_from_args(args)
    horizon = args.horizon if args.horizon is not None else settings.default_horizon_days
    plan = compute_plan(herd, paddocks, horizon)
    budget = plan["budget"]

    print("=" * 70)
    print("Grazing Plan")
    print("=" * 70)
    print()
    print(f"Herd: {herd.head_count} head x {herd.avg_body_weight_lb:,.0f} lb @ {herd.intake_pct_body_weight}% BW")
    print(f"Daily demand: {format_mass(budget['daily_demand_lb'])} DM/day")
    print(f"Horizon: {budget['horizon_days']:g} days ({format_mass(budget['daily_demand_lb'] * budget['horizon_days'])})")
    print()

    print(f"{'Paddock':<22} {'Area':>10} {'Grazeable':>14} {'Supply':>12} {'Days on':>8}")
    print("-" * 70)
    for b in budget["per_paddock"]:
        print(
            f"{b['paddock_name']:<22} "
            f"{format_area(b['acres']):>10} "
            f"{format_dm_rate(b['grazeable_dm_lb_per_acre']):>14} "
            f"{format_mass(b['daily_supply_lb']):>12} "
            f"{b['days_on']:>8.2f}"
        )
    print("-" * 70)
    print(f"Standing supply:   {format_mass(budget['total_daily_supply_lb'])}")
    print(f"Horizon regrowth:  {format_mass(budget['growth_over_horizon_lb'])}")
    print(f"Avg growth rate:   {format_dm_rate(budget['average_growth_lb_per_acre_per_day'], 1)}/day")
    print(f"Coverage:          {budget['coverage_days']:.1f} days")
    if budget["supplement_required"]:
        print(f"Deficit:           {format_mass(budget['deficit_lb'])} - supplemental feed required")
    else:
        print("Deficit:           none")

    print()
    print("Move plan:")
    print(f"  {'Start day':>9}  {'Paddock':<22} {'Days':>6}")
    for step in plan["move_plan"]:
        print(f"  {step['start_day']:>9}  {step['paddock_name']:<22} {step['estimated_days']:>6.2f}")
    summary = summarize_move_plan(plan["move_plan"])
    print(f"  {summary['steps']} moves, {summary['planned_days']:g} days planned")

    print()
    print("Horizon contribution by paddock:")
    print(f"  {'Paddock':<22} {'Share':>7} {'Growth share':>14} {'Days':>8}")
    for a in plan["allocation"]:
        print(
            f"  {a['paddock_name']:<22} "
            f"{a['share']:>7.1%} "
            f"{format_mass(a['allocated_growth_lb']):>14} "
            f"{a['contribution_days']:>8.2f}"
        )


async def cmd_costs(args: argparse.Namespace) -> None:
    """Print seeding and amendment costs."""
    paddocks = _load_paddocks(args)
    if paddocks is None:
        return

    if args.zone:
        if args.zone not in SEED_MIXES_BY_ZONE:
            print(f"Unknown zone '{args.zone}'. Known zones: {', '.join(SEED_MIXES_BY_ZONE)}")
            return
        defaults = default_amendment_plan(args.zone)
        paddocks = [apply_amendment_plan(p, defaults) for p in paddocks]

    plan = compute_plan(DEFAULT_HERD, paddocks, 0)

    print("=" * 70)
    print("Seeding & Amendment Costs")
    print("=" * 70)
    print()
    print(f"{'Paddock':<22} {'Area':>10} {'Seed':>10} {'Fert':>10} {'Lime':>10} {'Total':>10}")
    print("-" * 76)
    for c in plan["costs"]:
        print(
            f"{c['paddock_name']:<22} "
            f"{format_area(c['acres']):>10} "
            f"{format_currency(c['seed']):>10} "
            f"{format_currency(c['fertilizer']):>10} "
            f"{format_currency(c['lime']):>10} "
            f"{format_currency(c['total']):>10}"
        )

    totals = plan["project_totals"]
    print("-" * 76)
    print(f"Total area:  {format_area(totals['acres'])}")
    print(f"Seed:        {format_currency(totals['seed'])}")
    print(f"N:           {format_currency(totals['nitrogen'])}")
    print(f"P2O5:        {format_currency(totals['phosphorus'])}")
    print(f"K2O:         {format_currency(totals['potassium'])}")
    print(f"Lime:        {format_currency(totals['lime'])}")
    print(f"Total:       {format_currency(totals['total'])}")
    print()
    print("Costs are estimates only. Adjust rates and unit prices to match your suppliers and soil tests.")


async def cli_main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Forage budget, grazing rotation and amendment costs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  agriops-grazing fetch                          Cache paddocks from the record store
  agriops-grazing plan --head 60 --weight 1200   Forage budget and move plan
  agriops-grazing plan --file paddocks.json --horizon 10
  agriops-grazing costs --zone "Zone 6"          Costs with zone default rates
""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    fetch_parser = subparsers.add_parser("fetch", help="Cache paddocks from the record store")
    fetch_parser.add_argument("--tenant", help="Tenant ID (default: AGRIOPS_TENANT_ID)")

    plan_parser = subparsers.add_parser("plan", help="Show forage budget and rotation")
    plan_parser.add_argument("--file", help="Paddock JSON file (default: local cache)")
    plan_parser.add_argument("--head", type=int, help=f"Head count (default: {DEFAULT_HERD.head_count})")
    plan_parser.add_argument("--weight", type=float, help="Average body weight, lb")
    plan_parser.add_argument("--intake", type=float, help="Daily intake, percent of body weight")
    plan_parser.add_argument("--horizon", type=float, help="Planning horizon in days")

    costs_parser = subparsers.add_parser("costs", help="Show seeding and amendment costs")
    costs_parser.add_argument("--file", help="Paddock JSON file (default: local cache)")
    costs_parser.add_argument("--zone", help="Fill missing rates and prices from this zone's defaults")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    # Dispatch to command handlers
    commands = {
        "fetch": cmd_fetch,
        "plan": cmd_plan,
        "costs": cmd_costs,
    }

    if args.command in commands:
        await commands[args.command](args)
    else:
        parser.print_help()


def cli() -> None:
    """CLI entry point."""
    asyncio.run(cli_main())


if __name__ == "__main__":
    cli()

"""
Planning session: one editor's in-memory copy of a herd and paddock set.

Paddocks are loaded once from the record store when the session starts.
After that every edit swaps in a new immutable snapshot and `recompute()`
rebuilds all derived figures from scratch (budget, move plan, allocation,
costs). Derived results are never stored on the session.

Saving seeding or amendment history is the only remote write. A failed save
is reported back as a `SaveResult` and leaves the session untouched, so the
user can keep editing and recomputing offline.
"""

import logging
from dataclasses import dataclass
from typing import TypedDict

import httpx

from agriops.core.client import RecordStoreAPIError, RecordStoreError, RetryableError
from agriops.data import paddocks as paddock_store
from agriops.grazing.amendments import PaddockCost, ProjectTotals, compute_paddock_cost, compute_project_totals
from agriops.grazing.budget import ForageBudget, compute_budget
from agriops.grazing.inputs import DEFAULT_HERD, Herd, Paddock, numeric_or_zero
from agriops.grazing.rotation import (
    MoveStep,
    PaddockAllocation,
    allocate_horizon_growth,
    build_move_plan,
)

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 30

_SAVE_ERRORS = (RecordStoreAPIError, RecordStoreError, RetryableError, httpx.HTTPError)


class PlanSnapshot(TypedDict):
    """Everything derived from one set of session inputs."""

    budget: ForageBudget
    move_plan: list[MoveStep]
    allocation: list[PaddockAllocation]
    costs: list[PaddockCost]
    project_totals: ProjectTotals


@dataclass
class SaveResult:
    """Outcome of a remote save, shown to the user as a notification."""

    ok: bool
    message: str
    record: dict | None = None


def compute_plan(herd: Herd, paddocks: list[Paddock], horizon_days: float) -> PlanSnapshot:
    """Run the whole planning engine over one input snapshot."""
    budget = compute_budget(herd, paddocks, horizon_days)
    return PlanSnapshot(
        budget=budget,
        move_plan=build_move_plan(budget["per_paddock"], budget["horizon_days"]),
        allocation=allocate_horizon_growth(
            budget["per_paddock"],
            budget["daily_demand_lb"],
            budget["growth_over_horizon_lb"],
        ),
        costs=[compute_paddock_cost(p) for p in paddocks],
        project_totals=compute_project_totals(paddocks),
    )


class PlanningSession:
    """A single-editor planning session for one tenant."""

    def __init__(
        self,
        tenant_id: str,
        herd: Herd = DEFAULT_HERD,
        paddocks: list[Paddock] | None = None,
        horizon_days: float = DEFAULT_HORIZON_DAYS,
    ):
        self.tenant_id = tenant_id
        self.herd = herd
        self._paddocks: list[Paddock] = list(paddocks or [])
        self.horizon_days = numeric_or_zero(horizon_days)

    @classmethod
    async def load(
        cls,
        tenant_id: str,
        herd: Herd = DEFAULT_HERD,
        horizon_days: float = DEFAULT_HORIZON_DAYS,
    ) -> "PlanningSession":
        """Start a session with the tenant's paddocks from the record store."""
        paddocks = await paddock_store.list_paddocks(tenant_id)
        logger.debug("Loaded %d paddocks for tenant %s", len(paddocks), tenant_id)
        return cls(tenant_id, herd, paddocks, horizon_days)

    @property
    def paddocks(self) -> list[Paddock]:
        return list(self._paddocks)

    def get_paddock(self, paddock_id: str) -> Paddock:
        for paddock in self._paddocks:
            if paddock.id == str(paddock_id):
                return paddock
        raise KeyError(f"Paddock {paddock_id} not in session")

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def update_herd(self, **changes) -> Herd:
        self.herd = self.herd.replace(**changes)
        return self.herd

    def set_horizon(self, horizon_days: float) -> float:
        self.horizon_days = numeric_or_zero(horizon_days)
        return self.horizon_days

    def update_paddock(self, paddock_id: str, **changes) -> Paddock:
        """Apply field edits to one paddock; other paddocks are untouched."""
        current = self.get_paddock(paddock_id)
        updated = current.replace(**changes)
        if updated.id != current.id and any(p.id == updated.id for p in self._paddocks):
            raise ValueError(f"Paddock {updated.id} already in session")
        self._paddocks = [updated if p.id == current.id else p for p in self._paddocks]
        return updated

    def add_paddock(self, paddock: Paddock) -> None:
        if any(p.id == paddock.id for p in self._paddocks):
            raise ValueError(f"Paddock {paddock.id} already in session")
        self._paddocks = [*self._paddocks, paddock]

    def remove_paddock(self, paddock_id: str) -> Paddock:
        removed = self.get_paddock(paddock_id)
        self._paddocks = [p for p in self._paddocks if p.id != removed.id]
        return removed

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    def recompute(self) -> PlanSnapshot:
        return compute_plan(self.herd, self._paddocks, self.horizon_days)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    async def save_seeding_record(
        self,
        paddock_id: str,
        mix_name: str | None,
        species_rates: list[dict] | None,
        notes: str | None = None,
        date_planted: str | None = None,
    ) -> SaveResult:
        """Save seeding history for a paddock; failures come back as a SaveResult."""
        paddock = self.get_paddock(paddock_id)
        try:
            record = await paddock_store.upsert_seeding_record(
                self.tenant_id, paddock.id, mix_name, species_rates, notes, date_planted
            )
        except _SAVE_ERRORS as e:
            logger.warning("Failed to save seeding for %s: %s", paddock.name, e)
            return SaveResult(ok=False, message=f"Failed to save seeding: {e}")
        return SaveResult(ok=True, message=f"Saved seeding for {paddock.name}", record=record)

    async def save_amendment_record(
        self,
        paddock_id: str,
        product: str,
        rate_text: str | None,
        notes: str | None = None,
        date_applied: str | None = None,
    ) -> SaveResult:
        """Save an amendment application; failures come back as a SaveResult."""
        paddock = self.get_paddock(paddock_id)
        try:
            record = await paddock_store.upsert_amendment_record(
                self.tenant_id, paddock.id, product, rate_text, notes, date_applied
            )
        except ValueError as e:
            return SaveResult(ok=False, message=str(e))
        except _SAVE_ERRORS as e:
            logger.warning("Failed to save amendment for %s: %s", paddock.name, e)
            return SaveResult(ok=False, message=f"Failed to save amendment: {e}")
        return SaveResult(ok=True, message=f"Saved {product.strip()} for {paddock.name}", record=record)

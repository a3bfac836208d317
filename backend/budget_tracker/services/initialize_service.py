import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..schemas import CategoryCreate, CategoryRecord, MonthlyBudgetCreate, MonthlyBudgetRecord
from ..storage import BudgetStorage

logger = logging.getLogger(__name__)


class SeedValidationError(Exception):
    """A category seed failed validation; carries the offending seed."""

    def __init__(self, seed: dict[str, Any], error: ValidationError):
        super().__init__(str(error))
        self.seed = seed
        self.error = error


@dataclass
class InitializationPlan:
    """
    What an initialize call will do, computed before any write.

    slots has one entry per seed, in seed order: either the existing category
    that seed reuses, or an index into to_create.
    """
    to_delete: list[str] = field(default_factory=list)
    to_create: list[CategoryCreate] = field(default_factory=list)
    slots: list[CategoryRecord | int] = field(default_factory=list)

    @property
    def reused(self) -> list[CategoryRecord]:
        return [s for s in self.slots if isinstance(s, CategoryRecord)]


def plan_initialization(
    existing: list[CategoryRecord],
    seeds: list[CategoryCreate],
) -> InitializationPlan:
    """
    Decide which categories to delete, create and reuse.

    The first existing category seen for a name is kept and later ones with
    the same name are scheduled for deletion. Seeds reuse the kept category
    of their name; seeds with a new name are created once even if repeated.
    """
    plan = InitializationPlan()

    kept: dict[str, CategoryRecord] = {}
    for category in existing:
        if category.name in kept:
            plan.to_delete.append(category.id)
        else:
            kept[category.name] = category

    pending: dict[str, int] = {}
    for seed in seeds:
        if seed.name in kept:
            plan.slots.append(kept[seed.name])
            continue
        if seed.name not in pending:
            pending[seed.name] = len(plan.to_create)
            plan.to_create.append(seed)
        plan.slots.append(pending[seed.name])

    return plan


def validate_seeds(raw_seeds: list[dict[str, Any]]) -> list[CategoryCreate]:
    """Validate every seed, failing on the first bad one."""
    seeds = []
    for raw in raw_seeds:
        try:
            seeds.append(CategoryCreate.model_validate(raw))
        except ValidationError as exc:
            raise SeedValidationError(raw, exc) from exc
    return seeds


class InitializeService:
    """
    Idempotent bootstrap of default categories and a month's income.

    All validation happens before the first write. The writes themselves are
    separate storage calls; if one fails midway, repeating the call finishes
    the job.
    """

    def __init__(self, storage: BudgetStorage):
        self.storage = storage

    def initialize(
        self,
        raw_seeds: list[dict[str, Any]],
        month: str,
        monthly_income: Any,
    ) -> tuple[list[CategoryRecord], MonthlyBudgetRecord]:
        seeds = validate_seeds(raw_seeds)

        budget = self.storage.get_monthly_budget(month)
        budget_data = None
        if budget is None:
            # Raises ValidationError for a missing or non-numeric income
            budget_data = MonthlyBudgetCreate(month=month, total_income=monthly_income)

        plan = plan_initialization(self.storage.list_categories(), seeds)

        if plan.to_delete:
            logger.info("Deleting %d duplicate categories", len(plan.to_delete))
            for category_id in plan.to_delete:
                self.storage.delete_category(category_id)

        created = [self.storage.create_category(seed) for seed in plan.to_create]
        if created:
            logger.info("Created %d categories", len(created))

        categories = [
            slot if isinstance(slot, CategoryRecord) else created[slot]
            for slot in plan.slots
        ]

        if budget_data is not None:
            budget = self.storage.create_monthly_budget(budget_data)
            logger.info("Created monthly budget for %s", month)

        return categories, budget

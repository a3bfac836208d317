from .enrichment import enrich_expense, enrich_expenses, UNKNOWN_CATEGORY_NAME
from .initialize_service import (
    InitializeService,
    InitializationPlan,
    SeedValidationError,
    plan_initialization,
    validate_seeds,
)
from .recap_service import RecapService

__all__ = [
    "enrich_expense",
    "enrich_expenses",
    "UNKNOWN_CATEGORY_NAME",
    "InitializeService",
    "InitializationPlan",
    "SeedValidationError",
    "plan_initialization",
    "validate_seeds",
    "RecapService",
]

from typing import Any

from .common import CamelModel
from .category import CategoryRecord
from .monthly_budget import MonthlyBudgetRecord


class InitializeRequest(CamelModel):
    """
    Bulk bootstrap payload.

    Seeds stay raw dicts here; each one is validated as a CategoryCreate so a
    bad seed can be echoed back in the error body.
    """
    categories: list[dict[str, Any]]
    monthly_income: Any = None
    month: str


class InitializeResponse(CamelModel):
    categories: list[CategoryRecord]
    budget: MonthlyBudgetRecord

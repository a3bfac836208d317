from datetime import datetime

from .common import CamelModel, Money


class MonthlyBudgetCreate(CamelModel):
    """Fields for recording a month's income."""
    month: str  # YYYY-MM
    total_income: Money


class MonthlyBudgetUpdate(CamelModel):
    """Fields for updating a monthly budget (all optional)."""
    month: str | None = None
    total_income: Money | None = None


class MonthlyBudgetRecord(CamelModel):
    """Stored monthly budget."""
    id: str
    month: str
    total_income: float
    created_at: datetime

    class Config:
        from_attributes = True

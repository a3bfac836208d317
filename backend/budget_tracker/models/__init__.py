from .base import Base, TimestampMixin, utcnow
from .category import BudgetCategory
from .expense import Expense
from .monthly_budget import MonthlyBudget

__all__ = [
    "Base",
    "TimestampMixin",
    "utcnow",
    "BudgetCategory",
    "Expense",
    "MonthlyBudget",
]

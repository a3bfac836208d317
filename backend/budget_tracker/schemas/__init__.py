from .category import CategoryCreate, CategoryUpdate, CategoryRecord, DEFAULT_ICON
from .expense import ExpenseCreate, ExpenseRecord, ExpenseResponse
from .monthly_budget import MonthlyBudgetCreate, MonthlyBudgetUpdate, MonthlyBudgetRecord
from .initialize import InitializeRequest, InitializeResponse
from .recap import CategoryRecapLine, MonthSummary, MonthlyRecap, YearlyRecap

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRecord",
    "DEFAULT_ICON",
    "ExpenseCreate",
    "ExpenseRecord",
    "ExpenseResponse",
    "MonthlyBudgetCreate",
    "MonthlyBudgetUpdate",
    "MonthlyBudgetRecord",
    "InitializeRequest",
    "InitializeResponse",
    "CategoryRecapLine",
    "MonthSummary",
    "MonthlyRecap",
    "YearlyRecap",
]

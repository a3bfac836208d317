from abc import ABC, abstractmethod
from typing import Any

from ..schemas import (
    CategoryCreate,
    CategoryRecord,
    ExpenseCreate,
    ExpenseRecord,
    MonthlyBudgetCreate,
    MonthlyBudgetRecord,
)


class StorageError(Exception):
    """A storage operation failed (constraint violation, connectivity, ...)."""


class BudgetStorage(ABC):
    """
    Persistence contract for categories, expenses and monthly budgets.

    Partial updates take a dict of snake_case field names; only the keys
    present are changed. Lookups return None when the id (or month) is
    unknown, deletes return False. Any other failure raises StorageError.
    """

    # --- Categories ---

    @abstractmethod
    def list_categories(self) -> list[CategoryRecord]:
        ...

    @abstractmethod
    def get_category(self, category_id: str) -> CategoryRecord | None:
        ...

    @abstractmethod
    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        ...

    @abstractmethod
    def update_category(self, category_id: str, updates: dict[str, Any]) -> CategoryRecord | None:
        ...

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Delete a category and every expense that references it."""
        ...

    # --- Expenses ---

    @abstractmethod
    def list_expenses(self, month: str | None = None) -> list[ExpenseRecord]:
        """All expenses, or those whose date string starts with month."""
        ...

    @abstractmethod
    def get_expense(self, expense_id: str) -> ExpenseRecord | None:
        ...

    @abstractmethod
    def create_expense(self, data: ExpenseCreate) -> ExpenseRecord:
        ...

    @abstractmethod
    def delete_expense(self, expense_id: str) -> bool:
        ...

    # --- Monthly budgets ---

    @abstractmethod
    def get_monthly_budget(self, month: str) -> MonthlyBudgetRecord | None:
        ...

    @abstractmethod
    def list_monthly_budgets(self) -> list[MonthlyBudgetRecord]:
        ...

    @abstractmethod
    def create_monthly_budget(self, data: MonthlyBudgetCreate) -> MonthlyBudgetRecord:
        ...

    @abstractmethod
    def update_monthly_budget(self, month: str, updates: dict[str, Any]) -> MonthlyBudgetRecord | None:
        ...

    def close(self) -> None:
        """Release any resources held by the store."""
        pass

import uuid
from typing import Any

from ..models import utcnow
from ..schemas import (
    CategoryCreate,
    CategoryRecord,
    ExpenseCreate,
    ExpenseRecord,
    MonthlyBudgetCreate,
    MonthlyBudgetRecord,
)
from .base import BudgetStorage, StorageError


class MemoryStorage(BudgetStorage):
    """
    Process-local store backed by plain dicts.

    There is no locking; concurrent writers race and the last write wins.
    Iteration always runs over a snapshot of the dicts, and callers get
    copies, so a returned record can be changed without touching the store.
    Unless enforce_unique is set, duplicate category names are accepted and a
    second budget for the same month replaces the first, where the database
    store would reject both.
    """

    def __init__(self, enforce_unique: bool = False):
        self.enforce_unique = enforce_unique
        self._categories: dict[str, CategoryRecord] = {}
        self._expenses: dict[str, ExpenseRecord] = {}
        # Keyed by month, not id
        self._monthly_budgets: dict[str, MonthlyBudgetRecord] = {}

    def _check_name_free(self, name: str, category_id: str | None = None) -> None:
        if not self.enforce_unique:
            return
        for existing in list(self._categories.values()):
            if existing.name == name and existing.id != category_id:
                raise StorageError(f"Category name already exists: {name!r}")

    # --- Categories ---

    def list_categories(self) -> list[CategoryRecord]:
        return [c.model_copy() for c in list(self._categories.values())]

    def get_category(self, category_id: str) -> CategoryRecord | None:
        category = self._categories.get(category_id)
        return category.model_copy() if category else None

    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        self._check_name_free(data.name)
        category = CategoryRecord(id=str(uuid.uuid4()), **data.model_dump())
        self._categories[category.id] = category
        return category.model_copy()

    def update_category(self, category_id: str, updates: dict[str, Any]) -> CategoryRecord | None:
        category = self._categories.get(category_id)
        if category is None:
            return None
        if "name" in updates:
            self._check_name_free(updates["name"], category_id)

        updated = category.model_copy(update=updates)
        self._categories[category_id] = updated
        return updated.model_copy()

    def delete_category(self, category_id: str) -> bool:
        if category_id not in self._categories:
            return False

        # Also delete associated expenses
        orphaned = [
            expense_id
            for expense_id, expense in list(self._expenses.items())
            if expense.category_id == category_id
        ]
        if self._categories.pop(category_id, None) is None:
            return False
        for expense_id in orphaned:
            self._expenses.pop(expense_id, None)
        return True

    # --- Expenses ---

    def list_expenses(self, month: str | None = None) -> list[ExpenseRecord]:
        expenses = [e.model_copy() for e in list(self._expenses.values())]
        if not month:
            return expenses
        return [e for e in expenses if e.date.startswith(month)]

    def get_expense(self, expense_id: str) -> ExpenseRecord | None:
        expense = self._expenses.get(expense_id)
        return expense.model_copy() if expense else None

    def create_expense(self, data: ExpenseCreate) -> ExpenseRecord:
        expense = ExpenseRecord(
            id=str(uuid.uuid4()),
            created_at=utcnow(),
            **data.model_dump(),
        )
        self._expenses[expense.id] = expense
        return expense.model_copy()

    def delete_expense(self, expense_id: str) -> bool:
        return self._expenses.pop(expense_id, None) is not None

    # --- Monthly budgets ---

    def get_monthly_budget(self, month: str) -> MonthlyBudgetRecord | None:
        budget = self._monthly_budgets.get(month)
        return budget.model_copy() if budget else None

    def list_monthly_budgets(self) -> list[MonthlyBudgetRecord]:
        return [b.model_copy() for b in list(self._monthly_budgets.values())]

    def create_monthly_budget(self, data: MonthlyBudgetCreate) -> MonthlyBudgetRecord:
        if self.enforce_unique and data.month in self._monthly_budgets:
            raise StorageError(f"Monthly budget already exists: {data.month!r}")

        budget = MonthlyBudgetRecord(
            id=str(uuid.uuid4()),
            created_at=utcnow(),
            **data.model_dump(),
        )
        self._monthly_budgets[budget.month] = budget
        return budget.model_copy()

    def update_monthly_budget(self, month: str, updates: dict[str, Any]) -> MonthlyBudgetRecord | None:
        budget = self._monthly_budgets.get(month)
        if budget is None:
            return None

        new_month = updates.get("month", month)
        if new_month != month and self.enforce_unique and new_month in self._monthly_budgets:
            raise StorageError(f"Monthly budget already exists: {new_month!r}")

        updated = budget.model_copy(update=updates)
        self._monthly_budgets.pop(month, None)
        self._monthly_budgets[updated.month] = updated
        return updated.model_copy()

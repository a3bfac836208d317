from typing import Callable

from ..schemas import CategoryRecord, ExpenseRecord
from ..storage import BudgetStorage


def _percentage(spent: float, budget: float) -> float:
    return round(spent / budget * 100, 2) if budget > 0 else 0.0


def _category_lines(
    categories: list[CategoryRecord],
    expenses: list[ExpenseRecord],
    ceiling: Callable[[CategoryRecord], float],
) -> list[dict]:
    """Budget vs spending for each category over the recap period."""
    spending: dict[str, float] = {}
    for expense in expenses:
        spending[expense.category_id] = spending.get(expense.category_id, 0.0) + expense.amount

    lines = []
    for cat in categories:
        budget = round(ceiling(cat), 2)
        spent = round(spending.get(cat.id, 0.0), 2)
        lines.append({
            "category_id": cat.id,
            "category_name": cat.name,
            "icon": cat.icon,
            "is_annual": cat.is_annual,
            "budget": budget,
            "spent": spent,
            "remaining": round(budget - spent, 2),
            "percentage": _percentage(spent, budget),
        })
    return lines


class RecapService:
    """
    Monthly and yearly summaries of income, budget, spending and savings.

    Annual categories are prorated (divided by 12) in a monthly recap, and
    monthly categories are multiplied by 12 in a yearly one. Spending on
    categories that no longer exist counts toward the totals only.
    """

    def __init__(self, storage: BudgetStorage):
        self.storage = storage

    def monthly_recap(self, month: str) -> dict:
        categories = self.storage.list_categories()
        expenses = self.storage.list_expenses(month)
        budget = self.storage.get_monthly_budget(month)

        total_income = budget.total_income if budget else 0.0
        total_spent = round(sum(e.amount for e in expenses), 2)
        lines = _category_lines(
            categories,
            expenses,
            lambda c: c.monthly_budget / 12 if c.is_annual else c.monthly_budget,
        )

        return {
            "month": month,
            "total_income": total_income,
            "total_budget": round(sum(line["budget"] for line in lines), 2),
            "total_spent": total_spent,
            "savings": round(total_income - total_spent, 2),
            "categories": lines,
        }

    def yearly_recap(self, year: str) -> dict:
        prefix = f"{year}-"
        categories = self.storage.list_categories()
        expenses = self.storage.list_expenses(prefix)
        incomes = {
            b.month: b.total_income
            for b in self.storage.list_monthly_budgets()
            if b.month.startswith(prefix)
        }

        months = []
        for m in range(1, 13):
            month = f"{prefix}{m:02d}"
            income = incomes.get(month, 0.0)
            spent = round(sum(e.amount for e in expenses if e.date.startswith(month)), 2)
            months.append({
                "month": month,
                "total_income": income,
                "total_spent": spent,
                "savings": round(income - spent, 2),
            })

        total_income = round(sum(incomes.values()), 2)
        total_spent = round(sum(e.amount for e in expenses), 2)
        lines = _category_lines(
            categories,
            expenses,
            lambda c: c.monthly_budget if c.is_annual else c.monthly_budget * 12,
        )

        return {
            "year": year,
            "total_income": total_income,
            "total_budget": round(sum(line["budget"] for line in lines), 2),
            "total_spent": total_spent,
            "savings": round(total_income - total_spent, 2),
            "categories": lines,
            "months": months,
        }

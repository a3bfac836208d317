from fastapi import APIRouter, Depends, HTTPException, Query

from ..schemas import ExpenseCreate, ExpenseResponse
from ..services.enrichment import enrich_expense, enrich_expenses
from ..storage import BudgetStorage, get_storage
from .errors import storage_fault, validation_message

router = APIRouter()


@router.get("", response_model=list[ExpenseResponse])
def list_expenses(
    month: str | None = Query(None, description="YYYY-MM prefix of the expense date"),
    storage: BudgetStorage = Depends(get_storage)
):
    """Get expenses, optionally for one month, with category name and icon."""
    with storage_fault("Failed to fetch expenses"):
        expenses = storage.list_expenses(month)
        categories = storage.list_categories()
    return enrich_expenses(expenses, categories)


@router.post("", response_model=ExpenseResponse, status_code=201)
@validation_message("Invalid expense data")
def create_expense(expense: ExpenseCreate, storage: BudgetStorage = Depends(get_storage)):
    """Log an expense. The category id is not checked."""
    with storage_fault("Failed to create expense"):
        created = storage.create_expense(expense)
        category = storage.get_category(created.category_id)
    return enrich_expense(created, category)


@router.delete("/{expense_id}", status_code=204)
def delete_expense(expense_id: str, storage: BudgetStorage = Depends(get_storage)):
    """Delete an expense."""
    with storage_fault("Failed to delete expense"):
        deleted = storage.delete_expense(expense_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Expense not found")
    return None

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import MonthlyBudgetCreate, MonthlyBudgetUpdate, MonthlyBudgetRecord
from ..storage import BudgetStorage, get_storage
from .errors import storage_fault, validation_message

router = APIRouter()


@router.get("", response_model=list[MonthlyBudgetRecord])
def list_budgets(storage: BudgetStorage = Depends(get_storage)):
    with storage_fault("Failed to fetch budgets"):
        return storage.list_monthly_budgets()


@router.get("/{month}", response_model=MonthlyBudgetRecord)
def get_budget(month: str, storage: BudgetStorage = Depends(get_storage)):
    with storage_fault("Failed to fetch monthly budget"):
        budget = storage.get_monthly_budget(month)
    if not budget:
        raise HTTPException(status_code=404, detail="Monthly budget not found")
    return budget


@router.post("", response_model=MonthlyBudgetRecord, status_code=201)
@validation_message("Invalid budget data")
def create_budget(data: MonthlyBudgetCreate, storage: BudgetStorage = Depends(get_storage)):
    with storage_fault("Failed to create monthly budget"):
        return storage.create_monthly_budget(data)


@router.patch("/{month}", response_model=MonthlyBudgetRecord)
@validation_message("Invalid update data")
def update_budget(
    month: str,
    data: MonthlyBudgetUpdate,
    storage: BudgetStorage = Depends(get_storage),
):
    update_data = data.model_dump(exclude_unset=True, exclude_none=True)

    with storage_fault("Failed to update budget"):
        budget = storage.update_monthly_budget(month, update_data)
    if not budget:
        raise HTTPException(status_code=404, detail="Monthly budget not found")
    return budget

from fastapi import APIRouter, Depends

from ..schemas import MonthlyRecap, YearlyRecap
from ..services.recap_service import RecapService
from ..storage import BudgetStorage, get_storage
from .errors import storage_fault

router = APIRouter()


@router.get("/monthly/{month}", response_model=MonthlyRecap)
def monthly_recap(month: str, storage: BudgetStorage = Depends(get_storage)):
    """Income, budget, spending and savings for one YYYY-MM month."""
    service = RecapService(storage)
    with storage_fault("Failed to build monthly recap"):
        return service.monthly_recap(month)


@router.get("/yearly/{year}", response_model=YearlyRecap)
def yearly_recap(year: str, storage: BudgetStorage = Depends(get_storage)):
    """Year totals with a per-month breakdown."""
    service = RecapService(storage)
    with storage_fault("Failed to build yearly recap"):
        return service.yearly_recap(year)

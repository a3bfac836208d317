from fastapi import APIRouter, Depends
from pydantic import ValidationError

from ..schemas import InitializeRequest, InitializeResponse
from ..services.initialize_service import InitializeService, SeedValidationError
from ..storage import BudgetStorage, get_storage
from .errors import RequestDataError, storage_fault, validation_message

router = APIRouter()


@router.post("", response_model=InitializeResponse, status_code=201)
@validation_message("Invalid category data")
def initialize(data: InitializeRequest, storage: BudgetStorage = Depends(get_storage)):
    """
    Seed default categories and the month's income.

    Safe to repeat: categories are matched by name (duplicates left over from
    earlier runs are removed) and an existing budget for the month is kept
    as is.
    """
    service = InitializeService(storage)
    try:
        with storage_fault("Failed to initialize data"):
            categories, budget = service.initialize(
                data.categories, data.month, data.monthly_income
            )
    except SeedValidationError as exc:
        raise RequestDataError("Invalid category data", exc.error, category=exc.seed)
    except ValidationError as exc:
        raise RequestDataError("Invalid budget data", exc)

    return {"categories": categories, "budget": budget}

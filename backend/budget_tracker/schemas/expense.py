from datetime import datetime
from pydantic import field_validator

from .common import CamelModel, PositiveMoney


class ExpenseCreate(CamelModel):
    """Fields for logging an expense."""
    amount: PositiveMoney
    category_id: str
    date: str  # YYYY-MM-DD, not calendar-checked
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def blank_notes_to_none(cls, value: str | None) -> str | None:
        return value or None


class ExpenseRecord(CamelModel):
    """Stored expense."""
    id: str
    amount: float
    category_id: str
    date: str
    notes: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class ExpenseResponse(ExpenseRecord):
    """Expense with its category's display fields joined on."""
    category_name: str
    category_icon: str

from sqlalchemy import String, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class MonthlyBudget(Base, TimestampMixin):
    """Income recorded for one calendar month (month is YYYY-MM)."""

    __tablename__ = "monthly_budgets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    month: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)
    total_income: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False
    )

    def __repr__(self) -> str:
        return f"<MonthlyBudget(month='{self.month}', income={self.total_income})>"

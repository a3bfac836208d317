from sqlalchemy import String, Numeric, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class BudgetCategory(Base):
    """
    Spending category with a budget ceiling.

    monthly_budget is a monthly ceiling, or an annual one when is_annual is set.
    Expenses reference categories by id only; there is no foreign key, so the
    cascade on delete lives in the storage layer.
    """

    __tablename__ = "budget_categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    monthly_budget: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False
    )
    icon: Mapped[str] = mapped_column(
        String(64), nullable=False, default="DollarSign", server_default="DollarSign"
    )
    is_annual: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )

    def __repr__(self) -> str:
        return f"<BudgetCategory(id={self.id}, name='{self.name}')>"

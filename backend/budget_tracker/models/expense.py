from sqlalchemy import String, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Expense(Base, TimestampMixin):
    """
    A single dated spending transaction.

    date is kept as the client-supplied YYYY-MM-DD text so month filtering
    stays a plain prefix match.
    """

    __tablename__ = "expenses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    amount: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    category_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    date: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    def __repr__(self) -> str:
        return f"<Expense(id={self.id}, date={self.date}, amount={self.amount})>"

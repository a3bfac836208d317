import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..models import BudgetCategory, Expense, MonthlyBudget
from ..schemas import (
    CategoryCreate,
    CategoryRecord,
    ExpenseCreate,
    ExpenseRecord,
    MonthlyBudgetCreate,
    MonthlyBudgetRecord,
)
from .base import BudgetStorage, StorageError

logger = logging.getLogger(__name__)


class DatabaseStorage(BudgetStorage):
    """
    Store backed by SQLAlchemy tables.

    Each call runs in its own session and commits once, so a category delete
    and its expense cascade succeed or fail together. Category names and
    budget months are UNIQUE columns; violations surface as StorageError.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise StorageError(str(exc)) from exc
        finally:
            session.close()

    def close(self) -> None:
        self.engine.dispose()

    # --- Categories ---

    def list_categories(self) -> list[CategoryRecord]:
        with self._session() as session:
            rows = session.query(BudgetCategory).all()
            return [CategoryRecord.model_validate(row) for row in rows]

    def get_category(self, category_id: str) -> CategoryRecord | None:
        with self._session() as session:
            row = session.get(BudgetCategory, category_id)
            return CategoryRecord.model_validate(row) if row else None

    def create_category(self, data: CategoryCreate) -> CategoryRecord:
        with self._session() as session:
            row = BudgetCategory(id=str(uuid.uuid4()), **data.model_dump())
            session.add(row)
            session.flush()
            return CategoryRecord.model_validate(row)

    def update_category(self, category_id: str, updates: dict[str, Any]) -> CategoryRecord | None:
        with self._session() as session:
            row = session.get(BudgetCategory, category_id)
            if row is None:
                return None

            for field, value in updates.items():
                setattr(row, field, value)

            session.flush()
            return CategoryRecord.model_validate(row)

    def delete_category(self, category_id: str) -> bool:
        with self._session() as session:
            row = session.get(BudgetCategory, category_id)
            if row is None:
                return False

            # Expenses first; there is no foreign key to cascade for us
            removed = (
                session.query(Expense)
                .filter(Expense.category_id == category_id)
                .delete(synchronize_session=False)
            )
            session.delete(row)
            logger.debug("Deleted category %s with %d expenses", category_id, removed)
            return True

    # --- Expenses ---

    def list_expenses(self, month: str | None = None) -> list[ExpenseRecord]:
        with self._session() as session:
            rows = session.query(Expense).all()
            expenses = [ExpenseRecord.model_validate(row) for row in rows]

        if not month:
            return expenses
        # Plain string prefix, same as the memory store (LIKE would treat _ and % specially)
        return [e for e in expenses if e.date.startswith(month)]

    def get_expense(self, expense_id: str) -> ExpenseRecord | None:
        with self._session() as session:
            row = session.get(Expense, expense_id)
            return ExpenseRecord.model_validate(row) if row else None

    def create_expense(self, data: ExpenseCreate) -> ExpenseRecord:
        with self._session() as session:
            row = Expense(id=str(uuid.uuid4()), **data.model_dump())
            session.add(row)
            session.flush()
            return ExpenseRecord.model_validate(row)

    def delete_expense(self, expense_id: str) -> bool:
        with self._session() as session:
            deleted = (
                session.query(Expense)
                .filter(Expense.id == expense_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0

    # --- Monthly budgets ---

    def get_monthly_budget(self, month: str) -> MonthlyBudgetRecord | None:
        with self._session() as session:
            row = session.query(MonthlyBudget).filter(MonthlyBudget.month == month).first()
            return MonthlyBudgetRecord.model_validate(row) if row else None

    def list_monthly_budgets(self) -> list[MonthlyBudgetRecord]:
        with self._session() as session:
            rows = session.query(MonthlyBudget).all()
            return [MonthlyBudgetRecord.model_validate(row) for row in rows]

    def create_monthly_budget(self, data: MonthlyBudgetCreate) -> MonthlyBudgetRecord:
        with self._session() as session:
            row = MonthlyBudget(id=str(uuid.uuid4()), **data.model_dump())
            session.add(row)
            session.flush()
            return MonthlyBudgetRecord.model_validate(row)

    def update_monthly_budget(self, month: str, updates: dict[str, Any]) -> MonthlyBudgetRecord | None:
        with self._session() as session:
            row = session.query(MonthlyBudget).filter(MonthlyBudget.month == month).first()
            if row is None:
                return None

            for field, value in updates.items():
                setattr(row, field, value)

            session.flush()
            return MonthlyBudgetRecord.model_validate(row)

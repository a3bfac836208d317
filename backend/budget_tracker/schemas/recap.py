from .common import CamelModel


class CategoryRecapLine(CamelModel):
    category_id: str
    category_name: str
    icon: str
    is_annual: bool
    budget: float
    spent: float
    remaining: float
    percentage: float


class MonthSummary(CamelModel):
    month: str
    total_income: float
    total_spent: float
    savings: float


class MonthlyRecap(CamelModel):
    month: str
    total_income: float
    total_budget: float
    total_spent: float
    savings: float
    categories: list[CategoryRecapLine]


class YearlyRecap(CamelModel):
    year: str
    total_income: float
    total_budget: float
    total_spent: float
    savings: float
    categories: list[CategoryRecapLine]
    months: list[MonthSummary]

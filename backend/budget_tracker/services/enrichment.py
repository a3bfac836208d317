from ..schemas import CategoryRecord, ExpenseRecord, ExpenseResponse, DEFAULT_ICON

UNKNOWN_CATEGORY_NAME = "Unknown"


def enrich_expense(expense: ExpenseRecord, category: CategoryRecord | None) -> ExpenseResponse:
    """Attach the category's name and icon, falling back when the id dangles."""
    return ExpenseResponse(
        **expense.model_dump(),
        category_name=category.name if category else UNKNOWN_CATEGORY_NAME,
        category_icon=category.icon if category else DEFAULT_ICON,
    )


def enrich_expenses(
    expenses: list[ExpenseRecord],
    categories: list[CategoryRecord],
) -> list[ExpenseResponse]:
    cat_map = {c.id: c for c in categories}
    return [enrich_expense(e, cat_map.get(e.category_id)) for e in expenses]

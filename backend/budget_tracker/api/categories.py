from fastapi import APIRouter, Depends, HTTPException

from ..schemas import CategoryCreate, CategoryUpdate, CategoryRecord
from ..storage import BudgetStorage, get_storage
from .errors import storage_fault, validation_message

router = APIRouter()


@router.get("", response_model=list[CategoryRecord])
def list_categories(storage: BudgetStorage = Depends(get_storage)):
    """Get all categories."""
    with storage_fault("Failed to fetch categories"):
        return storage.list_categories()


@router.post("", response_model=CategoryRecord, status_code=201)
@validation_message("Invalid category data")
def create_category(category: CategoryCreate, storage: BudgetStorage = Depends(get_storage)):
    """Create a new category."""
    with storage_fault("Failed to create category"):
        return storage.create_category(category)


@router.patch("/{category_id}", response_model=CategoryRecord)
@validation_message("Invalid update data")
def update_category(
    category_id: str,
    category: CategoryUpdate,
    storage: BudgetStorage = Depends(get_storage)
):
    """Update a category."""
    update_data = category.model_dump(exclude_unset=True, exclude_none=True)

    with storage_fault("Failed to update category"):
        updated = storage.update_category(category_id, update_data)
    if not updated:
        raise HTTPException(status_code=404, detail="Category not found")
    return updated


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: str, storage: BudgetStorage = Depends(get_storage)):
    """Delete a category and all of its expenses."""
    with storage_fault("Failed to delete category"):
        deleted = storage.delete_category(category_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Category not found")
    return None

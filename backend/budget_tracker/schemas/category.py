from pydantic import Field, field_validator

from .common import CamelModel, Money, PositiveMoney

DEFAULT_ICON = "DollarSign"


class CategoryCreate(CamelModel):
    """Fields for creating a category."""
    name: str = Field(min_length=1)
    monthly_budget: PositiveMoney
    icon: str | None = DEFAULT_ICON
    is_annual: bool = False

    @field_validator("icon")
    @classmethod
    def default_icon(cls, value: str | None) -> str:
        return value or DEFAULT_ICON


class CategoryUpdate(CamelModel):
    """Fields for updating a category (all optional)."""
    name: str | None = Field(None, min_length=1)
    monthly_budget: Money | None = None
    icon: str | None = None
    is_annual: bool | None = None


class CategoryRecord(CamelModel):
    """Stored category."""
    id: str
    name: str
    monthly_budget: float
    icon: str = DEFAULT_ICON
    is_annual: bool = False

    class Config:
        from_attributes = True

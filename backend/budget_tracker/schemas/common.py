from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

# Amount columns are Numeric(10, 2)
MONEY_LIMIT = 100_000_000


def _to_cents(value: float) -> float:
    value = round(value, 2)
    if abs(value) >= MONEY_LIMIT:
        raise ValueError(f"must be less than {MONEY_LIMIT} in magnitude")
    return value


def _positive_cents(value: float) -> float:
    value = _to_cents(value)
    if value <= 0:
        raise ValueError("must be greater than 0")
    return value


Money = Annotated[float, AfterValidator(_to_cents)]
PositiveMoney = Annotated[float, AfterValidator(_positive_cents)]


class CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        allow_inf_nan = False

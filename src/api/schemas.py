from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from src.components.categories import Category

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


# --- Categories ---
class CategoryWriteRequest(BaseModel):
    """Body of POST /categories and PUT /categories/{id}.

    Types are checked strictly: a number is not a valid name. A null field
    counts as unset. A client-sent id is accepted but never used.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    id: int | None = None
    name: str = ""
    description: str = ""

    @field_validator("name", "description", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("id")
    @classmethod
    def id_fits_int64(cls, value: int | None) -> int | None:
        if value is not None and not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError("id overflows a 64-bit integer")
        return value


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name, description=category.description)

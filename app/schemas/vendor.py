"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field, field_validator

from app.domain.vendor import CITY_MAX_LENGTH, NAME_MAX_LENGTH
from app.schemas.category import CategoryOut
from app.schemas.common import CamelModel, bounded_text

class VendorCreate(CamelModel):
    name: str
    city: str
    category_ids: list[str]

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return bounded_text(value, "Name", NAME_MAX_LENGTH)

    @field_validator("city")
    @classmethod
    def _check_city(cls, value: str) -> str:
        return bounded_text(value, "City", CITY_MAX_LENGTH)

    @field_validator("category_ids")
    @classmethod
    def _check_category_ids(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("Select at least one category")
        return value

class VendorUpdate(CamelModel):
    """Partial update.

    ``category_ids`` left out means "keep the current categories"; an empty
    list means "remove them all". Check ``model_fields_set`` to tell the two
    apart.
    """

    name: str | None = None
    city: str | None = None
    category_ids: list[str] | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str | None) -> str | None:
        return value if value is None else bounded_text(value, "Name", NAME_MAX_LENGTH)

    @field_validator("city")
    @classmethod
    def _check_city(cls, value: str | None) -> str | None:
        return value if value is None else bounded_text(value, "City", CITY_MAX_LENGTH)

    @property
    def replaces_categories(self) -> bool:
        return "category_ids" in self.model_fields_set and self.category_ids is not None

class VendorFilters(CamelModel):
    """Optional list filters. Blank strings count as "not supplied"."""

    city: str | None = None
    category_id: str | None = None

    @field_validator("city", "category_id")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

class VendorOut(CamelModel):
    id: str
    name: str
    city: str
    created_at: datetime
    categories: list[CategoryOut] = Field(default_factory=list)

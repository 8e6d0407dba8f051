"""Category Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import field_validator

from app.domain.category import NAME_MAX_LENGTH
from app.schemas.common import CamelModel, bounded_text

class CategoryCreate(CamelModel):
    name: str

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return bounded_text(value, "Name", NAME_MAX_LENGTH)

class CategoryUpdate(CategoryCreate):
    """Renaming is the only mutation a category supports."""

class CategoryOut(CamelModel):
    id: str
    name: str
    created_at: datetime

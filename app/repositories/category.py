"""Category repository."""


from app.domain.category import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category
    # categories.name is the only unique constraint besides the primary key
    conflict_message = "Category already exists"

from apps.notes.application.category.queries.get_category import GetCategoryQuery
from apps.notes.application.category.queries.list_categories import ListCategoriesQuery

__all__ = ["GetCategoryQuery", "ListCategoriesQuery"]

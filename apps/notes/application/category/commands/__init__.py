from apps.notes.application.category.commands.create_category import CreateCategoryInteractor
from apps.notes.application.category.commands.delete_category import DeleteCategoryInteractor
from apps.notes.application.category.commands.update_category import UpdateCategoryInteractor

__all__ = ["CreateCategoryInteractor", "DeleteCategoryInteractor", "UpdateCategoryInteractor"]

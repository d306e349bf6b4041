from apps.notes.application.category.dto.category import CreateCategoryInput, UpdateCategoryInput

__all__ = ["CreateCategoryInput", "UpdateCategoryInput"]

from apps.notes.application.category.ports.category_gateway import (
    CategoryCommandGateway,
    CategoryQueryGateway,
)

__all__ = ["CategoryCommandGateway", "CategoryQueryGateway"]

from apps.notes.infrastructure.persistence_postgres.adapters.category_gateway_sqla import (
    SqlaCategoryCommandGateway,
    SqlaCategoryQueryGateway,
)
from apps.notes.infrastructure.persistence_postgres.adapters.note_gateway_sqla import (
    SqlaNoteCommandGateway,
    SqlaNoteQueryGateway,
)
from apps.notes.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaCategoryCommandGateway",
    "SqlaCategoryQueryGateway",
    "SqlaNoteCommandGateway",
    "SqlaNoteQueryGateway",
    "SqlaTransactionManager",
]

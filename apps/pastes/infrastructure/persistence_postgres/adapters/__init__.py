from apps.pastes.infrastructure.persistence_postgres.adapters.paste_gateway_sqla import (
    SqlaPasteCommandGateway,
    SqlaPasteQueryGateway,
)
from apps.pastes.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = ["SqlaPasteCommandGateway", "SqlaPasteQueryGateway", "SqlaTransactionManager"]

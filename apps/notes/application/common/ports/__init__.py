from apps.notes.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]

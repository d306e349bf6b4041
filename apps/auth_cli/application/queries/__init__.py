"""CLI Queries."""

from apps.auth_cli.application.queries.status import AuthStatusQuery

__all__ = ["AuthStatusQuery"]

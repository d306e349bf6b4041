"""Login state file adapter."""

from apps.auth_cli.infrastructure.config.state_file import (
    CliConfig,
    JsonLoginStateStore,
    default_config_path,
)

__all__ = ["CliConfig", "JsonLoginStateStore", "default_config_path"]

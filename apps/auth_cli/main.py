"""Device-login CLI entry point.

``device-login`` 콘솔 스크립트가 run()을 호출합니다.
"""

from __future__ import annotations

from apps.auth_cli.presentation.cli import app
from apps.auth_cli.setup.logging import setup_logging


def run() -> None:
    setup_logging()
    app()


if __name__ == "__main__":
    run()

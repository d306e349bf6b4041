"""Rich consoles.

stdout은 명령 결과, stderr는 오류 메시지용입니다.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


__all__ = ["console", "err_console", "escape", "print_error"]

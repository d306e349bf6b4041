"""Browser launcher."""

from __future__ import annotations

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_browser(url: str) -> bool:
    """기본 브라우저로 URL 열기. 실패하면 False."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.info("Browser launch failed", extra={"error": str(e)})
        return False
    return bool(opened)


__all__ = ["open_browser"]

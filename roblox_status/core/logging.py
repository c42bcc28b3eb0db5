from __future__ import annotations

import logging
import re


class CredentialRedactingFilter(logging.Filter):
    """Masks the Roblox session cookie in log lines, including httpx debug output."""

    def __init__(self, cookie_name: str = ".ROBLOSECURITY") -> None:
        super().__init__()
        self._pattern = re.compile(rf"({re.escape(cookie_name)}=)[^;\s'\"]+")

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self._pattern.sub(r"\1[redacted]", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def configure_logging(*, debug: bool, cookie_name: str = ".ROBLOSECURITY") -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        force=True,
    )
    redactor = CredentialRedactingFilter(cookie_name)
    for handler in logging.getLogger().handlers:
        handler.addFilter(redactor)

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    # Upstream request lines are only useful while debugging the relay.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging configured cookie_name=%s debug=%s", cookie_name, debug)

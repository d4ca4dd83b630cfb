"""
Logging configuration
Header-derived text is attacker controlled, so records are sanitized before output
"""

import logging
import sys
from clientip.config import settings


class HeaderValueFilter(logging.Filter):
    """Filter that escapes control characters and caps message length"""

    MAX_MESSAGE_LENGTH = 512

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Left as-is so Handler.handleError reports the bad format call
            return True
        cleaned = "".join(
            ch if ch.isprintable() else repr(ch)[1:-1] for ch in message
        )
        if len(cleaned) > self.MAX_MESSAGE_LENGTH:
            cleaned = cleaned[: self.MAX_MESSAGE_LENGTH] + "...[truncated]"
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


def setup_logging():
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(HeaderValueFilter())

    # Root logger
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Resolution event logger
resolver_logger = logging.getLogger("clientip.resolution")


def log_client_resolved(address: str, source: str):
    """Log which source supplied the client address"""
    resolver_logger.debug(f"Client {address} resolved from {source}")


def log_client_unresolved(peer: str):
    """Log a request whose client address could not be determined"""
    resolver_logger.info(f"No client address resolved (peer={peer!r})")

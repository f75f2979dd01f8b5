import logging
import os


def init_logging(default_level: str | None = None) -> None:
    """Initialize root logging once, honoring LOG_LEVEL env.

    Safe to call multiple times; subsequent calls are no-ops if handlers exist.
    """
    if logging.getLogger().handlers:
        return
    level_name = (default_level or os.getenv("LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = "%(asctime)s | %(levelname)5s | %(name)s | %(message)s"
    logging.basicConfig(level=level, format=fmt)
    # playwright/httpx chatter drowns the per-request lifecycle lines
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    logging.getLogger("fakecheck.logging").debug("logging initialized at level %s", level_name)

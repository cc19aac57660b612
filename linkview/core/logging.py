import logging
from typing import Optional
from rich.logging import RichHandler

_CONFIGURED = False

def setup(level: Optional[str] = None) -> logging.Logger:
    global _CONFIGURED
    if not _CONFIGURED:
        if level is None:
            from linkview.core.config import log_level

            level = log_level()
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True)],
        )
        logging.getLogger("httpx").setLevel(logging.WARNING)
        _CONFIGURED = True
    return logging.getLogger("linkview")

def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not _CONFIGURED:
        setup()
    return logging.getLogger(name or "linkview")

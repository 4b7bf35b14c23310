import sys
from typing import Optional, Tuple

from loguru import logger

from .config import AppConfig, get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
DEFAULT_COMPONENT = "inventory_metrics"


class AppLogger:
    """Installs the loguru handlers for the inventory dashboard.

    Handlers follow AppConfig:
      - stderr, coloured text or JSON lines (LOG_JSON), at LOG_LEVEL
      - optionally LOG_FILE, always JSON lines, rotated by size
    Handlers are rebuilt only when those settings change, so calling
    ``get_logger`` from every module stays cheap.
    """

    def __init__(self) -> None:
        self._applied: Optional[Tuple[str, bool, Optional[str]]] = None

    def configure(self, config: Optional[AppConfig] = None) -> None:
        config = config or get_config()
        settings = (config.log_level.upper(), config.log_json, config.log_file)
        if settings == self._applied:
            return

        level, as_json, log_file = settings
        handlers = [dict(sink=sys.stderr, level=level, format=CONSOLE_FORMAT, serialize=as_json)]
        if log_file:
            handlers.append(
                dict(sink=log_file, level=level, serialize=True, rotation=config.log_rotation, retention=config.log_retention)
            )
        logger.configure(handlers=handlers, extra={"component": DEFAULT_COMPONENT})
        self._applied = settings

    def get_logger(self, name: str = None):
        """Return the shared logger, tagged with ``name`` as its component."""
        self.configure()
        if name:
            return logger.bind(component=name)
        return logger


_app_logger = AppLogger()


def get_logger(name: str = None):
    """Get the application logger, applying the latest logging config first."""
    return _app_logger.get_logger(name)

"""Base service class for CLI services."""

from pathlib import Path
from typing import Any

from latest_json_logging import get_logger


class BaseService:
    """Base service class providing common functionality for CLI services.

    This base class provides:
    - Tauri project context
    - Logging tagged with the service name
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the base service.

        Parameters
        ----------
        project_root : Path
            Tauri project directory
        """
        self.project_root = project_root
        self._logger = get_logger(self.__class__.__module__)

    def log_info(self, message: str, *args: Any) -> None:
        """Log an info message with service context."""
        self._logger.info("[%s] " + message, self.__class__.__name__, *args)

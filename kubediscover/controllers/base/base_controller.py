"""Base controller for collection runs.

Controllers gather one data set per run and narrate their progress through an
optional callback, so the CLI can report counts as they are gathered.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import suppress
from typing import Any

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class BaseController(ABC):
    """Base controller class with progress narration.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    def __init__(self, progress_callback: ProgressCallback | None = None) -> None:
        self._progress_callback = progress_callback

    def _notify_progress(self, message: str) -> None:
        """Notify progress callback if provided."""
        logger.debug(message)
        if self._progress_callback:
            with suppress(Exception):
                self._progress_callback(message)

    @abstractmethod
    async def collect(self, *args: Any, **kwargs: Any) -> Any:
        """Collect the full data set for one run."""
        ...

"""Rollback guard for cache slots under construction."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from types import TracebackType

logger = logging.getLogger(__name__)


class SlotGuard:
    """Remove a cache slot on exit unless :meth:`disarm` was called.

    Used around package generation so a failed or interrupted build never
    leaves a half-populated slot behind.
    """

    def __init__(self, slot_path: Path) -> None:
        self.slot_path = slot_path
        self.armed = True

    def disarm(self) -> None:
        """Keep the slot on exit."""
        self.armed = False

    def __enter__(self) -> SlotGuard:
        self.slot_path.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self.armed:
            return
        logger.info("removing incomplete package %s", self.slot_path)
        try:
            shutil.rmtree(self.slot_path)
        except OSError as err:
            logger.error("failed to remove %s: %s", self.slot_path, err)

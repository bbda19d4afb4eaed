"""
Progress reporting for template runs.

Components report user-facing progress through a Reporter instead of
printing. The CLI supplies a console implementation; library callers get
LogReporter, which forwards to the standard logging module.
"""

from __future__ import annotations

import logging
from typing import Protocol


class Reporter(Protocol):
    """Sink for user-facing progress messages."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LogReporter:
    """Reporter backed by a logging.Logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("stencil")

    def info(self, message: str) -> None:
        self.logger.info(message)

    def success(self, message: str) -> None:
        self.logger.info(message)

    def warn(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


class NullReporter:
    """Reporter that discards everything, for machine-readable output modes."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

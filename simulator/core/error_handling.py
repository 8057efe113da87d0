"""
Error types and centralized error reporting for the dungeon engine.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DungeonError(Exception):
    """Base class for every error raised by the dungeon engine."""


class LoadError(DungeonError):
    """Raised when a level cannot be read, parsed or allocated."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class GridReleasedError(DungeonError):
    """Raised when a grid is used after it has been released."""


class MissingPlayerMarkerError(DungeonError):
    """Raised when an operation needs the player marker and the grid has none."""


class ErrorSeverity(Enum):
    """Enumeration of error severity levels for the game's error handling system."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class GameError:
    """Represents a game error with severity, context, and optional exception information."""
    message: str
    severity: ErrorSeverity
    context: dict[str, Any]
    exception: Optional[Exception] = None


class ErrorHandler:
    """Centralized error handling for the game."""

    def __init__(self) -> None:
        """Initialize the ErrorHandler with a logger and empty error history."""
        self.logger = logging.getLogger("game_errors")
        self.error_history: list[GameError] = []

    def handle(
        self,
        message: str,
        severity: ErrorSeverity,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> GameError:
        """Record an error and log it at the level matching its severity."""
        error = GameError(
            message=message,
            severity=severity,
            context=context or {},
            exception=exception,
        )
        self.error_history.append(error)

        # Prefix context keys to avoid conflicts with logging system reserved keys
        safe_context = {f"ctx_{key}": value for key, value in error.context.items()}

        if error.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"CRITICAL: {error.message}", extra=safe_context)
        elif error.severity == ErrorSeverity.HIGH:
            self.logger.error(f"ERROR: {error.message}", extra=safe_context)
        elif error.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"WARNING: {error.message}", extra=safe_context)
        else:
            self.logger.info(f"INFO: {error.message}", extra=safe_context)
        return error

    def handle_exception(
        self,
        exception: DungeonError,
        context: Optional[dict[str, Any]] = None,
    ) -> GameError:
        """Record an engine exception; load failures are reported as HIGH,
        anything else as CRITICAL."""
        severity = (
            ErrorSeverity.HIGH
            if isinstance(exception, LoadError)
            else ErrorSeverity.CRITICAL
        )
        return self.handle(str(exception), severity, context, exception)


# Global error handler instance
ERROR_HANDLER = ErrorHandler()

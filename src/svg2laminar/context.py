"""Diagnostics collected while converting a single SVG file."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class ConversionContext:
    """Append-only info/warning/error logs for one file's conversion.

    A context is created at the start of a single-file conversion, passed
    explicitly to every conversion function and copied into the result once
    the conversion is done. It is never shared between conversions.
    """

    log: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def info(self, message: str) -> None:
        """Record an informational message."""
        self.log.append(message)
        logger.debug(message)

    def warning(self, message: str) -> None:
        """Record a recoverable issue."""
        self.warnings.append(message)
        logger.warning(message)

    def error(self, message: str) -> None:
        """Record an error."""
        self.errors.append(message)
        logger.error(message)

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

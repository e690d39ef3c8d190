"""
=============================================================================
CONVERTER CONFIGURATION
=============================================================================

Everything a conversion needs to know before it starts:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── headerconv --workers 2                                    │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HEADERCONV_WORKERS=2 headerconv                           │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The input stream itself is not configuration; it is handed to the
converter directly (standard input by default).

=============================================================================
"""

import logging
import os
from dataclasses import dataclass, field

from .formats import OutputFormat


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_num_workers() -> int:
    """One queue slot per CPU, like the number of workers a pool would get."""
    return os.cpu_count() or 1


@dataclass
class ConverterConfig:
    """
    Configuration for a HeaderConverter.

    Example:
        config = ConverterConfig(num_workers=2, log_level="DEBUG")
        config.validate()
    """

    output_format: OutputFormat = OutputFormat.JSON
    """Representation of the serialized result. Only JSON exists."""

    num_workers: int = field(default_factory=default_num_workers)
    """
    Capacity of each classifier queue.
    The producer blocks when a consumer falls this far behind.
    """

    log_level: str = "WARNING"
    """
    Logging level for the headerconv logger.
    INFO adds the conversion timing, DEBUG the per-line match details.
    """

    @property
    def log_level_value(self) -> int:
        """The log level as a logging module constant."""
        return getattr(logging, self.log_level.upper(), logging.WARNING)

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """
        Create configuration from environment variables.

        HEADERCONV_FORMAT     Output format (default: json)
        HEADERCONV_WORKERS    Queue capacity (default: CPU count)
        HEADERCONV_LOG_LEVEL  Logging level (default: WARNING)
        """
        workers = os.getenv("HEADERCONV_WORKERS")
        return cls(
            output_format=OutputFormat.from_name(os.getenv("HEADERCONV_FORMAT", "json")),
            num_workers=int(workers) if workers else default_num_workers(),
            log_level=os.getenv("HEADERCONV_LOG_LEVEL", "WARNING"),
        )

    def validate(self) -> None:
        """Fail fast on values the converter cannot run with."""
        if not isinstance(self.output_format, OutputFormat):
            raise ValueError(f"Invalid output format: {self.output_format!r}")

        if self.num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {self.num_workers}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )

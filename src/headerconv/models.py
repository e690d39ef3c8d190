"""
=============================================================================
CONVERSION DATA MODEL
=============================================================================

    input line ──classify──► HeaderRecord ──┐
                                           ├──aggregate──► ConversionResult
    input line ──classify──► RawLine ──────┘

HeaderRecord and RawLine only live while they travel through the queues
between the classifier thread and the aggregator threads. ConversionResult
is what a single conversion hands back to its caller.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .formats import OutputFormat


class HeaderConvError(Exception):
    """Base class for errors raised by headerconv."""


class ConversionError(HeaderConvError):
    """
    Raised when a conversion cannot produce any output.

    Per-line problems never end up here; unparseable lines are collected
    as raw lines instead. This is reserved for failures of the whole
    conversion, such as a result that cannot be serialized.

    The exit_code is what the command line reports for this failure.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True)
class HeaderRecord:
    """A classified line: normalized key and its unmodified value."""
    key: str
    value: str


@dataclass(frozen=True)
class RawLine:
    """A retained line that is neither a status line nor a pair."""
    text: str


@dataclass
class ConversionResult:
    """
    Aggregated output of one conversion.

    Attributes:
        converted:     Field name → value. Later duplicates overwrite
                       earlier ones.
        not_converted: Raw lines, in input order.
        elapsed:       Wall-clock seconds spent classifying and
                       aggregating. Informational only.
    """

    converted: Dict[str, str] = field(default_factory=dict)
    not_converted: List[str] = field(default_factory=list)
    elapsed: float = 0.0

    def to_mapping(self, output_format: OutputFormat = OutputFormat.JSON) -> Dict[str, Any]:
        """
        Build the flat mapping that gets serialized.

        The raw lines are attached under the format's reserved key only
        when there are any.
        """
        mapping: Dict[str, Any] = dict(self.converted)
        if self.not_converted:
            mapping[output_format.raw_key] = list(self.not_converted)
        return mapping

"""
=============================================================================
OUTPUT FORMATS
=============================================================================

The converter can describe its result in exactly one representation today:
JSON. The format is still modelled as an enum so that every place that
depends on it (reserved key names, key normalization, serialization) goes
through one seam.

=============================================================================
RESERVED KEYS
=============================================================================

    ┌──────────┬─────────────┬────────────────────────────────────────────┐
    │  Format  │  Key        │  Meaning                                   │
    ├──────────┼─────────────┼────────────────────────────────────────────┤
    │  json    │  "code"     │  3-digit status code from the status line │
    │  json    │  "raw"      │  Lines that were neither status nor pair  │
    └──────────┴─────────────┴────────────────────────────────────────────┘

=============================================================================
ADDING A FORMAT
=============================================================================

1. Add a member to OutputFormat.
2. Give it a branch in code_key, raw_key and serialize, and decide in
   LineClassifier.parse_pair how its keys are normalized.

Until a second member exists, the branches below have a single case.

=============================================================================
"""

import json
from enum import Enum
from typing import Any, Dict


class OutputFormat(Enum):
    """Structured output representation of a conversion result."""

    JSON = "json"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """
        Look up a format by its string form (case-insensitive).

        Raises:
            ValueError: If no format has that name.
        """
        for fmt in cls:
            if fmt.value == name.strip().lower():
                return fmt
        choices = ", ".join(fmt.value for fmt in cls)
        raise ValueError(f"Unknown output format: {name!r} (choose from {choices})")

    @property
    def code_key(self) -> str:
        """Field name used for the status code."""
        if self is OutputFormat.JSON:
            return "code"
        return "Code"

    @property
    def raw_key(self) -> str:
        """Field name used for the list of unparsed lines."""
        if self is OutputFormat.JSON:
            return "raw"
        return "Raw"

    def serialize(self, mapping: Dict[str, Any]) -> str:
        """
        Serialize a flat result mapping.

        JSON output is compact, key-sorted and keeps non-ASCII text as-is.

        Raises:
            TypeError, ValueError: If the mapping holds something the
            format cannot represent.
        """
        if self is OutputFormat.JSON:
            return json.dumps(
                mapping,
                ensure_ascii=False,
                separators=(",", ":"),
                sort_keys=True,
            )
        raise ValueError(f"No serializer for format: {self}")

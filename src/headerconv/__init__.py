"""
=============================================================================
HEADERCONV - Captured HTTP Response Headers to JSON
=============================================================================

Reads the header block a verbose HTTP client prints and emits it as one
flat JSON object:

    HTTP/1.1 200 OK                     {
    Content-Type: text/html     ──►       "code": "200",
    X-Cache: HIT                          "contentType": "text/html",
                                          "xCache": "HIT"
                                        }

Lines that are neither the status line nor a "Key: Value" pair are kept,
in order, under "raw".

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    headerconv/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m headerconv)
    ├── converter.py         # HeaderConverter, convert_headers()
    ├── config.py            # ConverterConfig dataclass
    ├── formats.py           # OutputFormat enum and serialization
    ├── models.py            # HeaderRecord, RawLine, ConversionResult, errors
    └── core/                # Pipeline components
        ├── classifier.py    # Line classification + producer thread
        ├── normalizer.py    # Header key → camelCase field name
        └── aggregator.py    # Consumer threads and result collections

=============================================================================
QUICK START
=============================================================================

    from headerconv import HeaderConverter, convert_headers

    convert_headers("HTTP/1.1 404 Not Found\\nServer: nginx\\n")
    # '{"code":"404","server":"nginx"}'

    with open("headers.txt") as f:
        result = HeaderConverter(raw_header=f).convert()
        result.converted, result.not_converted

=============================================================================
"""

__version__ = "1.0.0"

from .config import ConverterConfig
from .converter import HeaderConverter, convert_headers
from .formats import OutputFormat
from .models import (
    ConversionError,
    ConversionResult,
    HeaderConvError,
    HeaderRecord,
    RawLine,
)

__all__ = [
    "HeaderConverter",
    "convert_headers",
    "ConverterConfig",
    "OutputFormat",
    "ConversionResult",
    "HeaderRecord",
    "RawLine",
    "HeaderConvError",
    "ConversionError",
    "__version__",
]

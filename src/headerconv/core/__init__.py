"""
=============================================================================
CONVERSION PIPELINE COMPONENTS
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        LINE CLASSIFIER                               │
    │  ─────────────────────────────────────────────────────────────────  │
    │  • Reads the input stream line by line (producer thread)            │
    │  • Status line → HeaderRecord("code", ...)                          │
    │  • "Key: Value" → HeaderRecord(normalized key, value)               │
    │  • Anything else → RawLine                                          │
    └─────────────────────────────────────────────────────────────────────┘
                 │ records                          │ raw lines
                 ▼                                  ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                          AGGREGATOR                                  │
    │  ─────────────────────────────────────────────────────────────────  │
    │  • One consumer thread per queue                                    │
    │  • Records → dict, raw lines → list                                 │
    │  • Joins both consumers before returning                            │
    └─────────────────────────────────────────────────────────────────────┘

The key normalizer is a plain function used by the classifier.

=============================================================================
"""

from .aggregator import Aggregator, QueueConsumer
from .classifier import LineClassifier, iter_lines
from .normalizer import normalize_key

__all__ = [
    "Aggregator",       # Drains both queues into the result collections
    "QueueConsumer",    # Thread draining one queue until its sentinel
    "LineClassifier",   # Status / pair / raw classification + producer
    "iter_lines",       # Trimmed line iterator that treats read errors as EOF
    "normalize_key",    # "Content-Type" → "contentType"
]

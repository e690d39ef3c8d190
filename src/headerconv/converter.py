"""
=============================================================================
HTTP HEADER CONVERTER
=============================================================================

Turns header text captured from a verbose HTTP client into JSON:

    $ curl -sI https://example.com | headerconv
    {"code":"200","contentType":"text/html","xCache":"HIT"}

=============================================================================
CONVERSION FLOW
=============================================================================

    input stream
         │
         ▼
    ┌──────────────────────────────────┐
    │  LineClassifier.produce          │  producer thread
    └──────────────────────────────────┘
         │ HeaderRecord          │ RawLine         bounded queues,
         ▼                       ▼                 maxsize = num_workers
    ┌──────────────┐     ┌──────────────┐
    │  consumer    │     │  consumer    │          Aggregator threads
    └──────────────┘     └──────────────┘
         │ dict                  │ list
         └──────────┬────────────┘
                    ▼  join (all three threads)
            ConversionResult
                    │  attach "raw" if non-empty
                    ▼
            OutputFormat.serialize → str

There is no timeout: a stream that never reaches end of input keeps the
conversion waiting.

=============================================================================
"""

import io
import logging
import queue
import sys
import threading
import time
from dataclasses import replace
from typing import IO, Optional, Union

from .config import ConverterConfig
from .core.aggregator import Aggregator
from .core.classifier import LineClassifier
from .formats import OutputFormat
from .models import ConversionError, ConversionResult, HeaderRecord, RawLine


logger = logging.getLogger(__name__)


class HeaderConverter:
    """
    Converts one captured header block per call to convert()/output().

    The input stream, output format and worker count can be changed
    between conversions with the set_* methods; a running conversion
    only reads them once at its start.

    Example:
        converter = HeaderConverter()           # reads sys.stdin
        print(converter.output())

        converter = HeaderConverter(raw_header=open("headers.txt"))
        result = converter.convert()
        result.converted["contentType"]
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        raw_header: Optional[IO] = None,
    ):
        # Own copy: the set_* methods must not leak into a shared config
        config = replace(config) if config is not None else ConverterConfig()
        config.validate()

        self.config = config
        self.raw_header: IO = raw_header if raw_header is not None else sys.stdin

    @property
    def output_format(self) -> OutputFormat:
        return self.config.output_format

    @property
    def num_workers(self) -> int:
        return self.config.num_workers

    def set_raw_header(self, raw_header: IO) -> None:
        """Set the stream the header text is read from."""
        self.raw_header = raw_header

    def set_output_format(self, output_format: OutputFormat) -> None:
        """Set the serialized output format."""
        if not isinstance(output_format, OutputFormat):
            raise ValueError(f"Invalid output format: {output_format!r}")
        self.config.output_format = output_format

    def set_num_workers(self, num_workers: int) -> None:
        """Set the capacity of each classifier queue."""
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.config.num_workers = num_workers

    def convert(self) -> ConversionResult:
        """
        Classify and aggregate the whole input stream.

        Returns:
            ConversionResult with the converted mapping, the raw lines
            (without the reserved key attached) and the elapsed time.

        Raises:
            ConversionError: If the producer thread failed with anything
            other than a read error.
        """
        start_time = time.perf_counter()

        classifier = LineClassifier(self.output_format)
        converted: "queue.Queue[Optional[HeaderRecord]]" = queue.Queue(maxsize=self.num_workers)
        not_converted: "queue.Queue[Optional[RawLine]]" = queue.Queue(maxsize=self.num_workers)

        failures: list = []

        def run_producer():
            try:
                classifier.produce(self.raw_header, converted, not_converted)
            except Exception as e:
                failures.append(e)

        producer = threading.Thread(
            target=run_producer,
            name="Producer",
            daemon=True,
        )
        producer.start()

        mapping, raw_lines = Aggregator().collect(converted, not_converted)
        producer.join()

        if failures:
            e = failures[0]
            raise ConversionError(f"Reading input failed: {type(e).__name__}: {e}") from e

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Converted {len(mapping)} fields, {len(raw_lines)} raw lines "
            f"in {elapsed * 1000:.3f}ms"
        )
        return ConversionResult(converted=mapping, not_converted=raw_lines, elapsed=elapsed)

    def output(self) -> str:
        """
        Convert the input stream and serialize the result.

        Raises:
            ConversionError: If the result cannot be serialized.
        """
        result = self.convert()
        mapping = result.to_mapping(self.output_format)

        try:
            return self.output_format.serialize(mapping)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"Cannot serialize result as {self.output_format}: {e}") from e


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def convert_headers(
    source: Union[str, bytes, IO],
    config: Optional[ConverterConfig] = None,
) -> str:
    """
    Convert header text in one call.

    Args:
        source: The header text itself, or a stream to read it from.
        config: Converter configuration (defaults apply when omitted).

    Returns:
        The serialized result.
    """
    if isinstance(source, str):
        source = io.StringIO(source)
    elif isinstance(source, bytes):
        source = io.BytesIO(source)

    return HeaderConverter(config, raw_header=source).output()

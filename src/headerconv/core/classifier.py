r"""
=============================================================================
LINE CLASSIFIER
=============================================================================

Reads captured response headers line by line and decides what each line is.

=============================================================================
CLASSIFICATION RULES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    ONE LINE OF INPUT                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   1. Strip trailing whitespace                                       │
    │          │                                                           │
    │          ├── shorter than 4 characters? → dropped                   │
    │          ▼                                                           │
    │   2. First retained line only: status line?                          │
    │          │   "HTTP/1.1 200 OK" → HeaderRecord("code", "200")        │
    │          │                                                           │
    │          ├── yes → done                                              │
    │          ▼                                                           │
    │   3. Pair line?                                                      │
    │          │   "Content-Type: text/html"                               │
    │          │       → HeaderRecord("contentType", "text/html")         │
    │          │                                                           │
    │          ├── yes → done                                              │
    │          ▼                                                           │
    │   4. Anything else → RawLine(line)                                   │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
REGEX PATTERNS
=============================================================================

STATUS_PATTERN: (?P<code>[0-9]{3})\s(?P<message>.+)$

    Searched anywhere in the line: "HTTP/1.1 200 OK" and "HTTP/2 404 Not Found"
    match, "HTTP/2 200" without a reason phrase does not. Only the code
    is used downstream.

PAIR_PATTERN: ^(?P<key>.+?):\s+(?P<value>.+)$

    (?P<key>.+?)    - Shortest non-empty run up to the separator
    :\s+            - Colon followed by at least one whitespace character
    (?P<value>.+)   - Non-empty remainder

    "Date: Mon, 01 Jan 2024 10:00:00 GMT" splits at the first ": ", so
    the colons in the time stay in the value. "Key:value" has no
    whitespace after the colon and is NOT a pair.

Both patterns are compiled with re.ASCII: \s means space, tab, CR, LF, FF
or VT only, so "Key:\u00a0value" (no-break space) is not a pair.

Lines starting with a space are folded continuations of the previous
header. They are never pairs on their own and end up as raw lines.

=============================================================================
PRODUCER
=============================================================================

produce() is the body of the producer thread. It feeds two bounded queues
and always finishes by putting a None sentinel on each, so the consumers
terminate even when reading fails halfway.

=============================================================================
"""

import logging
import queue
import re
from typing import IO, Iterator, Optional, Union

from ..formats import OutputFormat
from ..models import HeaderRecord, RawLine
from .normalizer import normalize_key


logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 4


def iter_lines(stream: IO) -> Iterator[str]:
    """
    Yield lines from a text or binary stream with trailing whitespace removed.

    Binary input is decoded as UTF-8, replacing undecodable bytes. A read
    error ends the iteration exactly like end of input does.
    """
    while True:
        try:
            line = stream.readline()
        except (OSError, ValueError, UnicodeDecodeError) as e:
            logger.debug(f"Stopped reading input: {type(e).__name__}: {e}")
            return

        if not line:
            return

        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")

        yield line.rstrip()


class LineClassifier:
    """
    Classifies header lines into HeaderRecord and RawLine items.

    The compiled patterns belong to the instance; each converter builds its
    own classifier for the format it outputs.
    """

    def __init__(self, output_format: OutputFormat = OutputFormat.JSON):
        self.output_format = output_format
        self.status_pattern = re.compile(r"(?P<code>[0-9]{3})\s(?P<message>.+)$", re.ASCII)
        self.pair_pattern = re.compile(r"^(?P<key>.+?):\s+(?P<value>.+)$", re.ASCII)

    def parse_status(self, line: str) -> Optional[HeaderRecord]:
        """Return the status code record, or None if the line is no status line."""
        match = self.status_pattern.search(line)
        if match is None:
            return None

        logger.debug(f"Status line groups: {match.groupdict()}")
        return HeaderRecord(self.output_format.code_key, match.group("code"))

    def parse_pair(self, line: str) -> Optional[HeaderRecord]:
        """Return a record with a normalized key, or None if the line is no pair."""
        if line.startswith(" "):
            return None

        match = self.pair_pattern.match(line)
        if match is None:
            return None

        key = match.group("key")
        if self.output_format is OutputFormat.JSON:
            key = normalize_key(key)
        return HeaderRecord(key, match.group("value"))

    def classify(self, line: str, first: bool = False) -> Union[HeaderRecord, RawLine]:
        """
        Classify one trimmed line.

        Args:
            line: Input line with trailing whitespace already removed.
            first: Whether this is the first retained line of the input,
                   the only one that may be a status line.
        """
        if first:
            record = self.parse_status(line)
            if record is not None:
                return record

        record = self.parse_pair(line)
        if record is not None:
            return record

        return RawLine(line)

    def classify_stream(self, stream: IO) -> Iterator[Union[HeaderRecord, RawLine]]:
        """Classify every retained line of a stream, in input order."""
        first = True
        for line in iter_lines(stream):
            if len(line) < MIN_LINE_LENGTH:
                continue

            yield self.classify(line, first=first)
            first = False

    def produce(
        self,
        stream: IO,
        converted: "queue.Queue[Optional[HeaderRecord]]",
        not_converted: "queue.Queue[Optional[RawLine]]",
    ) -> None:
        """
        Producer thread body: route every classified line to its queue.

        Records go to `converted`, raw lines to `not_converted`. Both
        queues receive a None sentinel when the input is exhausted.
        """
        try:
            for item in self.classify_stream(stream):
                if isinstance(item, HeaderRecord):
                    converted.put(item)
                else:
                    not_converted.put(item)
        finally:
            converted.put(None)
            not_converted.put(None)

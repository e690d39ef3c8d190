"""
=============================================================================
AGGREGATOR
=============================================================================

Drains the two classifier queues and builds the result collections.

    ┌───────────────┐   converted queue    ┌──────────────────┐
    │               │ ───────────────────► │ Consumer-records │ ──► dict
    │  Classifier   │                      └──────────────────┘
    │  (producer)   │   not-converted queue ┌──────────────────┐
    │               │ ───────────────────► │ Consumer-raw     │ ──► list
    └───────────────┘                      └──────────────────┘
                                                     │
                                 join() both ◄───────┘  (completion barrier)

Each collection has exactly one writer, so neither needs a lock. The only
synchronization is the queue hand-off and the final join.

Ordering: each queue is drained in the order the producer filled it, so
the raw list keeps input order and a repeated header keeps its last value.
Nothing is promised about the relative order of the two queues.

=============================================================================
"""

import logging
import queue
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..models import HeaderRecord, RawLine


logger = logging.getLogger(__name__)


class QueueConsumer(threading.Thread):
    """
    Thread that feeds every queued item to a callback until it sees None.

    None is the sentinel the producer puts on a queue once it is done.
    """

    def __init__(
        self,
        source: queue.Queue,
        receive: Callable[[Any], None],
        name: str,
    ):
        # daemon=True: a producer stuck on a stream without EOF must not
        # keep the interpreter alive after the main thread exits
        super().__init__(name=name, daemon=True)
        self.source = source
        self.receive = receive
        self.received = 0

    def run(self):
        logger.debug(f"{self.name} started")

        while True:
            item = self.source.get()
            if item is None:
                break

            self.receive(item)
            self.received += 1

        logger.debug(f"{self.name} stopped after {self.received} items")


class Aggregator:
    """
    Collects classified records into a mapping and raw lines into a list.

    Usage:
        aggregator = Aggregator()
        converted, not_converted = aggregator.collect(records_q, raw_q)
    """

    def __init__(self):
        self.converted: Dict[str, str] = {}
        self.not_converted: List[str] = []

    def _add_record(self, record: HeaderRecord) -> None:
        self.converted[record.key] = record.value

    def _add_raw(self, raw: RawLine) -> None:
        self.not_converted.append(raw.text)

    def collect(
        self,
        converted: "queue.Queue[Optional[HeaderRecord]]",
        not_converted: "queue.Queue[Optional[RawLine]]",
    ) -> Tuple[Dict[str, str], List[str]]:
        """
        Drain both queues concurrently and return (mapping, raw lines).

        Blocks until each queue has delivered its sentinel.
        """
        consumers = [
            QueueConsumer(converted, self._add_record, name="Consumer-records"),
            QueueConsumer(not_converted, self._add_raw, name="Consumer-raw"),
        ]
        for consumer in consumers:
            consumer.start()
        for consumer in consumers:
            consumer.join()

        return self.converted, self.not_converted

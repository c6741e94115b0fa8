# io/recorder.py
"""Fan-out of analytics records (io.business_events) to one or more sinks."""

import json
import logging
import sys
from dataclasses import asdict
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, ev) -> None: ...


class JsonlSink:
    """One JSON object per line. Tuples become lists, anything else odd becomes str."""

    def __init__(self, fp: TextIO = sys.stdout, *, flush: bool = False):
        self.fp = fp
        self.flush = flush

    def write(self, ev) -> None:
        self.fp.write(json.dumps(asdict(ev), default=str) + "\n")
        if self.flush:
            self.fp.flush()


class MemorySink:
    def __init__(self):
        self.events: list = []

    def write(self, ev) -> None:
        self.events.append(ev)

    def of(self, kind: type) -> list:
        return [e for e in self.events if isinstance(e, kind)]


class Recorder:
    def __init__(self, *sinks: Sink):
        self.sinks = sinks or (JsonlSink(),)
        self.emitted = 0
        self.failures = 0

    def emit(self, ev) -> None:
        self.emitted += 1
        for s in self.sinks:
            try:
                s.write(ev)
            except (OSError, TypeError, ValueError):
                # a broken sink must not stop the simulation
                self.failures += 1
                logger.exception("recorder sink %s failed on %s", type(s).__name__, type(ev).__name__)

# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from dispatch_sim.sim.hooks import NoopHooks

LOGGER_NAME = "dispatch_sim"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", name: str = LOGGER_NAME) -> logging.Logger:
    """Attach one JSON stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    Structured logs for the event loop: run lifecycle, business events at INFO,
    everything else at DEBUG (sampled) when debug is on.
    """

    BUSINESS = {
        "TrafficRefreshed",
        "DispatchRequested",
        "DispatchCompleted",
        "DispatchFailed",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or configure_logging(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(
            getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}}
        )

    def _shape_event(self, ev) -> tuple[str, dict]:
        name = type(ev).__name__
        base = asdict(ev) if is_dataclass(ev) else {"t": getattr(ev, "t", None)}
        return name, base

    # --------------------------------------------------------

    def run_start(self, *, until, max_events, qsize):
        self._emit("INFO", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed, **extra):
        self._emit("INFO", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now, qsize):
        if self.debug and (qsize % self.sample_every) == 0:
            name, extra = self._shape_event(ev)
            self._emit("DEBUG", "schedule", event=name, now=now, qsize=qsize, **extra)

    def dispatch_start(self, ev, *, seq, qsize, handlers):
        self._processed += 1
        name, extra = self._shape_event(ev)
        if name in self.BUSINESS:
            self._emit("INFO", name, **extra, seq=seq, qsize=qsize, handlers=handlers)
        elif self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", name, **extra, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, produced, qsize, ms):
        if self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", produced=produced, qsize=qsize, ms=ms)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev)
        self._emit("ERROR", "kernel_error", event=name, reason=reason, data=shaped, **extra)

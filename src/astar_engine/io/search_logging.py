# io/search_logging.py
import json
import logging
import sys

from astar_engine.io.recorder import Recorder
from astar_engine.search.events import NodeExpanded, NodeRelaxed, SearchFinished
from astar_engine.search.hooks import NoopHooks


def _default_json_logger(name="astar_engine", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


def _label(node) -> str:
    return repr(node)


class SearchLogging(NoopHooks):
    """
    Structured logs for a search run. Lifecycle records go out at INFO;
    per-node records only when `debug` is set, sampled every `sample_every`.
    Trace events are forwarded to the recorder when one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)
        self._popped = 0
        self._relaxed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, ev):
        if self.recorder:
            self.recorder.emit(ev)

    # --------------------------------------------------------

    def run_start(self, *, start, finish):
        self._popped = self._relaxed = 0
        self._emit("INFO", "run_start", start=_label(start), finish=_label(finish))

    def run_end(self, *, state, expanded: int, weight: float | None, wall_ms: float):
        self._emit(
            "INFO",
            "run_end",
            state=state.value,
            expanded=expanded,
            relaxed=self._relaxed,
            weight=weight,
            wall_ms=round(wall_ms, 3),
        )
        self._record(SearchFinished(state=state.value, expanded=expanded, weight=weight))

    def pop(self, node, *, open_size: int, closed_size: int):
        self._popped += 1
        self._record(
            NodeExpanded(
                node=_label(node),
                g=node.g,
                f=node.f,
                open_size=open_size,
                closed_size=closed_size,
            )
        )
        if self.debug and (self._popped % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "pop",
                node=_label(node),
                g=node.g,
                f=node.f,
                open_size=open_size,
                closed_size=closed_size,
            )

    def relax(self, current, successor, *, g: float, improved: bool):
        self._relaxed += 1
        self._record(
            NodeRelaxed(
                current=_label(current),
                successor=_label(successor),
                g=g,
                f=successor.f,
                improved=improved,
            )
        )
        if self.debug and (self._relaxed % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "relax",
                current=_label(current),
                successor=_label(successor),
                g=g,
                f=successor.f,
                improved=improved,
            )

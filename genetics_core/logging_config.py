"""
Logging setup for genetics runs.

Records may carry run fields (generation, best and mean fitness, timings)
as ``extra`` attributes. Both formatters render whichever of them are present.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from genetics.history import GenerationRecord

LOGGER_NAMES = ("genetics", "genetics_core")

# Run fields in display order, with their console rendering.
RUN_FIELDS = {
    "event": "{}",
    "generation": "gen={}",
    "population_size": "size={}",
    "best_fitness": "best={:.4f}",
    "mean_fitness": "mean={:.4f}",
    "elapsed_ms": "{}ms",
}


def _run_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in RUN_FIELDS if hasattr(record, name)}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_run_fields(record),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """``HH:MM:SS LEVEL logger: message  gen=3 best=0.9812``, optionally coloured."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s", "%H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = [
            RUN_FIELDS[name].format(value)
            for name, value in _run_fields(record).items()
            if name != "event"
        ]
        if fields:
            line = f"{line}  {' '.join(fields)}"

        color = self.LEVEL_COLORS.get(record.levelno)
        if self.use_colors and color:
            line = f"{color}{line}{self.RESET}"
        return line


class RunLogger(logging.LoggerAdapter):
    """Logs the milestones of an evolution run with run fields attached."""

    def __init__(self, name: str = "genetics", **context):
        super().__init__(logging.getLogger(name), context)

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs

    def run_started(self) -> None:
        self.info("Run started", extra={"event": "run_started"})

    def generation_complete(self, record: GenerationRecord, elapsed_ms: int) -> None:
        self.info(
            f"Generation {record.generation} complete",
            extra={
                "event": "generation_complete",
                "generation": record.generation,
                "best_fitness": record.best_fitness,
                "mean_fitness": record.mean_fitness,
                "elapsed_ms": elapsed_ms,
            },
        )

    def run_complete(self, generation: int, best_fitness: float, elapsed_ms: int) -> None:
        self.info(
            f"Run complete at generation {generation}",
            extra={
                "event": "run_complete",
                "generation": generation,
                "best_fitness": best_fitness,
                "elapsed_ms": elapsed_ms,
            },
        )


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
) -> None:
    """Replace the handlers of the genetics loggers.

    The console gets JSON lines or the human format; ``log_file``, when
    given, always gets JSON lines. Unknown level names raise ValueError.
    """
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(
        StructuredFormatter() if json_output else HumanFormatter(use_colors)
    )
    handlers: List[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level.upper())
        logger.handlers[:] = handlers


def get_logger(name: str, **context) -> RunLogger:
    return RunLogger(name, **context)

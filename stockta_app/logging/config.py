"""
Structured logging for the StockTA indicator engine.

Indicator functions are pure and never log. The calculator and the engine
report what they produced through the helpers in this module, one
structured event per indicator plus one summary per analysis.
"""
import logging
import sys
from collections import Counter
from typing import Any, Iterable, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor


def _event_processors(include_timestamp: bool, include_caller: bool) -> list[Processor]:
    """Processors that enrich every event before it is rendered."""
    chain: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if include_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    if include_caller:
        chain.append(structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ))
    return chain


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for every stockta_app logger.

    Args:
        level: Standard library level name, e.g. "DEBUG"
        format_json: Render one JSON object per event instead of console lines
        include_timestamp: Add a UTC ISO timestamp to each event
        include_caller: Add module, function and line of the log call
        extra_processors: Processors to run after the built-in ones
        stream: Where rendered events are written, stdout by default
    """
    stream = stream or sys.stdout
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream,
        format="%(message)s",
    )

    processors = _event_processors(include_timestamp, include_caller)
    processors.extend(extra_processors or [])
    processors.append(
        structlog.processors.JSONRenderer() if format_json
        else structlog.dev.ConsoleRenderer(colors=stream.isatty())
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger named after its module."""
    return structlog.get_logger(name)


def get_indicator_logger(name: str) -> FilteringBoundLogger:
    """Get a logger whose events carry ``subsystem="indicators"``."""
    return get_logger(name).bind(subsystem="indicators")


def log_indicator_result(
    logger: FilteringBoundLogger,
    indicator: str,
    symbol: str,
    points: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single indicator calculation.

    An empty result is the normal outcome for a window longer than the
    supplied history, so it is reported at info level rather than as an error.

    Args:
        logger: Structlog logger instance
        indicator: Indicator name, e.g. "sma_50"
        symbol: Symbol the series belongs to
        points: Number of points (or levels) produced
        context: Additional context data such as window parameters
    """
    bound_logger = logger.bind(
        indicator=indicator,
        symbol=symbol,
        points=points,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if points:
        bound_logger.debug("Indicator calculated")
    else:
        bound_logger.info("Indicator skipped, insufficient history")


def log_signal_summary(
    logger: FilteringBoundLogger,
    symbol: str,
    signals: Iterable[Any],
) -> None:
    """
    Log how many signals of each kind were detected for a symbol.

    Args:
        logger: Structlog logger instance
        symbol: Symbol the signals belong to
        signals: Signal objects exposing a ``kind`` enum
    """
    counts = Counter(signal.kind.value for signal in signals)

    logger.info(
        "Signals detected",
        symbol=symbol,
        total=sum(counts.values()),
        by_kind=dict(sorted(counts.items())),
    )

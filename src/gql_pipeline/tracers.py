# -*- coding: utf-8 -*-
""" Useful instrumentation implementations. """

import logging
import time
from typing import Any, Dict, Optional

from .instrumentation import Instrumentation


def _nanoseconds(seconds: float) -> int:
    return int(seconds * 1e9)


class TimingInstrumentation(Instrumentation):
    """ Record how long each phase of query processing took.

    Phases which did not run (e.g. parsing when given a parsed document or
    execution when validation failed) are reported as ``None``.

    Timestamps are stored on the instance, so an instance must only be used
    for a single query; create a new one per query.
    """

    def __init__(self) -> None:
        self.start = None  # type: Optional[float]
        self.end = None  # type: Optional[float]
        self.parse_start = None  # type: Optional[float]
        self.parse_end = None  # type: Optional[float]
        self.validation_start = None  # type: Optional[float]
        self.validation_end = None  # type: Optional[float]
        self.execution_start = None  # type: Optional[float]
        self.execution_end = None  # type: Optional[float]

    def on_query_start(self) -> None:
        self.start = time.perf_counter()

    def on_query_end(self) -> None:
        self.end = time.perf_counter()

    def on_parsing_start(self) -> None:
        self.parse_start = time.perf_counter()

    def on_parsing_end(self) -> None:
        self.parse_end = time.perf_counter()

    def on_validation_start(self) -> None:
        self.validation_start = time.perf_counter()

    def on_validation_end(self) -> None:
        self.validation_end = time.perf_counter()

    def on_execution_start(self) -> None:
        self.execution_start = time.perf_counter()

    def on_execution_end(self) -> None:
        self.execution_end = time.perf_counter()

    def stats(self) -> Dict[str, Any]:
        """ Durations in nanoseconds, keyed by phase. """

        def _duration(start, end):
            if start is None or end is None:
                return None
            return _nanoseconds(end - start)

        return {
            "duration": _duration(self.start, self.end),
            "parsing": _duration(self.parse_start, self.parse_end),
            "validation": _duration(self.validation_start, self.validation_end),
            "execution": _duration(self.execution_start, self.execution_end),
        }


_SLOW_LOG_FORMAT_STR = (
    "GraphQL query took too long (duration = %fms, threshold = %fms)"
)

_DEFAULT_LOGGER = logging.getLogger("gql_pipeline.slow_query_log")


class SlowQueryLog(Instrumentation):
    """ Log slow queries through Python's logging utilities.

    The start time of the query is stored on the instance, so an instance
    must not be shared by concurrent queries; create a new one per query.

    Args:
        threshold: Slow query threshold in ms

        logger: Custom logger instance to use.
            Defaults to ``gql_pipeline.slow_query_log``.

        level: Log level. Defaults to ``WARNING``.

        format_str: Log format string.
            The log call will pass the duration of the query in ms and the
            threshold in ms.
    """

    def __init__(
        self,
        threshold: float,
        logger: Optional[logging.Logger] = None,
        level: int = logging.WARNING,
        format_str: Optional[str] = None,
    ):
        self._threshold = threshold
        self._logger = logger if logger is not None else _DEFAULT_LOGGER
        self._level = level
        self._format_str = format_str or _SLOW_LOG_FORMAT_STR
        self._start = None  # type: Optional[float]

    def on_query_start(self) -> None:
        self._start = time.perf_counter()

    def on_query_end(self) -> None:
        if self._start is None:
            return
        duration = (time.perf_counter() - self._start) * 1000
        if duration > self._threshold:
            self._logger.log(
                self._level, self._format_str, duration, self._threshold
            )

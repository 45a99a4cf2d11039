"""Observability helpers for instrumenting engine operations."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from packr_app.logging_config import correlation_context, get_logger, log_event

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def instrument_operation(operation: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a callable to emit started/completed/failed events with timings."""

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with correlation_context() as correlation_id:
                start = time.perf_counter()
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_started",
                    operation=operation,
                    correlation_id=correlation_id,
                )
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    duration_ms = round((time.perf_counter() - start) * 1000, 2)
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "operation_failed",
                        operation=operation,
                        correlation_id=correlation_id,
                        duration_ms=duration_ms,
                        exc_info=True,
                    )
                    raise
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.INFO,
                    "operation_completed",
                    operation=operation,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                )
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]

"""Observability for SmurfScan.

Configures structlog as the formatter for stdlib logging (stderr only, so the
CLI report on stdout stays clean), binds per-scan correlation ids and provides
the ``traced`` decorator for critical functions.
"""

import inspect
import functools
import logging
import re
import sys
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

import structlog
from structlog.contextvars import bind_contextvars, unbind_contextvars

F = TypeVar("F", bound=Callable[..., Any])

_SENSITIVE_KEY_RE = re.compile(r"(token|key|secret|password|authorization)", re.IGNORECASE)

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO", json_output: bool | None = None) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        level: Root log level name.
        json_output: Force JSON rendering; defaults to JSON unless stderr is a TTY.
    """
    if json_output is None:
        json_output = not sys.stderr.isatty()
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    # aiohttp access logs are noisy at INFO
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


def set_correlation_id(correlation_id: str) -> None:
    bind_contextvars(correlation_id=correlation_id)


def clear_correlation_id() -> None:
    unbind_contextvars("correlation_id")


def _mask_scalar(value: Any) -> Any:
    if value is None:
        return None
    s = str(value)
    if len(s) <= 8:
        return "***"
    return f"{s[:4]}…{s[-3:]}"


def _safe_kwargs(kwargs: dict[str, Any], max_length: int = 200) -> dict[str, Any]:
    safe: dict[str, Any] = {}
    for key, value in kwargs.items():
        if _SENSITIVE_KEY_RE.search(key):
            safe[key] = _mask_scalar(value)
        else:
            text = repr(value)
            safe[key] = text if len(text) <= max_length else text[:max_length] + "..."
    return safe


def traced(
    *,
    log_level: str = "INFO",
    capture_kwargs: bool = True,
    add_metadata: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """Log entry, duration and failure of the decorated function.

    Works for both sync and async functions. Exceptions are logged and re-raised.
    """

    def decorator(func: F) -> F:
        name = f"{func.__module__}.{func.__qualname__}"
        level_no = logging.getLevelName(log_level.upper())
        metadata = add_metadata or {}

        def _started(kwargs: dict[str, Any]) -> float:
            bind_contextvars(execution_id=f"{func.__name__}_{int(time.time() * 1000000)}")
            logger.log(
                level_no,
                "function_started",
                function=name,
                kwargs=_safe_kwargs(kwargs) if capture_kwargs else None,
                **metadata,
            )
            return time.perf_counter()

        def _finished(start: float) -> None:
            logger.log(
                level_no,
                "function_finished",
                function=name,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                **metadata,
            )

        def _failed(start: float, exc: BaseException) -> None:
            logger.error(
                "function_failed",
                function=name,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                error_type=type(exc).__name__,
                error_message=str(exc),
                **metadata,
            )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start = _started(kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _failed(start, e)
                    raise
                else:
                    _finished(start)
                    return result
                finally:
                    unbind_contextvars("execution_id")

            return cast(F, async_wrapper)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start = _started(kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _failed(start, e)
                raise
            else:
                _finished(start)
                return result
            finally:
                unbind_contextvars("execution_id")

        return cast(F, sync_wrapper)

    return decorator

"""Utility decorators for logging and timing."""
import inspect
import functools
import time
from typing import Callable
from moneymood.utils.logging import get_logger

logger = get_logger(__name__)


def log_execution(log_args: bool = True, log_result: bool = False):
    """
    Decorator to log function execution with timing.
    
    Args:
        log_args: Whether to log function arguments
        log_result: Whether to log function result
    
    Example:
        @log_execution(log_args=False)
        async def fetch_rates(self):
            ...
    """
    def decorator(func: Callable):
        def _start_extra(args, kwargs):
            extra = {"function": func.__name__}
            if log_args:
                extra["function_args"] = str(args)[:100]  # Truncate long args
                extra["function_kwargs"] = str(kwargs)[:100]
            return extra

        def _finish(start_time: float, result=None, error: Exception = None) -> None:
            execution_time = round((time.time() - start_time) * 1000, 2)  # ms
            if error is not None:
                logger.error(
                    f"Failed {func.__name__}",
                    extra={"function": func.__name__, "execution_time_ms": execution_time, "error": str(error)}
                )
                return
            log_extra = {"function": func.__name__, "execution_time_ms": execution_time}
            if log_result:
                log_extra["result"] = str(result)[:100]
            logger.debug(f"Completed {func.__name__}", extra=log_extra)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time.time()
            logger.debug(f"Starting {func.__name__}", extra=_start_extra(args, kwargs))
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _finish(start_time, error=e)
                raise
            _finish(start_time, result)
            return result
        
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.time()
            logger.debug(f"Starting {func.__name__}", extra=_start_extra(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _finish(start_time, error=e)
                raise
            _finish(start_time, result)
            return result
        
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper
    
    return decorator

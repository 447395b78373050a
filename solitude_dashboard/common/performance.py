"""
렌더링 시간 측정 유틸리티

Streamlit 재실행마다 페이지 렌더링에 걸린 시간을 로깅합니다.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# 로그 레벨 전환 기준 (초)
SLOW_THRESHOLD_SECONDS = 1.0
VERY_SLOW_THRESHOLD_SECONDS = 10.0


def _log_elapsed(name: str, elapsed: float) -> None:
    if elapsed >= VERY_SLOW_THRESHOLD_SECONDS:
        logger.error(f"⚠️  SLOW: {name} took {elapsed:.2f}s (threshold: 10s)")
    elif elapsed >= SLOW_THRESHOLD_SECONDS:
        logger.warning(f"⏱️  {name} took {elapsed:.2f}s (threshold: 1s)")
    else:
        logger.info(f"✓ {name} completed in {elapsed:.2f}s")


def measure_time(func: F) -> F:
    """
    함수 실행 시간을 측정하고 로깅하는 데코레이터.

    실행 시간이 1초 이상이면 WARNING, 10초 이상이면 ERROR 레벨로 로깅합니다.
    예외가 발생해도 경과 시간은 기록하고 예외는 그대로 전파합니다.

    Examples:
        >>> @measure_time
        ... def render_page():
        ...     ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__name__, time.perf_counter() - start_time)

    return wrapper  # type: ignore[return-value]

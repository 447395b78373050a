"""
공통 유틸리티 모듈

렌더링 시간 측정 등 계층에 관계없이 쓰이는 헬퍼를 제공합니다.
"""

from .performance import measure_time

__all__ = ["measure_time"]

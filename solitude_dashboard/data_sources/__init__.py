"""
데이터 소스 모듈

대시보드가 표시하는 리터럴 통계 테이블을 제공합니다.
"""

from .literals import AGE_GROUP_ROWS, REGION_ROWS, load_age_groups, load_regions

__all__ = [
    "REGION_ROWS",
    "AGE_GROUP_ROWS",
    "load_regions",
    "load_age_groups",
]

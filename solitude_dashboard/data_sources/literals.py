"""
리터럴 통계 테이블

보건복지부/통계청 공표 자료를 기반으로 직접 입력한 값입니다.
외부 조회 없이 모듈 로드 시점의 상수만 사용합니다.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, List, Tuple

from ..core.config import CONFIG
from ..domain.models import AgeGroupTable, RegionTable
from ..domain.tiers import validate_tier_thresholds

logger = logging.getLogger(__name__)


# ============================================================
# 지역별 고독사 건수
# ============================================================

# 지역명 → (건수, left 비율, top 비율)
# 위치는 지도 위 대략적인 지리적 배치이며 실제 좌표에서 계산한 값이 아님
REGION_ROWS: Dict[str, Tuple[int, float, float]] = {
    "서울": (342, 0.42, 0.30),
    "경기": (512, 0.40, 0.25),
    "부산": (287, 0.65, 0.75),
    "대구": (201, 0.55, 0.60),
}


# ============================================================
# 연령대별 고독사 건수 (연령 구간 오름차순)
# ============================================================

AGE_GROUP_ROWS: List[Tuple[str, int]] = [
    ("65-70세", 120),
    ("70-75세", 210),
    ("75-80세", 350),
    ("80-85세", 480),
    ("85세 이상", 640),
]


@lru_cache(maxsize=1)
def load_regions() -> RegionTable:
    """
    지역 통계 테이블을 생성합니다.

    마커 색상에 쓰이는 기본 색상 단계 임계값도 함께 검증합니다.

    Returns:
        검증된 RegionTable

    Raises:
        ValidationError: 리터럴이 불변 조건을 위반한 경우
    """
    validate_tier_thresholds(CONFIG.map.tier_thresholds)
    table = RegionTable.from_rows(REGION_ROWS)
    logger.info(f"지역 통계 로드 완료: {len(table)}개 지역")
    return table


@lru_cache(maxsize=1)
def load_age_groups() -> AgeGroupTable:
    """
    연령대 통계 테이블을 생성합니다.

    Returns:
        검증된 AgeGroupTable

    Raises:
        ValidationError: 리터럴이 비어 있거나 불변 조건을 위반한 경우
    """
    table = AgeGroupTable.from_rows(AGE_GROUP_ROWS)
    logger.info(f"연령대 통계 로드 완료: {len(table)}개 구간")
    return table

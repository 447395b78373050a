"""
리터럴 통계 테이블 검증

로드 시점에 지역/연령대 테이블과 색상 단계 임계값의
불변 조건을 확인합니다. 위반 시 ValidationError를 발생시킵니다.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Sequence

from .exceptions import ValidationError

if TYPE_CHECKING:
    from .models import AgeGroupStat, RegionStat

logger = logging.getLogger(__name__)


def _find_duplicates(values: Sequence[str]) -> list[str]:
    return [value for value, n in Counter(values).items() if n > 1]


def validate_regions(regions: Sequence["RegionStat"]) -> None:
    """
    지역 통계 테이블을 검증합니다.

    검증 항목:
    - 지역명 중복 없음
    - 건수 0 이상
    - 위치 좌표가 0~1 범위

    Raises:
        ValidationError: 조건 위반 시
    """
    duplicates = _find_duplicates([r.name for r in regions])
    if duplicates:
        raise ValidationError(f"중복된 지역명이 있습니다: {', '.join(duplicates)}")

    for region in regions:
        if region.count < 0:
            raise ValidationError(f"{region.name}: 건수는 0 이상이어야 합니다 ({region.count})")
        x, y = region.position
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            raise ValidationError(
                f"{region.name}: 위치 좌표가 0~1 범위를 벗어났습니다 ({x}, {y})"
            )

    logger.debug(f"지역 테이블 검증 완료: {len(regions)}개")


def validate_age_groups(groups: Sequence["AgeGroupStat"]) -> None:
    """
    연령대 통계 테이블을 검증합니다.

    빈 테이블은 막대 높이 정규화 시 0으로 나누게 되므로 허용하지 않습니다.

    Raises:
        ValidationError: 조건 위반 시
    """
    if not groups:
        raise ValidationError("연령대 테이블이 비어 있습니다")

    duplicates = _find_duplicates([g.label for g in groups])
    if duplicates:
        raise ValidationError(f"중복된 연령대 라벨이 있습니다: {', '.join(duplicates)}")

    negatives = [g.label for g in groups if g.count < 0]
    if negatives:
        raise ValidationError(f"음수 건수가 있습니다: {', '.join(negatives)}")

    if max(g.count for g in groups) <= 0:
        raise ValidationError("연령대 최대 건수가 0이라 막대 높이를 계산할 수 없습니다")


def validate_thresholds(thresholds: Sequence[int]) -> None:
    """
    색상 단계 임계값이 양수이고 엄격한 내림차순인지 확인합니다.

    Raises:
        ValidationError: 조건 위반 시
    """
    values = list(thresholds)
    if not values:
        raise ValidationError("색상 단계 임계값이 비어 있습니다")
    if any(value <= 0 for value in values):
        raise ValidationError(f"임계값은 0보다 커야 합니다: {values}")
    if any(high <= low for high, low in zip(values, values[1:])):
        raise ValidationError(f"임계값은 내림차순이어야 합니다: {values}")

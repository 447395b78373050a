"""
건수 → 색상 단계 분류

지역 마커 색상을 결정하는 4단계 심각도 구간을 정의합니다.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from ..core.config import CONFIG
from .exceptions import ValidationError
from .validation import validate_thresholds


class ColorTier(IntEnum):
    """심각도 단계 (숫자가 클수록 심각)"""

    TIER1 = 1
    TIER2 = 2
    TIER3 = 3
    TIER4 = 4


def validate_tier_thresholds(thresholds: Sequence[int]) -> None:
    """
    색상 단계 임계값을 검증합니다.

    양수 + 엄격한 내림차순이고 개수가 단계 수보다 하나 적어야 합니다.

    Raises:
        ValidationError: 조건 위반 시
    """
    limits = list(thresholds)
    validate_thresholds(limits)
    if len(limits) != len(ColorTier) - 1:
        raise ValidationError(f"임계값은 {len(ColorTier) - 1}개여야 합니다: {limits}")


def color_tier(count: int, thresholds: Sequence[int] | None = None) -> ColorTier:
    """
    건수에 해당하는 색상 단계를 반환합니다.

    임계값은 높은 값부터 비교하며 처음으로 초과하는 구간이 적용됩니다.
    기본 임계값 (500, 300, 200) 기준:
    - count > 500 → TIER4
    - count > 300 → TIER3
    - count > 200 → TIER2
    - 그 외 → TIER1

    기본 임계값은 지역 테이블 로드 시 한 번 검증하므로,
    thresholds를 직접 넘긴 경우에만 호출마다 검증합니다.

    Args:
        count: 고독사 건수
        thresholds: 내림차순 임계값 (기본값: CONFIG.map.tier_thresholds)

    Returns:
        ColorTier

    Examples:
        >>> color_tier(342)
        <ColorTier.TIER3: 3>
    """
    if thresholds is None:
        limits = tuple(CONFIG.map.tier_thresholds)
    else:
        limits = tuple(thresholds)
        validate_tier_thresholds(limits)

    top = len(limits) + 1
    for index, limit in enumerate(limits):
        if count > limit:
            return ColorTier(top - index)
    return ColorTier.TIER1

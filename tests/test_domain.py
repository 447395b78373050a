"""
도메인 모델, 검증, 색상 단계 테스트
"""
from __future__ import annotations

import pytest

from solitude_dashboard.data_sources import AGE_GROUP_ROWS, REGION_ROWS, load_age_groups, load_regions
from solitude_dashboard.domain.exceptions import ValidationError
from solitude_dashboard.domain.models import AgeGroupTable, RegionStat, RegionTable
from solitude_dashboard.domain.tiers import ColorTier, color_tier
from solitude_dashboard.domain.validation import validate_thresholds


# ============================================================
# 리터럴 테이블 로드
# ============================================================

def test_load_regions_keeps_literal_order():
    """지역 테이블은 리터럴 순서와 값을 그대로 유지"""
    table = load_regions()

    assert table.names == ["서울", "경기", "부산", "대구"]
    assert [r.count for r in table] == [342, 512, 287, 201]
    assert table.get("부산").position == (0.65, 0.75)


def test_load_age_groups_keeps_ascending_order():
    """연령대 테이블은 연령 구간 오름차순 유지"""
    table = load_age_groups()

    assert [g.label for g in table] == ["65-70세", "70-75세", "75-80세", "80-85세", "85세 이상"]
    assert table.max_count == 640
    assert len(table) == len(AGE_GROUP_ROWS)


def test_region_table_lookup():
    """지역명 조회 및 포함 여부"""
    table = RegionTable.from_rows(REGION_ROWS)

    assert "서울" in table
    assert "제주" not in table
    assert table.get("제주") is None
    assert table.get("경기").count == 512


def test_region_percent_positions_within_bounds():
    """모든 지역 마커 위치는 0~100% 범위"""
    for region in load_regions():
        assert 0.0 <= region.left_pct <= 100.0
        assert 0.0 <= region.top_pct <= 100.0


def test_to_frame_columns():
    """데이터프레임 변환 시 컬럼과 순서 유지"""
    regions = load_regions().to_frame()
    ages = load_age_groups().to_frame()

    assert list(regions.columns) == ["name", "count", "x", "y"]
    assert list(ages.columns) == ["label", "count"]
    assert ages["count"].tolist() == [120, 210, 350, 480, 640]


# ============================================================
# 검증
# ============================================================

def test_duplicate_region_names_rejected():
    """지역명 중복 시 ValidationError"""
    stats = [
        RegionStat(name="서울", count=1, position=(0.1, 0.1)),
        RegionStat(name="서울", count=2, position=(0.2, 0.2)),
    ]
    with pytest.raises(ValidationError, match="중복"):
        RegionTable.from_stats(stats)


def test_negative_region_count_rejected():
    with pytest.raises(ValidationError):
        RegionTable.from_rows({"서울": (-1, 0.5, 0.5)})


def test_region_position_out_of_bounds_rejected():
    """위치 좌표가 0~1을 벗어나면 거부"""
    with pytest.raises(ValidationError, match="범위"):
        RegionTable.from_rows({"서울": (10, 1.2, 0.5)})


def test_empty_age_table_rejected():
    """빈 연령대 테이블은 0으로 나누기 전에 거부"""
    with pytest.raises(ValidationError, match="비어"):
        AgeGroupTable.from_rows([])


def test_all_zero_age_table_rejected():
    with pytest.raises(ValidationError):
        AgeGroupTable.from_rows([("65-70세", 0), ("70-75세", 0)])


def test_duplicate_age_labels_rejected():
    with pytest.raises(ValidationError):
        AgeGroupTable.from_rows([("65-70세", 1), ("65-70세", 2)])


@pytest.mark.parametrize(
    "thresholds",
    [
        (300, 500, 200),
        (500, 500, 200),
        (500, 300, 0),
        (),
    ],
)
def test_invalid_thresholds_rejected(thresholds):
    """임계값은 양수 + 엄격한 내림차순이어야 함"""
    with pytest.raises(ValidationError):
        validate_thresholds(thresholds)


# ============================================================
# 색상 단계
# ============================================================

@pytest.mark.parametrize(
    "count, expected",
    [
        (342, ColorTier.TIER3),
        (512, ColorTier.TIER4),
        (287, ColorTier.TIER2),
        (201, ColorTier.TIER2),
    ],
)
def test_color_tier_for_seeded_regions(count, expected):
    """시드 지역 건수별 색상 단계"""
    assert color_tier(count) == expected


@pytest.mark.parametrize(
    "count, expected",
    [
        (501, ColorTier.TIER4),
        (500, ColorTier.TIER3),
        (301, ColorTier.TIER3),
        (300, ColorTier.TIER2),
        (200, ColorTier.TIER1),
        (0, ColorTier.TIER1),
    ],
)
def test_color_tier_boundaries_fall_to_lower_tier(count, expected):
    """임계값과 같은 값은 아래 단계 (초과 비교)"""
    assert color_tier(count) == expected


def test_color_tier_is_deterministic():
    for region in load_regions():
        assert color_tier(region.count) == color_tier(region.count)


def test_color_tier_custom_thresholds():
    assert color_tier(15, thresholds=(20, 10, 5)) == ColorTier.TIER3


def test_color_tier_wrong_threshold_count():
    with pytest.raises(ValidationError):
        color_tier(100, thresholds=(500, 300))

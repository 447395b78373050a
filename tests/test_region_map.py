"""
지역 지도 위젯 테스트

마커 배치, 선택 이벤트 해석, 선택 상태 전이, 상세 패널을 검증합니다.
"""
from __future__ import annotations

import pytest

from solitude_dashboard.core.config import DashboardConfig, MapConfig
from solitude_dashboard.data_sources import load_regions
from solitude_dashboard.domain.exceptions import ValidationError
from solitude_dashboard.ui.charts.colors import TIER_COLORS, hex_to_rgb, tier_color, tint
from solitude_dashboard.domain.models import RegionStat, RegionTable
from solitude_dashboard.domain.tiers import ColorTier
from solitude_dashboard.ui.region_map import (
    build_map_figure,
    build_region_detail_html,
    region_from_event,
    render_region_map,
)
from solitude_dashboard.ui.state import MAP_STATE_KEY, MapState, select_region, selected_region


def _click(name=None, index=None):
    point = {}
    if name is not None:
        point["customdata"] = name
    if index is not None:
        point["point_index"] = index
    return {"selection": {"points": [point], "point_indices": [], "box": [], "lasso": []}}


def _empty_event():
    return {"selection": {"points": [], "point_indices": [], "box": [], "lasso": []}}


# ============================================================
# Figure
# ============================================================

def test_map_figure_places_markers_at_region_fractions():
    """마커는 지역별 비율 좌표에 배치되고 count를 라벨로 표시"""
    table = load_regions()
    fig = build_map_figure(table)
    trace = fig.data[0]

    assert list(trace.x) == [0.42, 0.40, 0.65, 0.55]
    assert list(trace.y) == [0.30, 0.25, 0.75, 0.60]
    assert list(trace.text) == ["342", "512", "287", "201"]
    assert list(trace.customdata) == table.names


def test_map_figure_markers_within_canvas_bounds():
    """어떤 마커도 0~100% 범위 밖에 그려지지 않음"""
    fig = build_map_figure(load_regions())
    trace = fig.data[0]

    assert all(0.0 <= x <= 1.0 for x in trace.x)
    assert all(0.0 <= y <= 1.0 for y in trace.y)
    assert tuple(fig.layout.xaxis.range) == (0, 1)
    # y축 반전: top 비율이 클수록 아래쪽
    assert tuple(fig.layout.yaxis.range) == (1, 0)


def test_map_figure_marker_colors_follow_tiers():
    fig = build_map_figure(load_regions())
    colors = list(fig.data[0].marker.color)

    assert colors == [
        TIER_COLORS[ColorTier.TIER3],
        TIER_COLORS[ColorTier.TIER4],
        TIER_COLORS[ColorTier.TIER2],
        TIER_COLORS[ColorTier.TIER2],
    ]


def test_tier_color_and_tint():
    assert tier_color(600) == "#EF4444"
    assert tier_color(10) == "#86EFAC"
    assert tint("#FFFFFF", 0.5) == "#808080"
    assert hex_to_rgb("#FFF") == (255, 255, 255)


# ============================================================
# 선택 이벤트 해석
# ============================================================

def test_region_from_event_customdata():
    assert region_from_event(_click(name="서울"), load_regions()) == "서울"


def test_region_from_event_customdata_list():
    assert region_from_event(_click(name=["대구"]), load_regions()) == "대구"


def test_region_from_event_falls_back_to_point_index():
    assert region_from_event(_click(index=1), load_regions()) == "경기"


@pytest.mark.parametrize("event", [None, {}, _empty_event(), _click(name="제주"), _click(index=9)])
def test_region_from_event_ignores_empty_or_unknown(event):
    assert region_from_event(event, load_regions()) is None


# ============================================================
# 선택 상태 전이
# ============================================================

def test_initial_state_has_no_selection():
    state = MapState()
    assert state.selected is None
    assert selected_region(state, load_regions()) is None


def test_select_region_sets_selection():
    table = load_regions()
    state = MapState()

    region = select_region(state, "서울", table)

    assert state.selected == "서울"
    assert region.count == 342


def test_second_selection_replaces_first():
    """두 번째 선택은 교체 (누적되지 않음)"""
    table = load_regions()
    state = MapState()

    select_region(state, "서울", table)
    select_region(state, "부산", table)

    assert state.selected == "부산"
    assert selected_region(state, table).count == 287


def test_select_unknown_region_keeps_previous_selection():
    table = load_regions()
    state = MapState()
    select_region(state, "경기", table)

    with pytest.raises(ValidationError):
        select_region(state, "제주", table)
    assert state.selected == "경기"


# ============================================================
# 상세 패널
# ============================================================

def test_region_detail_html_shows_name_and_count():
    html = build_region_detail_html(load_regions().get("경기"))

    assert "경기 지역 고독사 현황" in html
    assert '<p class="sd-region-detail-count">512명</p>' in html


# ============================================================
# 렌더링 (Streamlit Mock)
# ============================================================

def test_render_without_click_shows_no_detail_panel(mock_st):
    render_region_map()

    assert mock_st.session_state[MAP_STATE_KEY].selected is None
    rendered = [c[0][0] for c in mock_st.markdown.call_args_list]
    assert not any("sd-region-detail" in html for html in rendered)
    assert mock_st.plotly_chart.call_args[1]["on_select"] == "rerun"


def test_render_click_shows_detail_panel_for_region(mock_st):
    """마커 클릭 시 해당 지역 이름과 건수만 상세 패널에 표시"""
    mock_st.plotly_chart.return_value = _click(name="대구")

    render_region_map()

    assert mock_st.session_state[MAP_STATE_KEY].selected == "대구"
    detail = mock_st.markdown.call_args[0][0]
    assert "대구 지역 고독사 현황" in detail
    assert "201명" in detail
    assert "서울" not in detail


def test_render_click_replaces_previous_detail(mock_st):
    mock_st.plotly_chart.return_value = _click(name="서울")
    render_region_map()
    mock_st.plotly_chart.return_value = _click(name="경기")
    render_region_map()

    detail = mock_st.markdown.call_args[0][0]
    assert "경기 지역 고독사 현황" in detail
    assert "서울" not in detail


def test_render_empty_selection_keeps_previous_region(mock_st):
    """빈 캔버스 클릭(빈 선택)으로는 선택이 해제되지 않음"""
    mock_st.plotly_chart.return_value = _click(name="부산")
    render_region_map()
    mock_st.plotly_chart.return_value = _empty_event()
    render_region_map()

    assert mock_st.session_state[MAP_STATE_KEY].selected == "부산"
    assert "부산 지역 고독사 현황" in mock_st.markdown.call_args[0][0]


def test_region_detail_html_shows_raw_count_without_grouping():
    """상세 패널 건수는 천 단위 구분 없이 원래 값 그대로"""
    region = RegionStat(name="경기", count=1234, position=(0.4, 0.25))
    html = build_region_detail_html(region)

    assert '<p class="sd-region-detail-count">1234명</p>' in html


def test_render_explicit_empty_table_is_not_replaced(mock_st):
    """빈 테이블을 직접 넘기면 리터럴 지역으로 대체하지 않음"""
    render_region_map(RegionTable(regions=()))

    fig = mock_st.plotly_chart.call_args[0][0]
    assert len(fig.data[0].x) == 0


# ============================================================
# 색상 단계 임계값 검증 시점
# ============================================================

def test_default_map_figure_does_not_revalidate_thresholds(monkeypatch):
    """기본 임계값은 로드 시 한 번만 검증하고 마커마다 다시 검증하지 않음"""
    import solitude_dashboard.domain.tiers as tiers

    table = load_regions()
    calls = []
    monkeypatch.setattr(tiers, "validate_tier_thresholds", lambda t: calls.append(t))

    build_map_figure(table)

    assert calls == []


def test_custom_map_config_thresholds_are_validated():
    bad = MapConfig(tier_thresholds=(200, 300, 500))
    with pytest.raises(ValidationError):
        build_map_figure(load_regions(), bad)


def test_load_regions_validates_default_thresholds(monkeypatch):
    import solitude_dashboard.data_sources.literals as literals

    bad_config = DashboardConfig(map=MapConfig(tier_thresholds=(100, 200, 300)))
    monkeypatch.setattr(literals, "CONFIG", bad_config)
    literals.load_regions.cache_clear()
    try:
        with pytest.raises(ValidationError):
            literals.load_regions()
    finally:
        literals.load_regions.cache_clear()

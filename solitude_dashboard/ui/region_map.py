"""
지역별 고독사 현황 지도 위젯

지역마다 원형 마커를 캔버스 위 비율 좌표에 배치하고,
건수 단계에 따라 색을 입힙니다. 마커를 클릭하면 Streamlit이
재실행되며 선택된 지역의 상세 패널이 지도 아래에 표시됩니다.

상태 전이:
- 선택 없음 → 마커 클릭 → 해당 지역 선택
- 지역 선택 → 다른 마커 클릭 → 새 지역으로 교체
- 빈 캔버스 클릭(빈 선택 이벤트)은 무시하므로 선택은 해제되지 않음
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import plotly.graph_objects as go
import streamlit as st

from ..core.config import CONFIG, MapConfig
from ..data_sources import load_regions
from ..domain.models import RegionStat, RegionTable
from .cards import card_header, card_title, escape
from .charts.colors import tier_color, tier_outline_color
from .state import get_map_state, select_region, selected_region

logger = logging.getLogger(__name__)

MAP_CHART_KEY = "region_map_chart"


def build_map_figure(regions: RegionTable, config: MapConfig | None = None) -> go.Figure:
    """
    지역 마커 캔버스 Figure를 생성합니다.

    x축은 left 비율, y축은 top 비율이며 y축을 뒤집어
    top 값이 커질수록 아래쪽에 배치되도록 합니다.

    Args:
        regions: 지역 테이블
        config: 지도 설정 (기본값: CONFIG.map)

    Returns:
        plotly Figure
    """
    cfg = config or CONFIG.map
    frame = regions.to_frame()
    # 기본 설정은 load_regions에서 검증됨, 직접 넘긴 설정만 호출마다 검증
    thresholds = None if config is None else cfg.tier_thresholds

    fig = go.Figure(
        go.Scatter(
            x=frame["x"].tolist(),
            y=frame["y"].tolist(),
            mode="markers+text",
            text=[str(c) for c in frame["count"]],
            customdata=frame["name"].tolist(),
            textposition="middle center",
            textfont=dict(color="#FFFFFF", size=12, family="Arial Black"),
            marker=dict(
                size=cfg.marker_size,
                color=[tier_color(c, thresholds) for c in frame["count"]],
                line=dict(
                    width=2,
                    color=[tier_outline_color(c, thresholds) for c in frame["count"]],
                ),
                opacity=1.0,
            ),
            # 선택 시 다른 마커가 흐려지지 않도록 고정
            selected=dict(marker=dict(opacity=1.0)),
            unselected=dict(marker=dict(opacity=1.0)),
            hovertemplate="%{customdata}: %{text}명<extra></extra>",
        )
    )
    fig.update_xaxes(range=[0, 1], visible=False, fixedrange=True)
    fig.update_yaxes(range=[1, 0], visible=False, fixedrange=True)
    fig.update_layout(
        height=cfg.canvas_height,
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor=cfg.canvas_color,
        paper_bgcolor=cfg.canvas_color,
        showlegend=False,
        dragmode=False,
        clickmode="event+select",
    )
    return fig


def region_from_event(event: Any, regions: RegionTable) -> Optional[str]:
    """
    plotly_chart 선택 이벤트에서 클릭된 지역명을 추출합니다.

    Args:
        event: st.plotly_chart(on_select="rerun") 반환값
        regions: 지역 테이블

    Returns:
        클릭된 지역명. 선택된 점이 없거나 알 수 없는 값이면 None.
    """
    if not event:
        return None
    selection = event.get("selection") if isinstance(event, Mapping) else None
    if not selection:
        return None
    points = selection.get("points") or []
    if not points:
        return None

    point = points[0]
    name = point.get("customdata")
    if isinstance(name, (list, tuple)):
        name = name[0] if name else None
    if name is None:
        index = point.get("point_index")
        if isinstance(index, int) and 0 <= index < len(regions):
            name = regions.names[index]

    if name not in regions:
        logger.warning(f"선택 이벤트에서 지역을 확인할 수 없음: {point}")
        return None
    return str(name)


def build_region_detail_html(region: RegionStat, unit: str | None = None) -> str:
    """선택된 지역의 이름과 건수를 보여주는 상세 패널 HTML을 생성합니다.

    건수는 천 단위 구분 없이 원래 값 그대로 표시합니다.
    """
    suffix = CONFIG.counter.unit if unit is None else unit
    return (
        '<div class="sd-region-detail">'
        f'<h3 class="sd-region-detail-title">{escape(region.name)} 지역 고독사 현황</h3>'
        f'<p class="sd-region-detail-count">{escape(region.count)}{escape(suffix)}</p>'
        "</div>"
    )


def render_region_map(regions: RegionTable | None = None) -> None:
    """지도 카드를 렌더링하고 마커 클릭을 선택 상태에 반영합니다."""

    table = regions if regions is not None else load_regions()
    state = get_map_state()

    with st.container(border=True):
        st.markdown(
            card_header(card_title(escape(CONFIG.map.title))),
            unsafe_allow_html=True,
        )
        event = st.plotly_chart(
            build_map_figure(table),
            use_container_width=True,
            on_select="rerun",
            selection_mode="points",
            key=MAP_CHART_KEY,
            config={"displayModeBar": False},
        )

        name = region_from_event(event, table)
        if name is not None:
            select_region(state, name, table)

        region = selected_region(state, table)
        if region is not None:
            st.markdown(build_region_detail_html(region), unsafe_allow_html=True)

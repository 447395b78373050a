"""
대시보드 페이지 구성

제목 배너, 카운터/지도 2단 그리드, 전체 폭 연령대 차트, 출처 문구를
배치합니다. 페이지 자체는 상태를 갖지 않으며 각 위젯은 독립적으로 렌더링됩니다.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import streamlit as st

from ..common.performance import measure_time
from ..core.config import CONFIG, PageConfig
from ..data_sources import load_age_groups, load_regions
from .adapters import handle_domain_errors
from .cards import escape, inject_dashboard_styles
from .charts.age_chart import build_age_chart_figure, render_age_chart
from .counter import build_counter_html, render_counter
from .region_map import build_map_figure, render_region_map
from .state import CounterState

logger = logging.getLogger(__name__)


def build_title_html(config: PageConfig | None = None) -> str:
    cfg = config or CONFIG.page
    return f'<h1 class="sd-page-title">{escape(cfg.page_title)}</h1>'


def build_footer_html(config: PageConfig | None = None) -> str:
    cfg = config or CONFIG.page
    return f'<div class="sd-page-footer"><p>{escape(cfg.footer)}</p></div>'


def build_page_snapshot() -> Dict[str, Any]:
    """
    페이지를 구성하는 조각들을 Streamlit 없이 생성합니다.

    같은 리터럴 데이터로 두 번 호출하면 동일한 결과를 반환합니다.
    위젯 상태는 초기값(카운터 기본값, 지역 선택 없음) 기준입니다.

    Returns:
        title, counter, map, age_chart, footer 키를 갖는 딕셔너리
        (HTML 문자열 또는 Figure 딕셔너리)
    """
    return {
        "title": build_title_html(),
        "counter": build_counter_html(CounterState()),
        "map": build_map_figure(load_regions()).to_dict(),
        "age_chart": build_age_chart_figure(load_age_groups()).to_dict(),
        "footer": build_footer_html(),
    }


@measure_time
def render_page() -> None:
    """대시보드 전체 페이지를 렌더링합니다."""

    inject_dashboard_styles()
    st.markdown(build_title_html(), unsafe_allow_html=True)

    # 넓은 화면에서는 카운터 2 : 지도 1, 좁은 화면에서는 세로로 쌓임
    counter_col, map_col = st.columns(list(CONFIG.page.column_ratio), gap="large")
    with counter_col:
        with handle_domain_errors("고독사 수 카운터"):
            render_counter()
    with map_col:
        with handle_domain_errors("지역별 지도"):
            render_region_map()

    with handle_domain_errors("연령대별 차트"):
        render_age_chart()

    st.markdown(build_footer_html(), unsafe_allow_html=True)
    logger.debug("페이지 렌더링 완료")

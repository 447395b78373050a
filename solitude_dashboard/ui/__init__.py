"""
UI 레이어의 공개 API

이 모듈은 Streamlit 기반 UI 컴포넌트를 재수출합니다.
카드 프리미티브, 위젯, 페이지 구성, 어댑터 등을 포함합니다.
"""

from .adapters import handle_domain_errors
from .charts import build_age_chart_figure, compute_bar_layout, render_age_chart
from .counter import build_counter_html, render_counter
from .page import build_page_snapshot, render_page
from .region_map import build_map_figure, build_region_detail_html, render_region_map

__all__ = (
    # Widgets
    "render_counter",
    "render_region_map",
    "render_age_chart",
    "build_counter_html",
    "build_map_figure",
    "build_region_detail_html",
    "build_age_chart_figure",
    "compute_bar_layout",
    # Page
    "render_page",
    "build_page_snapshot",
    # Adapters
    "handle_domain_errors",
)

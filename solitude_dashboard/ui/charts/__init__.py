"""차트 렌더링 모듈.

연령대 막대 차트와 단계 색상 유틸리티를 re-export합니다.
"""

from .age_chart import BarGeometry, build_age_chart_figure, compute_bar_layout, render_age_chart
from .colors import TIER_COLORS, tier_color, tier_outline_color

__all__ = [
    "BarGeometry",
    "compute_bar_layout",
    "build_age_chart_figure",
    "render_age_chart",
    "TIER_COLORS",
    "tier_color",
    "tier_outline_color",
]

"""Configuration and constants for the solitary death dashboard.

위젯별 표시 문구, 색상 단계 임계값, 차트 좌표계 등 전역 설정을 제공합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


# ============================================================
# 카운터 위젯 설정
# ============================================================

@dataclass(frozen=True)
class CounterConfig:
    """실시간 고독사 수 카운터 설정"""

    # 세션 시작 시 표시할 값
    initial_count: int = 1234

    # 숫자 뒤에 붙는 단위
    unit: str = "명"

    title: str = "실시간 고독사 수"
    subtitle: str = "2024년 기준"


# ============================================================
# 지역 지도 설정
# ============================================================

@dataclass(frozen=True)
class MapConfig:
    """지역별 지도 위젯 설정"""

    title: str = "지역별 고독사 현황"

    # 색상 단계 임계값 (높은 값부터, 첫 번째로 초과하는 단계가 적용됨)
    tier_thresholds: Tuple[int, ...] = (500, 300, 200)

    # 캔버스 높이 (픽셀)
    canvas_height: int = 400

    # 마커 지름 (픽셀)
    marker_size: int = 48

    canvas_color: str = "#F3F4F6"


# ============================================================
# 연령대 차트 설정
# ============================================================

@dataclass(frozen=True)
class ChartConfig:
    """연령대별 막대 차트 좌표계 설정 (SVG viewBox 기준)"""

    title: str = "연령대별 고독사 현황"

    view_width: int = 500
    chart_height: int = 300

    # 최대 막대 위에 남겨둘 여백
    margin: int = 100

    # 막대 한 칸의 폭과 첫 막대의 x 오프셋
    slot_width: int = 100
    offset: int = 50
    bar_width: int = 50

    # 값 라벨은 막대 위, 범주 라벨은 기준선 아래에 배치
    value_label_gap: int = 10
    category_label_gap: int = 20

    bar_color: str = "#FF6384"


@dataclass(frozen=True)
class PageConfig:
    """페이지 레이아웃 설정"""

    page_title: str = "고독사 현황 대시보드"
    footer: str = "본 데이터는 보건복지부와 통계청의 공식 통계를 기반으로 합니다."

    # 카운터 : 지도 컬럼 비율 (md:col-span-2 / 1)
    column_ratio: Tuple[int, int] = (2, 1)


@dataclass(frozen=True)
class DashboardConfig:
    """대시보드 전역 설정"""

    counter: CounterConfig = field(default_factory=CounterConfig)
    map: MapConfig = field(default_factory=MapConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    page: PageConfig = field(default_factory=PageConfig)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = DashboardConfig()

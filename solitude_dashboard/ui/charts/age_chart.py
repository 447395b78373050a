"""연령대별 고독사 막대 차트 모듈.

막대 좌표는 SVG viewBox(0 0 500 300) 기준으로 계산하며 (y는 아래로 증가),
Plotly Figure는 y축을 뒤집어 같은 좌표에 사각형과 라벨을 그립니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ...core.config import CONFIG, ChartConfig
from ...data_sources import load_age_groups
from ...domain.exceptions import RenderError
from ...domain.models import AgeGroupTable
from ..cards import card_header, card_title, escape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarGeometry:
    """
    막대 하나의 좌표 정보 (SVG 좌표계).

    Attributes:
        label: 연령대 라벨
        count: 건수
        x: 막대 왼쪽 x
        y: 막대 위쪽 y (chart_height - height)
        width: 막대 폭
        height: 막대 높이
        label_x: 라벨 중심 x
        value_label_y: 값 라벨 기준선 y (막대 위)
        category_label_y: 범주 라벨 기준선 y (기준선 아래)
    """

    label: str
    count: int
    x: float
    y: float
    width: float
    height: float
    label_x: float
    value_label_y: float
    category_label_y: float


def compute_bar_layout(
    table: AgeGroupTable, config: ChartConfig | None = None
) -> List[BarGeometry]:
    """
    연령대 테이블에서 막대 좌표를 계산합니다.

    막대 높이 = count / max_count * (chart_height - margin)
    막대 x = index * slot_width + offset

    Args:
        table: 연령대 테이블 (입력 순서대로 배치)
        config: 차트 설정 (기본값: CONFIG.chart)

    Returns:
        BarGeometry 리스트

    Raises:
        RenderError: 최대 건수가 0 이하라 정규화할 수 없는 경우
    """
    cfg = config or CONFIG.chart
    frame = table.to_frame()

    max_count = frame["count"].max()
    if pd.isna(max_count) or max_count <= 0:
        raise RenderError("최대 건수가 0이라 막대 높이를 계산할 수 없습니다")

    usable = cfg.chart_height - cfg.margin
    frame["height"] = frame["count"] / max_count * usable
    frame["x"] = frame.index * cfg.slot_width + cfg.offset
    frame["y"] = cfg.chart_height - frame["height"]
    frame["label_x"] = frame["x"] + cfg.bar_width / 2

    return [
        BarGeometry(
            label=str(label),
            count=int(count),
            x=float(x),
            y=float(y),
            width=float(cfg.bar_width),
            height=float(height),
            label_x=float(label_x),
            value_label_y=float(y - cfg.value_label_gap),
            category_label_y=float(cfg.chart_height + cfg.category_label_gap),
        )
        for label, count, x, y, height, label_x in zip(
            frame["label"],
            frame["count"],
            frame["x"],
            frame["y"],
            frame["height"],
            frame["label_x"],
        )
    ]


def build_age_chart_figure(
    table: AgeGroupTable, config: ChartConfig | None = None
) -> go.Figure:
    """
    연령대 막대 차트 Figure를 생성합니다.

    compute_bar_layout의 좌표를 그대로 사용합니다. 막대는 사각형 shape,
    값 라벨과 연령대 라벨은 annotation으로 그리며, y축을 뒤집어
    SVG viewBox와 같은 좌표계(위쪽이 0)를 유지합니다.
    범주 라벨이 잘리지 않도록 y축 범위는 기준선 아래로 확장합니다.
    """
    cfg = config or CONFIG.chart
    bars = compute_bar_layout(table, cfg)

    fig = go.Figure()
    for bar in bars:
        fig.add_shape(
            type="rect",
            x0=bar.x,
            x1=bar.x + bar.width,
            y0=bar.y,
            y1=cfg.chart_height,
            fillcolor=cfg.bar_color,
            line=dict(width=0),
            layer="above",
        )
        fig.add_annotation(
            x=bar.label_x,
            y=bar.value_label_y,
            text=str(bar.count),
            showarrow=False,
            yanchor="bottom",
            font=dict(size=14),
        )
        fig.add_annotation(
            x=bar.label_x,
            y=bar.category_label_y,
            text=escape(bar.label),
            showarrow=False,
            yanchor="bottom",
            font=dict(size=12),
        )

    fig.update_xaxes(range=[0, cfg.view_width], visible=False, fixedrange=True)
    fig.update_yaxes(
        range=[cfg.chart_height + cfg.category_label_gap * 2, 0],
        visible=False,
        fixedrange=True,
    )
    fig.update_layout(
        height=cfg.chart_height + 2 * cfg.category_label_gap,
        margin=dict(l=10, r=10, t=10, b=10),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
    )
    logger.debug(f"연령대 차트 생성: 막대 {len(bars)}개")
    return fig


def render_age_chart(table: AgeGroupTable | None = None) -> None:
    """연령대 막대 차트 카드를 렌더링합니다."""

    data = table if table is not None else load_age_groups()
    with st.container(border=True):
        st.markdown(
            card_header(card_title(escape(CONFIG.chart.title))),
            unsafe_allow_html=True,
        )
        st.plotly_chart(
            build_age_chart_figure(data),
            use_container_width=True,
            config={"displayModeBar": False},
        )

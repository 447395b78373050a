"""실시간 고독사 수 카운터 위젯."""

from __future__ import annotations

import logging

import streamlit as st

from ..core.config import CONFIG, CounterConfig
from .cards import card_content, card_header, card_root, card_title, escape, format_with_unit
from .state import CounterState, get_counter_state

logger = logging.getLogger(__name__)


def build_counter_html(state: CounterState, config: CounterConfig | None = None) -> str:
    """카운터 카드 HTML을 생성합니다.

    Args:
        state: 카운터 상태
        config: 카운터 설정 (기본값: CONFIG.counter)

    Returns:
        "1,234명" 형식의 값을 담은 카드 HTML
    """
    cfg = config or CONFIG.counter
    title = (
        f"<span>{escape(cfg.title)}</span>"
        f'<span class="sd-card-subtitle">{escape(cfg.subtitle)}</span>'
    )
    value = format_with_unit(state.count, cfg.unit)
    body = (
        '<div class="sd-counter">'
        f'<div class="sd-counter-value">{escape(value)}</div>'
        "</div>"
    )
    return card_root(
        card_header(card_title(title, "sd-card-title--split")) + card_content(body),
        "sd-card--alert",
    )


def render_counter() -> None:
    """세션 상태의 카운터 값을 카드로 렌더링합니다."""

    state = get_counter_state()
    logger.debug(f"카운터 렌더링: {state.count}")
    st.markdown(build_counter_html(state), unsafe_allow_html=True)

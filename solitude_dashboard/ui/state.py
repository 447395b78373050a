"""
위젯 뷰모델과 세션 상태 관리

각 위젯의 로컬 상태를 명시적인 데이터클래스로 두고
Streamlit 세션 상태에 위젯별 고유 키로 보관합니다.
상태 변경은 set_count / select_region 함수로만 수행합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from ..core.config import CONFIG
from ..domain.exceptions import ValidationError
from ..domain.models import RegionStat, RegionTable

logger = logging.getLogger(__name__)

COUNTER_STATE_KEY = "_counter_state"
MAP_STATE_KEY = "_region_map_state"


@dataclass
class CounterState:
    """카운터 위젯 상태: 표시할 숫자 하나."""

    count: int = CONFIG.counter.initial_count


@dataclass
class MapState:
    """
    지도 위젯 선택 상태.

    selected가 None이면 선택 없음, 지역명이면 해당 지역 선택 상태입니다.
    한 번 선택되면 다른 지역으로 바뀔 수는 있어도 해제되지는 않습니다.
    """

    selected: Optional[str] = None


def set_count(state: CounterState, value: int) -> CounterState:
    """
    카운터 값을 변경합니다.

    현재 페이지에서는 호출하지 않으며, 실시간 갱신 기능을 위해 남겨둔 경로입니다.

    Raises:
        ValidationError: 음수 값인 경우
    """
    value = int(value)
    if value < 0:
        raise ValidationError(f"카운터 값은 0 이상이어야 합니다 ({value})")
    state.count = value
    return state


def select_region(state: MapState, name: str, regions: RegionTable) -> RegionStat:
    """
    지역을 선택 상태로 전환합니다.

    이전 선택 여부와 관계없이 지정한 지역으로 교체합니다.

    Args:
        state: 지도 상태
        name: 선택할 지역명
        regions: 지역 테이블

    Returns:
        선택된 지역 통계

    Raises:
        ValidationError: 테이블에 없는 지역명인 경우
    """
    region = regions.get(name)
    if region is None:
        raise ValidationError(f"알 수 없는 지역입니다: {name}")
    if state.selected != name:
        logger.info(f"지역 선택: {state.selected} → {name}")
    state.selected = name
    return region


def selected_region(state: MapState, regions: RegionTable) -> RegionStat | None:
    """현재 선택된 지역 통계를 반환합니다. 선택이 없으면 None."""
    if state.selected is None:
        return None
    return regions.get(state.selected)


def get_counter_state() -> CounterState:
    """세션의 카운터 상태를 반환합니다. 없으면 초기값으로 생성합니다."""

    state = st.session_state.get(COUNTER_STATE_KEY)
    if not isinstance(state, CounterState):
        state = CounterState()
        st.session_state[COUNTER_STATE_KEY] = state
    return state


def get_map_state() -> MapState:
    """세션의 지도 선택 상태를 반환합니다. 없으면 선택 없음으로 생성합니다."""

    state = st.session_state.get(MAP_STATE_KEY)
    if not isinstance(state, MapState):
        state = MapState()
        st.session_state[MAP_STATE_KEY] = state
    return state

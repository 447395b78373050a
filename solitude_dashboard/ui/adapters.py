"""
도메인 예외 → UI 에러 메시지 어댑터

이 모듈은 도메인 계층에서 발생하는 예외를 잡아서
Streamlit 사용자 친화적인 에러 메시지로 변환합니다.

위젯 하나의 실패가 페이지의 나머지 위젯 렌더링을 막지 않도록
위젯 단위로 감싸서 사용합니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

import streamlit as st

from ..domain.exceptions import RenderError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def handle_domain_errors(widget_name: str = "위젯") -> Generator[None, None, None]:
    """
    도메인 예외를 잡아서 Streamlit 에러 메시지로 변환하는 컨텍스트 매니저.

    Args:
        widget_name: 로그와 메시지에 표시할 위젯 이름

    Examples:
        >>> with handle_domain_errors("지역 지도"):
        ...     render_region_map()

    Notes:
        - ValidationError: 통계 테이블 또는 선택 값 검증 실패
        - RenderError: 차트/카드 생성 실패
    """
    try:
        yield

    except ValidationError as e:
        logger.error(f"{widget_name} 데이터 검증 실패: {e}")
        st.error(f"❌ {widget_name} 데이터 검증 실패: {str(e)}")

    except RenderError as e:
        logger.error(f"{widget_name} 렌더링 실패: {e}")
        st.warning(f"⚠️ {widget_name}을(를) 표시할 수 없습니다: {str(e)}")

    except Exception as e:
        logger.exception(f"{widget_name} 렌더링 중 예상치 못한 오류")
        st.error(f"❌ 예상치 못한 오류가 발생했습니다: {type(e).__name__}: {str(e)}")
        st.exception(e)

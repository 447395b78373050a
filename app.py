"""
고독사 현황 대시보드 메인 엔트리 포인트

실행:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from solitude_dashboard.core.config import CONFIG
from solitude_dashboard.ui import render_page


def main() -> None:
    """대시보드 페이지를 설정하고 렌더링합니다."""

    logger.info("고독사 현황 대시보드 시작")
    st.set_page_config(page_title=CONFIG.page.page_title, layout="wide")
    render_page()


if __name__ == "__main__":
    main()

"""
고독사 현황 대시보드 패키지

하드코딩된 고독사 통계를 Streamlit 단일 페이지로 보여줍니다.
구성:
- 도메인 모델과 검증 로직 (Streamlit 비의존)
- 리터럴 통계 테이블
- 카드 프리미티브, 카운터, 지역 지도, 연령대 차트 위젯
"""

from __future__ import annotations

__version__ = "1.0.0"

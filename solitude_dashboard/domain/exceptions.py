"""
도메인 계층 예외 정의

이 모듈은 대시보드 도메인 계층에서 발생할 수 있는
예외를 정의합니다. UI 계층은 이 예외들을 잡아서
사용자 친화적인 에러 메시지로 변환합니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ValidationError(DomainError):
    """
    데이터 검증 실패 시 발생하는 예외.

    리터럴 통계 테이블이 불변 조건을 만족하지 않거나
    존재하지 않는 지역을 선택했을 때 발생합니다.
    예: 지역명 중복, 음수 건수, 빈 연령대 테이블 등
    """

    pass


class RenderError(DomainError):
    """
    위젯 렌더링 실패 시 발생하는 예외.

    차트나 카드 조각을 만들 수 없는 경우 사용합니다.
    """

    pass

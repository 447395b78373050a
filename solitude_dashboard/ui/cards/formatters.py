"""카드 표시용 포맷팅 유틸리티 모듈.

HTML 이스케이프와 천 단위 구분 숫자 포맷팅 함수를 제공합니다.
"""

from __future__ import annotations

import pandas as pd


def escape(value: object) -> str:
    """HTML 이스케이프 처리를 수행합니다.

    Args:
        value: 이스케이프할 값

    Returns:
        이스케이프된 문자열
    """
    if value is None:
        return ""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def format_count(value: float | int | None) -> str:
    """숫자를 천 단위 구분 기호가 있는 문자열로 포맷팅합니다.

    Args:
        value: 포맷팅할 숫자

    Returns:
        "1,234" 형식의 문자열 또는 "-"
    """
    if value is None:
        return "-"
    if isinstance(value, float) and pd.isna(value):
        return "-"
    try:
        return f"{int(round(float(value))):,}"
    except (TypeError, ValueError):
        return "-"


def format_with_unit(value: float | int | None, unit: str) -> str:
    """천 단위 구분 숫자 뒤에 단위를 붙입니다.

    값이 없으면 단위 없이 "-"만 반환합니다.

    Examples:
        >>> format_with_unit(1234, "명")
        '1,234명'
    """
    text = format_count(value)
    if text == "-":
        return text
    return f"{text}{unit}"

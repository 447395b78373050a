"""카드 프리미티브 모듈.

카드 슬롯 빌더, 포맷터, 공용 스타일을 re-export합니다.
"""

from .card import build_card, card_content, card_header, card_root, card_title
from .formatters import escape, format_count, format_with_unit
from .styles import inject_dashboard_styles

__all__ = [
    "card_root",
    "card_header",
    "card_title",
    "card_content",
    "build_card",
    "escape",
    "format_count",
    "format_with_unit",
    "inject_dashboard_styles",
]

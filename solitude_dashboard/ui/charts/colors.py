"""차트 색상 관리 모듈.

색상 단계별 마커 색상과 색상 변환 유틸리티를 제공합니다.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ...domain.tiers import ColorTier, color_tier

# 단계별 마커 색상 (green-300 → yellow-300 → orange-400 → red-500)
TIER_COLORS: Dict[ColorTier, str] = {
    ColorTier.TIER1: "#86EFAC",
    ColorTier.TIER2: "#FDE047",
    ColorTier.TIER3: "#FB923C",
    ColorTier.TIER4: "#EF4444",
}

# 마커 테두리용 음영 계수
OUTLINE_SHADE = 0.8


def hex_to_rgb(hx: str) -> Tuple[int, int, int]:
    """16진수 색상 코드를 RGB 튜플로 변환합니다.

    Args:
        hx: "#RRGGBB" 또는 "#RGB" 형식의 16진수 색상 코드

    Returns:
        (R, G, B) 튜플 (각 값은 0-255 범위)
    """
    hx = hx.lstrip("#")
    if len(hx) == 3:
        hx = "".join(ch * 2 for ch in hx)
    return tuple(int(hx[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore


def rgb_to_hex(rgb: Tuple[float, float, float]) -> str:
    r, g, b = [max(0, min(255, int(round(v)))) for v in rgb]
    return f"#{r:02X}{g:02X}{b:02X}"


def tint(hex_color: str, factor: float) -> str:
    """기본 색상의 밝기를 조정합니다.

    factor가 1.0보다 크면 밝게, 작으면 어둡게 조정합니다.
    """
    r, g, b = hex_to_rgb(hex_color)
    if factor >= 1.0:
        r = r + (255 - r) * (factor - 1.0)
        g = g + (255 - g) * (factor - 1.0)
        b = b + (255 - b) * (factor - 1.0)
    else:
        r = r * factor
        g = g * factor
        b = b * factor
    return rgb_to_hex((r, g, b))


def tier_color(count: int, thresholds: Sequence[int] | None = None) -> str:
    """건수에 해당하는 단계 색상을 반환합니다."""
    return TIER_COLORS[color_tier(count, thresholds)]


def tier_outline_color(count: int, thresholds: Sequence[int] | None = None) -> str:
    """마커 테두리용으로 단계 색상을 어둡게 조정한 색을 반환합니다."""
    return tint(tier_color(count, thresholds), OUTLINE_SHADE)

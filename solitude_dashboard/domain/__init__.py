"""
도메인 계층 공개 API

Streamlit에 의존하지 않는 데이터 모델, 검증, 색상 단계 분류를 제공합니다.
"""

from .exceptions import DomainError, RenderError, ValidationError
from .models import AgeGroupStat, AgeGroupTable, RegionStat, RegionTable
from .tiers import ColorTier, color_tier, validate_tier_thresholds
from .validation import validate_age_groups, validate_regions, validate_thresholds

__all__ = [
    # Exceptions
    "DomainError",
    "ValidationError",
    "RenderError",
    # Models
    "RegionStat",
    "RegionTable",
    "AgeGroupStat",
    "AgeGroupTable",
    # Tiers
    "ColorTier",
    "color_tier",
    "validate_tier_thresholds",
    # Validation
    "validate_regions",
    "validate_age_groups",
    "validate_thresholds",
]

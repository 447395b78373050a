"""전역 설정 모듈."""

from .config import CONFIG, DashboardConfig

__all__ = ["CONFIG", "DashboardConfig"]

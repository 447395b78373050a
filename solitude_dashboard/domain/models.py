"""
도메인 모델: 고독사 대시보드의 핵심 데이터 구조

이 모듈은 대시보드에서 사용하는 통계 데이터 모델을 정의합니다.
모든 모델은 불변(frozen) 데이터클래스로 구현되어 로드 이후 변경되지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Sequence, Tuple

import pandas as pd

from .validation import validate_age_groups, validate_regions


@dataclass(frozen=True)
class RegionStat:
    """
    한 행정 지역의 고독사 통계.

    Attributes:
        name: 지역명 (예: "서울")
        count: 고독사 건수 (0 이상)
        position: 지도 캔버스 상의 (x, y) 비율 좌표, 각 값은 0~1 범위
    """

    name: str
    count: int
    position: Tuple[float, float]

    @property
    def left_pct(self) -> float:
        return self.position[0] * 100.0

    @property
    def top_pct(self) -> float:
        return self.position[1] * 100.0


@dataclass(frozen=True)
class AgeGroupStat:
    """연령대 라벨과 해당 연령대의 고독사 건수."""

    label: str
    count: int


@dataclass(frozen=True)
class RegionTable:
    """
    지역 통계의 불변 컬렉션.

    입력 순서를 유지하며 지역명으로 조회할 수 있습니다.

    Examples:
        >>> table = RegionTable.from_rows({"서울": (342, 0.42, 0.30)})
        >>> table.get("서울").count
        342
    """

    regions: Tuple[RegionStat, ...]

    @classmethod
    def from_rows(
        cls, rows: Mapping[str, Tuple[int, float, float]]
    ) -> "RegionTable":
        """
        {지역명: (건수, x 비율, y 비율)} 형태의 리터럴에서 테이블을 생성합니다.

        Raises:
            ValidationError: 불변 조건 위반 시
        """
        regions = tuple(
            RegionStat(name=name, count=count, position=(float(x), float(y)))
            for name, (count, x, y) in rows.items()
        )
        return cls.from_stats(regions)

    @classmethod
    def from_stats(cls, regions: Iterable[RegionStat]) -> "RegionTable":
        items = tuple(regions)
        validate_regions(items)
        return cls(regions=items)

    def __iter__(self) -> Iterator[RegionStat]:
        return iter(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    def __contains__(self, name: object) -> bool:
        return any(region.name == name for region in self.regions)

    @property
    def names(self) -> list[str]:
        return [region.name for region in self.regions]

    def get(self, name: str) -> RegionStat | None:
        """지역명으로 통계를 조회합니다. 없으면 None."""
        for region in self.regions:
            if region.name == name:
                return region
        return None

    def to_frame(self) -> pd.DataFrame:
        """name, count, x, y 컬럼의 데이터프레임으로 변환합니다."""
        return pd.DataFrame(
            {
                "name": [r.name for r in self.regions],
                "count": [r.count for r in self.regions],
                "x": [r.position[0] for r in self.regions],
                "y": [r.position[1] for r in self.regions],
            }
        )


@dataclass(frozen=True)
class AgeGroupTable:
    """
    연령대 통계의 순서 있는 불변 컬렉션.

    표시 순서는 연령 구간 오름차순이며 입력 순서를 그대로 따릅니다.
    """

    groups: Tuple[AgeGroupStat, ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Tuple[str, int]]) -> "AgeGroupTable":
        """
        [(라벨, 건수), ...] 리터럴에서 테이블을 생성합니다.

        Raises:
            ValidationError: 테이블이 비어 있거나 라벨 중복, 음수 건수인 경우
        """
        groups = tuple(AgeGroupStat(label=label, count=count) for label, count in rows)
        validate_age_groups(groups)
        return cls(groups=groups)

    def __iter__(self) -> Iterator[AgeGroupStat]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    @property
    def max_count(self) -> int:
        return max(group.count for group in self.groups)

    def to_frame(self) -> pd.DataFrame:
        """label, count 컬럼의 데이터프레임으로 변환합니다 (순서 유지)."""
        return pd.DataFrame(
            {
                "label": [g.label for g in self.groups],
                "count": [g.count for g in self.groups],
            }
        )

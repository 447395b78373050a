import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Streamlit을 사용하는 모듈 목록 (모듈 전역 `st` 이름을 교체)
STREAMLIT_MODULES = (
    "solitude_dashboard.ui.adapters",
    "solitude_dashboard.ui.state",
    "solitude_dashboard.ui.counter",
    "solitude_dashboard.ui.region_map",
    "solitude_dashboard.ui.charts.age_chart",
    "solitude_dashboard.ui.cards.styles",
    "solitude_dashboard.ui.page",
)


@pytest.fixture
def mock_st(monkeypatch):
    """모든 UI 모듈의 Streamlit을 하나의 Mock으로 교체합니다.

    session_state는 일반 딕셔너리로 두어 상태 저장/조회를 그대로 검증할 수 있습니다.
    """
    import importlib

    fake = MagicMock()
    fake.session_state = {}
    fake.columns.side_effect = lambda spec, **kwargs: [MagicMock() for _ in spec]
    fake.plotly_chart.return_value = None

    for name in STREAMLIT_MODULES:
        module = importlib.import_module(name)
        monkeypatch.setattr(module, "st", fake)
    return fake

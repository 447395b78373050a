"""대시보드 카드 반응형 스타일 모듈.

카드 프리미티브와 위젯 조각이 사용하는 CSS를 제공합니다.
"""

from __future__ import annotations

import streamlit as st

DASHBOARD_CSS = """
<style>
:root {
    --sd-card-border: #E5E7EB;
    --sd-card-radius: 0.5rem;
    --sd-card-padding: 1rem;
    --sd-alert-red: #DC2626;
}

.sd-page-title {
    font-size: 1.875rem;
    font-weight: 700;
    text-align: center;
    margin-bottom: 2rem;
}

.sd-card {
    background-color: #FFFFFF;
    border: 1px solid var(--sd-card-border);
    border-radius: var(--sd-card-radius);
    padding: var(--sd-card-padding);
    box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -2px rgba(0, 0, 0, 0.1);
}

.sd-card--alert {
    background-color: #FEF2F2;
}

.sd-card-header {
    border-bottom: 1px solid var(--sd-card-border);
    padding-bottom: 0.75rem;
    margin-bottom: 0.75rem;
}

.sd-card-title {
    font-size: 1.125rem;
    font-weight: 600;
    color: #1F2937;
    margin: 0;
    padding: 0;
}

.sd-card-title--split {
    display: flex;
    justify-content: space-between;
    align-items: center;
}

.sd-card-subtitle {
    font-size: 0.875rem;
    font-weight: 400;
    color: #4B5563;
}

.sd-counter {
    text-align: center;
}

.sd-counter-value {
    font-size: 2.25rem;
    font-weight: 700;
    color: var(--sd-alert-red);
}

.sd-region-detail {
    margin-top: 1rem;
    padding: 1rem;
    background-color: #F9FAFB;
    border-radius: var(--sd-card-radius);
    text-align: center;
}

.sd-region-detail-title {
    font-size: 1.25rem;
    font-weight: 700;
    margin: 0;
}

.sd-region-detail-count {
    font-size: 1.875rem;
    color: var(--sd-alert-red);
    margin: 0.5rem 0 0 0;
}

.sd-page-footer {
    margin-top: 2rem;
    text-align: center;
    color: #4B5563;
}

@media (max-width: 700px) {
    .sd-page-title {
        font-size: 1.5rem;
        margin-bottom: 1.25rem;
    }

    .sd-counter-value {
        font-size: 1.875rem;
    }

    .sd-card-title--split {
        flex-wrap: wrap;
        gap: 0.25rem;
    }
}

@media (prefers-color-scheme: dark) {
    .sd-card,
    .sd-region-detail {
        background-color: rgba(13, 17, 23, 0.55);
        border-color: rgba(250, 250, 251, 0.15);
    }

    .sd-card-title {
        color: rgba(250, 250, 251, 0.9);
    }

    .sd-card-subtitle,
    .sd-page-footer {
        color: rgba(250, 250, 251, 0.7);
    }
}
</style>
"""


def inject_dashboard_styles() -> None:
    """Inject shared CSS styles for dashboard cards (re-inject on each run)."""

    st.markdown(DASHBOARD_CSS, unsafe_allow_html=True)

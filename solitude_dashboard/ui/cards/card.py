"""카드 프리미티브 모듈.

테두리가 있는 카드 컨테이너를 네 개의 슬롯(root, header, title, content)으로
조합합니다. 각 슬롯은 이미 렌더링된 HTML 조각을 받아 감싸는 순수 함수이며,
호출자가 넘긴 클래스는 기본 클래스 뒤에 붙어 기본 스타일을 덮어씁니다.
"""

from __future__ import annotations

from typing import Iterable

from .formatters import escape


def _class_attr(base: str, extra: str) -> str:
    classes = [base]
    if extra and extra.strip():
        classes.append(extra.strip())
    return " ".join(classes)


def _join(content: str | Iterable[str] | None) -> str:
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    return "".join(content)


def card_root(content: str | Iterable[str] | None, class_name: str = "") -> str:
    return f'<div class="{_class_attr("sd-card", class_name)}">{_join(content)}</div>'


def card_header(content: str | Iterable[str] | None, class_name: str = "") -> str:
    return (
        f'<div class="{_class_attr("sd-card-header", class_name)}">{_join(content)}</div>'
    )


def card_title(content: str | Iterable[str] | None, class_name: str = "") -> str:
    return f'<h3 class="{_class_attr("sd-card-title", class_name)}">{_join(content)}</h3>'


def card_content(content: str | Iterable[str] | None, class_name: str = "") -> str:
    return (
        f'<div class="{_class_attr("sd-card-content", class_name)}">{_join(content)}</div>'
    )


def build_card(
    *,
    title: str,
    content: str | Iterable[str] | None,
    class_name: str = "",
    title_class: str = "",
    content_class: str = "",
) -> str:
    """제목 텍스트와 본문 HTML로 완성된 카드를 만듭니다.

    Args:
        title: 제목 텍스트 (이스케이프 처리됨)
        content: 본문 HTML 조각
        class_name: 카드 루트에 추가할 클래스
        title_class: 제목에 추가할 클래스
        content_class: 본문에 추가할 클래스

    Returns:
        카드 HTML 문자열
    """
    return card_root(
        card_header(card_title(escape(title), title_class))
        + card_content(content, content_class),
        class_name,
    )

"""
검사항목 라벨 문자열 유틸리티

- clean_label(): 라벨 비교 전 공통 전처리 (사전 빌드/정규화/검증에서 공유)
- escape_alias(): 별칭을 정규식 리터럴로 안전하게 변환
"""
from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
# 장음 기호(ー)와 전각 마이너스(−)는 하이픈으로 통일
_DASH_LIKE_RE = re.compile(r"[ー−]")


def clean_label(raw: str) -> str:
    """라벨 문자열을 비교용으로 정리합니다.

    변환 규칙:
    - 앞뒤 공백 제거, 내부 공백 연속 구간 삭제
    - 전각 괄호 （） → 반각 ()
    - ー / − → -

    사용 예시:
        >>> clean_label(" AST （GOT） ")
        'AST(GOT)'
        >>> clean_label("ペーハー")
        'ペ-ハ-'
    """
    t = raw.strip()
    t = _WHITESPACE_RE.sub("", t)
    t = t.replace("（", "(").replace("）", ")")
    t = _DASH_LIKE_RE.sub("-", t)
    return t


def escape_alias(alias: str) -> str:
    """별칭을 정규식 패턴 안에서 문자 그대로 매칭되도록 이스케이프합니다.

    사용 예시:
        >>> escape_alias("A/G(比)")
        'A/G\\\\(比\\\\)'
    """
    return re.escape(alias)


__all__ = ["clean_label", "escape_alias"]

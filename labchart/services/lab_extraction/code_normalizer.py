"""
검사항목 라벨 정규화 모듈

OCR/LLM 출력의 검사항목 라벨 텍스트를 canonical 항목으로 변환합니다.
lab_dictionary의 별칭 사전을 사용합니다.

매칭 우선순위 (먼저 맞는 것이 이김, 각 단계는 사전 순서 → 별칭 순서로 평가):
1. 정확 일치 (대소문자 구분)
2. 정확 일치 (대소문자 무시) - 대소문자만 다르게 입력된 ASCII 약어 대응
3. 괄호 앞부분 일치 - "AST(GOT)" → "AST"
4. 부분 포함 (길이 3 이상 별칭만) - 복합명사 안에 들어있는 일본어 항목명 대응.
   짧은 별칭은 흔한 토큰과의 오탐이 많아 제외합니다.

별칭도 라벨과 같은 clean_label() 전처리를 거친 형태로 비교합니다.

사용 예시:
    from labchart.services.lab_extraction.code_normalizer import normalize_label

    normalize_label("AST（GOT）")
    # "AST"
    normalize_label("血清アルブミン値")
    # "Alb"
"""
from __future__ import annotations

from typing import Optional

from .label_utils import clean_label, escape_alias
from .reference.lab_dictionary import LabDictionary, get_lab_dictionary

# 부분 포함 매칭을 허용하는 최소 별칭 길이
MIN_SUBSTRING_ALIAS_LENGTH = 3


def normalize_label(
    raw_label: Optional[str],
    dictionary: Optional[LabDictionary] = None,
) -> Optional[str]:
    """라벨 텍스트를 canonical 항목으로 해석합니다.

    매개변수:
        raw_label: 원본 라벨 문자열
        dictionary: 사용할 사전 (None이면 전역 기본 사전)

    반환값:
        canonical 항목 문자열 또는 None (일치 없음)
    """
    if not raw_label or not isinstance(raw_label, str):
        return None

    cleaned = clean_label(raw_label)
    if not cleaned:
        return None

    lx = dictionary if dictionary is not None else get_lab_dictionary()

    # 1) 정확 일치
    for entry in lx:
        if cleaned in entry.cleaned_aliases:
            return entry.item

    # 2) 대소문자 무시 정확 일치
    folded = cleaned.lower()
    for entry in lx:
        for alias in entry.cleaned_aliases:
            if folded == alias.lower():
                return entry.item

    # 3) 괄호 앞부분 일치
    if "(" in cleaned:
        head = cleaned.split("(", 1)[0]
        if head:
            for entry in lx:
                if head in entry.cleaned_aliases:
                    return entry.item

    # 4) 부분 포함 (긴 별칭만)
    for entry in lx:
        for alias in entry.cleaned_aliases:
            if len(alias) >= MIN_SUBSTRING_ALIAS_LENGTH and alias in cleaned:
                return entry.item

    return None


__all__ = [
    "MIN_SUBSTRING_ALIAS_LENGTH",
    "clean_label",
    "escape_alias",
    "normalize_label",
]

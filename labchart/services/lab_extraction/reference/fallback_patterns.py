"""
전체 텍스트 폴백 패턴 (reference/fallback_patterns)
-----------------------------------------------------
- 라인 근접 스캔으로 찾지 못한 주요 항목을, 줄바꿈을 공백으로 평탄화한 전체 텍스트에서 다시 찾기 위한
  (항목, 정규식) 선언 테이블입니다. 대소문자 무시로 매칭하며, 첫 번째 캡처 그룹이 값입니다.
- 라벨 뒤 숫자가 아닌 구간을 건너뛰고 숫자를 캡처합니다. BE 만 음수 부호(-, −, －)를 허용합니다.
- compile_fallback_patterns() 가 로드 시점에 컴파일 검사를 수행합니다.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from labchart.exceptions import DictionaryIntegrityError

from .lab_dictionary import LabDictionary, get_lab_dictionary

logger = logging.getLogger(__name__)

_FALLBACK_CACHE: Optional[Tuple["FallbackPattern", ...]] = None

FALLBACK_PATTERN_SPECS: List[Tuple[str, str]] = [
    ("TP", r"(?:TP|総蛋白)[^0-9]*([\d.]+)"),
    ("Alb", r"(?:アルブミン|Alb)[^0-9]*([\d.]+)"),
    ("A/G", r"A/G[^0-9]*([\d.]+)"),
    ("BUN", r"(?:UN|BUN|尿素窒素)[^0-9]*([\d.]+)"),
    ("Cr", r"(?:CRE|クレアチニン)[^0-9]*([\d.]+)"),
    ("eGFR", r"eGFR[^0-9]*([\d.]+)"),
    ("AST", r"(?:AST|GOT)[^0-9]*(\d+)"),
    ("ALT", r"(?:ALT|GPT)[^0-9]*(\d+)"),
    ("ALP", r"ALP[^0-9]*(\d+)"),
    ("LDH", r"LDH[^0-9]*(\d+)"),
    ("T-Bil", r"(?:T-Bil|総ビリルビン)[^0-9]*([\d.]+)"),
    ("D-Bil", r"(?:D-Bil|直接ビリルビン)[^0-9]*([\d.]+)"),
    ("I-Bil", r"間接ビリルビン[^0-9]*([\d.]+)"),
    ("Na", r"Na[^0-9]*(\d+)"),
    ("K", r"(?:K|カリウム)[^0-9]*([\d.]+)"),
    ("Cl", r"(?:Cl|クロール)[^0-9]*(\d+)"),
    ("Ca", r"(?:Ca|カルシウム)[^0-9]*([\d.]+)"),
    ("補正Ca", r"補正Ca[^0-9]*([\d.]+)"),
    ("IP", r"(?:IP|無機リン|無機P)[^0-9]*([\d.]+)"),
    ("Mg", r"(?:Mg|マグネシウム)[^0-9]*([\d.]+)"),
    ("WBC", r"(?:WBC|白血球)[^0-9]*(\d+)"),
    ("RBC", r"(?:RBC|赤血球)[^0-9]*(\d+)"),
    ("Hb", r"(?:Hb|ヘモグロビン)[^0-9]*([\d.]+)"),
    ("Hct", r"(?:Hct|ヘマトクリット)[^0-9]*([\d.]+)"),
    ("PLT", r"(?:PLT|血小板)[^0-9]*([\d.]+)"),
    ("MCV", r"MCV[^0-9]*([\d.]+)"),
    ("MCH", r"MCH[^0-9]*([\d.]+)"),
    ("MCHC", r"MCHC[^0-9]*([\d.]+)"),
    ("CRP", r"CRP[^0-9]*([\d.]+)"),
    ("CA19-9", r"CA19-9[^0-9]*([\d.]+)"),
    ("CA125", r"CA125[^0-9]*([\d.]+)"),
    ("Ccr", r"(?:推算Ccr|Ccr)[^0-9]*([\d.]+)"),
    ("γ-GTP", r"[γr]-?GTP[^0-9]*(\d+)"),
    ("Neut", r"Neut[^0-9]*([\d.]+)"),
    ("Lymph", r"Lymph[^0-9]*([\d.]+)"),
    ("Mono", r"Mono[^0-9]*([\d.]+)"),
    ("Eosino", r"Eosino[^0-9]*([\d.]+)"),
    ("Baso", r"Baso[^0-9]*([\d.]+)"),
    # 뇌척수액 검사
    ("CSF細胞数", r"(?:CSF細胞数|髄液細胞数|細胞数)[^0-9]*(\d+)"),
    ("CSF蛋白", r"(?:CSF蛋白|髄液蛋白)[^0-9]*([\d.]+)"),
    ("CSF糖", r"(?:CSF糖|髄液糖)[^0-9]*([\d.]+)"),
    ("IgG index", r"IgG\s*index[^0-9]*([\d.]+)"),
    ("MBP", r"MBP[^0-9]*([\d.]+)"),
    ("OCB", r"(?:OCB|オリゴクローナル)[^0-9]*(\d+)"),
    # 사이토카인
    ("IL-6", r"IL-?6[^0-9]*([\d.]+)"),
    ("IL-2", r"IL-?2[^0-9]*([\d.]+)"),
    ("TNF-α", r"TNF-?[αa][^0-9]*([\d.]+)"),
    ("sIL-2R", r"sIL-?2R[^0-9]*([\d.]+)"),
    ("ネオプテリン", r"ネオプテリン[^0-9]*([\d.]+)"),
    ("フェリチン", r"(?:フェリチン|Ferritin)[^0-9]*([\d.]+)"),
    # 신경 마커
    ("NSE", r"NSE[^0-9]*([\d.]+)"),
    ("S-100β", r"S-?100[^0-9]*([\d.]+)"),
    ("NfL", r"(?:NfL|NFL)[^0-9]*([\d.]+)"),
    ("タウ蛋白", r"(?:タウ|Tau)[^0-9]*([\d.]+)"),
    # 젖산/피루브산
    ("Lac", r"(?:Lac|乳酸)[^0-9]*([\d.]+)"),
    ("Pyr", r"(?:Pyr|ピルビン酸)[^0-9]*([\d.]+)"),
    ("L/P比", r"L/P[^0-9]*([\d.]+)"),
    # 혈액가스
    ("pH", r"pH[^0-9]*([\d.]+)"),
    ("PaO2", r"(?:PaO2|pO2)[^0-9]*([\d.]+)"),
    ("PaCO2", r"(?:PaCO2|pCO2)[^0-9]*([\d.]+)"),
    ("HCO3", r"HCO3[^0-9]*([\d.]+)"),
    ("BE", r"BE[^0-9\-−－]*([\-−－]?\s*[\d.]+)"),
    ("SaO2", r"(?:SaO2|SpO2)[^0-9]*([\d.]+)"),
    # 요검사
    ("尿蛋白定量", r"尿蛋白定量[^0-9]*([\d.]+)"),
    ("NAG", r"NAG[^0-9]*([\d.]+)"),
    ("Alb/Cre比", r"(?:Alb/Cre|UACR|ACR)[^0-9]*([\d.]+)"),
    ("尿浸透圧", r"尿浸透圧[^0-9]*([\d.]+)"),
    ("FENa", r"FENa[^0-9]*([\d.]+)"),
]


@dataclass(frozen=True)
class FallbackPattern:
    """컴파일된 폴백 패턴"""

    item: str
    pattern: re.Pattern


def compile_fallback_patterns(
    specs: Sequence[Tuple[str, str]],
    dictionary: LabDictionary,
    strict: bool = True,
) -> Tuple[FallbackPattern, ...]:
    """(항목, 정규식) 테이블을 컴파일하고 검증합니다.

    Args:
        specs: (canonical 항목, 정규식 문자열) 시퀀스
        dictionary: 항목 존재 여부를 확인할 사전
        strict: True면 사전에 없는 항목을 오류로, False면 건너뜀 (축소 사전 주입용)

    Returns:
        FallbackPattern 튜플 (선언 순서 유지)

    Raises:
        DictionaryIntegrityError: 정규식 컴파일 실패, 캡처 그룹 누락, (strict) 미등록 항목
    """
    compiled: List[FallbackPattern] = []
    errors: List[str] = []
    seen: set[str] = set()

    for item, source in specs:
        if item not in dictionary:
            if strict:
                errors.append(f"{item}: 사전에 없는 항목의 폴백 패턴")
            else:
                logger.debug("사전에 없는 항목의 폴백 패턴 건너뜀: %s", item)
            continue
        if item in seen:
            errors.append(f"{item}: 폴백 패턴이 중복 정의되었습니다")
            continue
        seen.add(item)
        try:
            pattern = re.compile(source, re.IGNORECASE)
        except re.error as e:
            errors.append(f"{item}: 정규식 컴파일 실패 ({e})")
            continue
        if pattern.groups < 1:
            errors.append(f"{item}: 값 캡처 그룹이 없습니다")
            continue
        compiled.append(FallbackPattern(item=item, pattern=pattern))

    if errors:
        raise DictionaryIntegrityError("폴백 패턴 테이블 오류:\n- " + "\n- ".join(errors))
    return tuple(compiled)


def get_fallback_patterns(force_rebuild: bool = False) -> Tuple[FallbackPattern, ...]:
    """기본 사전 기준으로 검증된 폴백 패턴을 캐시하여 반환합니다."""
    global _FALLBACK_CACHE
    if force_rebuild or _FALLBACK_CACHE is None:
        _FALLBACK_CACHE = compile_fallback_patterns(
            FALLBACK_PATTERN_SPECS, get_lab_dictionary(), strict=True
        )
    return _FALLBACK_CACHE


__all__ = [
    "FALLBACK_PATTERN_SPECS",
    "FallbackPattern",
    "compile_fallback_patterns",
    "get_fallback_patterns",
]

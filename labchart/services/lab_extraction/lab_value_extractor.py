"""
검사값 추출 모듈

비식별화된 OCR 텍스트에서 (항목, 값, 단위) 목록을 추출합니다.
두 가지 전략을 순서대로 적용하며, 호출마다 새로 만드는 found 집합을 공유하여
한 항목은 최대 1번만 출력됩니다. (먼저 발견된 값이 이김)

전략 A - 라인 근접 스캔:
    - 텍스트를 공백 제거된 비어있지 않은 라인으로 나누고, 선두 라인 번호("12 ")를 제거한 형태도 함께 검사
    - 라인에 별칭이 포함되면
        (a) 같은 라인: 별칭 뒤 숫자가 아닌 문자들 다음의 숫자 ("AST (GOT) 64")
        (b) 다음 라인: 숫자로 시작하고 H/L/N 플래그가 붙을 수 있는 라인 ("WBC" / "8500 H")
    - 이른 라인이 우선, 같은 라인 안에서는 사전 순서가 우선

전략 B - 전체 텍스트 폴백:
    - 라인을 공백 1개로 이어붙인 텍스트에 폴백 정규식 테이블을 대소문자 무시로 적용
    - 전략 A에서 찾은 항목은 건너뜀

값은 음이 아닌 유한 소수만 허용합니다. 부호 허용 항목(BE)만 음수를 받으며,
"-", "−", "－" 를 모두 부호로 읽고 부호 뒤 공백을 허용합니다.
어떤 입력에도 예외를 던지지 않으며 최악의 경우 빈 리스트를 반환합니다.

사용 예시:
    from labchart.services.lab_extraction import extract_lab_measurements

    extract_lab_measurements("AST (GOT) 64")
    # [Measurement(item='AST', value=64.0, unit='U/L')]
"""
from __future__ import annotations

import logging
import math
import re
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .label_utils import escape_alias
from .measurement import Measurement
from .reference.fallback_patterns import (
    FALLBACK_PATTERN_SPECS,
    FallbackPattern,
    compile_fallback_patterns,
    get_fallback_patterns,
)
from .reference.lab_dictionary import LabDictionary, LabItemEntry, get_lab_dictionary

logger = logging.getLogger(__name__)

_LINE_NUMBER_RE = re.compile(r"^\d+\s+")
_NEXT_LINE_VALUE_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*[HLN]?")
_NEXT_LINE_SIGNED_VALUE_RE = re.compile(r"^([\-−－]?\s*\d+(?:\.\d+)?)\s*[HLN]?")
# parseFloat 과 같은 접두 해석: "1.2.3" → 1.2
_DECIMAL_PREFIX_RE = re.compile(r"^(-?)\s*(\d+\.?\d*|\.\d+)")
# OCR 이 내는 전각/수학 마이너스
_MINUS_GLYPHS = str.maketrans({"−": "-", "－": "-"})

_SAME_LINE_SUFFIX = r"[^\d]*(\d+\.?\d*)"
_SAME_LINE_SIGNED_SUFFIX = r"[^\d\-−－]*([\-−－]?\s*\d+\.?\d*)"

_DEFAULT_EXTRACTOR: Optional["LabValueExtractor"] = None


def parse_decimal(token: Optional[str]) -> Optional[float]:
    """숫자 토큰의 선두 소수 부분을 float로 변환합니다. 실패 시 None.

    전각/수학 마이너스(−, －)는 "-" 로 보고, 부호와 숫자 사이의 공백은 무시합니다.
    """
    if not token:
        return None
    m = _DECIMAL_PREFIX_RE.match(token.strip().translate(_MINUS_GLYPHS))
    if not m:
        return None
    try:
        value = float(m.group(1) + m.group(2))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def build_same_line_pattern(alias: str, signed: bool = False) -> re.Pattern:
    """별칭 뒤 같은 라인의 숫자를 캡처하는 정규식을 생성합니다."""
    suffix = _SAME_LINE_SIGNED_SUFFIX if signed else _SAME_LINE_SUFFIX
    return re.compile(escape_alias(alias) + suffix)


class LabValueExtractor:
    """두 전략(라인 근접 → 전체 텍스트 폴백)으로 검사값을 추출"""

    def __init__(
        self,
        dictionary: Optional[LabDictionary] = None,
        fallback_patterns: Optional[Sequence[FallbackPattern]] = None,
    ):
        """
        Args:
            dictionary: 검사항목 사전 (None이면 전역 기본 사전)
            fallback_patterns: 폴백 패턴 (None이면 기본 테이블, 주입 사전이면 사전에 있는 항목만)
        """
        if dictionary is None:
            self.dictionary = get_lab_dictionary()
            if fallback_patterns is None:
                fallback_patterns = get_fallback_patterns()
        else:
            self.dictionary = dictionary
            if fallback_patterns is None:
                fallback_patterns = compile_fallback_patterns(
                    FALLBACK_PATTERN_SPECS, dictionary, strict=False
                )
        self.fallback_patterns: Tuple[FallbackPattern, ...] = tuple(fallback_patterns)

        self._same_line_patterns: Dict[Tuple[str, str], re.Pattern] = {}
        for entry in self.dictionary:
            for alias in entry.aliases:
                self._same_line_patterns[(entry.item, alias)] = build_same_line_pattern(
                    alias, signed=entry.signed
                )

    def extract(self, text: Optional[str]) -> List[Measurement]:
        """텍스트에서 검사값을 추출합니다.

        Args:
            text: 비식별화된 OCR/요약 텍스트

        Returns:
            Measurement 리스트 (항목 중복 없음, 발견 순서)
        """
        if not text or not isinstance(text, str):
            return []

        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            return []

        found: Set[str] = set()
        results: List[Measurement] = []

        self._scan_lines(lines, found, results)
        line_hits = len(results)
        self._scan_full_text(" ".join(lines), found, results)

        logger.debug(
            "검사값 추출 완료: %d 항목 (라인 %d, 폴백 %d) %s",
            len(results),
            line_hits,
            len(results) - line_hits,
            [m.item for m in results],
        )
        return results

    # ---------- 전략 A ----------
    def _scan_lines(self, lines: List[str], found: Set[str], results: List[Measurement]) -> None:
        for i, line in enumerate(lines):
            without_line_num = _LINE_NUMBER_RE.sub("", line, count=1)
            next_line = lines[i + 1] if i + 1 < len(lines) else None

            for entry in self.dictionary:
                if entry.item in found:
                    continue
                for alias in entry.aliases:
                    if alias not in without_line_num and alias not in line:
                        continue
                    value = self._value_near(entry, alias, line, next_line)
                    if value is None:
                        continue
                    results.append(Measurement(item=entry.item, value=value, unit=entry.unit))
                    found.add(entry.item)
                    break

    def _value_near(
        self,
        entry: LabItemEntry,
        alias: str,
        line: str,
        next_line: Optional[str],
    ) -> Optional[float]:
        candidate: Optional[float] = None

        m = self._same_line_patterns[(entry.item, alias)].search(line)
        if m:
            candidate = parse_decimal(m.group(1))

        if candidate is None and next_line is not None:
            next_re = _NEXT_LINE_SIGNED_VALUE_RE if entry.signed else _NEXT_LINE_VALUE_RE
            m2 = next_re.match(next_line)
            if m2:
                candidate = parse_decimal(m2.group(1))

        if candidate is None or not self._accepts(entry.item, candidate):
            return None
        return candidate

    # ---------- 전략 B ----------
    def _scan_full_text(self, full_text: str, found: Set[str], results: List[Measurement]) -> None:
        for fp in self.fallback_patterns:
            if fp.item in found:
                continue
            m = fp.pattern.search(full_text)
            if not m:
                continue
            value = parse_decimal(m.group(1))
            if value is None or not self._accepts(fp.item, value):
                continue
            results.append(
                Measurement(item=fp.item, value=value, unit=self.dictionary.unit(fp.item))
            )
            found.add(fp.item)

    def _accepts(self, item: str, value: float) -> bool:
        if not math.isfinite(value):
            return False
        return value >= 0 or self.dictionary.is_signed(item)


def get_lab_value_extractor(force_rebuild: bool = False) -> LabValueExtractor:
    """기본 사전/폴백 패턴을 사용하는 전역 추출기를 반환합니다."""
    global _DEFAULT_EXTRACTOR
    if force_rebuild or _DEFAULT_EXTRACTOR is None:
        _DEFAULT_EXTRACTOR = LabValueExtractor()
    return _DEFAULT_EXTRACTOR


def extract_lab_measurements(redacted_text: Optional[str]) -> List[Measurement]:
    """비식별화된 텍스트에서 검사값 목록을 추출합니다. (주 진입점)

    비식별화는 호출 측 책임입니다. (redact_pii 를 먼저 적용)
    """
    return get_lab_value_extractor().extract(redacted_text)


__all__ = [
    "LabValueExtractor",
    "build_same_line_pattern",
    "extract_lab_measurements",
    "get_lab_value_extractor",
    "parse_decimal",
]

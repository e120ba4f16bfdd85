"""
개인정보(PII) 제거 모듈

신뢰 경계 밖에서 들어온 텍스트(OCR 결과, 사용자 입력)를 로그/LLM/추출기로 넘기기 전에
순서가 정해진 패턴 목록으로 개인정보를 찾아 고정 마커로 치환합니다.

패턴 (적용 순서):
1. 환자 식별 헤더: 患者名/患者氏名/患者ID/患者番号 + 뒤따르는 일본어/영숫자
2. 이메일
3. 하이픈 없는 전화번호: 0으로 시작하는 10~11자리 (09012345678, 0312345678)
4. 우편번호: 〒123-4567, 1234567 (더 긴 숫자열의 일부는 제외)
5. 주소: 都道府県 + 市区町村 한자 조각
6. 생년월일: 1980年1月2日生, 1980/01/02 生年月日
7. 하이픈 전화번호: 03-1234-5678, 090-123-4567
8. 경칭: 様 / 殿 / 御中

이메일은 숫자 패턴보다 먼저 적용합니다. 로컬 파트의 숫자열이 우편번호로 먼저 치환되면
이메일 패턴이 더 이상 일치하지 않습니다.

패턴은 텍스트 전체에 독립적으로 순차 적용됩니다. 마커는 어떤 패턴과도 일치하지 않으므로
redact()는 멱등입니다: redact(redact(t)) == redact(t)

주의 - 한계 (best-effort 필터이며 비식별화 보증이 아님):
- 라벨 없이 등장하는 이름(예: "山田太郎")이나 경칭 앞의 이름은 남습니다. 경칭만 제거됩니다.
- 都道府県/市区町村 패턴에 맞지 않는 주소(번지만, 영문 주소)는 남습니다.
- 로마자/가타카나 이름, 보험자 번호 등 목록에 없는 형식은 탐지하지 않습니다.
- 국제 형식(+81 90-...), 괄호 형식(03(1234)5678), 공백 구분(090 1234 5678) 전화번호는 남습니다.
- 하이픈 없는 전화번호는 0으로 시작하는 10~11자리만 탐지합니다. 더 긴 숫자열 안의 번호는 남습니다.
- 라벨이 없는 날짜는 제거하지 않습니다. (검사일/이벤트 날짜 보존)
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

REDACTION_MARKER = "[個人情報削除]"

# (카테고리, 정규식) - 순서 유지
PII_PATTERN_SPECS: List[Tuple[str, str]] = [
    (
        "patient_header",
        r"患者(?:名|氏名|ID|番号)\s*[:：]?\s*[一-龯぀-ゟ゠-ヿA-Za-z0-9]+",
    ),
    ("email", r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}"),
    ("phone_compact", r"(?<![\d\-])0\d{9,10}(?!\d)"),
    ("postal_code", r"〒?(?<![\d\-])\d{3}-?\d{4}(?![\d\-])"),
    ("address", r"[一-龯]+[都道府県][一-龯]+[市区町村]"),
    ("birth_date", r"\d{4}[年/\-]\d{1,2}[月/\-]\d{1,2}日?\s*(?:生年月日|生)"),
    ("phone", r"\d{2,4}-\d{2,4}-\d{4}"),
    ("honorific", r"(?:様|殿|御中)"),
]


def compile_pii_patterns(
    specs: Sequence[Tuple[str, str]] = PII_PATTERN_SPECS,
) -> List[Tuple[str, re.Pattern]]:
    """PII 패턴 테이블을 컴파일합니다. 잘못된 정규식은 re.error 로 즉시 실패합니다."""
    return [(category, re.compile(source)) for category, source in specs]


# 임포트 시점 컴파일 (잘못된 패턴은 즉시 실패)
PII_PATTERNS: List[Tuple[str, re.Pattern]] = compile_pii_patterns()

_DEFAULT_REDACTOR: Optional["PIIRedactor"] = None


class PIIRedactor:
    """순서가 있는 PII 패턴으로 텍스트를 치환하는 비식별화기 (상태 없음)"""

    def __init__(
        self,
        patterns: Optional[Sequence[Tuple[str, re.Pattern]]] = None,
        marker: str = REDACTION_MARKER,
    ):
        """
        Args:
            patterns: (카테고리, 컴파일된 정규식) 목록 (None이면 기본 패턴)
            marker: 치환 마커 문자열
        """
        self.patterns = list(patterns) if patterns is not None else list(PII_PATTERNS)
        self.marker = marker
        for category, pattern in self.patterns:
            if pattern.search(marker):
                raise ValueError(f"PII 패턴 '{category}' 이(가) 마커 '{marker}' 와 일치합니다")

    def redact(self, text: Optional[str]) -> str:
        """텍스트의 PII를 마커로 치환합니다.

        Args:
            text: 원본 텍스트

        Returns:
            치환된 텍스트 (빈 값/문자열이 아닌 입력은 빈 문자열)
        """
        if not text or not isinstance(text, str):
            return ""

        cleaned = text
        total = 0
        for category, pattern in self.patterns:
            cleaned, count = pattern.subn(self.marker, cleaned)
            if count:
                total += count
                logger.debug("PII 치환: %s %d건", category, count)
        if total:
            logger.info("PII 치환 완료: 총 %d건", total)
        return cleaned


def get_pii_redactor() -> PIIRedactor:
    """기본 패턴/마커를 사용하는 전역 비식별화기를 반환합니다."""
    global _DEFAULT_REDACTOR
    if _DEFAULT_REDACTOR is None:
        _DEFAULT_REDACTOR = PIIRedactor()
    return _DEFAULT_REDACTOR


def redact_pii(raw_text: Optional[str]) -> str:
    """신뢰 경계 밖의 텍스트를 가장 먼저 비식별화합니다. (주 진입점)"""
    return get_pii_redactor().redact(raw_text)


__all__ = [
    "REDACTION_MARKER",
    "PII_PATTERN_SPECS",
    "PII_PATTERNS",
    "PIIRedactor",
    "compile_pii_patterns",
    "get_pii_redactor",
    "redact_pii",
]

"""
LLM 검사값 검증/정규화 모듈 (Quality Gate)

LLM이 구조화한 labResults 의 각 항목을 검사항목 사전 기준으로 정리합니다.
LLM 출력은 참고값이므로 사전에 없는 항목도 원래 이름 그대로 유지합니다.

정책:
- 포함 조건:
  - item 이 비어있지 않음
  - value 가 유한한 숫자 (숫자 문자열 "2.5", "1,234" 허용)
- 정규화:
  - item 은 normalize_label 로 canonical 항목명으로 변환 (실패 시 원래 이름)
  - unit 이 비어있으면 사전의 기본 단위로 채움
- 제외 조건:
  - item 누락 → missing_item
  - value 누락/비숫자 → invalid_value
"""

import math
from dataclasses import dataclass, field
from typing import Any

from labchart.models.summary import LabDataEntry, LabResultGroup
from labchart.services.lab_extraction.code_normalizer import normalize_label
from labchart.services.lab_extraction.reference.lab_dictionary import (
    LabDictionary,
    get_lab_dictionary,
)


@dataclass
class ValidationResult:
    """Quality gate 검증 결과"""

    accepted: list[dict] = field(default_factory=list)
    rejected: list[dict] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def total_count(self) -> int:
        return self.accepted_count + self.rejected_count

    def summary(self) -> dict:
        """QA 요약 반환"""
        return {
            "total": self.total_count,
            "accepted": self.accepted_count,
            "rejected": self.rejected_count,
        }


def coerce_to_float(val: Any) -> float | None:
    """유한한 숫자로 변환, 불가하면 None"""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        out = float(val)
    elif isinstance(val, str):
        s = val.strip().replace(",", "")
        if not s:
            return None
        try:
            out = float(s)
        except ValueError:
            return None
    else:
        return None
    return out if math.isfinite(out) else None


def coerce_to_str_or_none(val: Any) -> str | None:
    """문자열로 변환, 빈값이면 None"""
    if val is None:
        return None
    s = str(val).strip()
    return s if s else None


def validate_lab_entries(
    date: str | None,
    entries: list[LabDataEntry],
    dictionary: LabDictionary | None = None,
    result: ValidationResult | None = None,
) -> ValidationResult:
    """
    같은 검사일의 검사값 리스트를 검증하여 accepted/rejected로 분리합니다.

    Args:
        date: 검사일 (그대로 결과에 기록)
        entries: LLM 출력 검사값 리스트
        dictionary: 검사항목 사전 (None이면 전역 기본 사전)
        result: 누적할 ValidationResult (None이면 새로 생성)

    Returns:
        ValidationResult
    """
    lx = dictionary if dictionary is not None else get_lab_dictionary()
    result = result if result is not None else ValidationResult()

    for entry in entries:
        raw_item = coerce_to_str_or_none(entry.item)
        value = coerce_to_float(entry.value)

        rejection_reasons = []
        if not raw_item:
            rejection_reasons.append("missing_item")
        if value is None:
            rejection_reasons.append("invalid_value")

        if rejection_reasons:
            rejected_entry = entry.model_dump()
            rejected_entry["date"] = date
            rejected_entry["reasons"] = rejection_reasons
            result.rejected.append(rejected_entry)
            continue

        canonical = normalize_label(raw_item, lx)
        item = canonical or raw_item
        unit = coerce_to_str_or_none(entry.unit)
        if unit is None and canonical:
            unit = lx.unit(canonical) or None

        result.accepted.append({
            "date": date,
            "item": item,
            "value": value,
            "unit": unit or "",
            "known": canonical is not None,
        })

    return result


def validate_lab_results(
    groups: list[LabResultGroup],
    dictionary: LabDictionary | None = None,
) -> tuple[list[LabResultGroup], ValidationResult]:
    """
    labResults 전체를 검증하고, accepted 항목만 남긴 그룹 리스트를 반환합니다.

    Args:
        groups: LLM 출력 labResults
        dictionary: 검사항목 사전 (None이면 전역 기본 사전)

    Returns:
        (정규화된 LabResultGroup 리스트, ValidationResult)
    """
    result = ValidationResult()
    cleaned_groups: list[LabResultGroup] = []

    for group in groups:
        before = result.accepted_count
        validate_lab_entries(group.date, group.data, dictionary, result)
        accepted = result.accepted[before:]
        cleaned_groups.append(
            LabResultGroup(
                date=group.date,
                data=[
                    LabDataEntry(item=a["item"], value=a["value"], unit=a["unit"])
                    for a in accepted
                ],
            )
        )

    return cleaned_groups, result


__all__ = [
    "ValidationResult",
    "coerce_to_float",
    "coerce_to_str_or_none",
    "validate_lab_entries",
    "validate_lab_results",
]

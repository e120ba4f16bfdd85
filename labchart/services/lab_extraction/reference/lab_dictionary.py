"""
검사항목 별칭 사전 (reference/lab_dictionary)
-----------------------------------------------------
- lab_items.py 의 카테고리/단위 테이블로부터 불변(read-only) 사전을 생성하고 프로세스 전역에 캐시합니다.
- 생성 시점에 무결성을 검증하여 모호한 별칭을 런타임 대신 개발 단계에서 실패시킵니다.

주요 제공 함수
- build_lab_dictionary(): LabDictionary 생성 (테스트용 축소 사전 주입 가능)
- get_lab_dictionary(): 최초 1회 빌드 후 메모리 캐시.
- list_all_items(): 모든 canonical 항목 목록 (사전 순서 유지)

무결성 규칙
- 별칭은 비어있지 않은 문자열이어야 합니다. 같은 항목 내 중복 별칭은 제거합니다.
- 하나의 별칭(원문, 그리고 clean_label 적용 후)은 하나의 항목에만 속할 수 있습니다.
- 대소문자만 다른 항목 간 충돌은 경고로 기록합니다. (정확 매칭이 우선하므로 치명적이지 않음)
- 단위/부호 허용 테이블이 사전에 없는 항목을 가리키면 오류입니다.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

from labchart.exceptions import DictionaryIntegrityError

from ..label_utils import clean_label

logger = logging.getLogger(__name__)

# 모듈 전역 캐시
_DICTIONARY_CACHE: Optional["LabDictionary"] = None


@dataclass(frozen=True)
class LabItemEntry:
    """canonical 검사항목 1개의 사전 엔트리"""

    item: str
    category: str
    aliases: Tuple[str, ...]
    cleaned_aliases: Tuple[str, ...]
    unit: str = ""
    signed: bool = False


class LabDictionary:
    """canonical 항목 → 별칭/단위 조회용 불변 사전

    항목 순서(카테고리 순서 → 카테고리 내 선언 순서)는 매칭 우선순위이므로 그대로 보존합니다.
    """

    def __init__(self, entries: Sequence[LabItemEntry]):
        self._entries: Tuple[LabItemEntry, ...] = tuple(entries)
        self._by_item: Mapping[str, LabItemEntry] = MappingProxyType(
            {e.item: e for e in self._entries}
        )

    def __contains__(self, item: object) -> bool:
        return item in self._by_item

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LabItemEntry]:
        return iter(self._entries)

    def items(self) -> List[str]:
        """canonical 항목 목록 (우선순위 순서)"""
        return [e.item for e in self._entries]

    def entry(self, item: str) -> LabItemEntry:
        return self._by_item[item]

    def aliases(self, item: str) -> Tuple[str, ...]:
        return self._by_item[item].aliases

    def unit(self, item: str) -> str:
        """canonical 단위 (미추적 또는 미등록 항목은 빈 문자열)"""
        e = self._by_item.get(item)
        return e.unit if e is not None else ""

    def category(self, item: str) -> str:
        return self._by_item[item].category

    def is_signed(self, item: str) -> bool:
        e = self._by_item.get(item)
        return bool(e is not None and e.signed)

    def iter_aliases(self) -> Iterator[Tuple[str, str]]:
        """(item, alias) 쌍을 우선순위 순서로 순회"""
        for e in self._entries:
            for alias in e.aliases:
                yield e.item, alias


def _dedupe_aliases(item: str, aliases: Iterable[object], errors: List[str]) -> Tuple[str, ...]:
    out: List[str] = []
    for alias in aliases:
        if not isinstance(alias, str) or not alias.strip():
            errors.append(f"{item}: 빈 별칭 또는 문자열이 아닌 별칭 {alias!r}")
            continue
        if alias in out:
            logger.debug("항목 내 중복 별칭 제거: %s / %s", item, alias)
            continue
        out.append(alias)
    if not out:
        errors.append(f"{item}: 유효한 별칭이 없습니다")
    return tuple(out)


def build_lab_dictionary(
    categories: Optional[Sequence[Tuple[str, Mapping[str, Sequence[str]]]]] = None,
    units: Optional[Mapping[str, str]] = None,
    signed_items: Optional[Iterable[str]] = None,
) -> LabDictionary:
    """사전을 빌드하고 무결성을 검증하여 반환합니다.

    Args:
        categories: (카테고리명, {항목: 별칭 리스트}) 의 순서 있는 시퀀스 (None이면 기본 테이블)
        units: 항목 → canonical 단위 (None이면 기본 단위 테이블)
        signed_items: 음수 값을 허용할 항목 집합 (None이면 기본값)

    Returns:
        LabDictionary

    Raises:
        DictionaryIntegrityError: 별칭 충돌, 빈 별칭, 미등록 항목 참조 등
    """
    # 지연 import (참조 데이터는 필요할 때만 로드)
    from .lab_items import LAB_ITEM_CATEGORIES, LAB_ITEM_UNITS, SIGNED_ITEMS

    # 축소 사전을 주입한 경우 기본 단위/부호 테이블은 해당 항목으로만 한정
    strict_units = units is not None or categories is None
    strict_signed = signed_items is not None or categories is None
    if categories is None:
        categories = LAB_ITEM_CATEGORIES
    if units is None:
        units = LAB_ITEM_UNITS
    signed: Set[str] = set(SIGNED_ITEMS if signed_items is None else signed_items)

    errors: List[str] = []
    raw_owner: Dict[str, str] = {}
    cleaned_owner: Dict[str, str] = {}
    folded_owner: Dict[str, Set[str]] = {}
    staged: List[Tuple[str, str, Tuple[str, ...], Tuple[str, ...]]] = []
    seen_items: Set[str] = set()

    for category, mapping in categories:
        for item, raw_aliases in mapping.items():
            if item in seen_items:
                errors.append(f"{item}: 항목이 여러 카테고리에 중복 정의되었습니다")
                continue
            seen_items.add(item)

            aliases = _dedupe_aliases(item, raw_aliases, errors)
            cleaned: List[str] = []
            for alias in aliases:
                owner = raw_owner.setdefault(alias, item)
                if owner != item:
                    errors.append(f"별칭 '{alias}' 이(가) {owner} / {item} 에 중복 등록되었습니다")
                c = clean_label(alias)
                c_owner = cleaned_owner.setdefault(c, item)
                if c_owner != item and owner == item:
                    errors.append(
                        f"정리된 별칭 '{c}' 이(가) {c_owner} / {item} 에 중복 등록되었습니다"
                    )
                folded_owner.setdefault(c.lower(), set()).add(item)
                cleaned.append(c)
            staged.append((item, category, aliases, tuple(cleaned)))

    for key, owners in folded_owner.items():
        if len(owners) > 1:
            logger.warning("대소문자만 다른 별칭 충돌: %s → %s", key, sorted(owners))

    for item in units:
        if item not in seen_items and strict_units:
            errors.append(f"단위 테이블에 미등록 항목이 있습니다: {item}")
    for item in signed:
        if item not in seen_items and strict_signed:
            errors.append(f"부호 허용 항목이 사전에 없습니다: {item}")

    if errors:
        raise DictionaryIntegrityError("검사항목 사전 무결성 오류:\n- " + "\n- ".join(errors))

    entries = [
        LabItemEntry(
            item=item,
            category=category,
            aliases=aliases,
            cleaned_aliases=cleaned,
            unit=units.get(item, "") or "",
            signed=item in signed,
        )
        for item, category, aliases, cleaned in staged
    ]
    logger.debug("검사항목 사전 빌드 완료: %d 항목", len(entries))
    return LabDictionary(entries)


def get_lab_dictionary(force_rebuild: bool = False) -> LabDictionary:
    """전역 캐시된 사전을 반환합니다. force_rebuild=True 면 재생성."""
    global _DICTIONARY_CACHE
    if force_rebuild or _DICTIONARY_CACHE is None:
        _DICTIONARY_CACHE = build_lab_dictionary()
    return _DICTIONARY_CACHE


def list_all_items() -> List[str]:
    """모든 canonical 항목을 사전 순서대로 반환합니다."""
    return get_lab_dictionary().items()


__all__ = [
    "LabItemEntry",
    "LabDictionary",
    "build_lab_dictionary",
    "get_lab_dictionary",
    "list_all_items",
]

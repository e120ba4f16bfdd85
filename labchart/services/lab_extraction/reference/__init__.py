"""참조 데이터 패키지
검사항목 별칭/단위 사전과 폴백 패턴 테이블을 제공합니다.
주요 모듈:
- lab_items: 검사항목 별칭/단위 원본 테이블 (카테고리 순서 = 매칭 우선순위)
- lab_dictionary: 사전 빌드/검증/캐시
- fallback_patterns: 전체 텍스트 폴백 정규식 테이블
"""
from .lab_items import LAB_ITEM_CATEGORIES, LAB_ITEM_UNITS, SIGNED_ITEMS
from .lab_dictionary import (
    LabDictionary,
    LabItemEntry,
    build_lab_dictionary,
    get_lab_dictionary,
    list_all_items,
)
from .fallback_patterns import (
    FALLBACK_PATTERN_SPECS,
    FallbackPattern,
    compile_fallback_patterns,
    get_fallback_patterns,
)
__all__ = [
    # lab_items
    "LAB_ITEM_CATEGORIES",
    "LAB_ITEM_UNITS",
    "SIGNED_ITEMS",
    # lab_dictionary
    "LabDictionary",
    "LabItemEntry",
    "build_lab_dictionary",
    "get_lab_dictionary",
    "list_all_items",
    # fallback_patterns
    "FALLBACK_PATTERN_SPECS",
    "FallbackPattern",
    "compile_fallback_patterns",
    "get_fallback_patterns",
]

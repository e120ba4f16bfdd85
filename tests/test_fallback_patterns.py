"""전체 텍스트 폴백 패턴 테이블 테스트"""

import pytest

from labchart.exceptions import DictionaryIntegrityError
from labchart.services.lab_extraction.reference import (
    FALLBACK_PATTERN_SPECS,
    build_lab_dictionary,
    compile_fallback_patterns,
    get_fallback_patterns,
    get_lab_dictionary,
)
from labchart.services.lab_extraction.lab_value_extractor import parse_decimal


class TestDefaultFallbackPatterns:
    """기본 폴백 테이블 테스트"""

    def test_all_specs_compile(self):
        patterns = get_fallback_patterns()
        assert len(patterns) == len(FALLBACK_PATTERN_SPECS)

    def test_items_are_known(self):
        lx = get_lab_dictionary()
        for fp in get_fallback_patterns():
            assert fp.item in lx

    def test_declaration_order(self):
        items = [fp.item for fp in get_fallback_patterns()]
        assert items == [item for item, _ in FALLBACK_PATTERN_SPECS]

    def test_case_insensitive(self):
        crp = next(fp for fp in get_fallback_patterns() if fp.item == "CRP")
        m = crp.pattern.search("crp : 2.5")
        assert m and m.group(1) == "2.5"

    def test_be_allows_sign(self):
        be = next(fp for fp in get_fallback_patterns() if fp.item == "BE")
        assert be.pattern.search("BE: -3.2").group(1) == "-3.2"

    def test_be_fullwidth_minus(self):
        """전체 텍스트 폴백에서도 전각 마이너스를 부호로 취급"""
        be = next(fp for fp in get_fallback_patterns() if fp.item == "BE")
        assert parse_decimal(be.pattern.search("BE: −3.2").group(1)) == -3.2

    def test_cached(self):
        assert get_fallback_patterns() is get_fallback_patterns()


class TestCompileFallbackPatterns:
    """compile_fallback_patterns() 검증 테스트"""

    def test_invalid_regex(self):
        with pytest.raises(DictionaryIntegrityError, match="정규식 컴파일 실패"):
            compile_fallback_patterns([("AST", r"AST(\d+")], get_lab_dictionary())

    def test_missing_capture_group(self):
        with pytest.raises(DictionaryIntegrityError, match="캡처 그룹"):
            compile_fallback_patterns([("AST", r"AST\d+")], get_lab_dictionary())

    def test_unknown_item_strict(self):
        with pytest.raises(DictionaryIntegrityError, match="NOPE"):
            compile_fallback_patterns([("NOPE", r"NOPE(\d+)")], get_lab_dictionary())

    def test_unknown_item_non_strict(self):
        """비엄격 모드: 사전에 없는 항목은 건너뜀"""
        lx = build_lab_dictionary(categories=[("t", {"CRP": ["CRP"]})])
        patterns = compile_fallback_patterns(FALLBACK_PATTERN_SPECS, lx, strict=False)
        assert [fp.item for fp in patterns] == ["CRP"]

    def test_duplicate_item(self):
        with pytest.raises(DictionaryIntegrityError, match="중복"):
            compile_fallback_patterns(
                [("AST", r"AST(\d+)"), ("AST", r"GOT(\d+)")], get_lab_dictionary()
            )

"""검사항목 별칭 사전 테스트"""

import pytest

from labchart.exceptions import DictionaryIntegrityError
from labchart.services.lab_extraction.reference import (
    LAB_ITEM_CATEGORIES,
    LAB_ITEM_UNITS,
    LabDictionary,
    build_lab_dictionary,
    get_lab_dictionary,
    list_all_items,
)


class TestLabDictionaryImport:
    """import 테스트"""

    def test_import_from_package(self):
        """패키지 레벨에서 import"""
        from labchart.services.lab_extraction import get_lab_dictionary, list_all_items

        assert get_lab_dictionary is not None
        assert list_all_items is not None


class TestBuildLabDictionary:
    """build_lab_dictionary() 기본 테이블 테스트"""

    def test_build_returns_dictionary(self):
        """빌드 결과가 LabDictionary"""
        lx = build_lab_dictionary()
        assert isinstance(lx, LabDictionary)
        assert len(lx) > 0

    def test_item_order_follows_categories(self):
        """항목 순서 = 카테고리 순서 → 선언 순서"""
        expected = [item for _, mapping in LAB_ITEM_CATEGORIES for item in mapping]
        assert build_lab_dictionary().items() == expected

    def test_first_items(self):
        """첫 카테고리(proteins)가 가장 먼저"""
        items = build_lab_dictionary().items()
        assert items[:3] == ["TP", "Alb", "A/G"]

    def test_every_alias_belongs_to_one_item(self):
        """원문 별칭은 하나의 항목에만 속함"""
        owners = {}
        for item, alias in build_lab_dictionary().iter_aliases():
            assert owners.setdefault(alias, item) == item

    def test_every_item_has_alias(self):
        """모든 항목은 별칭을 1개 이상 가짐"""
        for entry in build_lab_dictionary():
            assert len(entry.aliases) >= 1
            assert len(entry.aliases) == len(entry.cleaned_aliases)


class TestLabDictionaryLookup:
    """조회 메서드 테스트"""

    def test_contains(self):
        lx = get_lab_dictionary()
        assert "AST" in lx
        assert "WBC" in lx
        assert "UNKNOWN_ITEM" not in lx

    def test_aliases(self):
        lx = get_lab_dictionary()
        assert lx.aliases("AST") == ("AST", "GOT")
        assert "白血球" in lx.aliases("WBC")

    def test_unit(self):
        """canonical 단위 조회"""
        lx = get_lab_dictionary()
        assert lx.unit("AST") == "U/L"
        assert lx.unit("WBC") == "/μL"
        assert lx.unit("CRP") == "mg/dL"
        assert lx.unit("BE") == "mEq/L"

    def test_unit_of_untracked_item_is_empty(self):
        """단위 미추적/미등록 항목은 빈 문자열"""
        lx = get_lab_dictionary()
        assert lx.unit("A/G") == ""
        assert lx.unit("UNKNOWN_ITEM") == ""

    def test_category(self):
        lx = get_lab_dictionary()
        assert lx.category("AST") == "hepatic"
        assert lx.category("BE") == "blood_gas"

    def test_signed_items(self):
        """부호 허용 항목은 BE 뿐"""
        lx = get_lab_dictionary()
        assert lx.is_signed("BE") is True
        assert lx.is_signed("AST") is False
        assert [e.item for e in lx if e.signed] == ["BE"]

    def test_units_reference_known_items(self):
        """단위 테이블의 모든 항목이 사전에 존재"""
        lx = get_lab_dictionary()
        for item in LAB_ITEM_UNITS:
            assert item in lx


class TestGetLabDictionary:
    """get_lab_dictionary() 캐시 테스트"""

    def test_returns_cached_dictionary(self):
        """캐시된 사전 반환"""
        assert get_lab_dictionary() is get_lab_dictionary()

    def test_force_rebuild(self):
        """force_rebuild=True 면 새 객체"""
        lx1 = get_lab_dictionary()
        lx2 = get_lab_dictionary(force_rebuild=True)
        assert lx1 is not lx2
        assert lx1.items() == lx2.items()

    def test_list_all_items(self):
        items = list_all_items()
        assert "AST" in items
        assert len(items) == len(set(items))


class TestDictionaryIntegrity:
    """축소 사전 주입 시 무결성 검증"""

    def test_small_dictionary(self):
        lx = build_lab_dictionary(
            categories=[("test", {"AAA": ["AAA", "エーエー"], "BBB": ["BBB"]})],
            units={"AAA": "mg/dL"},
        )
        assert lx.items() == ["AAA", "BBB"]
        assert lx.unit("AAA") == "mg/dL"
        assert lx.unit("BBB") == ""
        assert not lx.is_signed("AAA")

    def test_alias_collision_across_items(self):
        """서로 다른 항목이 같은 별칭 → 오류"""
        with pytest.raises(DictionaryIntegrityError, match="foo"):
            build_lab_dictionary(
                categories=[("a", {"X": ["foo"]}), ("b", {"Y": ["foo"]})],
            )

    def test_cleaned_alias_collision(self):
        """정리 후 같아지는 별칭 → 오류"""
        with pytest.raises(DictionaryIntegrityError):
            build_lab_dictionary(
                categories=[("a", {"X": ["A B"]}), ("b", {"Y": ["AB"]})],
            )

    def test_case_only_collision_is_warning(self, caplog):
        """대소문자만 다른 충돌은 경고"""
        lx = build_lab_dictionary(
            categories=[("a", {"X": ["abc"]}), ("b", {"Y": ["ABC"]})],
        )
        assert lx.items() == ["X", "Y"]
        assert "대소문자만 다른 별칭 충돌" in caplog.text

    def test_duplicate_alias_within_item_is_removed(self):
        lx = build_lab_dictionary(categories=[("a", {"X": ["foo", "foo", "bar"]})])
        assert lx.aliases("X") == ("foo", "bar")

    def test_empty_alias(self):
        with pytest.raises(DictionaryIntegrityError):
            build_lab_dictionary(categories=[("a", {"X": [""]})])

    def test_item_in_two_categories(self):
        with pytest.raises(DictionaryIntegrityError, match="X"):
            build_lab_dictionary(
                categories=[("a", {"X": ["foo"]}), ("b", {"X": ["bar"]})],
            )

    def test_unit_for_unknown_item(self):
        """명시한 단위 테이블이 미등록 항목을 가리키면 오류"""
        with pytest.raises(DictionaryIntegrityError, match="ZZZ"):
            build_lab_dictionary(
                categories=[("a", {"X": ["foo"]})],
                units={"ZZZ": "mg"},
            )

    def test_signed_item_unknown(self):
        with pytest.raises(DictionaryIntegrityError, match="ZZZ"):
            build_lab_dictionary(
                categories=[("a", {"X": ["foo"]})],
                signed_items={"ZZZ"},
            )

    def test_signed_item_injection(self):
        lx = build_lab_dictionary(
            categories=[("a", {"X": ["foo"]})],
            signed_items={"X"},
        )
        assert lx.is_signed("X") is True

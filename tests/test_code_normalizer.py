"""검사항목 라벨 정규화 테스트"""

import pytest

from labchart.services.lab_extraction.code_normalizer import (
    clean_label,
    escape_alias,
    normalize_label,
)
from labchart.services.lab_extraction.reference import build_lab_dictionary, get_lab_dictionary


class TestCleanLabel:
    """clean_label() 테스트"""

    def test_strip_and_remove_spaces(self):
        assert clean_label("  AST  (GOT) ") == "AST(GOT)"

    def test_fullwidth_parens(self):
        assert clean_label("AST（GOT）") == "AST(GOT)"

    def test_long_vowel_mark_to_hyphen(self):
        assert clean_label("ペーハー") == "ペ-ハ-"
        assert clean_label("T−Bil") == "T-Bil"

    def test_empty(self):
        assert clean_label("   ") == ""


class TestEscapeAlias:
    """escape_alias() 테스트"""

    def test_special_chars_are_literal(self):
        import re

        pattern = re.compile(escape_alias("A/G(比)"))
        assert pattern.search("A/G(比) 1.5")
        assert not pattern.search("A/G比 1.5")

    def test_plus_sign(self):
        import re

        assert re.fullmatch(escape_alias("CD4+"), "CD4+")


class TestNormalizeLabel:
    """normalize_label() 테스트"""

    def test_exact(self):
        """정확 일치"""
        assert normalize_label("AST") == "AST"
        assert normalize_label("GOT") == "AST"
        assert normalize_label("白血球数") == "WBC"

    def test_halfwidth_katakana_alias(self):
        assert normalize_label("ｱﾙﾌﾞﾐﾝ") == "Alb"

    def test_case_insensitive(self):
        """대소문자만 다른 ASCII 약어"""
        assert normalize_label("crp") == "CRP"
        assert normalize_label("alt") == "ALT"

    def test_parenthesized_suffix(self):
        """괄호 앞부분 일치"""
        assert normalize_label("AST（GOT）") == "AST"
        assert normalize_label("CRP(定量)") == "CRP"

    def test_substring_long_alias(self):
        """긴 별칭 부분 포함"""
        assert normalize_label("血清アルブミン値") == "Alb"

    def test_exact_beats_substring(self):
        """정확 일치가 앞 카테고리의 부분 포함보다 우선"""
        assert normalize_label("尿中アルブミン") == "尿中アルブミン"

    def test_short_alias_not_substring(self):
        """짧은 별칭(K)은 부분 포함 매칭에서 제외"""
        assert normalize_label("KZ") is None

    def test_no_match(self):
        assert normalize_label("謎の検査") is None

    @pytest.mark.parametrize("raw", [None, "", "   ", 123])
    def test_invalid_input(self, raw):
        assert normalize_label(raw) is None

    def test_every_alias_round_trips(self):
        """모든 별칭은 자기 항목으로 정규화"""
        lx = get_lab_dictionary()
        for item, alias in lx.iter_aliases():
            assert normalize_label(alias) == item, alias

    def test_whitespace_alias_round_trips(self):
        assert normalize_label("IgG index") == "IgG index"
        assert normalize_label("IgG  index") == "IgG index"

    def test_injected_dictionary(self):
        lx = build_lab_dictionary(categories=[("t", {"AAA": ["AAA", "テスト項目"]})])
        assert normalize_label("テスト項目値", lx) == "AAA"
        assert normalize_label("AST", lx) is None

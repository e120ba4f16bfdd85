"""LLM 응답 JSON 추출 테스트"""

import pytest

from labchart.exceptions import SummaryParseError
from labchart.services.summary import extract_json_block


class TestExtractJsonBlock:
    """extract_json_block() 테스트"""

    def test_fenced_block(self):
        text = '以下が結果です。\n```json\n{"a": 1}\n```\n以上'
        assert extract_json_block(text) == {"a": 1}

    def test_fenced_block_without_newlines(self):
        assert extract_json_block('```json{"a": 1}```') == {"a": 1}

    def test_first_block_wins(self):
        text = '```json\n{"a": 1}\n```\n```json\n{"a": 2}\n```'
        assert extract_json_block(text) == {"a": 1}

    def test_whole_response(self):
        assert extract_json_block('  {"labResults": []}  ') == {"labResults": []}

    def test_no_json(self):
        with pytest.raises(SummaryParseError, match="응답 전체"):
            extract_json_block("JSONはありません")

    def test_broken_block(self):
        with pytest.raises(SummaryParseError, match="코드 블록"):
            extract_json_block("```json\n{\"a\": }\n```")

    def test_non_object(self):
        with pytest.raises(SummaryParseError, match="객체가 아닙니다"):
            extract_json_block("[1, 2]")

    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        with pytest.raises(SummaryParseError):
            extract_json_block(text)

"""
LLM 응답 JSON 추출 모듈

응답 텍스트에서 구조화 JSON 객체를 꺼냅니다.

1. 첫 번째 ```json 코드 블록의 내용을 파싱
2. 코드 블록이 없으면 응답 전체를 JSON으로 파싱
3. 둘 다 실패하면 SummaryParseError (빈 결과로 대체하지 않음)
"""
from __future__ import annotations

import json
import re
from typing import Any, Dict

from labchart.exceptions import SummaryParseError

_JSON_BLOCK_RE = re.compile(r"```json\n?([\s\S]*?)\n?```")


def extract_json_block(response_text: str) -> Dict[str, Any]:
    """LLM 응답에서 JSON 객체를 추출합니다.

    Args:
        response_text: LLM 응답 텍스트

    Returns:
        파싱된 dict

    Raises:
        SummaryParseError: JSON을 찾지 못했거나 객체가 아닐 때
    """
    if not response_text or not isinstance(response_text, str):
        raise SummaryParseError("LLM 응답이 비어있습니다")

    m = _JSON_BLOCK_RE.search(response_text)
    source = m.group(1) if m else response_text.strip()

    try:
        parsed = json.loads(source)
    except json.JSONDecodeError as e:
        where = "JSON 코드 블록" if m else "응답 전체"
        raise SummaryParseError(f"LLM 응답에서 JSON을 추출할 수 없습니다 ({where}): {e}") from e

    if not isinstance(parsed, dict):
        raise SummaryParseError(
            f"LLM 응답 JSON이 객체가 아닙니다: {type(parsed).__name__}"
        )
    return parsed


__all__ = ["extract_json_block"]

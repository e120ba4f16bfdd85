"""
Summary structuring prompts module.

이 패키지는 차트 요약 구조화에 사용되는 LLM 프롬프트를 중앙 관리합니다.
"""

from .summary_extraction import (
    SUMMARY_EXTRACTION_PROMPT,
    format_summary_user_prompt,
)

__all__ = [
    # 요약 구조화
    "SUMMARY_EXTRACTION_PROMPT",
    "format_summary_user_prompt",
]

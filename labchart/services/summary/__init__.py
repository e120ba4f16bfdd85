"""차트 요약 구조화 패키지

주요 모듈:
- summary_service: OCR/텍스트 → PII 제거 → LLM 구조화 (SummaryService)
- json_block: LLM 응답 JSON 추출
- validation: LLM 검사값 정규화/검증
"""

from .json_block import extract_json_block
from .summary_service import SummaryService
from .validation import ValidationResult, validate_lab_results

__all__ = [
    "SummaryService",
    "ValidationResult",
    "extract_json_block",
    "validate_lab_results",
]

"""개인정보 보호 패키지

외부 텍스트를 로그/LLM/추출기에 넘기기 전에 적용하는 PII 제거 기능을 제공합니다.
"""

from .pii_redactor import (
    PII_PATTERNS,
    REDACTION_MARKER,
    PIIRedactor,
    get_pii_redactor,
    redact_pii,
)

__all__ = [
    "PII_PATTERNS",
    "REDACTION_MARKER",
    "PIIRedactor",
    "get_pii_redactor",
    "redact_pii",
]

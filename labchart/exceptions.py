"""labchart 예외 정의

추출 코어(사전/정규화/추출기)는 입력 때문에 예외를 던지지 않습니다.
예외는 사전 무결성 검증(개발 시점)과 외부 협력자(OCR/LLM) 경계에서만 발생합니다.
"""


class LabChartError(Exception):
    """labchart 공통 기본 예외"""


class DictionaryIntegrityError(LabChartError):
    """검사항목 별칭 사전/폴백 패턴 테이블의 무결성 위반 (로드 시점 검출)"""


class InvalidInputError(LabChartError):
    """서비스 입력값 오류 (빈 이미지, 빈 텍스트, 길이 초과 등)"""


class NoTextDetectedError(LabChartError):
    """OCR 결과 텍스트가 없어 후속 처리를 할 수 없음"""


class OCRServiceError(LabChartError):
    """OCR 협력자 호출 실패"""


class LLMServiceError(LabChartError):
    """LLM 협력자 호출 실패"""


class LLMConfigurationError(LLMServiceError):
    """LLM API 키 등 설정 누락"""


class SummaryParseError(LabChartError):
    """LLM 응답에서 구조화 JSON을 얻지 못함 (빈 결과로 대체하지 않음)"""


__all__ = [
    "LabChartError",
    "DictionaryIntegrityError",
    "InvalidInputError",
    "NoTextDetectedError",
    "OCRServiceError",
    "LLMServiceError",
    "LLMConfigurationError",
    "SummaryParseError",
]

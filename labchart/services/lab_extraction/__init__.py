"""검사결과지 데이터 추출 패키지

비식별화된 OCR 텍스트에서 검사값(항목, 값, 단위)을 추출하는 기능을 제공합니다.

주요 모듈:
- label_utils: 라벨 전처리 (clean_label, escape_alias)
- code_normalizer: 라벨 → canonical 항목 정규화
- lab_value_extractor: 2단계 전략 검사값 추출기
- measurement: 추출 결과 모델
- lab_report_service: OCR → 비식별화 → 추출 파이프라인
- reference/: 검사항목 별칭/단위 사전, 폴백 패턴
"""

from labchart.services.privacy import redact_pii

from .code_normalizer import normalize_label
from .lab_report_service import LabReportService
from .lab_value_extractor import LabValueExtractor, extract_lab_measurements
from .measurement import Measurement
from .reference import get_lab_dictionary, list_all_items

__all__ = [
    # 비식별화
    "redact_pii",
    # code_normalizer
    "normalize_label",
    # lab_value_extractor
    "LabValueExtractor",
    "extract_lab_measurements",
    "Measurement",
    # lab_report_service
    "LabReportService",
    # reference
    "get_lab_dictionary",
    "list_all_items",
]

"""
검사결과지 이미지 처리 서비스

처리 흐름:
    이미지 바이트 → OCR → PII 제거 → 검사값 추출 → LabExtractionEnvelope

OCR이 텍스트를 검출하지 못한 경우는 오류가 아니라 빈 결과 + 안내 메시지입니다.
원문/비식별화 텍스트는 로그에 남기지 않습니다. (길이와 항목명만 기록)

사용 예시:
    from labchart.services.ocr import get_ocr_service
    from labchart.services.lab_extraction import LabReportService

    service = LabReportService(get_ocr_service())
    envelope = service.process_image(image_bytes)
    envelope.data.measurements
    # [{'item': 'AST', 'value': 64.0, 'unit': 'U/L'}, ...]
"""
from __future__ import annotations

import logging
from typing import Optional

from labchart.exceptions import InvalidInputError, LabChartError, OCRServiceError
from labchart.models.envelopes import ExtractionData, ExtractionMeta, LabExtractionEnvelope
from labchart.services.ocr.base import BaseOCRService
from labchart.services.privacy import PIIRedactor, get_pii_redactor

from .lab_value_extractor import LabValueExtractor, get_lab_value_extractor

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "テキストが検出されませんでした"


class LabReportService:
    """검사결과지 OCR → 비식별화 → 검사값 추출 서비스"""

    def __init__(
        self,
        ocr_service: Optional[BaseOCRService] = None,
        redactor: Optional[PIIRedactor] = None,
        extractor: Optional[LabValueExtractor] = None,
    ):
        """
        Args:
            ocr_service: OCR 서비스 (process_image 사용 시 필수)
            redactor: PII 제거기 (None이면 기본 제거기)
            extractor: 검사값 추출기 (None이면 기본 추출기)
        """
        self.ocr_service = ocr_service
        self.redactor = redactor or get_pii_redactor()
        self.extractor = extractor or get_lab_value_extractor()

    def process_image(self, image_bytes: bytes) -> LabExtractionEnvelope:
        """검사결과지 이미지에서 검사값을 추출합니다.

        Args:
            image_bytes: 이미지 바이트

        Returns:
            LabExtractionEnvelope (텍스트 미검출 시 빈 결과 + 메시지)

        Raises:
            InvalidInputError: 빈 이미지 또는 OCR 서비스 미설정
            OCRServiceError: OCR 호출 실패
        """
        if not image_bytes:
            raise InvalidInputError("이미지 데이터가 필요합니다")
        if self.ocr_service is None:
            raise InvalidInputError("OCR 서비스가 설정되지 않았습니다")

        try:
            ocr_envelope = self.ocr_service.run_ocr_from_bytes(image_bytes)
        except LabChartError:
            raise
        except Exception as e:
            logger.error(f"OCR 실패: {e}")
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e

        raw_text = ocr_envelope.data.text if ocr_envelope is not None else None
        if not raw_text:
            logger.info("OCR 텍스트 미검출")
            return LabExtractionEnvelope(
                stage="extract",
                data=ExtractionData(measurements=[]),
                meta=ExtractionMeta(items_found=0, raw_text_length=0, lines=0, message=NO_TEXT_MESSAGE),
            )

        logger.info("OCR 완료: %d 문자", len(raw_text))
        return self.process_text(raw_text)

    def process_text(self, raw_text: str) -> LabExtractionEnvelope:
        """OCR 텍스트(비식별화 전)에서 검사값을 추출합니다.

        Args:
            raw_text: 비식별화 전 텍스트

        Returns:
            LabExtractionEnvelope
        """
        redacted = self.redactor.redact(raw_text)
        measurements = self.extractor.extract(redacted)
        line_count = sum(1 for line in redacted.splitlines() if line.strip())

        logger.info("검사값 추출: %d 항목 %s", len(measurements), [m.item for m in measurements])
        return LabExtractionEnvelope(
            stage="extract",
            data=ExtractionData(measurements=[m.to_dict() for m in measurements]),
            meta=ExtractionMeta(
                items_found=len(measurements),
                raw_text_length=len(raw_text or ""),
                lines=line_count,
            ),
        )


__all__ = ["LabReportService", "NO_TEXT_MESSAGE"]

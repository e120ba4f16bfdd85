"""
차트 요약 구조화 서비스

카르테 서머리(이미지 또는 텍스트)를 비식별화한 뒤 LLM으로 임상 경과표용 JSON으로
구조화합니다.

처리 흐름:
    [이미지] → OCR → (텍스트 없음: NoTextDetectedError)
    [텍스트] → 길이 검증 (빈 값/최대 길이 초과: InvalidInputError)
    → PII 제거 → 프롬프트 + 비식별화 텍스트를 user 메시지 1건으로 전송
    → JSON 추출 → 스키마 검증 → 검사값 정규화 → SummaryEnvelope

LLM 응답에서 JSON을 얻지 못하면 빈 결과 대신 SummaryParseError 를 던집니다.

사용 예시:
    from labchart.services.llm import get_llm_service
    from labchart.services.summary import SummaryService

    service = SummaryService(get_llm_service())
    envelope = service.parse_text(summary_text)
    envelope.data.model_dump(by_alias=True)
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from labchart.exceptions import (
    InvalidInputError,
    LabChartError,
    LLMServiceError,
    NoTextDetectedError,
    OCRServiceError,
    SummaryParseError,
)
from labchart.models.envelopes import SummaryEnvelope, SummaryMeta
from labchart.models.summary import SummaryExtraction
from labchart.prompts import format_summary_user_prompt
from labchart.services.llm.base import BaseLLMService, Message
from labchart.services.ocr.base import BaseOCRService
from labchart.services.privacy import PIIRedactor, get_pii_redactor
from labchart.settings import settings

from .json_block import extract_json_block
from .validation import validate_lab_results

logger = logging.getLogger(__name__)


class SummaryService:
    """카르테 서머리 → 구조화 JSON 변환 서비스"""

    def __init__(
        self,
        llm_service: BaseLLMService,
        ocr_service: Optional[BaseOCRService] = None,
        redactor: Optional[PIIRedactor] = None,
        max_text_chars: Optional[int] = None,
    ):
        """
        Args:
            llm_service: 구조화에 사용할 LLM 서비스
            ocr_service: 이미지 입력용 OCR 서비스 (process_image 사용 시 필수)
            redactor: PII 제거기 (None이면 기본 제거기)
            max_text_chars: 텍스트 입력 최대 길이 (None이면 settings.summary_max_chars)
        """
        self.llm_service = llm_service
        self.ocr_service = ocr_service
        self.redactor = redactor or get_pii_redactor()
        self.max_text_chars = max_text_chars if max_text_chars is not None else settings.summary_max_chars

    def parse_text(self, text: str) -> SummaryEnvelope:
        """서머리 텍스트를 구조화합니다.

        Args:
            text: 카르테 서머리 텍스트

        Returns:
            SummaryEnvelope

        Raises:
            InvalidInputError: 빈 텍스트 또는 최대 길이 초과
            LLMServiceError: LLM 호출 실패 (설정 누락은 LLMConfigurationError)
            SummaryParseError: 응답에서 JSON을 얻지 못함
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("텍스트를 입력해 주세요")
        if len(text) > self.max_text_chars:
            raise InvalidInputError(
                f"텍스트가 너무 깁니다 (최대 {self.max_text_chars:,}자, 입력 {len(text):,}자)"
            )

        return self._structure(text, input_text_length=len(text))

    def process_image(self, image_bytes: bytes) -> SummaryEnvelope:
        """서머리 이미지를 OCR 후 구조화합니다.

        OCR 텍스트에는 최대 길이 제한을 적용하지 않습니다.

        Args:
            image_bytes: 이미지 바이트

        Returns:
            SummaryEnvelope

        Raises:
            InvalidInputError: 빈 이미지 또는 OCR 서비스 미설정
            OCRServiceError: OCR 호출 실패
            NoTextDetectedError: 텍스트 미검출
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
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e

        ocr_text = ocr_envelope.data.text if ocr_envelope is not None else None
        if not ocr_text:
            raise NoTextDetectedError("텍스트가 검출되지 않았습니다. 이미지를 확인해 주세요")

        logger.info("서머리 OCR 완료: %d 문자", len(ocr_text))
        return self._structure(
            ocr_text,
            input_text_length=len(ocr_text),
            ocr_text_length=len(ocr_text),
        )

    def _structure(
        self,
        text: str,
        input_text_length: int,
        ocr_text_length: Optional[int] = None,
    ) -> SummaryEnvelope:
        redacted = self.redactor.redact(text)

        messages = [Message(role="user", content=format_summary_user_prompt(redacted))]
        try:
            response = self.llm_service.generate(messages, max_tokens=settings.llm_max_tokens)
        except LabChartError:
            raise
        except Exception as e:
            logger.error(f"LLM 호출 실패: {e}")
            raise LLMServiceError(f"LLM 호출 오류: {e}") from e

        logger.info("LLM 응답 수신: %d 문자", len(response.content or ""))
        payload = extract_json_block(response.content)

        try:
            extraction = SummaryExtraction.model_validate(payload)
        except ValidationError as e:
            raise SummaryParseError(f"LLM 응답 JSON이 스키마와 맞지 않습니다: {e}") from e

        lab_results, validation = validate_lab_results(extraction.lab_results)
        extraction = extraction.model_copy(update={"lab_results": lab_results})
        if validation.rejected_count:
            logger.warning("검사값 %d건 제외 (숫자 아님/항목 누락)", validation.rejected_count)

        return SummaryEnvelope(
            stage="structure",
            data=extraction,
            meta=SummaryMeta(
                input_text_length=input_text_length,
                ocr_text_length=ocr_text_length,
                engine=(response.metadata or {}).get("provider"),
                lab_items_accepted=validation.accepted_count,
                lab_items_rejected=validation.rejected_count,
                rejected=validation.rejected,
            ),
        )


__all__ = ["SummaryService"]

"""OCR 서비스 기본 인터페이스

모든 OCR 서비스(DummyOCR, GoogleVisionOCR)가 상속하는 기본 인터페이스.
통일된 OCRResultEnvelope 반환 타입 사용. data.text 는 전체 텍스트 1건이며
텍스트가 검출되지 않으면 None 입니다.

다양한 입력 타입 지원:
- PIL Image (extract_text)
- 파일 경로 (run_ocr_from_path)
- numpy array (run_ocr_from_nparray)
- bytes (run_ocr_from_bytes)
- 통합 메서드 (run_ocr)

엔진 호출 실패는 None 대신 OCRServiceError 로 전달됩니다.
"""
from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Literal, Optional, Union

import numpy as np
from PIL import Image

from labchart.exceptions import InvalidInputError, LabChartError, OCRServiceError
from labchart.models.envelopes import OCRData, OCRMeta, OCRResultEnvelope

logger = logging.getLogger(__name__)


class BaseOCRService(ABC):
    """OCR 서비스 기본 추상 클래스

    필수 구현:
        - extract_text(Image.Image): 핵심 추상 메서드

    기본 구현 제공 (오버라이드 가능):
        - run_ocr_from_path(str): 파일 경로에서 OCR
        - run_ocr_from_nparray(np.ndarray): numpy 배열에서 OCR
        - run_ocr_from_bytes(bytes): 바이트 데이터에서 OCR
        - run_ocr(Union[...]): 입력 타입 자동 감지 통합 메서드

    원격 API 구현체(GoogleVisionOCR)는 run_ocr_from_bytes 를 오버라이드하여
    디코딩 없이 원본 바이트를 그대로 전송합니다.
    """

    engine_name: str = "BaseOCR"

    @abstractmethod
    def extract_text(self, image: Image.Image) -> OCRResultEnvelope:
        """이미지에서 텍스트 추출 (핵심 추상 메서드)

        Args:
            image: PIL Image 객체

        Returns:
            OCRResultEnvelope 객체
        """
        pass

    def run_ocr_from_bytes(self, image_bytes: bytes) -> OCRResultEnvelope:
        """바이트 데이터에서 OCR 실행

        기본 구현: PIL Image로 변환 후 extract_text 호출.

        Args:
            image_bytes: 이미지 바이트 데이터

        Returns:
            OCRResultEnvelope

        Raises:
            OCRServiceError: 디코딩/엔진 호출 실패
        """
        try:
            image = Image.open(io.BytesIO(image_bytes))
            return self.extract_text(image)
        except LabChartError:
            raise
        except Exception as e:
            logger.error(f"바이트 OCR 실패: {e}")
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e

    def run_ocr_from_path(self, file_path: str) -> OCRResultEnvelope:
        """파일 경로에서 OCR 실행

        Args:
            file_path: 이미지 파일 경로

        Returns:
            OCRResultEnvelope

        Raises:
            OCRServiceError: 파일 열기/엔진 호출 실패
        """
        try:
            with open(file_path, "rb") as f:
                image_bytes = f.read()
        except OSError as e:
            logger.error(f"파일 OCR 실패: {e}")
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e
        envelope = self.run_ocr_from_bytes(image_bytes)
        envelope.meta.source = "path"
        return envelope

    def run_ocr_from_nparray(self, image_array: np.ndarray) -> OCRResultEnvelope:
        """numpy 배열에서 OCR 실행

        Args:
            image_array: 이미지 numpy 배열 (RGB)

        Returns:
            OCRResultEnvelope

        Raises:
            OCRServiceError: 변환/엔진 호출 실패
        """
        try:
            image = Image.fromarray(image_array)
            envelope = self.extract_text(image)
        except LabChartError:
            raise
        except Exception as e:
            logger.error(f"배열 OCR 실패: {e}")
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e
        envelope.meta.source = "nparray"
        return envelope

    def run_ocr(
        self, image: Union[str, np.ndarray, Image.Image, bytes]
    ) -> OCRResultEnvelope:
        """통합 OCR 실행 메서드

        입력 타입을 자동 감지하여 적절한 메서드 호출.

        Args:
            image: 이미지 (파일 경로, numpy array, PIL Image, bytes)

        Returns:
            OCRResultEnvelope
        """
        if isinstance(image, str):
            return self.run_ocr_from_path(image)
        elif isinstance(image, bytes):
            return self.run_ocr_from_bytes(image)
        elif isinstance(image, Image.Image):
            return self.extract_text(image)
        elif isinstance(image, np.ndarray):
            return self.run_ocr_from_nparray(image)
        else:
            raise InvalidInputError(f"지원하지 않는 이미지 타입: {type(image)}")

    def _create_envelope(
        self,
        text: Optional[str],
        source: Literal["bytes", "nparray", "path"] = "bytes",
        lang: str = "auto",
    ) -> OCRResultEnvelope:
        """OCRResultEnvelope 생성 (빈 텍스트는 None 으로 통일)

        Args:
            text: 인식된 전체 텍스트
            source: 입력 소스 타입 ('bytes', 'nparray', 'path')
            lang: 인식 언어

        Returns:
            OCRResultEnvelope
        """
        if text is not None and not text.strip():
            text = None
        return OCRResultEnvelope(
            stage="ocr",
            data=OCRData(text=text),
            meta=OCRMeta(
                source=source,
                lang=lang,
                engine=self.engine_name,
                text_length=len(text) if text else 0,
            ),
        )


__all__ = [
    "BaseOCRService",
]

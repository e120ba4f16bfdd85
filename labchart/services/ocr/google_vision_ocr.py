"""Google Cloud Vision API OCR 구현"""

import io
import logging

from google.cloud import vision
from PIL import Image

from labchart.exceptions import OCRServiceError
from labchart.models.envelopes import OCRResultEnvelope
from labchart.settings import settings
from .base import BaseOCRService

logger = logging.getLogger(__name__)


class GoogleVisionOCR(BaseOCRService):
    """Google Cloud Vision API(text_detection)를 사용한 OCR 서비스"""

    engine_name = "GoogleVision"

    def __init__(self, client=None):
        """Google Vision 클라이언트 초기화

        Args:
            client: 주입할 ImageAnnotatorClient (None이면 설정으로 생성)
        """
        if client is not None:
            self.client = client
        elif settings.google_application_credentials:
            self.client = vision.ImageAnnotatorClient.from_service_account_file(
                settings.google_application_credentials
            )
        else:
            self.client = vision.ImageAnnotatorClient()

    def extract_text(self, image: Image.Image) -> OCRResultEnvelope:
        """이미지에서 텍스트 추출

        Args:
            image: PIL Image 객체

        Returns:
            OCRResultEnvelope 객체
        """
        # PIL Image를 바이트로 변환
        img_byte_arr = io.BytesIO()
        image.save(img_byte_arr, format="PNG")
        return self._detect(img_byte_arr.getvalue())

    def run_ocr_from_bytes(self, image_bytes: bytes) -> OCRResultEnvelope:
        """원본 바이트를 디코딩 없이 그대로 전송"""
        return self._detect(image_bytes)

    def _detect(self, content: bytes) -> OCRResultEnvelope:
        try:
            vision_image = vision.Image(content=content)
            response = self.client.text_detection(image=vision_image)
        except Exception as e:
            logger.error(f"Google Vision 호출 실패: {e}")
            raise OCRServiceError(f"OCR 처리 오류: {e}") from e

        if response.error.message:
            raise OCRServiceError(f"Google Vision API 오류: {response.error.message}")

        # 첫 번째 annotation이 전체 텍스트
        texts = response.text_annotations
        if not texts:
            return self._create_envelope(None, source="bytes")

        full_text = texts[0].description
        logger.info("OCR 완료: %d 문자", len(full_text or ""))
        return self._create_envelope(full_text, source="bytes")

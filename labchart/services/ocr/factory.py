"""OCR 서비스 팩토리"""

from labchart.settings import settings

from .base import BaseOCRService


def get_ocr_service() -> BaseOCRService:
    """설정에 따라 적절한 OCR 서비스 반환

    Returns:
        BaseOCRService 인스턴스 (모두 OCRResultEnvelope 반환)
    """
    if settings.ocr_provider == "google":
        from .google_vision_ocr import GoogleVisionOCR

        return GoogleVisionOCR()
    elif settings.ocr_provider == "dummy":
        from .dummy_ocr import DummyOCR

        return DummyOCR()
    else:
        raise ValueError(f"지원하지 않는 OCR 제공자: {settings.ocr_provider}")

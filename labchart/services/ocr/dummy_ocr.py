"""더미 OCR 구현 (테스트용)"""

from PIL import Image

from labchart.models.envelopes import OCRResultEnvelope
from .base import BaseOCRService

DUMMY_LAB_SHEET = """
検査結果報告書

患者名: 山田太郎
生年月日 1980年4月1日生
〒123-4567 東京都新宿区

項目名 結果 単位
1 WBC
8500 H
2 RBC 452
3 Hb 13.2 g/dL
4 PLT 23.1
5 AST (GOT) 64
6 ALT (GPT) 48
7 CRP 2.5 mg/dL
8 血糖 102

担当: 佐藤様
""".strip()


class DummyOCR(BaseOCRService):
    """테스트용 더미 OCR 서비스 (고정된 일본어 검사결과지 텍스트 반환)"""

    engine_name = "DummyOCR"

    def __init__(self, text: str | None = DUMMY_LAB_SHEET):
        """
        Args:
            text: 반환할 텍스트 (None이면 텍스트 미검출 상황을 흉내냄)
        """
        self.text = text

    def extract_text(self, image: Image.Image) -> OCRResultEnvelope:
        """더미 텍스트 반환

        Args:
            image: PIL Image 객체 (사용하지 않음)

        Returns:
            OCRResultEnvelope 객체
        """
        return self._create_envelope(self.text, source="nparray", lang="ja")

    def run_ocr_from_bytes(self, image_bytes: bytes) -> OCRResultEnvelope:
        """바이트를 디코딩하지 않고 고정 텍스트 반환"""
        return self._create_envelope(self.text, source="bytes", lang="ja")

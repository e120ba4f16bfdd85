"""OCR 서비스 테스트"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import numpy as np
import pytest

from labchart.exceptions import InvalidInputError, OCRServiceError
from labchart.models.envelopes import OCRResultEnvelope
from labchart.services.ocr.dummy_ocr import DUMMY_LAB_SHEET, DummyOCR
from labchart.services.ocr.google_vision_ocr import GoogleVisionOCR


class TestDummyOCR:
    """더미 OCR 테스트"""

    def test_extract_text(self, dummy_ocr_service, sample_image):
        envelope = dummy_ocr_service.extract_text(sample_image)

        assert isinstance(envelope, OCRResultEnvelope)
        assert envelope.stage == "ocr"
        assert envelope.data.text == DUMMY_LAB_SHEET
        assert envelope.meta.engine == "DummyOCR"
        assert envelope.meta.text_length == len(DUMMY_LAB_SHEET)

    def test_run_ocr_dispatch(self, dummy_ocr_service, sample_image):
        """입력 타입별 분기"""
        assert dummy_ocr_service.run_ocr(b"bytes").meta.source == "bytes"
        assert dummy_ocr_service.run_ocr(sample_image).data.text == DUMMY_LAB_SHEET
        array = np.zeros((10, 10, 3), dtype=np.uint8)
        assert dummy_ocr_service.run_ocr(array).meta.source == "nparray"

    def test_run_ocr_unsupported_type(self, dummy_ocr_service):
        with pytest.raises(InvalidInputError):
            dummy_ocr_service.run_ocr(123)

    def test_missing_file(self, dummy_ocr_service, tmp_path):
        with pytest.raises(OCRServiceError):
            dummy_ocr_service.run_ocr_from_path(str(tmp_path / "missing.png"))

    def test_file_path(self, dummy_ocr_service, sample_image, tmp_path):
        path = tmp_path / "sheet.png"
        sample_image.save(path)
        assert dummy_ocr_service.run_ocr(str(path)).meta.source == "path"

    def test_no_text(self, sample_image):
        envelope = DummyOCR(text=None).extract_text(sample_image)
        assert envelope.data.text is None
        assert envelope.meta.text_length == 0

    def test_whitespace_text_is_none(self, sample_image):
        assert DummyOCR(text="  \n ").extract_text(sample_image).data.text is None


def _vision_response(descriptions, error_message=""):
    response = MagicMock()
    response.error.message = error_message
    response.text_annotations = [SimpleNamespace(description=d) for d in descriptions]
    return response


class TestGoogleVisionOCR:
    """Google Vision OCR (클라이언트 주입) 테스트"""

    def test_full_text_from_first_annotation(self):
        client = MagicMock()
        client.text_detection.return_value = _vision_response(["WBC\n8500 H", "WBC", "8500"])

        envelope = GoogleVisionOCR(client=client).run_ocr_from_bytes(b"image-bytes")

        assert envelope.data.text == "WBC\n8500 H"
        assert envelope.meta.engine == "GoogleVision"
        assert envelope.meta.source == "bytes"
        client.text_detection.assert_called_once()

    def test_sends_raw_bytes(self):
        client = MagicMock()
        client.text_detection.return_value = _vision_response(["CRP 2.5"])

        GoogleVisionOCR(client=client).run_ocr_from_bytes(b"image-bytes")

        image = client.text_detection.call_args.kwargs["image"]
        assert image.content == b"image-bytes"

    def test_extract_text_from_pil(self, sample_image):
        client = MagicMock()
        client.text_detection.return_value = _vision_response(["CRP 2.5"])
        assert GoogleVisionOCR(client=client).extract_text(sample_image).data.text == "CRP 2.5"

    def test_no_annotations(self):
        client = MagicMock()
        client.text_detection.return_value = _vision_response([])
        envelope = GoogleVisionOCR(client=client).run_ocr_from_bytes(b"image-bytes")
        assert envelope.data.text is None

    def test_api_error_message(self):
        client = MagicMock()
        client.text_detection.return_value = _vision_response([], error_message="PERMISSION_DENIED")
        with pytest.raises(OCRServiceError, match="PERMISSION_DENIED"):
            GoogleVisionOCR(client=client).run_ocr_from_bytes(b"image-bytes")

    def test_client_exception(self):
        client = MagicMock()
        client.text_detection.side_effect = RuntimeError("deadline exceeded")
        with pytest.raises(OCRServiceError, match="deadline exceeded"):
            GoogleVisionOCR(client=client).run_ocr_from_bytes(b"image-bytes")

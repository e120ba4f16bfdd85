"""검사결과지 처리 서비스 테스트"""

from unittest.mock import MagicMock

import pytest

from labchart.exceptions import InvalidInputError, OCRServiceError
from labchart.models.envelopes import LabExtractionEnvelope
from labchart.services.lab_extraction import LabReportService
from labchart.services.lab_extraction.lab_report_service import NO_TEXT_MESSAGE
from labchart.services.ocr.dummy_ocr import DummyOCR


def _by_item(envelope):
    return {m["item"]: m for m in envelope.data.measurements}


class TestProcessImage:
    """process_image() 테스트"""

    def test_dummy_sheet(self, lab_report_service):
        """더미 OCR 검사결과지에서 주요 항목 추출"""
        envelope = lab_report_service.process_image(b"fake-image")

        assert isinstance(envelope, LabExtractionEnvelope)
        assert envelope.stage == "extract"
        by_item = _by_item(envelope)
        assert by_item["WBC"] == {"item": "WBC", "value": 8500.0, "unit": "/μL"}
        assert by_item["AST"] == {"item": "AST", "value": 64.0, "unit": "U/L"}
        assert by_item["CRP"]["value"] == 2.5
        assert by_item["Hb"]["value"] == 13.2
        assert by_item["Glu"]["value"] == 102.0
        assert envelope.meta.items_found == len(envelope.data.measurements)
        assert envelope.meta.message is None

    def test_no_text_is_not_error(self):
        """텍스트 미검출은 빈 결과 + 메시지"""
        service = LabReportService(DummyOCR(text=None))
        envelope = service.process_image(b"blank-image")

        assert envelope.data.measurements == []
        assert envelope.meta.items_found == 0
        assert envelope.meta.message == NO_TEXT_MESSAGE

    def test_empty_bytes(self, lab_report_service):
        with pytest.raises(InvalidInputError):
            lab_report_service.process_image(b"")

    def test_without_ocr_service(self):
        with pytest.raises(InvalidInputError):
            LabReportService().process_image(b"fake-image")

    def test_ocr_failure_wrapped(self):
        """OCR 예외는 OCRServiceError 로 전달"""
        ocr = MagicMock()
        ocr.run_ocr_from_bytes.side_effect = RuntimeError("quota exceeded")
        with pytest.raises(OCRServiceError, match="quota exceeded"):
            LabReportService(ocr).process_image(b"fake-image")

    def test_ocr_service_error_passthrough(self):
        ocr = MagicMock()
        ocr.run_ocr_from_bytes.side_effect = OCRServiceError("Google Vision API 오류")
        with pytest.raises(OCRServiceError, match="Google Vision"):
            LabReportService(ocr).process_image(b"fake-image")


class TestProcessText:
    """process_text() 테스트"""

    def test_redacts_before_extract(self):
        redactor = MagicMock()
        redactor.redact.return_value = "CRP 2.5"
        service = LabReportService(redactor=redactor)

        envelope = service.process_text("患者名: 山田太郎\nCRP 2.5")

        redactor.redact.assert_called_once_with("患者名: 山田太郎\nCRP 2.5")
        assert _by_item(envelope)["CRP"]["value"] == 2.5

    def test_meta(self):
        raw = "患者名: 山田太郎\nAST 30"
        envelope = LabReportService().process_text(raw)

        assert envelope.meta.raw_text_length == len(raw)
        assert envelope.meta.lines == 2
        assert envelope.data.measurements == [{"item": "AST", "value": 30.0, "unit": "U/L"}]

    def test_no_items(self):
        envelope = LabReportService().process_text("本日は晴天なり")
        assert envelope.data.measurements == []
        assert envelope.meta.items_found == 0

"""Envelope 모델 테스트"""

import pytest
from pydantic import ValidationError

from labchart.models.envelopes import (
    Envelope,
    ExtractionData,
    ExtractionMeta,
    LabExtractionEnvelope,
    OCRData,
    OCRMeta,
    OCRResultEnvelope,
    SummaryEnvelope,
    SummaryMeta,
)
from labchart.models.summary import SummaryExtraction


class TestOCRResultEnvelope:
    """OCR Envelope 테스트"""

    def test_create(self):
        env = OCRResultEnvelope(
            stage="ocr",
            data=OCRData(text="WBC 8500"),
            meta=OCRMeta(source="bytes", engine="GoogleVision", text_length=8),
        )
        assert env.data.text == "WBC 8500"
        assert env.version == "1.0"

    def test_text_optional(self):
        env = OCRResultEnvelope(stage="ocr", data=OCRData(), meta=OCRMeta())
        assert env.data.text is None
        assert env.meta.text_length == 0

    def test_invalid_stage(self):
        with pytest.raises(ValidationError):
            OCRResultEnvelope(stage="merge", data=OCRData(), meta=OCRMeta())

    def test_invalid_source(self):
        with pytest.raises(ValidationError):
            OCRMeta(source="url")


class TestLabExtractionEnvelope:
    """추출 Envelope 테스트"""

    def test_dump(self):
        env = LabExtractionEnvelope(
            stage="extract",
            data=ExtractionData(measurements=[{"item": "AST", "value": 64.0, "unit": "U/L"}]),
            meta=ExtractionMeta(items_found=1, raw_text_length=12),
        )
        dumped = env.model_dump()
        assert dumped["stage"] == "extract"
        assert dumped["data"]["measurements"][0]["item"] == "AST"
        assert dumped["meta"]["message"] is None


class TestSummaryEnvelope:
    """요약 Envelope / 스키마 테스트"""

    def test_camel_case_input(self):
        extraction = SummaryExtraction.model_validate({
            "patientInfo": {"diagnosis": "脳炎", "onsetDate": "2025-01-14"},
            "labResults": [{"date": "2025-01-15", "data": [{"item": "CRP", "value": 2.5, "unit": "mg/dL"}]}],
            "treatments": [{"medicationName": "アシクロビル", "dosageUnit": "mg"}],
            "clinicalEvents": [{"eventType": "発熱", "startDate": "2025-01-13"}],
            "unknownKey": 1,
        })
        assert extraction.patient_info.onset_date == "2025-01-14"
        assert extraction.lab_results[0].data[0].value == 2.5
        assert extraction.treatments[0].medication_name == "アシクロビル"
        assert extraction.clinical_events[0].event_type == "発熱"

    def test_snake_case_input(self):
        extraction = SummaryExtraction(lab_results=[], clinical_events=[])
        assert extraction.patient_info.diagnosis is None

    def test_null_sections(self):
        extraction = SummaryExtraction.model_validate(
            {"patientInfo": None, "labResults": None, "treatments": None, "clinicalEvents": None}
        )
        assert extraction.lab_results == []
        assert extraction.treatments == []

    def test_null_lab_data(self):
        extraction = SummaryExtraction.model_validate({"labResults": [{"date": None, "data": None}]})
        assert extraction.lab_results[0].data == []

    def test_envelope(self):
        env = SummaryEnvelope(
            stage="structure",
            data=SummaryExtraction(),
            meta=SummaryMeta(input_text_length=100),
        )
        dumped = env.model_dump(by_alias=True)
        assert dumped["data"]["labResults"] == []
        assert dumped["meta"]["ocr_text_length"] is None

    def test_generic_envelope(self):
        env = Envelope[dict, dict](stage="redact", data={}, meta={})
        assert env.stage == "redact"

"""파이프라인 데이터 모델"""

from .envelopes import (
    Envelope,
    ExtractionData,
    ExtractionMeta,
    LabExtractionEnvelope,
    OCRData,
    OCRMeta,
    OCRResultEnvelope,
    Stage,
    SummaryEnvelope,
    SummaryMeta,
)
from .summary import (
    ClinicalEvent,
    LabDataEntry,
    LabResultGroup,
    PatientInfo,
    SummaryExtraction,
    Treatment,
)

__all__ = [
    "Envelope",
    "ExtractionData",
    "ExtractionMeta",
    "LabExtractionEnvelope",
    "OCRData",
    "OCRMeta",
    "OCRResultEnvelope",
    "Stage",
    "SummaryEnvelope",
    "SummaryMeta",
    "ClinicalEvent",
    "LabDataEntry",
    "LabResultGroup",
    "PatientInfo",
    "SummaryExtraction",
    "Treatment",
]

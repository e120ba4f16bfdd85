"""파이프라인 Envelope 모델

파이프라인 각 단계(OCR/비식별화/추출/구조화)별 데이터와 메타데이터를
일관되고 타입 안전하게 관리하는 Pydantic 모델 정의.
"""
from __future__ import annotations

from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar
from typing_extensions import TypeAlias

from pydantic import BaseModel, Field

from .summary import SummaryExtraction


# =============================================================================
# 기본 타입 정의
# =============================================================================

Stage: TypeAlias = Literal['ocr', 'redact', 'extract', 'structure']
"""파이프라인 처리 단계"""

TData = TypeVar('TData')
TMeta = TypeVar('TMeta')


class Envelope(BaseModel, Generic[TData, TMeta]):
    """파이프라인 단계별 데이터와 메타데이터를 감싸는 공통 Envelope 모델"""
    stage: Stage
    data: TData
    meta: TMeta
    version: str = '1.0'


# =============================================================================
# OCR 단계 모델
# =============================================================================

class OCRData(BaseModel):
    """OCR 단계 결과 데이터 (전체 텍스트 1건, 검출 실패 시 None)"""
    text: Optional[str] = Field(default=None, description="이미지에서 인식된 전체 텍스트")


class OCRMeta(BaseModel):
    """OCR 단계 결과 메타데이터"""
    source: Optional[Literal['bytes', 'nparray', 'path']] = Field(default=None, description="입력 소스 타입")
    lang: Optional[str] = Field(default=None, description="OCR 인식 언어 힌트")
    engine: Optional[str] = Field(default=None, description="사용된 OCR 엔진명")
    text_length: int = Field(default=0, description="인식된 텍스트 길이")


# =============================================================================
# Extraction 단계 모델
# =============================================================================

class ExtractionData(BaseModel):
    """추출 단계 결과 데이터"""
    measurements: List[Dict[str, Any]] = Field(
        default_factory=list, description="추출된 검사값 리스트 ({item, value, unit})"
    )


class ExtractionMeta(BaseModel):
    """추출 단계 결과 메타데이터"""
    items_found: int = Field(default=0, description="추출된 검사 항목 수")
    raw_text_length: int = Field(default=0, description="비식별화 전 텍스트 길이")
    lines: Optional[int] = Field(default=None, description="처리된 비어있지 않은 라인 수")
    message: Optional[str] = Field(default=None, description="사용자 안내 메시지")


# =============================================================================
# Structure 단계 모델
# =============================================================================

class SummaryMeta(BaseModel):
    """구조화(요약) 단계 결과 메타데이터"""
    input_text_length: int = Field(default=0, description="입력 텍스트 길이 (OCR 텍스트 포함)")
    ocr_text_length: Optional[int] = Field(default=None, description="OCR 인식 텍스트 길이 (이미지 입력 시)")
    engine: Optional[str] = Field(default=None, description="사용된 LLM 엔진명")
    lab_items_accepted: int = Field(default=0, description="검증을 통과한 검사값 수")
    lab_items_rejected: int = Field(default=0, description="검증에서 제외된 검사값 수")
    rejected: List[Dict[str, Any]] = Field(default_factory=list, description="제외된 검사값과 사유")


# =============================================================================
# 타입 별칭 (Type Aliases)
# =============================================================================

OCRResultEnvelope = Envelope[OCRData, OCRMeta]
LabExtractionEnvelope = Envelope[ExtractionData, ExtractionMeta]
SummaryEnvelope = Envelope[SummaryExtraction, SummaryMeta]


__all__ = [
    'Stage',
    'Envelope',
    'OCRData',
    'OCRMeta',
    'OCRResultEnvelope',
    'ExtractionData',
    'ExtractionMeta',
    'LabExtractionEnvelope',
    'SummaryMeta',
    'SummaryEnvelope',
]

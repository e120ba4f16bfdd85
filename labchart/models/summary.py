"""차트 요약 구조화 결과 모델

LLM이 반환하는 JSON(camelCase 키)을 검증하는 Pydantic 스키마.
필드명은 snake_case, 직렬화는 by_alias=True 로 원래 camelCase 키를 유지합니다.
"""
from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    """camelCase 별칭 + snake_case 이름 모두 허용, 알 수 없는 키는 무시"""
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class PatientInfo(_CamelModel):
    """환자 기본 정보 (개인 식별 정보 제외)"""
    diagnosis: Optional[str] = Field(default=None, description="진단명")
    onset_date: Optional[str] = Field(default=None, alias='onsetDate', description="발병일 YYYY-MM-DD")


class LabDataEntry(_CamelModel):
    """검사값 1건 (LLM 출력 그대로, 값은 숫자 또는 문자열)"""
    item: Optional[str] = Field(default=None, description="검사항목명")
    value: Optional[Union[float, str]] = Field(default=None, description="검사값")
    unit: Optional[str] = Field(default=None, description="단위")


class LabResultGroup(_CamelModel):
    """같은 검사일의 검사값 묶음"""
    date: Optional[str] = Field(default=None, description="검사일 YYYY-MM-DD")
    data: List[LabDataEntry] = Field(default_factory=list)

    @field_validator('data', mode='before')
    @classmethod
    def _none_to_list(cls, v: Any) -> Any:
        return [] if v is None else v


class Treatment(_CamelModel):
    """치료/투약 1건"""
    category: Optional[str] = Field(default=None, description="치료 분류 (ステロイド, 免疫グロブリン 등)")
    medication_name: Optional[str] = Field(default=None, alias='medicationName')
    dosage: Optional[Union[float, str]] = Field(default=None)
    dosage_unit: Optional[str] = Field(default=None, alias='dosageUnit')
    start_date: Optional[str] = Field(default=None, alias='startDate')
    end_date: Optional[str] = Field(default=None, alias='endDate')
    note: Optional[str] = Field(default=None)


class ClinicalEvent(_CamelModel):
    """임상 이벤트 1건 (입원, 증상 등)"""
    event_type: Optional[str] = Field(default=None, alias='eventType')
    start_date: Optional[str] = Field(default=None, alias='startDate')
    end_date: Optional[str] = Field(default=None, alias='endDate')
    note: Optional[str] = Field(default=None)


class SummaryExtraction(_CamelModel):
    """차트 요약 구조화 결과 (LLM 응답 스키마)"""
    patient_info: PatientInfo = Field(default_factory=PatientInfo, alias='patientInfo')
    lab_results: List[LabResultGroup] = Field(default_factory=list, alias='labResults')
    treatments: List[Treatment] = Field(default_factory=list)
    clinical_events: List[ClinicalEvent] = Field(default_factory=list, alias='clinicalEvents')

    @field_validator('patient_info', mode='before')
    @classmethod
    def _none_to_patient_info(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator('lab_results', 'treatments', 'clinical_events', mode='before')
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


__all__ = [
    'PatientInfo',
    'LabDataEntry',
    'LabResultGroup',
    'Treatment',
    'ClinicalEvent',
    'SummaryExtraction',
]

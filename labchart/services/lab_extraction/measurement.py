"""검사값 추출 결과 모델"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Measurement:
    """추출된 검사값 1건 (생성 후 변경 불가)"""

    item: str
    value: float
    unit: str = ""

    def to_dict(self) -> dict:
        """딕셔너리로 변환"""
        return {
            "item": self.item,
            "value": self.value,
            "unit": self.unit,
        }

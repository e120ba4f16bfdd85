"""테스트 픽스처 및 헬퍼 함수

이 모듈은 테스트에서 공통으로 사용하는 샘플 텍스트와 헬퍼 함수를 제공합니다.
"""

from labchart.services.lab_extraction.measurement import Measurement

# 검사결과지 OCR 출력 형태 (라벨과 값이 다른 줄로 분리된 경우 포함)
SAMPLE_LAB_OCR_TEXT = """患者名: 山田太郎
〒160-0022 東京都新宿区
項目名 結果 単位
1 WBC
8500 H
2 AST (GOT) 64
3 CRP 2.5 mg/dL
4 BE -3.2"""

# 차트 요약 텍스트 (개인정보 포함)
SAMPLE_SUMMARY_TEXT = """患者氏名: 鈴木花子 様
2025年1月14日 全身性痙攣で救急搬送、同日入院。
2025年1月15日 WBC 8500/μL, CRP 2.5 mg/dL。
メチルプレドニゾロン 1000mg パルス療法を3日間施行。
連絡先 03-1234-5678"""


def measurements_by_item(measurements: list[Measurement]) -> dict[str, Measurement]:
    """추출 결과를 항목명 → Measurement 딕셔너리로 변환합니다.

    Args:
        measurements: 추출된 Measurement 리스트

    Returns:
        dict[str, Measurement]: 항목명 키 딕셔너리

    Example:
        >>> by_item = measurements_by_item(extract_lab_measurements("CRP 2.5"))
        >>> by_item["CRP"].value
        2.5
    """
    return {m.item: m for m in measurements}

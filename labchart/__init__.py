"""labchart - 일본어 임상 검사결과지/차트 요약 데이터 추출"""

__version__ = "0.1.0"

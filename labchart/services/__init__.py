"""서비스 패키지 (OCR, LLM, 비식별화, 검사값 추출, 요약 구조화)"""

"""테스트 픽스처 및 설정"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from PIL import Image

from labchart.services.lab_extraction import LabReportService
from labchart.services.llm.dummy_llm import DummyLLM
from labchart.services.ocr.dummy_ocr import DummyOCR
from labchart.services.summary import SummaryService

# 프로젝트 루트의 .env 파일 로드
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


@pytest.fixture
def dummy_ocr_service():
    """더미 OCR 서비스 픽스처"""
    return DummyOCR()


@pytest.fixture
def dummy_llm_service():
    """더미 LLM 서비스 픽스처"""
    return DummyLLM()


@pytest.fixture
def lab_report_service(dummy_ocr_service):
    """검사결과지 처리 서비스 픽스처"""
    return LabReportService(dummy_ocr_service)


@pytest.fixture
def summary_service(dummy_llm_service, dummy_ocr_service):
    """요약 구조화 서비스 픽스처"""
    return SummaryService(dummy_llm_service, ocr_service=dummy_ocr_service)


@pytest.fixture
def sample_image():
    """샘플 이미지 픽스처"""
    return Image.new("RGB", (100, 100), color="white")

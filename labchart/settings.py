"""애플리케이션 설정 관리"""

from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env 파일 로드
load_dotenv()

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent.parent


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OCR 설정
    ocr_provider: Literal["google", "dummy"] = Field(
        default="google", description="OCR 제공자 (google | dummy)"
    )
    google_application_credentials: str | None = Field(
        default=None, description="Google Cloud 서비스 계정 JSON 경로"
    )

    # LLM 설정
    llm_provider: Literal["anthropic", "openai", "dummy"] = Field(
        default="anthropic", description="LLM 제공자 (anthropic | openai | dummy)"
    )
    anthropic_api_key: str | None = Field(default=None, description="Anthropic API 키")
    openai_api_key: str | None = Field(default=None, description="OpenAI API 키")

    # 모델 설정
    anthropic_model: str = Field(
        default="claude-sonnet-4-20250514", description="Anthropic 모델명"
    )
    openai_model: str = Field(default="gpt-4o", description="OpenAI 모델명")
    llm_max_tokens: int = Field(default=4096, description="요약 구조화 응답 최대 토큰 수")

    # 요약 구조화 설정
    summary_max_chars: int = Field(
        default=50000, description="차트 요약 텍스트 최대 길이 (문자 수)"
    )

    # 앱 설정
    app_debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")


# 전역 설정 인스턴스
settings = Settings()


def validate_settings() -> dict[str, str]:
    """설정 유효성 검사 및 경고 메시지 반환"""
    warnings = {}

    # OCR 설정 검증
    if settings.ocr_provider == "google":
        if not settings.google_application_credentials:
            warnings["ocr"] = (
                "Google Cloud Vision API 사용을 위해서는 "
                "GOOGLE_APPLICATION_CREDENTIALS 환경변수가 필요합니다."
            )
        elif not Path(settings.google_application_credentials).exists():
            warnings["ocr"] = (
                f"서비스 계정 파일을 찾을 수 없습니다: "
                f"{settings.google_application_credentials}"
            )

    # LLM 설정 검증
    if settings.llm_provider == "anthropic":
        if not settings.anthropic_api_key:
            warnings["llm"] = (
                "Anthropic API 사용을 위해서는 ANTHROPIC_API_KEY가 필요합니다."
            )
    elif settings.llm_provider == "openai":
        if not settings.openai_api_key:
            warnings["llm"] = "OpenAI API 사용을 위해서는 OPENAI_API_KEY가 필요합니다."

    # 요약 설정 검증
    if settings.summary_max_chars <= 0:
        warnings["summary"] = "SUMMARY_MAX_CHARS는 양수여야 합니다."

    return warnings

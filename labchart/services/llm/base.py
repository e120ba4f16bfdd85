"""LLM 서비스 기본 인터페이스

차트 요약 구조화(SummaryService)가 사용하는 최소 계약입니다.
요약 흐름은 비식별화된 텍스트를 프롬프트 뒤에 붙인 user 메시지 1건을 보내고,
응답 본문에서 ```json 블록을 꺼내 스키마 검증합니다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Message:
    """LLM 에 보낼 메시지 1건 (비식별화된 텍스트만 담음)"""

    role: str  # "system" | "user" | "assistant"
    content: str


@dataclass
class LLMResponse:
    """LLM 응답 (content 는 JSON 블록을 포함할 것으로 기대하는 자유 텍스트)"""

    content: str
    model: str | None = None
    usage: dict | None = None
    metadata: dict | None = None


class BaseLLMService(ABC):
    """요약 구조화용 LLM 제공자 추상 클래스

    구현체는 설정 누락(API 키 등) 시 LLMConfigurationError, 그 밖의 호출 실패 시
    LLMServiceError 를 던집니다. 응답 파싱은 호출 측(SummaryService) 책임입니다.
    """

    @abstractmethod
    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지 목록으로 응답 1건을 생성합니다.

        Args:
            messages: 비식별화된 메시지 리스트
            **kwargs: max_tokens, temperature 등 제공자별 파라미터

        Returns:
            LLMResponse
        """

    def chat(self, user_message: str, system_message: str | None = None, **kwargs) -> str:
        """단일 user 메시지로 generate() 를 호출하고 본문만 반환"""
        messages = []
        if system_message:
            messages.append(Message(role="system", content=system_message))
        messages.append(Message(role="user", content=user_message))
        return self.generate(messages, **kwargs).content

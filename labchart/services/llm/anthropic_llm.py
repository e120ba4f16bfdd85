"""Anthropic API LLM 구현"""

import logging

import anthropic
from anthropic import Anthropic

from labchart.exceptions import LLMConfigurationError, LLMServiceError
from labchart.settings import settings

from .base import BaseLLMService, LLMResponse, Message

logger = logging.getLogger(__name__)


class AnthropicLLM(BaseLLMService):
    """Anthropic API를 사용한 LLM 서비스"""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        """Anthropic 클라이언트 초기화

        Args:
            api_key: Anthropic API 키 (None이면 설정값 사용)
            model: 모델명 (None이면 설정값 사용)

        Raises:
            LLMConfigurationError: API 키가 없을 때
        """
        self.api_key = api_key or settings.anthropic_api_key
        if not self.api_key:
            raise LLMConfigurationError("ANTHROPIC_API_KEY 환경변수가 설정되지 않았습니다")
        self.model = model or settings.anthropic_model
        self.client = Anthropic(api_key=self.api_key)

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """메시지를 기반으로 응답 생성

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (temperature, max_tokens 등)

        Returns:
            LLMResponse 객체
        """
        # system 메시지 분리
        system_message = None
        conversation_messages = []
        for msg in messages:
            if msg.role == "system":
                system_message = msg.content
            else:
                conversation_messages.append({"role": msg.role, "content": msg.content})

        request = {
            "model": self.model,
            "max_tokens": kwargs.pop("max_tokens", settings.llm_max_tokens),
            "messages": conversation_messages,
        }
        if system_message:
            request["system"] = system_message

        # API 호출
        try:
            response = self.client.messages.create(**request, **kwargs)
        except anthropic.AuthenticationError as e:
            raise LLMConfigurationError(f"Anthropic API 인증 실패: {e}") from e
        except anthropic.APIError as e:
            logger.error(f"Anthropic API 호출 실패: {e}")
            raise LLMServiceError(f"Anthropic API 오류: {e}") from e

        # 응답 변환 (텍스트 블록만 이어붙임)
        content = "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
        return LLMResponse(
            content=content,
            model=response.model,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
            metadata={"provider": "anthropic", "stop_reason": response.stop_reason},
        )

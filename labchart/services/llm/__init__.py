"""LLM 서비스 패키지

차트 요약 구조화에 사용하는 LLM 제공자(Anthropic/OpenAI/더미)를 통일된 인터페이스로 제공합니다.
"""

from .base import BaseLLMService, LLMResponse, Message
from .dummy_llm import DummyLLM
from .factory import get_llm_service

__all__ = [
    "BaseLLMService",
    "LLMResponse",
    "Message",
    "DummyLLM",
    "get_llm_service",
]

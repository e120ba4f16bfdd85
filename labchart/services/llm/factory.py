"""LLM 서비스 팩토리"""

from labchart.settings import settings

from .base import BaseLLMService


def get_llm_service() -> BaseLLMService:
    """설정에 따라 적절한 LLM 서비스 반환

    Returns:
        BaseLLMService 인스턴스

    Raises:
        LLMConfigurationError: 선택된 제공자의 API 키가 없을 때
    """
    if settings.llm_provider == "openai":
        from .openai_llm import OpenAILLM

        return OpenAILLM()
    elif settings.llm_provider == "anthropic":
        from .anthropic_llm import AnthropicLLM

        return AnthropicLLM()
    elif settings.llm_provider == "dummy":
        from .dummy_llm import DummyLLM

        return DummyLLM()
    else:
        raise ValueError(f"지원하지 않는 LLM 제공자: {settings.llm_provider}")

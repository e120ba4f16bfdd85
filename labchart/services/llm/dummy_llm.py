"""더미 LLM 구현 (테스트용)"""

from .base import BaseLLMService, LLMResponse, Message

DUMMY_SUMMARY_RESPONSE = """
以下が抽出結果です。

```json
{
  "patientInfo": {
    "diagnosis": "自己免疫性脳炎",
    "onsetDate": "2025-01-14"
  },
  "labResults": [
    {
      "date": "2025-01-15",
      "data": [
        {"item": "WBC", "value": 8500, "unit": "/μL"},
        {"item": "CRP", "value": 2.5, "unit": "mg/dL"}
      ]
    }
  ],
  "treatments": [
    {
      "category": "ステロイド",
      "medicationName": "メチルプレドニゾロン",
      "dosage": 1000,
      "dosageUnit": "mg",
      "startDate": "2025-01-15",
      "endDate": "2025-01-17",
      "note": "パルス療法"
    }
  ],
  "clinicalEvents": [
    {
      "eventType": "痙攣",
      "startDate": "2025-01-14",
      "endDate": null,
      "note": "全身性強直間代発作"
    }
  ]
}
```
""".strip()


class DummyLLM(BaseLLMService):
    """테스트용 더미 LLM 서비스

    user 메시지 내용과 관계없이 고정된 요약 JSON(코드 블록)을 반환합니다.
    마지막 요청 메시지는 last_messages 에 보관합니다.
    """

    def __init__(self, response_text: str = DUMMY_SUMMARY_RESPONSE):
        self.response_text = response_text
        self.last_messages: list[Message] = []

    def generate(self, messages: list[Message], **kwargs) -> LLMResponse:
        """더미 응답 생성

        Args:
            messages: 대화 메시지 리스트
            **kwargs: 추가 파라미터 (무시됨)

        Returns:
            LLMResponse 객체
        """
        self.last_messages = list(messages)
        prompt_chars = sum(len(m.content) for m in messages)
        return LLMResponse(
            content=self.response_text,
            model="dummy-model",
            usage={"prompt_chars": prompt_chars, "completion_chars": len(self.response_text)},
            metadata={"provider": "dummy"},
        )

"""
차트 요약 구조화용 프롬프트.

비식별화된 카르테 서머리 텍스트를 임상 경과표용 JSON(patientInfo/labResults/
treatments/clinicalEvents)으로 변환할 때 사용하는 LLM 프롬프트.
프롬프트 뒤에 비식별화된 텍스트를 그대로 이어붙여 user 메시지 1건으로 보냅니다.
"""

SUMMARY_EXTRACTION_PROMPT = """あなたは医療データ抽出の専門家です。以下のカルテサマリーのテキストから、臨床経過表を作成するためのデータを抽出してください。

## 抽出するデータ

1. **検査データ** (labResults)
   - 日付、検査項目名、数値、単位

2. **治療薬** (treatments)
   - 薬剤名、カテゴリ（抗てんかん薬、ステロイド、免疫グロブリン、血漿交換、免疫抑制剤、抗菌薬、その他）
   - 用量、単位、開始日、終了日（分かる場合）

3. **臨床イベント** (clinicalEvents)
   - 日付、イベント種類（発熱、痙攣、意識障害、画像所見、入院、退院、手術など）
   - 詳細・メモ

## 出力形式

以下のJSON形式で出力してください。日付は"YYYY-MM-DD"形式、不明な場合はnullとしてください。

```json
{
  "patientInfo": {
    "diagnosis": "診断名",
    "onsetDate": "発症日（推定）"
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
      "note": "全身性強直間代発作、約2分間"
    }
  ]
}
```

## 注意事項
- 検査項目名は一般的な略称（WBC, CRP, AST, ALTなど）に正規化してください
- 日付が「第○病日」などの相対表記の場合、可能なら絶対日付に変換してください
- 不確かな情報は抽出しないでください
- 個人を特定できる情報（氏名、ID、住所など）は除外してください

## カルテサマリーテキスト

"""


def format_summary_user_prompt(redacted_text: str) -> str:
    """요약 구조화용 user 프롬프트를 생성합니다.

    Parameters
    ----------
    redacted_text : str
        PII 제거가 끝난 서머리 텍스트

    Returns
    -------
    str
        프롬프트 + 텍스트
    """
    return SUMMARY_EXTRACTION_PROMPT + redacted_text

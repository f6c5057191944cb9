"""Offline analysis client adapter.

Serves a fixed, valid analysis payload without network calls. Handy for
local dry runs of the pipeline and as a template for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from edusurvey.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns the same one-question survey for every page."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "title": "",
        "items": [
            {
                "question": "교육 내용에 전반적으로 만족하십니까?",
                "category": "교육기획평가",
                "score": 4,
                "label": "만족",
            }
        ],
    }

    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_url: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, image_url, json_schema
        return json.dumps(self.DEFAULT_RESPONSE, ensure_ascii=False)

"""Vision-model analyzer for scanned survey pages."""

import json
from pathlib import Path

from edusurvey.analysis.base import BaseAnalyzer
from edusurvey.analysis.client_base import BaseAnalysisClient
from edusurvey.analysis.exceptions import AnalysisError
from edusurvey.analysis.models import PageAnalysis
from edusurvey.analysis.prompt_loader import load_json_schema, load_prompt_template
from edusurvey.analysis.validator import validate_and_build
from edusurvey.logging.logger import Log
from edusurvey.raster.models import PageImage


class SurveyAnalyzer(BaseAnalyzer):
    """Extracts the survey title and marked answers from a page via an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def analyze(self, image: PageImage) -> PageAnalysis:
        prompt = self._prompt_template.format(json_schema=self._json_schema)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = await self._client.create_vision_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            image_url=image.to_data_url(),
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Page analysis complete: {len(result.items)} items extracted")
        return result

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        if not cleaned:
            return {"title": "", "items": []}

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed

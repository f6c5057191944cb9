import json
from pathlib import Path

import pytest

from edusurvey.analysis.exceptions import AnalysisError
from edusurvey.analysis.prompt_loader import load_json_schema, load_prompt_template
from edusurvey.survey.models import CATEGORIES, LABELS


class TestLoadPromptTemplate:
    def test_loads_default_template_with_placeholder(self) -> None:
        template = load_prompt_template()
        assert "{json_schema}" in template

    def test_default_template_formats_cleanly(self) -> None:
        rendered = load_prompt_template().format(json_schema="SCHEMA")
        assert "SCHEMA" in rendered

    def test_loads_custom_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.txt"
        path.write_text("hello", encoding="utf-8")
        assert load_prompt_template(path) == "hello"

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(AnalysisError, match="Failed to load prompt template"):
            load_prompt_template(tmp_path / "nope.txt")


class TestLoadJsonSchema:
    def test_default_schema_is_valid_json(self) -> None:
        schema = json.loads(load_json_schema())
        assert schema["type"] == "object"
        assert set(schema["required"]) == {"title", "items"}

    def test_default_schema_enumerates_labels_and_categories(self) -> None:
        item = json.loads(load_json_schema())["properties"]["items"]["items"]
        assert set(item["properties"]["label"]["enum"]) == set(LABELS)
        assert set(item["properties"]["category"]["enum"]) == set(CATEGORIES)

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(AnalysisError, match="Failed to load JSON schema"):
            load_json_schema(tmp_path / "nope.json")

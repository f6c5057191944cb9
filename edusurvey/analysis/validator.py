"""Validates parsed analyzer JSON and builds PageAnalysis.

The page envelope (``title`` and the ``items`` list) must be well formed or
the whole page fails. Individual rows are judged on their own: a row without
question text or without a whole 1..5 score is dropped with a warning and the
rest of the page is kept. Label and category values outside the known sets
are kept as-is; the aggregation step decides how to treat them.
"""

from typing import Any

from edusurvey.analysis.exceptions import AnalysisValidationError
from edusurvey.analysis.models import PageAnalysis
from edusurvey.logging.logger import Log
from edusurvey.survey.models import DEFAULT_CATEGORY, SurveyItem

_MAX_ITEMS = 100
_MIN_SCORE = 1
_MAX_SCORE = 5


class _SkippedItem(Exception):
    """Raised internally for a row that cannot be used."""


def validate_and_build(data: dict[str, Any]) -> PageAnalysis:
    """Validate raw parsed JSON and build a PageAnalysis.

    Raises:
        AnalysisValidationError: if the page envelope is malformed.
    """
    if "items" not in data:
        raise AnalysisValidationError("Missing required top-level field: items")
    title = _build_title(data.get("title"))
    items = _build_items(data["items"])
    return PageAnalysis(title=title, items=items)


def _build_title(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise AnalysisValidationError("'title' must be a string or null")
    return raw.strip() or None


def _build_items(raw: Any) -> list[SurveyItem]:
    if not isinstance(raw, list):
        raise AnalysisValidationError("'items' must be a list")
    if len(raw) > _MAX_ITEMS:
        raise AnalysisValidationError(f"Too many items: {len(raw)} (max {_MAX_ITEMS})")

    items: list[SurveyItem] = []
    for index, entry in enumerate(raw):
        try:
            items.append(_build_item(entry))
        except _SkippedItem as exc:
            Log.warning(f"Skipping item at index {index}: {exc}")
    return items


def _build_item(raw: Any) -> SurveyItem:
    if not isinstance(raw, dict):
        raise _SkippedItem("item must be an object")
    question = raw.get("question")
    if not isinstance(question, str) or not question.strip():
        raise _SkippedItem("'question' must be a non-empty string")
    label = raw.get("label")
    if not isinstance(label, str):
        raise _SkippedItem("'label' must be a string")
    category = raw.get("category")
    if not isinstance(category, str):
        category = ""
    return SurveyItem(
        question=question,
        score=_build_score(raw.get("score")),
        label=label.strip(),
        category=category.strip() or DEFAULT_CATEGORY,
    )


def _build_score(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise _SkippedItem("'score' must be a number")
    if isinstance(raw, float) and not raw.is_integer():
        raise _SkippedItem(f"'score' must be a whole number, got {raw}")
    score = int(raw)
    if not _MIN_SCORE <= score <= _MAX_SCORE:
        raise _SkippedItem(
            f"'score' must be between {_MIN_SCORE} and {_MAX_SCORE}, got {score}"
        )
    return score

from dataclasses import dataclass, field

from edusurvey.survey.models import SurveyItem


@dataclass(frozen=True)
class PageAnalysis:
    """Output of analyzing one page image."""

    title: str | None = None
    items: list[SurveyItem] = field(default_factory=list)

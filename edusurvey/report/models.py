from dataclasses import dataclass, field

from edusurvey.aggregation.rollup import SurveySummary


@dataclass(frozen=True)
class DetailRow:
    """Per-question line of the detail table."""

    question: str
    count: int
    average_score: float
    distribution: dict[str, int]


@dataclass(frozen=True)
class CategorySection:
    """Detail rows sharing one category, in report order."""

    category: str
    rows: list[DetailRow] = field(default_factory=list)


@dataclass(frozen=True)
class SurveyReport:
    """Format-agnostic view of a tally, ready for export."""

    title: str
    summary: SurveySummary
    category_scores: dict[str, float] = field(default_factory=dict)
    sections: list[CategorySection] = field(default_factory=list)

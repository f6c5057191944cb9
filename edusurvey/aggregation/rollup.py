"""Scalar summaries derived from aggregated statistics and page states."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from edusurvey.survey.models import (
    SPECIFIC_CATEGORIES,
    AggregatedStat,
    Document,
    PageStatus,
)


@dataclass(frozen=True)
class SurveySummary:
    """Headline numbers for a tally run."""

    title: str
    overall_satisfaction: float
    category_satisfaction: dict[str, float] = field(default_factory=dict)
    completed_pages: int = 0
    error_pages: int = 0
    completed_respondents: int = 0
    error_respondents: int = 0
    target_audience_count: int = 0
    participation_rate: float | None = None
    file_count: int = 0


def _weighted_average(stats: Iterable[AggregatedStat]) -> float:
    total_score = 0
    total_count = 0
    for stat in stats:
        total_score += stat.total_score
        total_count += stat.count
    return total_score / total_count if total_count > 0 else 0.0


def overall_satisfaction(stats: Iterable[AggregatedStat]) -> float:
    """Mean score over every counted item; 0 when nothing was counted."""
    return _weighted_average(stats)


def category_satisfaction(stats: Iterable[AggregatedStat], category: str) -> float:
    return _weighted_average(s for s in stats if s.category == category)


def category_breakdown(stats: Sequence[AggregatedStat]) -> dict[str, float]:
    """Satisfaction for each specific category, in priority order."""
    return {c: category_satisfaction(stats, c) for c in SPECIFIC_CATEGORIES}


def count_pages(documents: Iterable[Document], status: PageStatus) -> int:
    return sum(
        1 for document in documents for response in document.responses
        if response.status == status
    )


def respondents_from_pages(page_count: int, pages_per_person: int) -> int:
    """Whole respondents covered by page_count pages."""
    return page_count // max(1, pages_per_person)


def participation_rate(completed_respondents: int, target_audience_count: int) -> float | None:
    """Percentage of the target audience that responded, or None without a target."""
    if target_audience_count <= 0:
        return None
    return completed_respondents / target_audience_count * 100


def resolve_title(documents: Iterable[Document]) -> str:
    """First non-empty extracted title, scanning documents then pages."""
    for document in documents:
        for response in document.responses:
            if response.title and response.title.strip():
                return response.title.strip()
    return ""


def summarize(
    documents: Sequence[Document],
    stats: Sequence[AggregatedStat],
    pages_per_person: int = 1,
    target_audience_count: int = 0,
) -> SurveySummary:
    completed_pages = count_pages(documents, PageStatus.COMPLETED)
    error_pages = count_pages(documents, PageStatus.ERROR)
    completed_respondents = respondents_from_pages(completed_pages, pages_per_person)
    return SurveySummary(
        title=resolve_title(documents),
        overall_satisfaction=overall_satisfaction(stats),
        category_satisfaction=category_breakdown(stats),
        completed_pages=completed_pages,
        error_pages=error_pages,
        completed_respondents=completed_respondents,
        error_respondents=respondents_from_pages(error_pages, pages_per_person),
        target_audience_count=max(0, target_audience_count),
        participation_rate=participation_rate(completed_respondents, target_audience_count),
        file_count=len(documents),
    )

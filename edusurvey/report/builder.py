from collections.abc import Sequence
from itertools import groupby

from edusurvey.aggregation.rollup import summarize
from edusurvey.report.models import CategorySection, DetailRow, SurveyReport
from edusurvey.survey.models import AggregatedStat, Document

UNKNOWN_TITLE = "교육명 미상"


def build_report(
    documents: Sequence[Document],
    stats: Sequence[AggregatedStat],
    pages_per_person: int = 1,
    target_audience_count: int = 0,
) -> SurveyReport:
    """Assemble summary, category table and grouped detail rows.

    ``stats`` must already be in report order; consecutive rows with the same
    category form one section.
    """
    summary = summarize(documents, stats, pages_per_person, target_audience_count)
    sections = [
        CategorySection(
            category=category,
            rows=[
                DetailRow(
                    question=stat.question,
                    count=stat.count,
                    average_score=stat.average_score,
                    distribution=dict(stat.distribution),
                )
                for stat in group
            ],
        )
        for category, group in groupby(stats, key=lambda s: s.category)
    ]
    return SurveyReport(
        title=summary.title or UNKNOWN_TITLE,
        summary=summary,
        category_scores=dict(summary.category_satisfaction),
        sections=sections,
    )

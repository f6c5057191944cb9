"""Fuzzy canonicalization of question phrasings and per-question statistics.

Scanned surveys produce slightly different question strings for the same row
(OCR noise, annotations in parentheses, spacing). Each distinct phrasing is
resolved once to a canonical key: the most similar existing key scoring at
least the threshold, or itself when none qualifies. The canonical key text is
the first phrasing seen for that bucket.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

import icu  # type: ignore[import-untyped]

from edusurvey.aggregation.similarity import similarity, strip_parentheticals
from edusurvey.survey.models import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    LABELS,
    AggregatedStat,
    Document,
    PageStatus,
    SurveyItem,
)

DEFAULT_THRESHOLD = 0.8
DEFAULT_LOCALE = "ko_KR"


@dataclass
class _Bucket:
    category: str
    total_score: int = 0
    count: int = 0
    distribution: dict[str, int] = field(default_factory=lambda: dict.fromkeys(LABELS, 0))

    def add(self, item: SurveyItem) -> None:
        self.total_score += item.score
        self.count += 1
        if item.label in self.distribution:
            self.distribution[item.label] += 1
        # First specific category wins over the default.
        if self.category == DEFAULT_CATEGORY and item.category not in ("", DEFAULT_CATEGORY):
            self.category = item.category


class Aggregator:
    """Derives sorted AggregatedStat rows from the full document collection.

    Stateless between calls: every ``aggregate`` starts from an empty memo and
    bucket set, so it is safe to call on a collection that is mid-run.
    """

    def __init__(
        self,
        threshold: float = DEFAULT_THRESHOLD,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._threshold = threshold
        self._collator = icu.Collator.createInstance(icu.Locale(locale))

    def aggregate(self, documents: Iterable[Document]) -> list[AggregatedStat]:
        buckets: dict[str, _Bucket] = {}
        memo: dict[str, str] = {}

        for item in _completed_items(documents):
            raw_key = strip_parentheticals(item.question).strip()
            if not raw_key:
                continue
            key = memo.get(raw_key)
            if key is None:
                key = self._resolve(raw_key, buckets)
                memo[raw_key] = key
            bucket = buckets.get(key)
            if bucket is None:
                bucket = _Bucket(category=item.category or DEFAULT_CATEGORY)
                buckets[key] = bucket
            bucket.add(item)

        stats = [
            AggregatedStat(
                question=key,
                category=bucket.category,
                average_score=bucket.total_score / bucket.count if bucket.count else 0.0,
                count=bucket.count,
                total_score=bucket.total_score,
                distribution=dict(bucket.distribution),
            )
            for key, bucket in buckets.items()
        ]
        return self.sort(stats)

    def sort(self, stats: list[AggregatedStat]) -> list[AggregatedStat]:
        """Order by category priority, then by question in collation order."""
        return sorted(
            stats,
            key=lambda s: (_category_rank(s.category), self._collator.getSortKey(s.question)),
        )

    def _resolve(self, raw_key: str, buckets: dict[str, _Bucket]) -> str:
        best_key: str | None = None
        best_score = 0.0
        for existing_key in buckets:
            score = similarity(raw_key, existing_key)
            # Strict comparison keeps the first key on ties.
            if score >= self._threshold and score > best_score:
                best_key = existing_key
                best_score = score
        return best_key if best_key is not None else raw_key


def aggregate(
    documents: Iterable[Document],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[AggregatedStat]:
    """Aggregate with a default-locale Aggregator."""
    return Aggregator(threshold=threshold).aggregate(documents)


def _completed_items(documents: Iterable[Document]) -> Iterable[SurveyItem]:
    for document in documents:
        for response in document.responses:
            if response.status == PageStatus.COMPLETED:
                yield from response.items


def _category_rank(category: str) -> int:
    try:
        return CATEGORIES.index(category)
    except ValueError:
        return len(CATEGORIES)

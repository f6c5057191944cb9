from dataclasses import dataclass, field
from enum import Enum

LABEL_VERY_SATISFIED = "매우만족"
LABEL_SATISFIED = "만족"
LABEL_NEUTRAL = "보통"
LABEL_DISSATISFIED = "불만"
LABEL_VERY_DISSATISFIED = "매우불만"

# Ordinal order, best to worst.
LABELS: tuple[str, ...] = (
    LABEL_VERY_SATISFIED,
    LABEL_SATISFIED,
    LABEL_NEUTRAL,
    LABEL_DISSATISFIED,
    LABEL_VERY_DISSATISFIED,
)

CATEGORY_PLANNING = "교육기획평가"
CATEGORY_ENVIRONMENT = "교육환경평가"
CATEGORY_INSTRUCTOR = "강사평가"
CATEGORY_OUTCOME = "프로그램 성과평가"
CATEGORY_OTHER = "기타"

# Report priority order; anything outside this tuple sorts after CATEGORY_OTHER.
CATEGORIES: tuple[str, ...] = (
    CATEGORY_PLANNING,
    CATEGORY_ENVIRONMENT,
    CATEGORY_INSTRUCTOR,
    CATEGORY_OUTCOME,
    CATEGORY_OTHER,
)

SPECIFIC_CATEGORIES: tuple[str, ...] = CATEGORIES[:-1]

DEFAULT_CATEGORY = CATEGORY_OTHER


class PageStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class ProcessingStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"


@dataclass(frozen=True)
class SurveyItem:
    """One question row with the satisfaction mark found on a page."""

    question: str
    score: int
    label: str
    category: str = DEFAULT_CATEGORY


@dataclass
class PageResponse:
    """Analysis state of a single rasterized page."""

    page_index: int
    status: PageStatus = PageStatus.PENDING
    items: list[SurveyItem] = field(default_factory=list)
    title: str | None = None
    error: str | None = None


@dataclass
class Document:
    """A submitted survey file and the per-page results gathered so far.

    ``total_pages == 0`` means the file has not been rasterized yet.
    """

    id: str
    file_name: str
    total_pages: int = 0
    responses: list[PageResponse] = field(default_factory=list)

    @property
    def is_settled(self) -> bool:
        """True once rasterized and every page reached completed or error."""
        return self.total_pages > 0 and all(
            r.status in (PageStatus.COMPLETED, PageStatus.ERROR) for r in self.responses
        )


@dataclass(frozen=True)
class SourceFile:
    """Raw bytes of a submitted document, kept for (re-)rasterization."""

    raw_bytes: bytes
    mime_type: str


@dataclass(frozen=True)
class AggregatedStat:
    """Statistics for one canonical question."""

    question: str
    category: str
    average_score: float
    count: int
    total_score: int
    distribution: dict[str, int]

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from edusurvey.report.models import SurveyReport

_UNSAFE_FILENAME_RE = re.compile(r"[^a-zA-Z0-9가-힣\s\-_]")
_FALLBACK_FILENAME = "교육만족도"


def safe_filename(title: str) -> str:
    return _UNSAFE_FILENAME_RE.sub("", title).strip() or _FALLBACK_FILENAME


def participation_text(report: SurveyReport) -> str:
    """e.g. ``"85.0% (17명 / 20명)"``; rate 0 and ``-`` without a target."""
    summary = report.summary
    rate = summary.participation_rate
    rate_text = f"{rate:.1f}" if rate is not None else "0"
    target_text = str(summary.target_audience_count) if summary.target_audience_count else "-"
    return f"{rate_text}% ({summary.completed_respondents}명 / {target_text}명)"


class BaseReportExporter(ABC):
    """Contract for report serializers."""

    file_suffix: ClassVar[str]

    @abstractmethod
    def save(self, report: SurveyReport, path: Path) -> None:
        """Write the report to exactly ``path``."""

    def default_filename(self, report: SurveyReport) -> str:
        return f"{safe_filename(report.title)}{self.file_suffix}"

    def write(self, report: SurveyReport, path: Path) -> Path:
        """Write the report; a directory path gets the default file name."""
        if path.is_dir():
            path = path / self.default_filename(report)
        self.save(report, path)
        return path


class TextReportExporter(BaseReportExporter):
    """Exporter whose output is a single text document."""

    encoding: ClassVar[str] = "utf-8"

    @abstractmethod
    def render(self, report: SurveyReport) -> str:
        """Serialize the report to text."""

    def save(self, report: SurveyReport, path: Path) -> None:
        path.write_text(self.render(report), encoding=self.encoding)

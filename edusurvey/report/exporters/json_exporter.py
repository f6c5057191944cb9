import json
from dataclasses import asdict

from edusurvey.report.exporters.base import TextReportExporter
from edusurvey.report.models import SurveyReport


class JsonReportExporter(TextReportExporter):
    """Machine-readable dump of the full report structure."""

    file_suffix = "_결과.json"

    def render(self, report: SurveyReport) -> str:
        return json.dumps(asdict(report), ensure_ascii=False, indent=2)

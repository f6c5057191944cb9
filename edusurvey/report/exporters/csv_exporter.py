import csv
import io

from edusurvey.report.exporters.base import TextReportExporter, participation_text
from edusurvey.report.models import SurveyReport
from edusurvey.survey.models import LABELS


class CsvReportExporter(TextReportExporter):
    """Spreadsheet-friendly CSV with a UTF-8 BOM so Excel detects the encoding."""

    file_suffix = "_결과.csv"
    encoding = "utf-8-sig"

    def render(self, report: SurveyReport) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        summary = report.summary

        writer.writerow(["교육만족도 조사 결과 보고서"])
        writer.writerow([])

        writer.writerow(["1. 종합 요약"])
        writer.writerow(["교육명", report.title])
        writer.writerow(["전체 만족도", f"{summary.overall_satisfaction:.2f}"])
        writer.writerow(["참여율", participation_text(report)])
        writer.writerow(["분석 파일 수", f"{summary.file_count}개"])
        writer.writerow([])

        writer.writerow(["2. 영역별 만족도"])
        writer.writerow(["영역", "점수 (5점 만점)"])
        for category, score in report.category_scores.items():
            writer.writerow([category, f"{score:.2f}"])
        writer.writerow([])

        writer.writerow(["3. 문항별 상세 분석"])
        writer.writerow(["카테고리", "문항", "응답수", "평균", *LABELS])
        for section in report.sections:
            for row in section.rows:
                writer.writerow([
                    section.category,
                    row.question,
                    row.count,
                    f"{row.average_score:.2f}",
                    *(row.distribution.get(label, 0) for label in LABELS),
                ])
        return buf.getvalue()

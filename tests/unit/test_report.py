import csv
import io
import json
from pathlib import Path

import docx
import pytest

from edusurvey.report.builder import UNKNOWN_TITLE, build_report
from edusurvey.report.exceptions import ReportError
from edusurvey.report.exporters.base import participation_text, safe_filename
from edusurvey.report.exporters.csv_exporter import CsvReportExporter
from edusurvey.report.exporters.docx_exporter import DocxReportExporter
from edusurvey.report.exporters.json_exporter import JsonReportExporter
from edusurvey.report.factory import ReportExporterFactory
from edusurvey.report.models import SurveyReport
from edusurvey.survey.models import LABELS, AggregatedStat, Document, PageResponse, PageStatus


def _stat(question: str, category: str, scores: list[int]) -> AggregatedStat:
    return AggregatedStat(
        question=question,
        category=category,
        average_score=sum(scores) / len(scores),
        count=len(scores),
        total_score=sum(scores),
        distribution={label: 0 for label in LABELS} | {"매우만족": scores.count(5), "만족": scores.count(4)},
    )


def _documents(title: str | None = "리더십 <강화> 과정") -> list[Document]:
    return [
        Document(
            id="d",
            file_name="d.pdf",
            total_pages=2,
            responses=[
                PageResponse(page_index=0, status=PageStatus.COMPLETED, title=title),
                PageResponse(page_index=1, status=PageStatus.COMPLETED),
            ],
        )
    ]


_STATS = [
    _stat("교육 목표", "교육기획평가", [5, 4]),
    _stat("강사의 열정", "강사평가", [5]),
    _stat("강사의 전문성", "강사평가", [4, 4]),
]


@pytest.fixture
def report() -> SurveyReport:
    return build_report(_documents(), _STATS, pages_per_person=1, target_audience_count=4)


class TestBuildReport:
    def test_groups_consecutive_categories(self, report: SurveyReport) -> None:
        assert [s.category for s in report.sections] == ["교육기획평가", "강사평가"]
        assert [r.question for r in report.sections[1].rows] == ["강사의 열정", "강사의 전문성"]

    def test_carries_summary_and_category_scores(self, report: SurveyReport) -> None:
        assert report.title == "리더십 <강화> 과정"
        assert report.summary.completed_respondents == 2
        assert report.summary.participation_rate == pytest.approx(50.0)
        assert list(report.category_scores)[0] == "교육기획평가"
        assert report.category_scores["강사평가"] == pytest.approx(13 / 3)

    def test_unknown_title_placeholder(self) -> None:
        report = build_report(_documents(title=None), _STATS)
        assert report.title == UNKNOWN_TITLE


class TestHelpers:
    def test_participation_text_with_target(self, report: SurveyReport) -> None:
        assert participation_text(report) == "50.0% (2명 / 4명)"

    def test_participation_text_without_target(self) -> None:
        report = build_report(_documents(), _STATS)
        assert participation_text(report) == "0% (2명 / -명)"

    @pytest.mark.parametrize(
        ("title", "expected"),
        [("리더십 <강화> 과정", "리더십 강화 과정"), ("///", "교육만족도"), ("", "교육만족도")],
    )
    def test_safe_filename(self, title: str, expected: str) -> None:
        assert safe_filename(title) == expected


class TestCsvExporter:
    def test_renders_three_sections(self, report: SurveyReport) -> None:
        rows = list(csv.reader(io.StringIO(CsvReportExporter().render(report))))

        assert rows[0] == ["교육만족도 조사 결과 보고서"]
        assert ["교육명", "리더십 <강화> 과정"] in rows
        assert ["참여율", "50.0% (2명 / 4명)"] in rows
        assert ["강사평가", "4.33"] in rows
        header = rows.index(["카테고리", "문항", "응답수", "평균", *LABELS])
        assert rows[header + 1] == ["교육기획평가", "교육 목표", "2", "4.50", "1", "1", "0", "0", "0"]

    def test_write_to_directory_uses_title_and_bom(
        self, report: SurveyReport, tmp_path: Path
    ) -> None:
        path = CsvReportExporter().write(report, tmp_path)

        assert path.name == "리더십 강화 과정_결과.csv"
        assert path.read_bytes().startswith(b"\xef\xbb\xbf")


class TestDocxExporter:
    def test_writes_summary_list(self, report: SurveyReport, tmp_path: Path) -> None:
        path = DocxReportExporter().write(report, tmp_path)

        assert path.name == "리더십 강화 과정_결과보고서.docx"
        paragraphs = [p.text for p in docx.Document(str(path)).paragraphs]
        assert paragraphs[0] == "교육만족도 조사 결과 보고서"
        assert "교육명: 리더십 <강화> 과정" in paragraphs
        assert "참여율: 50.0% (2명 / 4명)" in paragraphs
        assert "분석 파일 수: 1개" in paragraphs

    def test_category_table(self, report: SurveyReport) -> None:
        table = DocxReportExporter().build(report).tables[0]

        rows = [[cell.text for cell in row.cells] for row in table.rows]
        assert rows[0] == ["영역", "점수 (5점 만점)"]
        assert [row[0] for row in rows[1:]] == [
            "교육기획평가",
            "교육환경평가",
            "강사평가",
            "프로그램 성과평가",
        ]
        assert rows[3] == ["강사평가", "4.33"]

    def test_detail_table_grouped_by_category(self, report: SurveyReport) -> None:
        table = DocxReportExporter().build(report).tables[1]

        rows = [[cell.text for cell in row.cells] for row in table.rows]
        assert rows[0] == ["문항", "응답수", "평균", "응답 분포"]
        assert rows[1] == ["교육기획평가"] * 4
        assert rows[2][:3] == ["교육 목표", "2명", "4.50"]
        assert rows[2][3].startswith("매우만족: 1 | 만족: 1 | 보통: 0")
        assert rows[3] == ["강사평가"] * 4
        assert [row[0] for row in rows[4:]] == ["강사의 열정", "강사의 전문성"]

    def test_write_to_explicit_file(self, report: SurveyReport, tmp_path: Path) -> None:
        target = tmp_path / "report.docx"

        assert DocxReportExporter().write(report, target) == target
        assert target.read_bytes().startswith(b"PK")


class TestJsonExporter:
    def test_dumps_full_structure(self, report: SurveyReport) -> None:
        data = json.loads(JsonReportExporter().render(report))

        assert data["title"] == "리더십 <강화> 과정"
        assert data["summary"]["file_count"] == 1
        assert data["sections"][1]["rows"][1]["question"] == "강사의 전문성"


class TestReportExporterFactory:
    @pytest.mark.parametrize(
        ("fmt", "exporter_cls"),
        [("csv", CsvReportExporter), ("DOCX", DocxReportExporter), ("json", JsonReportExporter)],
    )
    def test_creates_exporter(self, fmt: str, exporter_cls: type) -> None:
        assert isinstance(ReportExporterFactory.create(fmt), exporter_cls)

    def test_raises_for_unknown_format(self) -> None:
        with pytest.raises(ReportError, match="Unknown report format"):
            ReportExporterFactory.create("xlsx")

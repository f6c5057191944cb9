"""Editable Word report built with python-docx."""

from pathlib import Path

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt
from docx.table import Table

from edusurvey.report.exporters.base import BaseReportExporter, participation_text
from edusurvey.report.models import CategorySection, SurveyReport
from edusurvey.survey.models import LABELS

_FONT_NAME = "Malgun Gothic"
_EAST_ASIAN_FONT_NAME = "맑은 고딕"
_TABLE_STYLE = "Table Grid"
_DISTRIBUTION_FONT_SIZE = Pt(8)


class DocxReportExporter(BaseReportExporter):
    """Summary list, category score table and per-question detail table."""

    file_suffix = "_결과보고서.docx"

    def save(self, report: SurveyReport, path: Path) -> None:
        doc = self.build(report)
        doc.save(str(path))

    def build(self, report: SurveyReport) -> DocxDocument:
        doc = Document()
        self._set_default_font(doc)

        heading = doc.add_heading("교육만족도 조사 결과 보고서", 0)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

        self._add_summary(doc, report)
        self._add_categories(doc, report)
        self._add_details(doc, report)
        return doc

    @staticmethod
    def _set_default_font(doc: DocxDocument) -> None:
        style = doc.styles["Normal"]
        style.font.name = _FONT_NAME
        # Hangul runs use the East Asian slot, not the Latin font name.
        style.element.rPr.rFonts.set(qn("w:eastAsia"), _EAST_ASIAN_FONT_NAME)

    @staticmethod
    def _add_summary(doc: DocxDocument, report: SurveyReport) -> None:
        summary = report.summary
        doc.add_heading("1. 종합 요약", 1)
        for label, value in (
            ("교육명", report.title),
            ("전체 만족도", f"{summary.overall_satisfaction:.2f} / 5.0"),
            ("참여율", participation_text(report)),
            ("분석 파일 수", f"{summary.file_count}개"),
        ):
            paragraph = doc.add_paragraph(style="List Bullet")
            paragraph.add_run(f"{label}: ").bold = True
            paragraph.add_run(value)

    @staticmethod
    def _add_categories(doc: DocxDocument, report: SurveyReport) -> None:
        doc.add_heading("2. 영역별 만족도", 1)
        table = _new_table(doc, ["영역", "점수 (5점 만점)"])
        for category, score in report.category_scores.items():
            cells = table.add_row().cells
            cells[0].text = category
            cells[1].text = f"{score:.2f}"
            cells[1].paragraphs[0].alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _add_details(self, doc: DocxDocument, report: SurveyReport) -> None:
        doc.add_heading("3. 문항별 상세 분석", 1)
        table = _new_table(doc, ["문항", "응답수", "평균", "응답 분포"])
        for section in report.sections:
            self._add_section(table, section)

    @staticmethod
    def _add_section(table: Table, section: CategorySection) -> None:
        header = table.add_row().cells
        merged = header[0].merge(header[-1])
        merged.paragraphs[0].add_run(section.category).bold = True

        for row in section.rows:
            cells = table.add_row().cells
            cells[0].text = row.question
            cells[1].text = f"{row.count}명"
            cells[2].text = f"{row.average_score:.2f}"
            distribution = " | ".join(
                f"{label}: {row.distribution.get(label, 0)}" for label in LABELS
            )
            run = cells[3].paragraphs[0].add_run(distribution)
            run.font.size = _DISTRIBUTION_FONT_SIZE


def _new_table(doc: DocxDocument, headers: list[str]) -> Table:
    table = doc.add_table(rows=1, cols=len(headers))
    table.style = _TABLE_STYLE
    for cell, text in zip(table.rows[0].cells, headers):
        cell.paragraphs[0].add_run(text).bold = True
    return table

from edusurvey.report.exceptions import ReportError
from edusurvey.report.exporters.base import BaseReportExporter
from edusurvey.report.exporters.csv_exporter import CsvReportExporter
from edusurvey.report.exporters.docx_exporter import DocxReportExporter
from edusurvey.report.exporters.json_exporter import JsonReportExporter


class ReportExporterFactory:
    """Creates the exporter for a report format name."""

    EXPORTERS: dict[str, type[BaseReportExporter]] = {
        "csv": CsvReportExporter,
        "docx": DocxReportExporter,
        "json": JsonReportExporter,
    }

    @classmethod
    def create(cls, report_format: str) -> BaseReportExporter:
        fmt = report_format.lower()
        exporter_cls = cls.EXPORTERS.get(fmt)
        if exporter_cls is None:
            raise ReportError(
                f"Unknown report format '{fmt}'. Choose from: {list(cls.EXPORTERS)}"
            )
        return exporter_cls()

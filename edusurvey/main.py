import argparse
import asyncio
import signal
from collections.abc import Sequence
from pathlib import Path

from edusurvey.aggregation.aggregator import Aggregator
from edusurvey.config.settings import Settings
from edusurvey.logging.logger import Log
from edusurvey.processor.exceptions import ProcessorError
from edusurvey.processor.file_loader import FileLoader
from edusurvey.processor.processor import Processor, build_processor
from edusurvey.processor.session import ProcessingSession
from edusurvey.report.builder import build_report
from edusurvey.report.exporters.base import participation_text
from edusurvey.report.factory import ReportExporterFactory
from edusurvey.report.models import SurveyReport


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="edusurvey",
        description="Tally scanned education satisfaction surveys into a report.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="PDF/image files or directories")
    parser.add_argument(
        "--pages-per-person",
        type=int,
        default=settings.pages_per_person,
        help="pages that make up one respondent (default: %(default)s)",
    )
    parser.add_argument(
        "--target-audience",
        type=int,
        default=settings.target_audience_count,
        help="number of trainees, used for the participation rate",
    )
    parser.add_argument(
        "--format",
        choices=sorted(ReportExporterFactory.EXPORTERS),
        default=settings.report_format.lower(),
        help="report format (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path.cwd(),
        help="output file or directory (default: current directory)",
    )
    return parser.parse_args(argv)


def load_session(paths: Sequence[Path], loader: FileLoader | None = None) -> ProcessingSession:
    """Read every survey file into a fresh session; unreadable files are logged and skipped."""
    loader = loader or FileLoader()
    session = ProcessingSession()
    for path in loader.collect(paths):
        try:
            source = loader.load(path)
        except (ProcessorError, FileNotFoundError) as exc:
            Log.error(f"Skipping {path}: {exc}")
            continue
        session.add_file(path.name, source.raw_bytes, source.mime_type)
    return session


async def run_until_stopped(processor: Processor, session: ProcessingSession) -> None:
    """Run the processor; Ctrl+C requests a cooperative stop instead of aborting."""
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, _request_stop, session)
        handler_installed = True
    except (NotImplementedError, RuntimeError):
        handler_installed = False
    try:
        await processor.run(session)
    finally:
        if handler_installed:
            loop.remove_signal_handler(signal.SIGINT)


def _request_stop(session: ProcessingSession) -> None:
    Log.warning("Stop requested, finishing the current page")
    session.request_stop()


def _log_progress(session: ProcessingSession) -> None:
    if session.progress:
        Log.debug(session.progress)


def print_summary(report: SurveyReport, output_path: Path) -> None:
    summary = report.summary
    print(f"교육명: {report.title}")
    print(f"전체 만족도: {summary.overall_satisfaction:.2f} / 5.0")
    print(f"참여율: {participation_text(report)}")
    print(f"오류 응답: {summary.error_respondents}명 ({summary.error_pages} pages)")
    for category, score in report.category_scores.items():
        print(f"  {category}: {score:.2f}")
    print(f"Report written to {output_path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load files -> process pages -> aggregate -> export report."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv, settings)

    session = load_session(args.paths)
    if not session.documents:
        Log.error("No survey files to process")
        return 1

    processor = build_processor(settings, on_update=_log_progress)
    asyncio.run(run_until_stopped(processor, session))

    aggregator = Aggregator(
        threshold=settings.similarity_threshold,
        locale=settings.collation_locale,
    )
    stats = aggregator.aggregate(session.documents)
    report = build_report(
        session.documents,
        stats,
        pages_per_person=max(1, args.pages_per_person),
        target_audience_count=max(0, args.target_audience),
    )
    exporter = ReportExporterFactory.create(args.format)
    output_path = exporter.write(report, args.output)
    print_summary(report, output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from edusurvey.config.settings import Settings
from edusurvey.main import load_session, main, parse_args, run_until_stopped
from edusurvey.processor.processor import Processor
from edusurvey.processor.session import ProcessingSession


@pytest.fixture
def example_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
    monkeypatch.delenv("REPORT_FORMAT", raising=False)
    return tmp_path


class TestParseArgs:
    def test_defaults_come_from_settings(self, example_env: Path) -> None:
        settings = Settings(pages_per_person=2, target_audience_count=30, report_format="DOCX")

        args = parse_args(["a.pdf"], settings)

        assert args.paths == [Path("a.pdf")]
        assert args.pages_per_person == 2
        assert args.target_audience == 30
        assert args.format == "docx"

    def test_rejects_unknown_format(self, example_env: Path) -> None:
        with pytest.raises(SystemExit):
            parse_args(["a.pdf", "--format", "xlsx"], Settings())


class TestLoadSession:
    def test_skips_unsupported_and_missing_files(self, tmp_path: Path) -> None:
        good = tmp_path / "scan.png"
        good.write_bytes(b"\x89PNG")
        bad = tmp_path / "notes.txt"
        bad.write_text("x")

        with patch("edusurvey.main.Log") as mock_log:
            session = load_session([good, bad, tmp_path / "missing.pdf"])

        assert [d.file_name for d in session.documents] == ["scan.png"]
        assert mock_log.error.call_count == 2


class TestRunUntilStopped:
    @pytest.mark.asyncio
    async def test_runs_processor(self) -> None:
        processor = MagicMock(spec=Processor)
        processor.run = AsyncMock()
        session = ProcessingSession()

        await run_until_stopped(processor, session)

        processor.run.assert_awaited_once_with(session)


class TestMain:
    def test_returns_error_without_files(self, example_env: Path) -> None:
        assert main([str(example_env / "empty.txt")]) == 1

    def test_writes_report_with_example_provider(
        self, example_env: Path, png_bytes: bytes, capsys: pytest.CaptureFixture[str]
    ) -> None:
        scans = example_env / "scans"
        scans.mkdir()
        (scans / "page1.png").write_bytes(png_bytes)
        (scans / "page2.png").write_bytes(png_bytes)
        out_dir = example_env / "out"
        out_dir.mkdir()

        code = main(
            [str(scans), "--format", "json", "--output", str(out_dir), "--target-audience", "4"]
        )

        assert code == 0
        [report_file] = out_dir.iterdir()
        assert report_file.name == "교육명 미상_결과.json"
        data = json.loads(report_file.read_text(encoding="utf-8"))
        [section] = data["sections"]
        assert section["category"] == "교육기획평가"
        assert section["rows"][0]["count"] == 2
        assert data["summary"]["participation_rate"] == pytest.approx(50.0)
        assert "Report written to" in capsys.readouterr().out

import mimetypes
from collections.abc import Iterable
from pathlib import Path

from edusurvey.processor.exceptions import FileReadError, UnsupportedFileTypeError
from edusurvey.survey.models import SourceFile

PDF_MIME_TYPE = "application/pdf"


def guess_mime_type(path: Path) -> str | None:
    """Mime type from the file extension, or None when unknown."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type


def is_supported(mime_type: str) -> bool:
    return mime_type == PDF_MIME_TYPE or mime_type.startswith("image/")


class FileLoader:
    """Resolves survey files on disk and reads them for intake."""

    def collect(self, paths: Iterable[Path]) -> list[Path]:
        """Expand directories into their supported files, sorted by name.

        Explicit file paths are kept as given so unsupported ones fail loudly
        in ``load``.
        """
        collected: list[Path] = []
        for path in paths:
            if path.is_dir():
                collected.extend(
                    p for p in sorted(path.iterdir())
                    if p.is_file() and is_supported(guess_mime_type(p) or "")
                )
            else:
                collected.append(path)
        return collected

    def load(self, path: Path) -> SourceFile:
        """Read a survey file from disk.

        Raises:
            UnsupportedFileTypeError: if the file is not a PDF or an image.
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        mime_type = guess_mime_type(path)
        if mime_type is None or not is_supported(mime_type):
            raise UnsupportedFileTypeError(f"Unsupported file type for {path.name}")
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return SourceFile(raw_bytes=raw_bytes, mime_type=mime_type)

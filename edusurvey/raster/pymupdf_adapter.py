import pymupdf

from edusurvey.raster.base import BaseRasterizer
from edusurvey.raster.exceptions import RasterizationError


class PyMuPdfAdapter(BaseRasterizer):
    """Renders PDF pages to JPEG using PyMuPDF."""

    def render_pdf(self, pdf_bytes: bytes) -> list[bytes]:
        try:
            matrix = pymupdf.Matrix(self._scale, self._scale)
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [
                    page.get_pixmap(matrix=matrix).tobytes("jpeg", jpg_quality=self._jpeg_quality)
                    for page in doc
                ]
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pymupdf rendering failed: {exc}") from exc

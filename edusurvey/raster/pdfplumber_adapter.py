import io

import pdfplumber
from pdfplumber.page import Page

from edusurvey.raster.base import BaseRasterizer
from edusurvey.raster.exceptions import RasterizationError

_PDF_POINTS_PER_INCH = 72


class PdfPlumberAdapter(BaseRasterizer):
    """Renders PDF pages to JPEG using pdfplumber (pypdfium2 + Pillow)."""

    def render_pdf(self, pdf_bytes: bytes) -> list[bytes]:
        resolution = int(_PDF_POINTS_PER_INCH * self._scale)
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [self._encode(page, resolution) for page in pdf.pages]
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"pdfplumber rendering failed: {exc}") from exc

    def _encode(self, page: Page, resolution: int) -> bytes:
        image = page.to_image(resolution=resolution).original.convert("RGB")
        buf = io.BytesIO()
        image.save(buf, format="JPEG", quality=self._jpeg_quality)
        return buf.getvalue()

import asyncio
from abc import ABC, abstractmethod

from edusurvey.raster.exceptions import RasterizationError
from edusurvey.raster.models import PageImage

PDF_MIME_TYPE = "application/pdf"


class BaseRasterizer(ABC):
    """Contract for all document rasterization adapters.

    Images pass through untouched as a single page; PDFs are rendered page by
    page, in order, by the concrete adapter off the event loop.
    """

    def __init__(self, scale: float = 2.0, jpeg_quality: int = 80) -> None:
        self._scale = scale
        self._jpeg_quality = jpeg_quality

    async def rasterize(self, raw_bytes: bytes, mime_type: str) -> list[PageImage]:
        """Convert a raw document into ordered page images.

        Args:
            raw_bytes: Raw file content.
            mime_type: Declared mime type of the content.

        Returns:
            One PageImage per page, in page order.

        Raises:
            RasterizationError: if the type is unsupported or rendering fails.
        """
        if mime_type.startswith("image/"):
            return [PageImage(data=raw_bytes, mime_type=mime_type)]
        if mime_type != PDF_MIME_TYPE:
            raise RasterizationError(f"Unsupported file type '{mime_type}'")
        pages = await asyncio.to_thread(self.render_pdf, raw_bytes)
        return [PageImage(data=page, mime_type="image/jpeg") for page in pages]

    @abstractmethod
    def render_pdf(self, pdf_bytes: bytes) -> list[bytes]:
        """Render every PDF page to JPEG bytes.

        Raises:
            RasterizationError: if rendering fails for any reason.
        """

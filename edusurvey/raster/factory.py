from edusurvey.config.settings import Settings
from edusurvey.raster.base import BaseRasterizer
from edusurvey.raster.pdfplumber_adapter import PdfPlumberAdapter
from edusurvey.raster.pymupdf_adapter import PyMuPdfAdapter


class RasterizerFactory:
    """Creates the correct rasterizer based on settings."""

    ADAPTERS: dict[str, type[BaseRasterizer]] = {
        "pymupdf": PyMuPdfAdapter,
        "pdfplumber": PdfPlumberAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterizer:
        engine = settings.rasterizer_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown rasterizer engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(scale=settings.render_scale, jpeg_quality=settings.jpeg_quality)

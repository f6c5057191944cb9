from abc import ABC, abstractmethod

from edusurvey.analysis.models import PageAnalysis
from edusurvey.raster.models import PageImage


class BaseAnalyzer(ABC):
    """Contract for all page analysis adapters."""

    @abstractmethod
    async def analyze(self, image: PageImage) -> PageAnalysis:
        """Read the survey title and marked answers from one page image.

        Args:
            image: A single rasterized page.

        Returns:
            PageAnalysis with the optional title and extracted items.

        Raises:
            AnalysisError: on any failure.
        """

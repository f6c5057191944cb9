from collections.abc import Callable

from edusurvey.analysis.base import BaseAnalyzer
from edusurvey.analysis.factory import AnalyzerFactory
from edusurvey.config.settings import Settings
from edusurvey.logging.logger import Log
from edusurvey.processor.session import ProcessingSession
from edusurvey.raster.base import BaseRasterizer
from edusurvey.raster.factory import RasterizerFactory
from edusurvey.raster.models import PageImage
from edusurvey.survey.models import Document, PageResponse, PageStatus, ProcessingStatus

UpdateCallback = Callable[[ProcessingSession], None]


class Processor:
    """Drives every document of a session through rasterization and page analysis.

    Documents are visited in collection order and pages in index order, one
    collaborator call at a time. A stop request is honoured before each
    document and before each page; an in-flight call always runs to the end.

    Failure handling:
    - rasterization failure on a new document removes it from the session;
    - analysis failure marks that page as error and moves to the next page;
    - completed pages are never analyzed again, error and pending pages are
      retried on the next run.
    """

    def __init__(
        self,
        rasterizer: BaseRasterizer,
        analyzer: BaseAnalyzer,
        on_update: UpdateCallback | None = None,
    ) -> None:
        self._rasterizer = rasterizer
        self._analyzer = analyzer
        self._on_update = on_update

    async def run(self, session: ProcessingSession) -> None:
        if not session.documents:
            return

        session.status = ProcessingStatus.PROCESSING
        session.clear_stop()
        self._notify(session)
        Log.info(f"Processing run started for {len(session.documents)} documents")

        try:
            for document in list(session.documents):
                if session.stop_requested:
                    Log.info("Stop requested, leaving remaining documents untouched")
                    break
                await self._process_document(session, document)
        finally:
            session.status = ProcessingStatus.IDLE
            session.progress = ""
            self._notify(session)
            Log.info("Processing run finished")

    async def _process_document(self, session: ProcessingSession, document: Document) -> None:
        if document.is_settled:
            Log.debug(f"Skipping settled document {document.file_name}")
            return
        source = session.source_for(document.id)
        if source is None:
            Log.warning(f"No source file registered for {document.file_name}, skipping")
            return

        if document.total_pages == 0:
            self._set_progress(session, f"{document.file_name} 변환 중...")
            try:
                images = await self._rasterizer.rasterize(source.raw_bytes, source.mime_type)
            except Exception as exc:
                Log.error(f"Conversion of {document.file_name} failed, dropping it: {exc}")
                session.remove_document(document.id)
                self._notify(session)
                return
            document.total_pages = len(images)
            document.responses = [PageResponse(page_index=i) for i in range(len(images))]
            self._notify(session)
            Log.info(f"Converted {document.file_name}: {len(images)} pages")
        else:
            self._set_progress(session, f"{document.file_name} 데이터 로드 중...")
            try:
                images = await self._rasterizer.rasterize(source.raw_bytes, source.mime_type)
            except Exception as exc:
                Log.error(f"Reconversion of {document.file_name} failed: {exc}")
                return
            if len(images) != len(document.responses):
                Log.warning(
                    f"{document.file_name} now renders {len(images)} pages, "
                    f"expected {len(document.responses)}"
                )

        await self._process_pages(session, document, images)

    async def _process_pages(
        self,
        session: ProcessingSession,
        document: Document,
        images: list[PageImage],
    ) -> None:
        for response, image in zip(document.responses, images):
            if session.stop_requested:
                Log.info(f"Stop requested during {document.file_name}")
                break
            if response.status == PageStatus.COMPLETED:
                continue

            page_number = response.page_index + 1
            self._set_progress(
                session,
                f"{document.file_name} - {page_number}/{document.total_pages} 페이지 분석 중...",
            )
            response.status = PageStatus.PROCESSING
            self._notify(session)

            try:
                analysis = await self._analyzer.analyze(image)
            except Exception as exc:
                response.status = PageStatus.ERROR
                response.items = []
                response.error = str(exc) or exc.__class__.__name__
                Log.exception(
                    f"Page {page_number} of {document.file_name} failed: {response.error}"
                )
            else:
                response.status = PageStatus.COMPLETED
                response.items = list(analysis.items)
                response.title = analysis.title or None
                response.error = None
                Log.info(
                    f"Page {page_number} of {document.file_name}: "
                    f"{len(response.items)} items"
                )
            self._notify(session)

    def _set_progress(self, session: ProcessingSession, message: str) -> None:
        session.progress = message
        self._notify(session)

    def _notify(self, session: ProcessingSession) -> None:
        if self._on_update is not None:
            self._on_update(session)


def build_processor(
    settings: Settings,
    on_update: UpdateCallback | None = None,
) -> Processor:
    """Build a Processor with the configured rasterizer and analyzer."""
    return Processor(
        rasterizer=RasterizerFactory.create(settings),
        analyzer=AnalyzerFactory.create(settings),
        on_update=on_update,
    )

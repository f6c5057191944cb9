import threading
import uuid

from edusurvey.survey.models import Document, ProcessingStatus, SourceFile


class ProcessingSession:
    """Owned state of one tally session.

    Holds the document collection, the raw source registry, the global
    status, the progress message and the stop flag. The Processor is the
    only writer of documents during a run; ``request_stop`` may be called
    from any thread or from a signal handler.
    """

    def __init__(self) -> None:
        self.documents: list[Document] = []
        self.status = ProcessingStatus.IDLE
        self.progress = ""
        self._sources: dict[str, SourceFile] = {}
        self._stop = threading.Event()

    def add_file(self, file_name: str, raw_bytes: bytes, mime_type: str) -> Document:
        """Register a file for processing; it is rasterized on the next run."""
        document = Document(id=uuid.uuid4().hex, file_name=file_name)
        self._sources[document.id] = SourceFile(raw_bytes=raw_bytes, mime_type=mime_type)
        self.documents.append(document)
        return document

    def source_for(self, document_id: str) -> SourceFile | None:
        return self._sources.get(document_id)

    def remove_document(self, document_id: str) -> None:
        self.documents = [d for d in self.documents if d.id != document_id]
        self._sources.pop(document_id, None)

    def reset(self) -> None:
        """Drop every document and return to idle."""
        self.documents = []
        self._sources.clear()
        self.status = ProcessingStatus.IDLE
        self.progress = ""
        self._stop.clear()

    def request_stop(self) -> None:
        self._stop.set()

    def clear_stop(self) -> None:
        self._stop.clear()

    @property
    def stop_requested(self) -> bool:
        return self._stop.is_set()

    @property
    def is_processing(self) -> bool:
        return self.status == ProcessingStatus.PROCESSING

from edusurvey.processor.session import ProcessingSession
from edusurvey.survey.models import ProcessingStatus


class TestAddFile:
    def test_registers_unrasterized_document_with_source(self) -> None:
        session = ProcessingSession()

        document = session.add_file("a.pdf", b"%PDF", "application/pdf")

        assert session.documents == [document]
        assert document.file_name == "a.pdf"
        assert document.total_pages == 0
        assert document.responses == []
        source = session.source_for(document.id)
        assert source is not None
        assert source.raw_bytes == b"%PDF"
        assert source.mime_type == "application/pdf"

    def test_assigns_unique_ids(self) -> None:
        session = ProcessingSession()
        ids = {session.add_file("same.pdf", b"", "application/pdf").id for _ in range(10)}
        assert len(ids) == 10


class TestRemoveAndReset:
    def test_remove_document_drops_document_and_source(self) -> None:
        session = ProcessingSession()
        keep = session.add_file("keep.pdf", b"1", "application/pdf")
        drop = session.add_file("drop.pdf", b"2", "application/pdf")

        session.remove_document(drop.id)

        assert session.documents == [keep]
        assert session.source_for(drop.id) is None

    def test_reset_returns_to_empty_idle_state(self) -> None:
        session = ProcessingSession()
        document = session.add_file("a.pdf", b"1", "application/pdf")
        session.status = ProcessingStatus.PROCESSING
        session.progress = "working"
        session.request_stop()

        session.reset()

        assert session.documents == []
        assert session.source_for(document.id) is None
        assert session.status == ProcessingStatus.IDLE
        assert session.progress == ""
        assert not session.stop_requested


class TestStopFlag:
    def test_request_and_clear(self) -> None:
        session = ProcessingSession()
        assert not session.stop_requested

        session.request_stop()
        assert session.stop_requested

        session.clear_stop()
        assert not session.stop_requested


class TestStatus:
    def test_is_processing_follows_status(self) -> None:
        session = ProcessingSession()
        assert not session.is_processing

        session.status = ProcessingStatus.PROCESSING
        assert session.is_processing

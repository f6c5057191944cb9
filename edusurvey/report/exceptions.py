class ReportError(Exception):
    """Raised when a report cannot be built or written."""

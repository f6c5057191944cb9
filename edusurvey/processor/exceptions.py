class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnsupportedFileTypeError(ProcessorError):
    """Raised when a submitted file is neither a PDF nor an image."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""

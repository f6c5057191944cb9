class RasterizationError(Exception):
    """Raised when a document cannot be turned into page images."""

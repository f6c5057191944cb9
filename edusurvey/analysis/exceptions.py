class AnalysisError(Exception):
    """Raised when page analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the analyzer response violates the survey item schema."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""

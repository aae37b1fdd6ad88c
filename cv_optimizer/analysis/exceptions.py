class AnalysisError(Exception):
    """Raised when CV analysis fails."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class AnalysisResponseError(AnalysisError):
    """Raised when the provider reply cannot be turned into an analysis result."""


class AnalysisValidationError(AnalysisError):
    """Raised when a parsed reply breaks the response schema."""

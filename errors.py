"""
Analysis exceptions.

Every failure of a food log analysis derives from AnalysisError, so the
single call site in the page controller can catch them together.
"""

FALLBACK_ERROR_MESSAGE = "Failed to analyze food log."


class AnalysisError(Exception):
    """Base exception for food log analysis failures."""

    pass


class AnalysisValidationError(AnalysisError):
    """
    Model reply did not satisfy the output schema.

    Raised when:
    - Reply is not valid JSON
    - A required field is missing
    - A numeric field is not a number or is negative
    """

    pass


class ProviderError(AnalysisError):
    """
    Outbound model call failed.

    Raised when:
    - OPENAI_API_KEY is not set
    - Network or provider error from the SDK
    - Model returned empty content
    """

    pass


class AnalysisInProgressError(Exception):
    """Analyze was triggered while a previous analysis is still running."""

    pass

"""Error taxonomy for the analysis pipeline.

Every stage raises one of these; the API layer is the only place that
turns them into HTTP responses.
"""

from typing import Dict, Optional


class ProposalAnalysisError(Exception):
    """Base error carrying the HTTP status and response message it maps to."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(
        self,
        error: Optional[str] = None,
        *,
        message: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.error = error
        super().__init__(error or self.message)

    def to_dict(self) -> Dict[str, str]:
        """Response body for this error."""
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


# ===========================================
# Extraction Errors
# ===========================================

class ExtractionError(ProposalAnalysisError):
    """Proposal content could not be obtained."""
    message = "Failed to fetch proposal content"


class InvalidReference(ExtractionError):
    """The proposal URL does not carry a usable identifier."""


class UpstreamDataMissing(ExtractionError):
    """The remote source answered without a proposal payload."""


class FetchFailed(ExtractionError):
    """Network or HTTP failure while fetching a proposal."""

    def __init__(self, error: str, upstream_status: Optional[int] = None):
        super().__init__(error)
        self.upstream_status = upstream_status


class UnreadableDocument(ExtractionError):
    """An uploaded document could not be parsed."""


# ===========================================
# Analysis Errors
# ===========================================

class AnalysisError(ProposalAnalysisError):
    """The completion service did not produce a usable analysis."""
    message = "Error calling OpenAI API"


class ServiceUnavailable(AnalysisError):
    """The completion call itself failed (network, auth, quota)."""


class EmptyResponse(AnalysisError):
    """The completion call succeeded but returned no content."""


class MalformedResponse(AnalysisError):
    """The completion content is not valid JSON of the expected shape."""


# ===========================================
# Request Errors
# ===========================================

class ConfigurationError(ProposalAnalysisError):
    """A required service credential is missing."""
    message = "OpenAI API key is not configured"


class ClientInputError(ProposalAnalysisError):
    """The request itself is unusable."""
    status_code = 400
    message = "No proposal content provided"

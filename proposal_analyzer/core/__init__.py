"""Core module - Configuration and error taxonomy."""

from proposal_analyzer.core.config import get_settings, Settings, default_policy
from proposal_analyzer.core.exceptions import (
    ProposalAnalysisError,
    ExtractionError,
    InvalidReference,
    UpstreamDataMissing,
    FetchFailed,
    UnreadableDocument,
    AnalysisError,
    ServiceUnavailable,
    EmptyResponse,
    MalformedResponse,
    ConfigurationError,
    ClientInputError,
)

__all__ = [
    "get_settings",
    "Settings",
    "default_policy",
    "ProposalAnalysisError",
    "ExtractionError",
    "InvalidReference",
    "UpstreamDataMissing",
    "FetchFailed",
    "UnreadableDocument",
    "AnalysisError",
    "ServiceUnavailable",
    "EmptyResponse",
    "MalformedResponse",
    "ConfigurationError",
    "ClientInputError",
]

"""Models package - All Pydantic models organized by domain."""

from proposal_analyzer.models.enums import Platform, Language, Vote
from proposal_analyzer.models.proposal import ProposalContent
from proposal_analyzer.models.analysis import (
    SummarySection,
    Summary,
    Conclusion,
    Opinion,
    AnalysisResult,
    AnalysisRequest,
    AnalyzeResponse,
    ErrorResponse,
)

__all__ = [
    # Enums
    "Platform",
    "Language",
    "Vote",
    # Proposal models
    "ProposalContent",
    # Analysis models
    "SummarySection",
    "Summary",
    "Conclusion",
    "Opinion",
    "AnalysisResult",
    # API models
    "AnalysisRequest",
    "AnalyzeResponse",
    "ErrorResponse",
]

"""Analysis models - model output, API request and response shapes."""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from proposal_analyzer.models.enums import Vote


class SummarySection(BaseModel):
    """One titled section of the proposal summary."""
    title: str = Field(..., description="Section heading")
    content: str = Field(..., description="Section body")


class Summary(BaseModel):
    """Summary half of the model's answer."""
    overview: str = Field(..., description="Short overview of the proposal")
    sections: List[SummarySection] = Field(
        default_factory=list,
        description="Ordered summary sections"
    )


class Conclusion(BaseModel):
    """Voting recommendation with a one-line reason."""
    vote: Vote = Field(..., description="For or Against")
    reason: str = Field(..., description="One-sentence justification")


class Opinion(BaseModel):
    """Opinion half of the model's answer."""
    conclusion: Conclusion
    reasoning: str = Field(..., description="Detailed reasoning against the policy")


class AnalysisResult(BaseModel):
    """Structured answer returned by the completion service."""
    summary: Summary
    opinion: Opinion


class AnalysisRequest(BaseModel):
    """Inputs handed from the API layer to the analysis service."""
    proposal_url: Optional[str] = Field(None, description="Proposal page URL")
    document_path: Optional[str] = Field(None, description="Path of an uploaded document")
    policy: Optional[str] = Field(None, description="Evaluation policy text")
    language: Optional[str] = Field(None, description="Language tag, 'ja' or 'en'")


class AnalyzeResponse(BaseModel):
    """Successful analysis response."""
    model_config = ConfigDict(populate_by_name=True)

    proposal_title: str = Field(..., alias="proposalTitle")
    organization: str
    platform: str
    proposer: Optional[str] = None
    analysis: AnalysisResult


class ErrorResponse(BaseModel):
    """Error body returned for any failed request."""
    message: str
    error: Optional[str] = None
